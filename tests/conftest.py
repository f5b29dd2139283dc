"""
Shared test fixtures for the RCON console tests.
Puts src/ on the path and keeps the real environment out of every test.
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Every test starts without console settings from the shell or .env."""
    for name in (
        "CONSOLE_URL",
        "CONSOLE_SESSION",
        "CONSOLE_HTTP_TIMEOUT",
        "CONSOLE_LOG_LEVEL",
        "CONSOLE_HISTORY_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


def make_response(status=200, text="", json_data=None):
    resp = MagicMock()
    resp.status_code = status
    resp.text = text
    if json_data is not None:
        resp.json.return_value = json_data
    else:
        resp.json.side_effect = ValueError("not json")
    return resp


@pytest.fixture
def session():
    """A stand-in for requests.Session that records calls."""
    s = MagicMock()
    s.request.return_value = make_response(200, "{}", {})
    return s


@pytest.fixture
def registry():
    from commands import build_registry

    return build_registry()
