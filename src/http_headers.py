"""HTTP header and session helpers for the RCON console.

Provides the request headers and session credential used across the
project:

- Accept: application/json
- Content-Type: application/json (only when a JSON body is sent)
- Cookie: hll_session=<session id>

Assumptions:
- The server hands out the `hll_session` cookie on connect; requests keeps
  it in the session jar. An already established session can be reused by
  putting its id in the environment variable `CONSOLE_SESSION`.
"""
from typing import Dict, Optional
import os

import requests


ENV_SESSION_NAME = "CONSOLE_SESSION"
SESSION_COOKIE = "hll_session"
JSON_CONTENT_TYPE = "application/json"


def get_common_headers(json_body: bool = False) -> Dict[str, str]:
    """Return the common headers used for HTTP requests.

    Args:
        json_body: Whether the request carries a JSON body.

    Returns:
        A dict with Accept and, for JSON bodies, Content-Type.
    """
    headers = {"Accept": JSON_CONTENT_TYPE}
    if json_body:
        headers["Content-Type"] = JSON_CONTENT_TYPE
    return headers


def create_session(token: Optional[str] = None) -> requests.Session:
    """Return a `requests.Session` carrying the session credential, if any.

    Args:
        token: Optional session id. If not provided, the function will look
            for it in the environment variable named by `ENV_SESSION_NAME`.
    """
    if token is None:
        token = os.getenv(ENV_SESSION_NAME)

    session = requests.Session()
    if token:
        session.cookies.set(SESSION_COOKIE, token)
    return session


__all__ = [
    "get_common_headers",
    "create_session",
    "ENV_SESSION_NAME",
    "SESSION_COOKIE",
]
