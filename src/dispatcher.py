"""Request dispatch: gate, resolve, place values, send, classify.

One call to `Dispatcher.dispatch` issues at most one HTTP request and never
retries. GET requests carry values in the query string; every other method
carries them as a compact JSON body.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

import requests

from commands.base import Command
from connection import ConnectionGate
from endpoints import build_url
from errors import HTTPError, TransportError
from http_headers import get_common_headers
from path_resolver import resolve_path


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedRequest:
    method: str
    path: str
    body: Optional[str] = None

    @property
    def headers(self) -> Dict[str, str]:
        return get_common_headers(json_body=self.body is not None)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(values: Mapping[str, Any]) -> str:
    """Encode non-empty values as a query string, preserving order."""
    pairs = [
        (key, _query_value(value))
        for key, value in values.items()
        if value is not None and value != ""
    ]
    return urlencode(pairs)


def build_request(command: Command, values: Mapping[str, Any]) -> PreparedRequest:
    """Resolve the route and place the remaining values by method.

    Raises:
        PathParameterError: a route placeholder could not be filled.
    """
    path, remaining = resolve_path(command.path, values)
    if not remaining:
        return PreparedRequest(command.method, path)
    if command.method == "GET":
        query = build_query(remaining)
        if query:
            path += ("&" if "?" in path else "?") + query
        return PreparedRequest(command.method, path)
    body = json.dumps(remaining, separators=(",", ":"), ensure_ascii=False)
    return PreparedRequest(command.method, path, body)


class Dispatcher:
    """Sends Commands through a shared session once the gate is open."""

    def __init__(
        self,
        session: requests.Session,
        gate: ConnectionGate,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self._session = session
        self._gate = gate
        self._base_url = base_url
        self._timeout = timeout

    def dispatch(self, command: Command, values: Mapping[str, Any]) -> str:
        """Send `command` with `values` and return the 2xx response body.

        Raises:
            GateError: not connected; nothing is sent.
            PathParameterError: unresolved route placeholder; nothing is sent.
            HTTPError: the server answered with a non-2xx status.
            TransportError: no HTTP answer at all.
        """
        self._gate.require_connected()
        prepared = build_request(command, values)
        return self.send(prepared, command.name)

    def send(self, prepared: PreparedRequest, label: str = "") -> str:
        url = build_url(prepared.path, self._base_url)
        logger.info("%s %s %s", label, prepared.method, prepared.path)
        try:
            resp = self._session.request(
                prepared.method,
                url,
                data=prepared.body.encode("utf-8") if prepared.body is not None else None,
                headers=prepared.headers,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("%s failed: %s", label, exc)
            raise TransportError(str(exc)) from exc

        if not 200 <= resp.status_code < 300:
            logger.warning("%s returned HTTP %s", label, resp.status_code)
            raise HTTPError(resp.status_code, resp.text)
        logger.debug("%s returned HTTP %s", label, resp.status_code)
        return resp.text


__all__ = ["Dispatcher", "PreparedRequest", "build_request", "build_query"]
