"""Connection state and the gate consulted before every dispatch.

`ConnectionGate` holds the one process-wide `ConnectionState`. Only the
connect / disconnect / status handlers in this module replace it; the
dispatcher and the console read it through the gate.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import requests

from endpoints import get_connect_endpoint, get_disconnect_endpoint, get_status_endpoint
from errors import GateError, HTTPError, TransportError, ValidationError
from http_headers import get_common_headers


logger = logging.getLogger(__name__)

MASKED_HOST = "•••.•••.•••.•••"


@dataclass(frozen=True)
class ConnectionState:
    connected: bool = False
    host: Optional[str] = None
    port: Optional[int] = None

    @classmethod
    def from_status(cls, payload: Any) -> "ConnectionState":
        """Build a state from a `{connected, host?, port?}` status document."""
        if not isinstance(payload, Mapping) or not payload.get("connected"):
            return cls()
        port = payload.get("port")
        try:
            port = int(port) if port not in (None, "") else None
        except (TypeError, ValueError):
            port = None
        return cls(True, payload.get("host") or None, port)

    def describe(self, reveal_host: bool = False) -> str:
        if not self.connected:
            return "Not connected"
        host = self.host if reveal_host else MASKED_HOST
        port = self.port if self.port is not None else ""
        return f"Connected to {host}:{port}"


DISCONNECTED = ConnectionState()


class ConnectionGate:
    """Process-wide connection flag with a single writer."""

    def __init__(self, state: ConnectionState = DISCONNECTED):
        self._state = state

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def connected(self) -> bool:
        return self._state.connected

    def replace(self, state: ConnectionState) -> None:
        if state != self._state:
            logger.info("Connection state: %s", state.describe(reveal_host=False))
        self._state = state

    def require_connected(self) -> None:
        if not self._state.connected:
            raise GateError()


def _json_or_text(resp: requests.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text


class ConnectionManager:
    """Talks to the connection endpoints and feeds the gate."""

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

    def _post(self, url: str, payload: Optional[dict] = None) -> requests.Response:
        try:
            if payload is None:
                return self._session.post(url, headers=get_common_headers(), timeout=self._timeout)
            return self._session.post(
                url,
                json=payload,
                headers=get_common_headers(json_body=True),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.warning("POST %s failed: %s", url, exc)
            raise TransportError(str(exc)) from exc

    def refresh(self) -> ConnectionState:
        """Re-read the server's view of this session; unreachable means disconnected."""
        try:
            resp = self._session.get(
                get_status_endpoint(self._base_url),
                headers=get_common_headers(),
                timeout=self._timeout,
            )
            payload = resp.json() if 200 <= resp.status_code < 300 else None
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Status check failed: %s", exc)
            payload = None
        state = ConnectionState.from_status(payload)
        self._gate.replace(state)
        return state

    def connect(self, host: str, port: int, password: str) -> Any:
        """Open an RCON session on the server; returns the server's reply."""
        if not host or not port or not password:
            raise ValidationError("Please fill in host, port and password")
        resp = self._post(
            get_connect_endpoint(self._base_url),
            {"host": host, "port": port, "password": password},
        )
        data = _json_or_text(resp)
        if not 200 <= resp.status_code < 300:
            raise HTTPError(resp.status_code, resp.text)
        state = ConnectionState.from_status(
            {
                "connected": True,
                "host": (data.get("host") if isinstance(data, dict) else None) or host,
                "port": (data.get("port") if isinstance(data, dict) else None) or port,
            }
        )
        self._gate.replace(state)
        return data

    def disconnect(self) -> None:
        resp = self._post(get_disconnect_endpoint(self._base_url))
        if not 200 <= resp.status_code < 300:
            raise HTTPError(resp.status_code, resp.text)
        self._gate.replace(DISCONNECTED)


__all__ = [
    "ConnectionState",
    "ConnectionGate",
    "ConnectionManager",
    "DISCONNECTED",
    "MASKED_HOST",
]
