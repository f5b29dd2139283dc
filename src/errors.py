"""Error types raised along the dispatch pipeline.

Every error here is terminal at the console boundary: the REPL catches
`ConsoleError`, hands it to the presenter and waits for the next line.
Nothing is retried.
"""
from typing import Optional


class ConsoleError(Exception):
    """Base class for failures surfaced to the operator."""


class ValidationError(ConsoleError):
    """Collected input cannot be turned into a request."""

    def __init__(self, message: str, field: Optional[str] = None, raw: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.raw = raw


class PathParameterError(ValidationError):
    """A `:name` placeholder in the route had no value to substitute."""

    def __init__(self, token: str, path: str):
        super().__init__(
            f"Error: No value for path parameter {token} in {path}",
            field=token.lstrip(":"),
        )
        self.token = token
        self.path = path


class GateError(ConsoleError):
    """Dispatch attempted while not connected to a server."""

    def __init__(self, message: str = "Error: Not connected to server"):
        super().__init__(message)


class HTTPError(ConsoleError):
    """The API answered with a non-2xx status."""

    def __init__(self, status: int, body: str):
        super().__init__(f"Error {status}:\n{body}")
        self.status = status
        self.body = body


class TransportError(ConsoleError):
    """The request never got an HTTP answer (refused, DNS, timeout...)."""

    def __init__(self, reason: str):
        super().__init__(f"Request failed: {reason}")
        self.reason = reason


__all__ = [
    "ConsoleError",
    "ValidationError",
    "PathParameterError",
    "GateError",
    "HTTPError",
    "TransportError",
]
