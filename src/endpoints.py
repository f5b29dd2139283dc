"""Endpoint helpers for the RCON console.

This module centralizes how we build API URLs based on environment
configuration found in `.env` / `.env.example`.

Current variables (see .env.example):
- CONSOLE_URL: Base URL of the RCON web API, e.g. http://localhost:8080
- CONSOLE_HTTP_TIMEOUT: Optional request timeout in seconds

Command routes are relative (`/api/v2/...`) and are joined onto the base
URL only after their path parameters have been resolved.
"""
from typing import Optional
import os


ENV_BASE_URL_NAME = "CONSOLE_URL"
ENV_TIMEOUT_NAME = "CONSOLE_HTTP_TIMEOUT"
DEFAULT_BASE_URL = "http://localhost:8080"

STATUS_PATH = "/api/v2/connection/status"
CONNECT_PATH = "/api/v2/connect"
DISCONNECT_PATH = "/api/v2/disconnect"
MAPS_PATH = "/api/v2/maps"


def get_api_base_url(url: Optional[str] = None) -> str:
    """Return the base API URL from argument or environment.

    Args:
        url: Optional explicit base URL. If omitted, uses the env var defined
            by `ENV_BASE_URL_NAME`, falling back to `DEFAULT_BASE_URL`.

    Returns:
        The base URL string without a trailing slash.

    Raises:
        ValueError: if the URL doesn't look like an http(s) URL.
    """
    if url is None:
        url = os.getenv(ENV_BASE_URL_NAME) or DEFAULT_BASE_URL

    if not (url.startswith("http://") or url.startswith("https://")):
        raise ValueError(
            "Base API URL must start with http:// or https://; got: " + url
        )

    return url.rstrip("/")


def get_http_timeout(value: Optional[str] = None) -> Optional[float]:
    """Return the request timeout in seconds, or None for no timeout.

    Raises:
        ValueError: if the configured value is not a positive number.
    """
    if value is None:
        value = os.getenv(ENV_TIMEOUT_NAME)
    if not value:
        return None
    try:
        seconds = float(value)
    except ValueError:
        raise ValueError(f"{ENV_TIMEOUT_NAME} must be a number of seconds; got: {value}")
    if seconds <= 0:
        raise ValueError(f"{ENV_TIMEOUT_NAME} must be positive; got: {value}")
    return seconds


def build_url(path: str, base_url: Optional[str] = None) -> str:
    """Join a resolved route (which may carry a query string) onto the base URL."""
    base_url = get_api_base_url(base_url)
    if not path.startswith("/"):
        path = "/" + path
    return f"{base_url}{path}"


def get_status_endpoint(base_url: Optional[str] = None) -> str:
    return build_url(STATUS_PATH, base_url)


def get_connect_endpoint(base_url: Optional[str] = None) -> str:
    return build_url(CONNECT_PATH, base_url)


def get_disconnect_endpoint(base_url: Optional[str] = None) -> str:
    return build_url(DISCONNECT_PATH, base_url)


def get_maps_endpoint(base_url: Optional[str] = None) -> str:
    return build_url(MAPS_PATH, base_url)


__all__ = [
    "get_api_base_url",
    "get_http_timeout",
    "build_url",
    "get_status_endpoint",
    "get_connect_endpoint",
    "get_disconnect_endpoint",
    "get_maps_endpoint",
    "ENV_BASE_URL_NAME",
    "ENV_TIMEOUT_NAME",
]
