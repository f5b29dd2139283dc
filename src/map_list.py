"""Map-name list shared by every map selector.

The list comes from the server as plain text, one map per line. It is
loaded once at startup (and on `maps`) and replaced atomically; form
renderers subscribe to be told when it first arrives.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Tuple

import requests

from endpoints import get_maps_endpoint
from errors import HTTPError, TransportError


logger = logging.getLogger(__name__)

Listener = Callable[[Tuple[str, ...]], None]


def parse_map_list(text: str) -> List[str]:
    """Split newline-delimited map names, dropping blanks and repeats."""
    seen = set()
    names: List[str] = []
    for line in text.splitlines():
        name = line.strip()
        if not name or name in seen:
            continue
        seen.add(name)
        names.append(name)
    return names


class MapList:
    """Holds the current map names; `None` until the first load."""

    def __init__(self, names: Optional[Iterable[str]] = None):
        self._names: Optional[Tuple[str, ...]] = tuple(names) if names is not None else None
        self._listeners: List[Listener] = []

    @property
    def names(self) -> Optional[Tuple[str, ...]]:
        return self._names

    @property
    def loaded(self) -> bool:
        return self._names is not None

    def replace(self, names: Iterable[str]) -> None:
        self._names = tuple(names)
        for listener in list(self._listeners):
            listener(self._names)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe


def load_map_list(
    session: requests.Session,
    map_list: MapList,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> List[str]:
    """Fetch the map list from the server and publish it into `map_list`."""
    url = get_maps_endpoint(base_url)
    try:
        resp = session.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Failed to load map list: %s", exc)
        raise TransportError(str(exc)) from exc
    if not 200 <= resp.status_code < 300:
        logger.warning("Map list request returned %s", resp.status_code)
        raise HTTPError(resp.status_code, resp.text)
    names = parse_map_list(resp.text)
    map_list.replace(names)
    logger.info("Loaded %d map names", len(names))
    return names


__all__ = ["MapList", "parse_map_list", "load_map_list"]
