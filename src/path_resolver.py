"""Substitute `:name` placeholders in a route template from collected values."""
from __future__ import annotations

import re
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import quote

from errors import PathParameterError


TOKEN_RE = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")

# Route token -> field name, tried before an exact name match.
ALIASES: Dict[str, str] = {"id": "player_id"}


def _lookup(name: str, values: Mapping[str, Any]) -> Optional[str]:
    for key in (ALIASES.get(name), name):
        if key is None or key not in values:
            continue
        value = values[key]
        if value is None or value == "":
            continue
        return key
    return None


def resolve_path(path: str, values: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    """Return the resolved path and the values left for query/body.

    Every consumed value is dropped from the returned mapping so it is not
    sent twice. The input mapping is left untouched.

    Raises:
        PathParameterError: a placeholder has no matching, non-empty value.
    """
    remaining = dict(values)

    def _substitute(match: "re.Match[str]") -> str:
        key = _lookup(match.group(1), remaining)
        if key is None:
            raise PathParameterError(match.group(0), path)
        value = remaining.pop(key)
        if isinstance(value, bool):
            value = "true" if value else "false"
        return quote(str(value), safe="")

    resolved = TOKEN_RE.sub(_substitute, path)
    return resolved, remaining


__all__ = ["resolve_path", "ALIASES", "TOKEN_RE"]
