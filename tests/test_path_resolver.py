"""Tests for path_resolver.py."""

import pytest

from errors import PathParameterError
from path_resolver import resolve_path


class TestResolvePath:
    def test_no_placeholders(self):
        path, remaining = resolve_path("/api/v2/kick", {"player_id": "1", "reason": "x"})
        assert path == "/api/v2/kick"
        assert remaining == {"player_id": "1", "reason": "x"}

    def test_id_aliases_player_id(self):
        values = {"player_id": "76561198123456789", "message": "hi"}
        path, remaining = resolve_path("/api/v2/players/:id/message", values)
        assert path == "/api/v2/players/76561198123456789/message"
        assert remaining == {"message": "hi"}
        assert "player_id" in values

    def test_same_name_match(self):
        path, remaining = resolve_path("/api/v2/maps/:map_name", {"map_name": "foy_warfare"})
        assert path == "/api/v2/maps/foy_warfare"
        assert remaining == {}

    def test_exact_id_used_when_no_player_id(self):
        path, _ = resolve_path("/api/v2/groups/:id", {"id": 4})
        assert path == "/api/v2/groups/4"

    def test_values_are_url_quoted(self):
        path, _ = resolve_path("/api/v2/players/:id", {"player_id": "a b/c"})
        assert path == "/api/v2/players/a%20b%2Fc"

    def test_unresolved_placeholder_fails(self):
        with pytest.raises(PathParameterError) as exc_info:
            resolve_path("/api/v2/players/:id/message", {"message": "hi"})
        assert exc_info.value.token == ":id"
        assert str(exc_info.value) == "Error: No value for path parameter :id in /api/v2/players/:id/message"

    def test_empty_value_counts_as_unresolved(self):
        with pytest.raises(PathParameterError):
            resolve_path("/api/v2/players/:id", {"player_id": ""})
