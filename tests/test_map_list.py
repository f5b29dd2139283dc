"""Tests for map_list.py."""

import pytest
import requests

from errors import HTTPError, TransportError
from map_list import MapList, load_map_list, parse_map_list
from conftest import make_response


class TestParseMapList:
    def test_lines_trimmed_and_deduplicated(self):
        text = "foy_warfare\n  kursk_warfare \n\nfoy_warfare\r\n"
        assert parse_map_list(text) == ["foy_warfare", "kursk_warfare"]

    def test_empty(self):
        assert parse_map_list("") == []


class TestMapList:
    def test_not_loaded_until_replaced(self):
        maps = MapList()
        assert maps.names is None
        assert not maps.loaded
        maps.replace([])
        assert maps.loaded
        assert maps.names == ()

    def test_listeners_notified_until_unsubscribed(self):
        maps = MapList()
        seen = []
        unsubscribe = maps.subscribe(seen.append)
        maps.replace(["a"])
        unsubscribe()
        unsubscribe()
        maps.replace(["b"])
        assert seen == [("a",)]


class TestLoadMapList:
    def test_publishes_names(self, session):
        session.get.return_value = make_response(200, "foy_warfare\nhill400_warfare\n")
        maps = MapList()
        names = load_map_list(session, maps, "http://rcon.test", timeout=3)
        assert names == ["foy_warfare", "hill400_warfare"]
        assert maps.names == ("foy_warfare", "hill400_warfare")
        session.get.assert_called_once_with("http://rcon.test/api/v2/maps", timeout=3)

    def test_error_status(self, session):
        session.get.return_value = make_response(503, "unavailable")
        maps = MapList()
        with pytest.raises(HTTPError):
            load_map_list(session, maps, "http://rcon.test")
        assert not maps.loaded

    def test_unreachable(self, session):
        session.get.side_effect = requests.ConnectionError("refused")
        with pytest.raises(TransportError):
            load_map_list(session, MapList(), "http://rcon.test")
