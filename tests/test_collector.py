"""Tests for collector.py - typed values from an expanded form."""

import pytest

from collector import collect, parse_int
from errors import ValidationError
from forms import FormRenderer
from map_list import MapList


@pytest.fixture
def render(registry):
    renderer = FormRenderer(MapList(["foy_warfare"]))

    def _render(name):
        return renderer.render(registry.get(name))

    return _render


class TestParseInt:
    @pytest.mark.parametrize("raw,expected", [("42", 42), (" 7 ", 7), ("-3", -3), ("+5", 5)])
    def test_integers(self, raw, expected):
        assert parse_int(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "12abc", "1.5", "", " "])
    def test_rejects_partial_or_non_integers(self, raw):
        assert parse_int(raw) is None


class TestCollect:
    def test_text_fields_verbatim(self, render):
        controls = render("PunishPlayer")
        controls["player_id"].set_value("76561198123456789")
        controls["reason"].set_value("Team killing")
        assert collect(controls) == {"player_id": "76561198123456789", "reason": "Team killing"}

    def test_number_field_parsed(self, render):
        controls = render("GetAdminLog")
        controls["seconds"].set_value("3600")
        assert collect(controls) == {"seconds": 3600}

    def test_empty_number_collects_zero(self, render):
        assert collect(render("GetAdminLog")) == {"seconds": 0}

    def test_invalid_number_names_the_field(self, render):
        controls = render("GetAdminLog")
        controls["seconds"].set_value("abc")
        with pytest.raises(ValidationError) as exc_info:
            collect(controls)
        assert exc_info.value.field == "seconds"
        assert exc_info.value.raw == "abc"
        assert "Invalid number format for Seconds" in str(exc_info.value)

    def test_checkbox_collects_bool(self, render):
        controls = render("SetMapShuffleEnabled")
        assert collect(controls) == {"enable": True}
        controls["enable"].set_value("off")
        assert collect(controls) == {"enable": False}

    def test_numeric_select_becomes_int(self, render):
        controls = render("ForceTeamSwitch")
        controls["player_id"].set_value("76561198123456789")
        controls["force_mode"].set_value("1")
        assert collect(controls)["force_mode"] == 1

    def test_text_select_stays_string(self, render):
        controls = render("SetMatchTimer")
        controls["game_mode"].set_value("Warfare")
        controls["match_length"].set_value("90")
        assert collect(controls) == {"game_mode": "Warfare", "match_length": 90}

    def test_map_select_keeps_name(self, render):
        controls = render("ChangeMap")
        controls["map_name"].set_value("foy_warfare")
        assert collect(controls) == {"map_name": "foy_warfare"}

    def test_hidden_conditional_field_still_collected(self, render):
        controls = render("GetServerInformation")
        controls["type"].set_value("session")
        assert collect(controls) == {"type": "session", "value": ""}

    def test_declaration_order(self, render):
        controls = render("TemporaryBanPlayer")
        assert list(collect(controls)) == ["player_id", "duration", "reason", "admin_name"]
