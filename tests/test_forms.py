"""Tests for forms.py - control mapping, conditional visibility, accordion."""

import pytest

from commands.base import (
    CheckboxField,
    Command,
    CommandRegistry,
    Section,
    SelectField,
    TextField,
    options,
    shown_when,
)
from errors import ValidationError
from forms import (
    Accordion,
    Collapsed,
    Expanded,
    FormRenderer,
    NumberInput,
    Select,
    TextArea,
    TextInput,
    Toggle,
    is_visible,
)
from map_list import MapList


@pytest.fixture
def renderer():
    return FormRenderer(MapList(["foy_warfare", "carentan_warfare"]))


class TestIsVisible:
    def test_member(self):
        assert is_visible("player", frozenset({"player"})) is True

    def test_non_member(self):
        assert is_visible("players", frozenset({"player"})) is False

    def test_placeholder_value(self):
        assert is_visible("", frozenset({"player"})) is False

    def test_checkbox_values(self):
        assert is_visible(True, frozenset({"true"})) is True
        assert is_visible(False, frozenset({"true"})) is False
        assert is_visible(False, frozenset({"false"})) is True


class TestControlMapping:
    def test_kinds_map_to_controls(self, registry, renderer):
        assert isinstance(renderer.render(registry.get("KickPlayer"))["player_id"], TextInput)
        broadcast = renderer.render(registry.get("ServerBroadcast"))["message"]
        assert isinstance(broadcast, TextArea)
        assert broadcast.rows == 3
        assert isinstance(renderer.render(registry.get("GetAdminLog"))["seconds"], NumberInput)
        assert isinstance(renderer.render(registry.get("SetMapShuffleEnabled"))["enable"], Toggle)
        assert isinstance(renderer.render(registry.get("SetMatchTimer"))["game_mode"], Select)

    def test_controls_follow_declaration_order(self, registry, renderer):
        controls = renderer.render(registry.get("TemporaryBanPlayer"))
        assert [c.name for c in controls] == ["player_id", "duration", "reason", "admin_name"]

    def test_checkbox_seeded_from_default(self, registry, renderer):
        assert renderer.render(registry.get("SetVoteKickEnabled"))["enable"].value is True

    def test_select_starts_on_disabled_placeholder(self, registry, renderer):
        select = renderer.render(registry.get("ForceTeamSwitch"))["force_mode"]
        assert select.value == ""
        assert select.choices[0].disabled
        assert select.choices[0].label == "Select force mode"
        assert [(c.value, c.label) for c in select.choices[1:]] == [
            ("0", "0 - On Death"),
            ("1", "1 - Immediately"),
        ]

    def test_select_accepts_value_label_or_position(self, registry, renderer):
        select = renderer.render(registry.get("ForceTeamSwitch"))["force_mode"]
        select.set_value("1 - immediately")
        assert select.value == "1"
        select.set_value("0")
        assert select.value == "0"
        mode = renderer.render(registry.get("SetMatchTimer"))["game_mode"]
        mode.set_value("2")
        assert mode.value == "Offensive"

    def test_select_rejects_unknown_option(self, registry, renderer):
        select = renderer.render(registry.get("SetMatchTimer"))["game_mode"]
        with pytest.raises(ValidationError):
            select.set_value("Conquest")

    def test_toggle_parses_words(self, registry, renderer):
        toggle = renderer.render(registry.get("SetMapShuffleEnabled"))["enable"]
        toggle.set_value("off")
        assert toggle.value is False
        toggle.set_value("yes")
        assert toggle.value is True

    @pytest.mark.parametrize("raw", ["tru", "of", "", "2"])
    def test_toggle_rejects_unknown_words(self, registry, renderer, raw):
        toggle = renderer.render(registry.get("SetVoteKickEnabled"))["enable"]
        with pytest.raises(ValidationError):
            toggle.set_value(raw)
        assert toggle.value is True


class TestMapFields:
    def test_map_name_renders_as_select_with_maps(self, registry, renderer):
        select = renderer.render(registry.get("ChangeMap"))["map_name"]
        assert isinstance(select, Select)
        assert not select.pending
        assert select.choices[0].label == "carentan_warfare"
        assert [c.value for c in select.choices[1:]] == ["foy_warfare", "carentan_warfare"]

    def test_map_id_renders_as_select(self, registry, renderer):
        assert isinstance(renderer.render(registry.get("SetDynamicWeatherEnabled"))["map_id"], Select)

    def test_pending_until_maps_arrive_then_backfilled_once(self, registry):
        maps = MapList()
        select = FormRenderer(maps).render(registry.get("ChangeMap"))["map_name"]
        assert select.pending
        assert len(select.choices) == 1

        maps.replace(["hill400_warfare", "kursk_warfare"])
        assert not select.pending
        assert select.choices[0].disabled
        assert [c.value for c in select.choices[1:]] == ["hill400_warfare", "kursk_warfare"]

        maps.replace(["other_map"])
        assert [c.value for c in select.choices[1:]] == ["hill400_warfare", "kursk_warfare"]

    def test_empty_list_stays_pending_until_names_arrive(self, registry):
        maps = MapList([])
        select = FormRenderer(maps).render(registry.get("ChangeMap"))["map_name"]
        assert select.pending

        maps.replace([])
        assert select.pending

        maps.replace(["foy_warfare"])
        assert not select.pending
        assert [c.value for c in select.choices[1:]] == ["foy_warfare"]

    def test_destroyed_form_stops_listening(self, registry):
        maps = MapList()
        controls = FormRenderer(maps).render(registry.get("ChangeMap"))
        controls.destroy()
        maps.replace(["foy_warfare"])
        assert controls["map_name"].pending


class TestConditionalVisibility:
    def test_conditional_field_starts_hidden(self, registry, renderer):
        controls = renderer.render(registry.get("GetServerInformation"))
        assert controls["type"].visible
        assert not controls["value"].visible
        assert [c.name for c in controls.visible_controls()] == ["type"]

    def test_visibility_tracks_every_change(self, registry, renderer):
        controls = renderer.render(registry.get("GetServerInformation"))
        for value, expected in (("player", True), ("players", False), ("player", True), ("session", False)):
            controls["type"].set_value(value)
            assert controls["value"].visible is expected

    def test_checkbox_controlled_field(self):
        cmd = Command(
            "X",
            "POST",
            "/x",
            fields=(
                CheckboxField("enable"),
                TextField("reason", conditional=shown_when("enable", "true")),
            ),
        )
        controls = FormRenderer(MapList([])).render(cmd)
        controls["enable"].set_value("on")
        assert controls["reason"].visible
        controls["enable"].set_value("off")
        assert not controls["reason"].visible

    def test_other_fields_untouched(self):
        cmd = Command(
            "X",
            "GET",
            "/x",
            fields=(
                SelectField("mode", options=options("a", "b")),
                TextField("when_a", conditional=shown_when("mode", "a")),
                TextField("plain"),
            ),
        )
        controls = FormRenderer(MapList([])).render(cmd)
        controls["plain"].visible = False
        controls["mode"].set_value("a")
        assert controls["when_a"].visible
        assert controls["plain"].visible is False


class TestAccordion:
    def _accordion(self, registry, renderer):
        return Accordion(registry, renderer)

    def test_initially_all_collapsed(self, registry, renderer):
        acc = self._accordion(registry, renderer)
        assert acc.expanded is None
        assert acc.controls is None

    def test_expanding_b_collapses_a_first(self, registry, renderer):
        acc = self._accordion(registry, renderer)
        assert acc.activate("KickPlayer") == [Expanded("KickPlayer")]
        first = acc.controls
        assert acc.activate("AddVip") == [Collapsed("KickPlayer"), Expanded("AddVip")]
        assert acc.expanded.name == "AddVip"
        assert first.destroyed
        assert not acc.is_expanded("KickPlayer")

    def test_reactivating_collapses(self, registry, renderer):
        acc = self._accordion(registry, renderer)
        acc.activate("KickPlayer")
        assert acc.activate("kickplayer") == [Collapsed("KickPlayer")]
        assert acc.expanded is None
        assert acc.controls is None

    def test_reopening_renders_fresh_controls(self, registry, renderer):
        acc = self._accordion(registry, renderer)
        acc.activate("KickPlayer")
        acc.controls["reason"].set_value("Griefing")
        acc.activate("KickPlayer")
        acc.activate("KickPlayer")
        assert acc.controls["reason"].value == ""

    def test_unknown_command(self, registry, renderer):
        with pytest.raises(KeyError):
            self._accordion(registry, renderer).activate("Nope")

    def test_collapse_all(self, renderer):
        reg = CommandRegistry([Section("S", (Command("A", "GET", "/a"),))])
        acc = Accordion(reg, renderer)
        assert acc.collapse_all() == []
        acc.activate("A")
        assert acc.collapse_all() == [Collapsed("A")]
