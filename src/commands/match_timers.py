"""Match Timers section - per game mode timers and dynamic weather."""

from commands.base import (
    CheckboxField,
    Command,
    NumberField,
    Section,
    SelectField,
    TextField,
    options,
)
from commands.maps import MAP_PLACEHOLDER


ALL_MODES = options("Warfare", "Offensive", "Skirmish")
WARMUP_MODES = options("Warfare", "Skirmish")


def _mode(choices) -> SelectField:
    return SelectField("game_mode", placeholder="Select game mode", options=choices)


SECTION = Section(
    "Match Timers",
    (
        Command(
            "SetMatchTimer",
            "POST",
            "/api/v2/match-timer",
            "Sets the match time of a specified game mode in minutes. For offensive the "
            "match timer is the length of each control point phase. Match timers are "
            "limited to the following ranges: Warfare: 30-180 minutes, Offensive: 10-60 "
            "minutes, Skirmish: 10-60 minutes.",
            (_mode(ALL_MODES), NumberField("match_length", placeholder="90")),
        ),
        Command(
            "RemoveMatchTimer",
            "DELETE",
            "/api/v2/match-timer",
            "Removes the custom match timers for the specified game mode.",
            (_mode(ALL_MODES),),
        ),
        Command(
            "SetWarmupTimer",
            "POST",
            "/api/v2/warmup-timer",
            "Sets the warmup timer for a specified game mode in minutes. Only supports "
            "Warfare and Skirmish. Warmup timers are limited to the following ranges: "
            "1-10 Minutes.",
            (_mode(WARMUP_MODES), NumberField("warmup_length", placeholder="5")),
        ),
        Command(
            "RemoveWarmupTimer",
            "DELETE",
            "/api/v2/warmup-timer",
            "Removes the custom warmup timer for a specified game mode.",
            (_mode(WARMUP_MODES),),
        ),
        Command(
            "SetDynamicWeatherEnabled",
            "POST",
            "/api/v2/dynamic-weather",
            "Enables or disabled dynamic weather for a specific map. Command only "
            "functions for maps that use the dynamic weather system.",
            (
                TextField("map_id", placeholder=MAP_PLACEHOLDER),
                CheckboxField("enable", default=True),
            ),
        ),
    ),
)
