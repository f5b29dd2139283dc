"""Player Management section."""

from commands.base import Command, NumberField, Section, SelectField, TextField, options


STEAM_ID = "76561198123456789"


def _player() -> TextField:
    return TextField("player_id", placeholder=STEAM_ID)


SECTION = Section(
    "Player Management",
    (
        Command(
            "MessagePlayer",
            "POST",
            "/api/v2/players/:id/message",
            "Sends a message to a specific player.",
            (_player(), TextField("message", placeholder="Your message here")),
        ),
        Command(
            "PunishPlayer",
            "POST",
            "/api/v2/punish",
            "Punishes a player by killing their character.",
            (_player(), TextField("reason", placeholder="Team killing")),
        ),
        Command(
            "KickPlayer",
            "POST",
            "/api/v2/kick",
            "Kicks a player from the server.",
            (_player(), TextField("reason", placeholder="Griefing")),
        ),
        Command(
            "ForceTeamSwitch",
            "POST",
            "/api/v2/force-team-switch",
            "Forces a player to switch team. Can force a player to switch either "
            "on death or immediately.",
            (
                _player(),
                SelectField(
                    "force_mode",
                    placeholder="Select force mode",
                    options=options(("0", "0 - On Death"), ("1", "1 - Immediately")),
                ),
            ),
        ),
        Command(
            "RemovePlayerFromPlatoon",
            "POST",
            "/api/v2/remove-from-squad",
            "Removes a player from their platoon.",
            (_player(), TextField("reason", placeholder="Reason")),
        ),
        Command(
            "DisbandPlatoon",
            "POST",
            "/api/v2/disband-squad",
            "Disbands a platoon and removes all players.",
            (
                NumberField("team_index", placeholder="0"),
                NumberField("squad_index", placeholder="0"),
                TextField("reason", placeholder="Reason"),
            ),
        ),
    ),
)
