"""Bans section."""

from commands.base import Command, NumberField, Section, TextField
from commands.players import STEAM_ID


SECTION = Section(
    "Bans",
    (
        Command(
            "GetPermanentBans",
            "GET",
            "/api/v2/bans?type=perma",
            "Retrieves a list of all permanent player bans.",
        ),
        Command(
            "GetTemporaryBans",
            "GET",
            "/api/v2/bans?type=temp",
            "Retrieves a list of all temporary player bans.",
        ),
        Command(
            "TemporaryBanPlayer",
            "POST",
            "/api/v2/temp-ban",
            "Bans a player from the server for a certain duration.",
            (
                TextField("player_id", placeholder=STEAM_ID),
                NumberField("duration", placeholder="24"),
                TextField("reason", placeholder="Team killing"),
                TextField("admin_name", placeholder="Your name"),
            ),
        ),
        Command(
            "RemoveTemporaryBan",
            "DELETE",
            "/api/v2/temp-ban",
            "Removes a temporary ban from a player.",
            (TextField("player_id", placeholder=STEAM_ID),),
        ),
        Command(
            "PermanentBanPlayer",
            "POST",
            "/api/v2/perma-ban",
            "Bans a player from a server permanently.",
            (
                TextField("player_id", placeholder=STEAM_ID),
                TextField("reason", placeholder="Cheating"),
                TextField("admin_name", placeholder="Your name"),
            ),
        ),
        Command(
            "RemovePermanentBan",
            "DELETE",
            "/api/v2/perma-ban",
            "Removes a permanent ban from a player.",
            (TextField("player_id", placeholder=STEAM_ID),),
        ),
    ),
)
