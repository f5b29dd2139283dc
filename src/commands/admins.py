"""Admins section."""

from commands.base import Command, Section, TextField
from commands.players import STEAM_ID


SECTION = Section(
    "Admins",
    (
        Command(
            "GetAdminUsers",
            "GET",
            "/api/v2/admins",
            "Retrieves a list of all admin users.",
        ),
        Command(
            "GetAdminGroups",
            "GET",
            "/api/v2/admin-groups",
            "Retrieves a list of all admin groups.",
        ),
        Command(
            "AddAdmin",
            "POST",
            "/api/v2/admins",
            "Adds a player to an admin group.",
            (
                TextField("player_id", placeholder=STEAM_ID),
                TextField("admin_group", placeholder="Moderator"),
                TextField("comment", placeholder="Trusted player"),
            ),
        ),
        Command(
            "RemoveAdmin",
            "DELETE",
            "/api/v2/admins",
            "Removes the admin privileges from a player.",
            (TextField("player_id", placeholder=STEAM_ID),),
        ),
    ),
)
