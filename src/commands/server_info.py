"""Server Information section - read-only queries plus server-wide messages."""

from commands.base import (
    Command,
    MultilineField,
    NumberField,
    Section,
    SelectField,
    TextField,
    options,
    shown_when,
)


INFO_TYPES = (
    "session",
    "serverconfig",
    "players",
    "player",
    "maprotation",
    "mapsequence",
    "bannedwords",
    "vipplayers",
)


SECTION = Section(
    "Server Information",
    (
        Command(
            "GetServerInformation",
            "GET",
            "/api/v2/server",
            "Retrieves various server information. Select type: players, player "
            "(requires Value=PlayerID), maprotation, mapsequence, session, "
            "serverconfig, bannedwords, vipplayers",
            (
                SelectField(
                    "type",
                    placeholder="Select information type",
                    description="Type of information to retrieve",
                    options=options(*INFO_TYPES),
                ),
                TextField(
                    "value",
                    placeholder="Player ID (e.g. 76561198123456789)",
                    description="Value (required for 'player' type - use Player ID)",
                    conditional=shown_when("type", "player"),
                ),
            ),
        ),
        Command(
            "GetAdminLog",
            "GET",
            "/api/v2/logs",
            "Retrieve admin log for the specified interval time (seconds)",
            (
                NumberField(
                    "seconds",
                    placeholder="3600",
                    description="How many seconds to look back in time",
                ),
            ),
        ),
        Command(
            "GetDisplayableCommands",
            "GET",
            "/api/v2/commands",
            "Retrieves the list of RCON commands",
        ),
        Command(
            "GetClientReferenceData",
            "GET",
            "/api/v2/command-reference",
            "Retrieves argument details for a specific command",
            (
                TextField(
                    "command",
                    placeholder="AddAdmin",
                    description="Command ID to get reference data for",
                ),
            ),
        ),
        Command(
            "GetServerChangelist",
            "GET",
            "/api/v2/changelist",
            "Retrieves the change list build number for the server",
        ),
        Command(
            "SetWelcomeMessage",
            "POST",
            "/api/v2/welcome-message",
            "Send a message to the server (sets welcome message)",
            (
                TextField(
                    "message",
                    placeholder="Welcome to our server!",
                    description="Welcome message to display to players",
                ),
            ),
        ),
        Command(
            "ServerBroadcast",
            "POST",
            "/api/v2/broadcast",
            "Create a message to broadcast to the server",
            (
                MultilineField(
                    "message",
                    placeholder="Server restart in 5 minutes",
                    description="Message to broadcast to all players",
                ),
            ),
        ),
    ),
)
