"""Connection section - handshake commands the server performs on connect."""

from commands.base import Command, Section


SECTION = Section(
    "Connection",
    (
        Command(
            "ServerConnect",
            "GET",
            "/api/v2/connection/status",
            "Establishes an Rcon V2 connection with the server. Returns the XOR Key "
            "in the content body. (Handled automatically on connect)",
        ),
        Command(
            "Login",
            "GET",
            "/api/v2/connection/status",
            "Authenticates a client to access the server. (Handled automatically on connect)",
        ),
    ),
)
