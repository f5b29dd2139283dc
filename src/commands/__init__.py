"""Command catalog for the RCON console.

Each module in this package contributes one `SECTION`: a titled, ordered
group of immutable Command descriptors. `build_registry()` assembles them
in display order.
"""

from .base import (
    CheckboxField,
    Command,
    CommandRegistry,
    Conditional,
    Field,
    MultilineField,
    NumberField,
    Option,
    Section,
    SelectField,
    TextField,
)


def build_registry() -> CommandRegistry:
    """Return a registry holding the full compiled-in catalog."""
    from . import (
        admins,
        bans,
        connection,
        maps,
        match_timers,
        players,
        server_info,
        server_settings,
        vips,
    )

    return CommandRegistry(
        [
            connection.SECTION,
            server_info.SECTION,
            players.SECTION,
            vips.SECTION,
            admins.SECTION,
            bans.SECTION,
            maps.SECTION,
            server_settings.SECTION,
            match_timers.SECTION,
        ]
    )


__all__ = [
    "CheckboxField",
    "Command",
    "CommandRegistry",
    "Conditional",
    "Field",
    "MultilineField",
    "NumberField",
    "Option",
    "Section",
    "SelectField",
    "TextField",
    "build_registry",
]
