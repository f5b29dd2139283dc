"""VIPs section."""

from commands.base import Command, NumberField, Section, TextField
from commands.players import STEAM_ID


SECTION = Section(
    "VIPs",
    (
        Command(
            "AddVip",
            "POST",
            "/api/v2/vips",
            "Gives a player VIP status.",
            (
                TextField("player_id", placeholder=STEAM_ID),
                TextField("comment", placeholder="Tournament winner"),
            ),
        ),
        Command(
            "RemoveVip",
            "DELETE",
            "/api/v2/vips",
            "Removes VIP status from a player.",
            (TextField("player_id", placeholder=STEAM_ID),),
        ),
        Command(
            "SetVipSlotCount",
            "POST",
            "/api/v2/vip-slots",
            "Set the VIP slot count for the server.",
            (NumberField("vip_slot_count", placeholder="10"),),
        ),
    ),
)
