"""Maps section - map changes, rotation and sequence editing."""

from commands.base import CheckboxField, Command, NumberField, Section, TextField


MAP_PLACEHOLDER = "carentan_warfare"


SECTION = Section(
    "Maps",
    (
        Command(
            "ChangeMap",
            "POST",
            "/api/v2/change-map",
            "Triggers a map change on the server.",
            (TextField("map_name", placeholder=MAP_PLACEHOLDER),),
        ),
        Command(
            "SetSectorLayout",
            "POST",
            "/api/v2/sector-layout",
            "Triggers a map restart and sets the objectives to the specified sectors.",
            tuple(
                TextField(f"sector_{i}", placeholder=f"AAS_N_F{i}") for i in range(1, 6)
            ),
        ),
        Command(
            "AddMapToRotation",
            "POST",
            "/api/v2/map-rotation",
            "Adds a map to the map rotation at a specified index.",
            (
                TextField("map_name", placeholder=MAP_PLACEHOLDER),
                NumberField("index", placeholder="0"),
            ),
        ),
        Command(
            "RemoveMapFromRotation",
            "DELETE",
            "/api/v2/map-rotation",
            "Removes a map from the rotation list at a specified index.",
            (NumberField("index", placeholder="0"),),
        ),
        Command(
            "AddMapToSequence",
            "POST",
            "/api/v2/map-sequence",
            "Adds a map to the map sequence at a specified index.",
            (
                TextField("map_name", placeholder=MAP_PLACEHOLDER),
                NumberField("index", placeholder="0"),
            ),
        ),
        Command(
            "RemoveMapFromSequence",
            "DELETE",
            "/api/v2/map-sequence",
            "Remove a map from the map sequence at a specified index.",
            (NumberField("index", placeholder="0"),),
        ),
        Command(
            "SetMapShuffleEnabled",
            "POST",
            "/api/v2/map-shuffle",
            "Randomises the map sequence.",
            (CheckboxField("enable", default=True),),
        ),
        Command(
            "MoveMapInSequence",
            "PUT",
            "/api/v2/map-sequence/move",
            "Moves a current map in the sequence to another location.",
            (
                NumberField("current_index", placeholder="0"),
                NumberField("new_index", placeholder="1"),
            ),
        ),
    ),
)
