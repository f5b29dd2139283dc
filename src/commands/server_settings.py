"""Server Settings section - queue, idle, ping, balance, vote kick and word filter."""

from commands.base import CheckboxField, Command, NumberField, Section, TextField


def _toggle(name: str, path: str, description: str) -> Command:
    return Command(name, "POST", path, description, (CheckboxField("enable", default=True),))


def _number(name: str, path: str, description: str, field: str, placeholder: str) -> Command:
    return Command(name, "POST", path, description, (NumberField(field, placeholder=placeholder),))


SECTION = Section(
    "Server Settings",
    (
        _number(
            "SetTeamSwitchCooldown",
            "/api/v2/team-switch-cooldown",
            "Sets the cooldown time for allowing players to switch teams.",
            "team_switch_timer",
            "180",
        ),
        _number(
            "SetMaxQueuedPlayers",
            "/api/v2/max-queued-players",
            "Sets the max number of players allowed to queue for the server.",
            "max_queued_players",
            "10",
        ),
        _number(
            "SetIdleKickDuration",
            "/api/v2/idle-kick-duration",
            "Sets the duration for kicking players for idling.",
            "idle_timeout_minutes",
            "15",
        ),
        _number(
            "SetHighPingThreshold",
            "/api/v2/high-ping-threshold",
            "Sets the threshold for players with high ping.",
            "high_ping_threshold_ms",
            "250",
        ),
        _toggle(
            "SetAutoBalanceEnabled",
            "/api/v2/auto-balance/enabled",
            "Enables or disables team auto balancing for the sever.",
        ),
        _number(
            "SetAutoBalanceThreshold",
            "/api/v2/auto-balance/threshold",
            "Sets the player threshold number for team auto balancing.",
            "auto_balance_threshold",
            "5",
        ),
        Command(
            "ResetVoteKickThreshold",
            "POST",
            "/api/v2/vote-kick/reset",
            "Resets the vote to kick threshold.",
        ),
        _toggle(
            "SetVoteKickEnabled",
            "/api/v2/vote-kick/enabled",
            "Enables or disables the vote to kick functionality.",
        ),
        Command(
            "SetVoteKickThreshold",
            "POST",
            "/api/v2/vote-kick/threshold",
            "Sets the vote to kick threshold.",
            (TextField("threshold_value", placeholder="1,10,10,5"),),
        ),
        Command(
            "AddBannedWords",
            "POST",
            "/api/v2/profanities",
            "Adds words to the custom profanity filter. Words should be separated with a comma.",
            (TextField("banned_words", placeholder="word1,word2,word3"),),
        ),
        Command(
            "RemoveBannedWords",
            "DELETE",
            "/api/v2/profanities",
            "Removes words from the custom profanity filter. Words should be separated "
            "with a comma.",
            (TextField("banned_words", placeholder="word1,word2"),),
        ),
    ),
)
