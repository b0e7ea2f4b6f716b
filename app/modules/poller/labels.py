"""Display labels and small formatting rules for matches.

Provider enums map through plain lookup tables. Values STRATZ adds later
fall back to ``UNKNOWN_LABEL`` instead of failing the run.
"""

from typing import Iterable

from infrastructure.notifications.models import MatchOutcome

UNKNOWN_LABEL = "Unknown"

LOBBY_LABELS = {
    "UNRANKED": "Unranked",
    "PRACTICE": "Lobby",
    "TOURNAMENT": "The International",
    "TUTORIAL": "Tutorial",
    "COOP_VS_BOTS": "Bots",
    "TEAM_MATCH": "Guild",
    "SOLO_QUEUE": "Solo Ranked",
    "RANKED": "Ranked",
    "SOLO_MID": "Duel",
    "BATTLE_CUP": "Battle Cup",
    "EVENT": "Event",
}

MODE_LABELS = {
    "NONE": "None",
    "ALL_PICK": "All Pick",
    "CAPTAINS_MODE": "Captains Mode",
    "RANDOM_DRAFT": "Random Draft",
    "SINGLE_DRAFT": "Single Draft",
    "ALL_RANDOM": "All Random",
    "INTRO": "Intro",
    "THE_DIRETIDE": "Diretide",
    "REVERSE_CAPTAINS_MODE": "Reverse Captains Mode",
    "THE_GREEVILING": "Greeviling",
    "TUTORIAL": "Tutorial",
    "MID_ONLY": "Mid Only",
    "LEAST_PLAYED": "Least Played",
    "NEW_PLAYER_POOL": "Limited Heroes",
    "COMPENDIUM_MATCHMAKING": "Compendium",
    "CUSTOM": "Custom",
    "CAPTAINS_DRAFT": "Captains Draft",
    "BALANCED_DRAFT": "Balanced Draft",
    "ABILITY_DRAFT": "Ability Draft",
    "EVENT": "Event",
    "ALL_RANDOM_DEATH_MATCH": "All Random Deathmatch",
    "SOLO_MID": "Solo Mid",
    "ALL_PICK_RANKED": "All Draft",
    "TURBO": "Turbo",
    "MUTATION": "Mutation",
}


def lobby_label(lobby_type: str) -> str:
    return LOBBY_LABELS.get(lobby_type, UNKNOWN_LABEL)


def mode_label(game_mode: str) -> str:
    return MODE_LABELS.get(game_mode, UNKNOWN_LABEL)


def format_duration(seconds: int) -> str:
    """Format seconds as ``m:ss``, without an hour component (3660 -> "61:00")."""
    minutes, secs = divmod(seconds, 60)
    return f"{minutes}:{secs:02d}"


def derive_outcome(victory_flags: Iterable[bool]) -> MatchOutcome:
    """Fold per-player win flags into the guild's outcome.

    At least one win and at least one loss means guild members met on
    opposite sides (MIXED). No flags at all means NONE.
    """
    won = lost = False
    for flag in victory_flags:
        if flag:
            won = True
        else:
            lost = True

    if won and lost:
        return MatchOutcome.MIXED
    if won:
        return MatchOutcome.VICTORY
    if lost:
        return MatchOutcome.DEFEAT
    return MatchOutcome.NONE
