"""Turns raw STRATZ matches into ``MatchNotification`` objects.

All required-field checks live here. A match either normalizes into a
fully populated notification or raises a ``NormalizationError`` naming
the first missing field.
"""

from datetime import datetime, timezone
from typing import List, Optional, Tuple

from pydantic import ValidationError

from infrastructure.notifications.models import MatchNotification, ParticipantStats
from integrations.stratz.schemas import RawMatch, RawPlayer
from modules.poller.errors import (
    EmptyParticipantsError,
    MissingMatchFieldError,
    MissingPlayerFieldError,
    NormalizationError,
)
from modules.poller.labels import (
    derive_outcome,
    format_duration,
    lobby_label,
    mode_label,
)

REQUIRED_MATCH_FIELDS = (
    "id",
    "durationSeconds",
    "endDateTime",
    "lobbyType",
    "gameMode",
)
REQUIRED_PLAYER_FIELDS = ("isRadiant", "isVictory", "kills", "deaths", "assists")


def _player_stats(
    player: Optional[RawPlayer], match_id: int, index: int
) -> Tuple[bool, bool, ParticipantStats]:
    if player is None:
        raise MissingPlayerFieldError("player", match_id=match_id, index=index)

    for field in REQUIRED_PLAYER_FIELDS:
        if getattr(player, field) is None:
            raise MissingPlayerFieldError(field, match_id=match_id, index=index)
    if player.hero is None:
        raise MissingPlayerFieldError("hero", match_id=match_id, index=index)
    if player.hero.id is None:
        raise MissingPlayerFieldError("hero.id", match_id=match_id, index=index)
    if player.hero.displayName is None:
        raise MissingPlayerFieldError(
            "hero.displayName", match_id=match_id, index=index
        )
    if player.steamAccount is None or player.steamAccount.name is None:
        raise MissingPlayerFieldError(
            "steamAccount.name", match_id=match_id, index=index
        )

    try:
        stats = ParticipantStats(
            display_name=player.steamAccount.name,
            character_id=player.hero.id,
            character_display_name=player.hero.displayName,
            kills=player.kills,
            deaths=player.deaths,
            assists=player.assists,
            performance_delta=player.imp,
        )
    except ValidationError as e:
        raise NormalizationError(
            f"Player {index} of match {match_id} has invalid stats: "
            f"{e.error_count()} validation errors",
            match_id=match_id,
        ) from e
    return player.isRadiant, player.isVictory, stats


def normalize_match(
    raw: RawMatch, guild_id: int, guild_name: str, guild_logo: str
) -> MatchNotification:
    """Build the notification for one match.

    Args:
        raw: Match as returned by STRATZ
        guild_id: Tracked guild id
        guild_name: Guild display name
        guild_logo: Guild logo UGC id

    Returns:
        MatchNotification with players split into Radiant and Dire, each in
        provider order

    Raises:
        MissingMatchFieldError: a match-level field is absent
        EmptyParticipantsError: the player list is absent or empty
        MissingPlayerFieldError: a player entry or one of its fields is absent
    """
    for field in REQUIRED_MATCH_FIELDS:
        if getattr(raw, field) is None:
            raise MissingMatchFieldError(field, match_id=raw.id)
    if not raw.players:
        raise EmptyParticipantsError(match_id=raw.id)

    radiant: List[ParticipantStats] = []
    dire: List[ParticipantStats] = []
    victory_flags: List[bool] = []
    for index, player in enumerate(raw.players):
        is_radiant, is_victory, stats = _player_stats(player, raw.id, index)
        victory_flags.append(is_victory)
        (radiant if is_radiant else dire).append(stats)

    return MatchNotification(
        match_id=str(raw.id),
        guild_id=str(guild_id),
        guild_name=guild_name,
        guild_logo=guild_logo,
        outcome=derive_outcome(victory_flags),
        lobby_label=lobby_label(raw.lobbyType),
        mode_label=mode_label(raw.gameMode),
        radiant=tuple(radiant),
        dire=tuple(dire),
        duration_field=format_duration(raw.durationSeconds),
        end_time=datetime.fromtimestamp(raw.endDateTime, tz=timezone.utc),
    )
