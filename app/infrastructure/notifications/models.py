"""Match notification models.

Platform-agnostic models for one finished match. The poller builds a
``MatchNotification`` once per new match; every channel renders the same
instance in its own format.

Uses Pydantic BaseModel (frozen) so a notification cannot change while it
is being fanned out to several channels.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MatchOutcome(Enum):
    """Guild-level outcome of a match, folded from per-player results.

    NONE: no player had a decisive result (cancelled match)
    VICTORY: every tracked player won
    DEFEAT: every tracked player lost
    MIXED: guild members played on both sides
    """

    NONE = "none"
    VICTORY = "victory"
    DEFEAT = "defeat"
    MIXED = "mixed"

    @property
    def label(self) -> str:
        return _OUTCOME_LABELS[self]


_OUTCOME_LABELS = {
    MatchOutcome.NONE: "Cancelled",
    MatchOutcome.VICTORY: "Victory",
    MatchOutcome.DEFEAT: "Defeat",
    MatchOutcome.MIXED: "Clash",
}


class NotificationStatus(Enum):
    """Delivery status of one notification on one channel."""

    SENT = "sent"
    FAILED = "failed"


class ParticipantStats(BaseModel):
    """One player's line in a match notification.

    Attributes:
        display_name: Player name (Steam account name)
        character_id: Hero id, used to look up the hero icon
        character_display_name: Hero name as reported by the provider
        kills, deaths, assists: Scoreboard values
        performance_delta: Signed performance score; omitted from rendering when None
    """

    model_config = ConfigDict(frozen=True)

    display_name: str
    character_id: int
    character_display_name: str
    kills: int = Field(ge=0)
    deaths: int = Field(ge=0)
    assists: int = Field(ge=0)
    performance_delta: Optional[int] = None


class MatchNotification(BaseModel):
    """Normalized, fully populated notification for one match.

    Attributes:
        match_id: Match identifier, as a string
        guild_id: Tracked guild id, as a string
        guild_name: Guild display name
        guild_logo: Guild logo reference (UGC id)
        outcome: Folded MatchOutcome
        lobby_label: Display label of the lobby type ("Ranked", ...)
        mode_label: Display label of the game mode ("All Pick", ...)
        radiant: Players on the Radiant side, in provider order
        dire: Players on the Dire side, in provider order
        duration_field: Pre-formatted "m:ss" duration
        end_time: Match end instant, UTC

    Example:
        notification = MatchNotification(
            match_id="42",
            guild_id="117311",
            guild_name="G",
            guild_logo="L",
            outcome=MatchOutcome.VICTORY,
            lobby_label="Ranked",
            mode_label="All Pick",
            radiant=(ParticipantStats(...),),
            dire=(),
            duration_field="10:00",
            end_time=datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc),
        )
    """

    model_config = ConfigDict(frozen=True)

    match_id: str
    guild_id: str
    guild_name: str
    guild_logo: str
    outcome: MatchOutcome
    lobby_label: str
    mode_label: str
    radiant: Tuple[ParticipantStats, ...] = ()
    dire: Tuple[ParticipantStats, ...] = ()
    duration_field: str
    end_time: datetime

    @field_validator("end_time")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Naive datetimes are taken as UTC; aware ones are converted."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @property
    def title(self) -> str:
        """``"{outcome} - {lobby} - {mode}"`` headline shared by all channels."""
        return f"{self.outcome.label} - {self.lobby_label} - {self.mode_label}"


class NotificationResult(BaseModel):
    """Result of delivering one notification to one channel.

    Attributes:
        match_id: Match the notification was built from
        channel: Channel name (e.g. "discord_webhook", "kook_card")
        status: SENT or FAILED
        message: Human-readable result message
        error_code: Error code for failures
        external_id: Message id returned by the platform, when available
    """

    match_id: str
    channel: str
    status: NotificationStatus
    message: str
    error_code: Optional[str] = None
    external_id: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Check if delivery was successful."""
        return self.status == NotificationStatus.SENT
