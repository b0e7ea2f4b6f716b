"""Match notification delivery.

Platform-agnostic notification models, the destination channel interface
with its Discord and KOOK implementations, and the fan-out dispatcher.

Usage:
    from infrastructure.notifications import (
        DiscordWebhookChannel,
        KookCardChannel,
        NotificationDispatcher,
    )

    dispatcher = NotificationDispatcher(
        channels=[
            KookCardChannel(kook_client, target_id="8464327790344506"),
            DiscordWebhookChannel(discord_client),
        ]
    )
    results = dispatcher.broadcast(notification)
"""

# Models
from infrastructure.notifications.models import (
    MatchNotification,
    MatchOutcome,
    NotificationResult,
    NotificationStatus,
    ParticipantStats,
)

# Dispatcher
from infrastructure.notifications.dispatcher import NotificationDispatcher

# Channel interface
from infrastructure.notifications.channels.base import NotificationChannel

# Channel implementations
from infrastructure.notifications.channels.card import KookCardChannel
from infrastructure.notifications.channels.webhook import DiscordWebhookChannel

__all__ = [
    # Models
    "MatchNotification",
    "MatchOutcome",
    "NotificationResult",
    "NotificationStatus",
    "ParticipantStats",
    # Dispatcher
    "NotificationDispatcher",
    # Channel interface
    "NotificationChannel",
    # Channel implementations
    "KookCardChannel",
    "DiscordWebhookChannel",
]
