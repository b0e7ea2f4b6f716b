"""Notification channel implementations."""

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.channels.card import KookCardChannel
from infrastructure.notifications.channels.webhook import DiscordWebhookChannel

__all__ = [
    "NotificationChannel",
    "KookCardChannel",
    "DiscordWebhookChannel",
]
