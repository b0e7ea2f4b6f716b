"""Discord webhook integration."""

from .client import DiscordWebhookClient

__all__ = ["DiscordWebhookClient"]
