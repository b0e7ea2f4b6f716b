"""Discord webhook settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class DiscordSettings(IntegrationSettings):
    """Discord webhook configuration.

    Environment Variables:
        DISCORD_WEBHOOK_URL: Incoming webhook URL; the embed publisher is
            disabled when unset
    """

    DISCORD_WEBHOOK_URL: str | None = Field(default=None, alias="DISCORD_WEBHOOK_URL")

    @property
    def is_configured(self) -> bool:
        return bool(self.DISCORD_WEBHOOK_URL)
