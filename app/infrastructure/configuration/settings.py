"""Guild poller configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.features import PollerSettings
from infrastructure.configuration.integrations import (
    AwsSettings,
    DiscordSettings,
    KookSettings,
    StratzSettings,
)


class Settings(BaseSettings):
    """Guild poller configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object:

    - **Integrations**: provider (STRATZ), destinations (KOOK, Discord), AWS
    - **Features**: the poller itself

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.discord.is_configured:
            webhook_url = settings.discord.DISCORD_WEBHOOK_URL
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    # Integration settings
    stratz: StratzSettings
    kook: KookSettings
    discord: DiscordSettings
    aws: AwsSettings

    # Feature settings
    poller: PollerSettings

    @property
    def is_production(self) -> bool:
        """True if PREFIX is empty (production)."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings, instantiating any section not passed explicitly.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "stratz": StratzSettings,
            "kook": KookSettings,
            "discord": DiscordSettings,
            "aws": AwsSettings,
            "poller": PollerSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
