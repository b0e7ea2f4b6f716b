"""Infrastructure configuration module - public API.

Centralized configuration for the guild poller using Pydantic BaseSettings
with one settings class per concern.

Exports:
    Settings: Main settings class (aggregates every section)
    PollerSettings, StratzSettings, KookSettings, DiscordSettings, AwsSettings

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    guild_id = settings.poller.GUILD_ID
    region = settings.aws.AWS_REGION
    ```
"""

from infrastructure.configuration.features import PollerSettings
from infrastructure.configuration.integrations import (
    AwsSettings,
    DiscordSettings,
    KookSettings,
    StratzSettings,
)
from infrastructure.configuration.settings import Settings

__all__ = [
    "Settings",
    "PollerSettings",
    "StratzSettings",
    "KookSettings",
    "DiscordSettings",
    "AwsSettings",
]
