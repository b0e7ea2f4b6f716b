"""Guild match poller feature settings."""

from typing import Literal

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class PollerSettings(FeatureSettings):
    """Configuration for the guild match poller.

    Environment Variables:
        POLLER_GUILD_ID: Tracked guild id (default: 117311)
        POLLER_FETCH_LIMIT: Matches fetched per run (default: 5)
        POLLER_TABLE_NAME: DynamoDB table holding watermarks (default: Guilds)
        POLLER_WATERMARK_BACKEND: 'dynamodb' or 'memory' (default: dynamodb)
        POLLER_INTERVAL_MINUTES: Scheduler period in minutes (default: 5)
        POLLER_CONCURRENT_DISPATCH: Send to destinations concurrently (default: False)

    The fetch limit bounds the work done per run. If more than
    POLLER_FETCH_LIMIT matches finish between two runs, the oldest of them
    are never delivered.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        guild_id = settings.poller.GUILD_ID
        take = settings.poller.FETCH_LIMIT
        ```
    """

    GUILD_ID: int = Field(default=117311, alias="POLLER_GUILD_ID")
    FETCH_LIMIT: int = Field(default=5, alias="POLLER_FETCH_LIMIT", ge=1, le=100)
    TABLE_NAME: str = Field(default="Guilds", alias="POLLER_TABLE_NAME")
    WATERMARK_BACKEND: Literal["dynamodb", "memory"] = Field(
        default="dynamodb", alias="POLLER_WATERMARK_BACKEND"
    )
    INTERVAL_MINUTES: int = Field(default=5, alias="POLLER_INTERVAL_MINUTES", ge=1)
    CONCURRENT_DISPATCH: bool = Field(
        default=False, alias="POLLER_CONCURRENT_DISPATCH"
    )
