"""Wiring for the poller service.

Builds the STRATZ client, watermark store, destination channels and
dispatcher from ``Settings``. A destination is enabled when its
credentials are configured; at least one must be.
"""

from functools import lru_cache
from typing import List, Optional

import structlog

from infrastructure.configuration import Settings
from infrastructure.notifications import (
    DiscordWebhookChannel,
    KookCardChannel,
    NotificationChannel,
    NotificationDispatcher,
)
from infrastructure.services.providers import get_dynamodb_client, get_settings
from integrations.discord import DiscordWebhookClient
from integrations.kook import KookClient
from integrations.stratz import StratzClient
from modules.poller.heroes import hero_emoji, hero_slug
from modules.poller.service import PollerService
from modules.poller.watermark import (
    DynamoWatermarkStore,
    InMemoryWatermarkStore,
    WatermarkStore,
)

logger = structlog.get_logger()


def build_channels(settings: Settings) -> List[NotificationChannel]:
    """Create a channel for every configured destination, KOOK first."""
    channels: List[NotificationChannel] = []
    if settings.kook.is_configured:
        channels.append(
            KookCardChannel(
                KookClient(
                    token=settings.kook.KOOK_TOKEN,
                    base_url=settings.kook.KOOK_BASE_URL,
                ),
                target_id=settings.kook.KOOK_TARGET_ID,
                icon_resolver=hero_slug,
            )
        )
    if settings.discord.is_configured:
        channels.append(
            DiscordWebhookChannel(
                DiscordWebhookClient(settings.discord.DISCORD_WEBHOOK_URL),
                icon_resolver=hero_emoji,
            )
        )
    return channels


def build_watermark_store(settings: Settings) -> WatermarkStore:
    if settings.poller.WATERMARK_BACKEND == "memory":
        logger.warning("using_in_memory_watermark_store")
        return InMemoryWatermarkStore()
    return DynamoWatermarkStore(get_dynamodb_client())


def build_poller_service(
    settings: Settings, store: Optional[WatermarkStore] = None
) -> PollerService:
    """Build a PollerService from settings.

    Args:
        settings: Application settings
        store: Watermark store override; built from settings when omitted

    Raises:
        ValueError: no destination is configured
    """
    channels = build_channels(settings)
    if not channels:
        raise ValueError(
            "No destination configured: set KOOK_TOKEN and KOOK_TARGET_ID "
            "or DISCORD_WEBHOOK_URL"
        )

    return PollerService(
        provider=StratzClient(
            token=settings.stratz.STRATZ_TOKEN,
            api_url=settings.stratz.STRATZ_API_URL,
            timeout=settings.stratz.STRATZ_TIMEOUT_SECONDS,
        ),
        store=store or build_watermark_store(settings),
        dispatcher=NotificationDispatcher(
            channels, concurrent=settings.poller.CONCURRENT_DISPATCH
        ),
        guild_id=settings.poller.GUILD_ID,
        table_name=settings.poller.TABLE_NAME,
        fetch_limit=settings.poller.FETCH_LIMIT,
    )


@lru_cache
def get_poller_service() -> PollerService:
    """Process-scoped PollerService built from the cached settings."""
    return build_poller_service(get_settings())
