"""Guild poller pipeline.

One ``run()`` fetches the guild's latest matches, selects those newer than
the stored watermark, and delivers them oldest first to every configured
channel. The watermark only moves after every selected match reached
every channel; any failure aborts the run and leaves it untouched, so the
next run retries from the same point.
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from infrastructure.notifications import NotificationDispatcher
from integrations.stratz import GuildMatches, StratzClient
from modules.poller.errors import ProviderError, PublishError
from modules.poller.normalizer import normalize_match
from modules.poller.watermark import WatermarkKey, WatermarkStore

logger = structlog.get_logger()

DEFAULT_FETCH_LIMIT = 5

PROVIDER_ERROR_CODES = {
    "GRAPHQL_ERRORS": "PROVIDER_GRAPHQL_ERRORS",
    "MISSING_GUILD": "PROVIDER_MISSING_GUILD",
    "INVALID_RESPONSE": "PROVIDER_INVALID_RESPONSE",
}


@dataclass(frozen=True)
class PollSummary:
    """Outcome of a successful run.

    Attributes:
        delivered: Matches delivered to every channel
        watermark: Watermark after the run
        previous_watermark: Watermark before the run (0 on first run)
    """

    delivered: int
    watermark: int
    previous_watermark: int

    @property
    def advanced(self) -> bool:
        return self.watermark > self.previous_watermark


class PollerService:
    """Runs the fetch, select, normalize, dispatch and commit pipeline.

    Args:
        provider: STRATZ client
        store: Watermark store
        dispatcher: Dispatcher holding the destination channels
        guild_id: Tracked guild id
        table_name: Table holding the watermark item
        fetch_limit: Number of most recent matches fetched per run. Matches
            older than this window are never seen if the backlog grows past it.
    """

    def __init__(
        self,
        provider: StratzClient,
        store: WatermarkStore,
        dispatcher: NotificationDispatcher,
        guild_id: int,
        table_name: str,
        fetch_limit: int = DEFAULT_FETCH_LIMIT,
    ):
        self.provider = provider
        self.store = store
        self.dispatcher = dispatcher
        self.guild_id = guild_id
        self.fetch_limit = fetch_limit
        self.key = WatermarkKey(table_name=table_name, entity_id=guild_id)

    def run(self) -> PollSummary:
        """Execute one poll.

        Returns:
            PollSummary for the run

        Raises:
            ProviderError: fetching matches failed
            StoreError: reading or writing the watermark failed
            NormalizationError: a selected match lacks a required field
            PublishError: a channel rejected a notification
        """
        log = logger.bind(guild_id=self.guild_id)
        log.info("poll_started", fetch_limit=self.fetch_limit)

        guild = self._fetch()
        stored: Optional[int] = self.store.get(self.key)
        current = stored if stored is not None else 0
        log.info(
            "watermark_loaded",
            watermark=current,
            first_run=stored is None,
            match_count=len(guild.matches),
        )

        proposed = current
        delivered = 0
        # STRATZ lists matches newest first
        for raw in reversed(guild.matches):
            if raw.id is not None and raw.id <= current:
                log.debug("match_skipped", match_id=raw.id, watermark=current)
                continue

            notification = normalize_match(
                raw, guild.guild_id, guild.guild_name, guild.guild_logo
            )
            results = self.dispatcher.broadcast(notification)
            failure = self.dispatcher.first_failure(results)
            if failure:
                raise PublishError(
                    f"Failed to publish match {notification.match_id} to "
                    f"{failure.channel}: {failure.message}",
                    channel=failure.channel,
                    match_id=notification.match_id,
                )

            delivered += 1
            proposed = max(proposed, raw.id)
            log.info(
                "match_dispatched",
                match_id=raw.id,
                outcome=notification.outcome.value,
            )

        if proposed > current:
            self.store.put(self.key, proposed)
            log.info("watermark_advanced", previous=current, watermark=proposed)

        summary = PollSummary(
            delivered=delivered, watermark=proposed, previous_watermark=current
        )
        log.info("poll_completed", delivered=delivered, watermark=proposed)
        return summary

    def _fetch(self) -> GuildMatches:
        result = self.provider.fetch_guild_matches(self.guild_id, self.fetch_limit)
        if not result.is_success:
            raise ProviderError(
                f"Failed to fetch matches for guild {self.guild_id}: "
                f"{result.describe()}",
                error_code=PROVIDER_ERROR_CODES.get(
                    result.error_code, "PROVIDER_REQUEST_FAILED"
                ),
                result=result,
            )
        return result.data
