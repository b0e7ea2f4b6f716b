"""Fan-out dispatcher for match notifications.

Delivers one ``MatchNotification`` to every configured channel and stops
at the first failure, so a caller can treat the broadcast as all or
nothing.

Usage Example:
    from infrastructure.notifications import NotificationDispatcher

    dispatcher = NotificationDispatcher(
        channels=[kook_channel, discord_channel],
    )

    results = dispatcher.broadcast(notification)
    failed = dispatcher.first_failure(results)
    if failed:
        logger.error("broadcast_failed", channel=failed.channel)
"""

import contextvars
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

import structlog

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.models import (
    MatchNotification,
    NotificationResult,
    NotificationStatus,
)

logger = structlog.get_logger()


class NotificationDispatcher:
    """Broadcasts notifications to a fixed, ordered list of channels.

    Sequential mode (default) publishes in configured order and does not
    contact the remaining channels once one fails. Concurrent mode issues
    all channel calls at once on a thread pool; results are still reported
    in configured order.

    Attributes:
        channels: Channels in delivery order
        concurrent: Publish to all channels in parallel
    """

    def __init__(
        self,
        channels: Sequence[NotificationChannel],
        concurrent: bool = False,
    ):
        if not channels:
            raise ValueError("NotificationDispatcher requires at least one channel")
        self.channels = list(channels)
        self.concurrent = concurrent

        logger.info(
            "initialized_notification_dispatcher",
            channels=self.get_available_channels(),
            concurrent=concurrent,
        )

    def broadcast(self, notification: MatchNotification) -> List[NotificationResult]:
        """Publish a notification to every channel.

        Args:
            notification: Notification to publish

        Returns:
            One NotificationResult per channel attempted, in configured
            order. In sequential mode the list ends at the first failure.
        """
        logger.info(
            "broadcasting_notification",
            match_id=notification.match_id,
            channels=self.get_available_channels(),
        )

        if self.concurrent and len(self.channels) > 1:
            # pool threads do not inherit contextvars such as the run id
            with ThreadPoolExecutor(max_workers=len(self.channels)) as executor:
                futures = [
                    executor.submit(
                        contextvars.copy_context().run,
                        self._publish,
                        channel,
                        notification,
                    )
                    for channel in self.channels
                ]
                results = [future.result() for future in futures]
        else:
            results = []
            for channel in self.channels:
                result = self._publish(channel, notification)
                results.append(result)
                if not result.is_success:
                    break

        success_count = sum(1 for r in results if r.is_success)
        logger.info(
            "notification_broadcast_complete",
            match_id=notification.match_id,
            success_count=success_count,
            total_attempts=len(results),
        )
        return results

    def _publish(
        self, channel: NotificationChannel, notification: MatchNotification
    ) -> NotificationResult:
        try:
            return channel.publish(notification)
        except Exception as e:
            logger.error(
                "channel_publish_exception",
                channel_name=channel.channel_name,
                match_id=notification.match_id,
                error=str(e),
                exc_info=True,
            )
            return NotificationResult(
                match_id=notification.match_id,
                channel=channel.channel_name,
                status=NotificationStatus.FAILED,
                message=f"Channel exception: {str(e)}",
                error_code="CHANNEL_EXCEPTION",
            )

    @staticmethod
    def first_failure(
        results: Sequence[NotificationResult],
    ) -> Optional[NotificationResult]:
        """Return the first failed result in configured order, if any."""
        return next((r for r in results if not r.is_success), None)

    def get_available_channels(self) -> List[str]:
        """Get list of channel names in delivery order."""
        return [channel.channel_name for channel in self.channels]
