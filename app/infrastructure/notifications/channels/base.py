"""Notification channel abstract base class.

All destination publishers (Discord webhook embed, KOOK card) implement
this interface. The dispatcher and the poller only ever see
``NotificationChannel``; adding a destination means adding a subclass.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

import structlog

from infrastructure.notifications.models import (
    MatchNotification,
    NotificationResult,
    NotificationStatus,
)
from infrastructure.operations import OperationResult

logger = structlog.get_logger()


class NotificationChannel(ABC):
    """Abstract base class for destination publishers.

    Subclasses render a ``MatchNotification`` into the platform's payload
    and send it with one outbound call. ``publish`` never raises for
    transport failures: it returns a FAILED ``NotificationResult`` and the
    caller decides whether to abort.

    Example Implementation:
        class EchoChannel(NotificationChannel):

            @property
            def channel_name(self) -> str:
                return "echo"

            def render(self, notification: MatchNotification) -> Any:
                return notification.title

            def _send(self, payload: Any) -> OperationResult:
                print(payload)
                return OperationResult.success()
    """

    @property
    @abstractmethod
    def channel_name(self) -> str:
        """Channel identifier used in results and logs."""
        pass

    @abstractmethod
    def render(self, notification: MatchNotification) -> Any:
        """Build the platform payload for a notification.

        Pure function of the notification; no network access.
        """
        pass

    @abstractmethod
    def _send(self, payload: Any) -> OperationResult:
        """Transmit a rendered payload. One outbound call, no retry."""
        pass

    def _external_id(self, result: OperationResult) -> Optional[str]:
        """Extract the platform message id from a successful send."""
        return None

    def publish(self, notification: MatchNotification) -> NotificationResult:
        """Render and send a notification.

        Args:
            notification: Notification to publish

        Returns:
            NotificationResult with SENT or FAILED status
        """
        log = logger.bind(channel=self.channel_name, match_id=notification.match_id)
        result = self._send(self.render(notification))

        if not result.is_success:
            log.error(
                "notification_publish_failed",
                error=result.message,
                error_code=result.error_code,
                status=result.status.value,
            )
            return NotificationResult(
                match_id=notification.match_id,
                channel=self.channel_name,
                status=NotificationStatus.FAILED,
                message=result.message,
                error_code=result.error_code,
            )

        external_id = self._external_id(result)
        log.info("notification_published", external_id=external_id)
        return NotificationResult(
            match_id=notification.match_id,
            channel=self.channel_name,
            status=NotificationStatus.SENT,
            message=f"Published to {self.channel_name}",
            external_id=external_id,
        )
