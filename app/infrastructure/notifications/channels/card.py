"""KOOK card channel: renders a match as a KOOK card message.

KOOK card messages (type 10) carry a JSON-serialized list of cards in the
``content`` field. Each card is a list of modules (header, section,
divider, context); text elements use KOOK's kmarkdown dialect.
"""

import json
from typing import Any, Dict, List, Optional

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.formatting import (
    DIRE_LABEL,
    FOOTER_TEXT,
    RADIANT_LABEL,
    IconResolver,
    format_side,
    guild_url,
    match_url,
    unknown_icon,
)
from infrastructure.notifications.models import MatchNotification, MatchOutcome
from infrastructure.operations import OperationResult
from integrations.kook.client import KookClient, MessageType

CARD_THEMES = {
    MatchOutcome.VICTORY: "success",
    MatchOutcome.DEFEAT: "danger",
    MatchOutcome.MIXED: "warning",
    MatchOutcome.NONE: "secondary",
}


def _kmarkdown(content: str) -> Dict[str, str]:
    return {"type": "kmarkdown", "content": content}


class KookCardChannel(NotificationChannel):
    """Publishes match notifications as KOOK card messages.

    Args:
        client: KookClient authenticated with the bot token
        target_id: KOOK channel id to post into
        icon_resolver: Maps a hero id to the text shown before a player name
    """

    def __init__(
        self,
        client: KookClient,
        target_id: str,
        icon_resolver: Optional[IconResolver] = None,
    ) -> None:
        self._client = client
        self.target_id = target_id
        self._icon_resolver = icon_resolver or unknown_icon

    @property
    def channel_name(self) -> str:
        return "kook_card"

    def render(self, notification: MatchNotification) -> List[Dict[str, Any]]:
        """Render the card list sent as message content."""
        modules: List[Dict[str, Any]] = [
            {
                "type": "header",
                "text": {"type": "plain-text", "content": notification.title},
            },
            {
                "type": "section",
                "text": _kmarkdown(
                    f"[{notification.guild_name}]({guild_url(notification)})"
                    f" | [Match {notification.match_id}]({match_url(notification)})"
                ),
            },
        ]

        columns = [
            _kmarkdown(f"**{label}**\n{format_side(players, self._icon_resolver)}")
            for label, players in (
                (RADIANT_LABEL, notification.radiant),
                (DIRE_LABEL, notification.dire),
            )
            if players
        ]
        if columns:
            modules.append(
                {
                    "type": "section",
                    "text": {
                        "type": "paragraph",
                        "cols": len(columns),
                        "fields": columns,
                    },
                }
            )

        modules.extend(
            [
                {
                    "type": "section",
                    "text": _kmarkdown(
                        f"**Duration**\n{notification.duration_field}"
                    ),
                },
                {"type": "divider"},
                {
                    "type": "context",
                    "elements": [
                        {
                            "type": "plain-text",
                            "content": (
                                f"{FOOTER_TEXT} - {notification.end_time.isoformat()}"
                            ),
                        }
                    ],
                },
            ]
        )

        return [
            {
                "type": "card",
                "theme": CARD_THEMES[notification.outcome],
                "size": "lg",
                "modules": modules,
            }
        ]

    def _send(self, payload: List[Dict[str, Any]]) -> OperationResult:
        return self._client.create_message(
            MessageType.CARD, self.target_id, json.dumps(payload)
        )

    def _external_id(self, result: OperationResult) -> Optional[str]:
        if isinstance(result.data, dict) and result.data.get("msg_id"):
            return str(result.data["msg_id"])
        return None
