"""Discord webhook channel: renders a match as a single rich embed."""

from typing import Any, Dict, List, Optional

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.formatting import (
    DIRE_LABEL,
    FOOTER_ICON_URL,
    FOOTER_TEXT,
    RADIANT_LABEL,
    IconResolver,
    format_side,
    guild_logo_url,
    guild_url,
    match_url,
)
from infrastructure.notifications.models import MatchNotification, MatchOutcome
from infrastructure.operations import OperationResult
from integrations.discord.client import DiscordWebhookClient

RADIANT_EMOJI = "<:radiant:958274781919207505>"
DIRE_EMOJI = "<:dire:958274694203719740>"
DURATION_HEADER = ":clock3: Duration"
UNKNOWN_EMOJI = ":grey_question:"

EMBED_COLORS = {
    MatchOutcome.VICTORY: 0x2ECC71,
    MatchOutcome.DEFEAT: 0xE74C3C,
    MatchOutcome.MIXED: 0xF1C40F,
    MatchOutcome.NONE: 0x95A5A6,
}


def _unknown_emoji(character_id: int) -> str:
    return UNKNOWN_EMOJI


class DiscordWebhookChannel(NotificationChannel):
    """Publishes match notifications through a Discord incoming webhook.

    Args:
        client: DiscordWebhookClient bound to the webhook URL
        icon_resolver: Maps a hero id to a Discord emoji string
    """

    def __init__(
        self,
        client: DiscordWebhookClient,
        icon_resolver: Optional[IconResolver] = None,
    ) -> None:
        self._client = client
        self._icon_resolver = icon_resolver or _unknown_emoji

    @property
    def channel_name(self) -> str:
        return "discord_webhook"

    def render(self, notification: MatchNotification) -> Dict[str, Any]:
        """Render the webhook body: match link as content plus one embed."""
        fields: List[Dict[str, Any]] = []
        for header, players in (
            (f"{RADIANT_EMOJI} {RADIANT_LABEL}", notification.radiant),
            (f"{DIRE_EMOJI} {DIRE_LABEL}", notification.dire),
        ):
            if players:
                fields.append(
                    {
                        "name": header,
                        "value": format_side(players, self._icon_resolver),
                        "inline": True,
                    }
                )
        fields.append(
            {
                "name": DURATION_HEADER,
                "value": notification.duration_field,
                "inline": False,
            }
        )

        embed = {
            "author": {
                "name": notification.guild_name,
                "url": guild_url(notification),
                "icon_url": guild_logo_url(notification),
            },
            "title": notification.title,
            "url": match_url(notification),
            "color": EMBED_COLORS[notification.outcome],
            "fields": fields,
            "footer": {"text": FOOTER_TEXT, "icon_url": FOOTER_ICON_URL},
            "timestamp": notification.end_time.isoformat(),
        }
        return {"content": match_url(notification), "embeds": [embed]}

    def _send(self, payload: Dict[str, Any]) -> OperationResult:
        return self._client.execute(payload)

    def _external_id(self, result: OperationResult) -> Optional[str]:
        if isinstance(result.data, dict) and result.data.get("id"):
            return str(result.data["id"])
        return None
