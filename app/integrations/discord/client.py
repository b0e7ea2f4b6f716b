"""Discord incoming webhook client."""

from typing import Any, Dict, Optional

from infrastructure.clients.http import HttpClient
from infrastructure.operations import OperationResult


class DiscordWebhookClient:
    """Executes a Discord incoming webhook.

    ``wait=true`` makes Discord return the created message so its id can be
    recorded.

    Args:
        webhook_url: Full webhook URL (contains the webhook secret)
        timeout: Request timeout in seconds
        http_client: Pre-built HttpClient (tests inject a mock here)
    """

    def __init__(
        self,
        webhook_url: str,
        timeout: float = 30,
        http_client: Optional[HttpClient] = None,
    ) -> None:
        self._webhook_url = webhook_url
        self._http = http_client or HttpClient(timeout=timeout)

    def execute(self, payload: Dict[str, Any]) -> OperationResult:
        """Send a webhook message.

        Args:
            payload: Webhook body ({"content": ..., "embeds": [...]})

        Returns:
            OperationResult with the created message object in data
        """
        return self._http.post(
            self._webhook_url, json_data=payload, params={"wait": "true"}
        )
