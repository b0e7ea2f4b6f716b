"""KOOK bot API client."""

from enum import Enum
from typing import Optional

import structlog

from infrastructure.clients.http import HttpClient
from infrastructure.operations import OperationResult

logger = structlog.get_logger()

DEFAULT_BASE_URL = "https://www.kookapp.cn"
CREATE_MESSAGE_PATH = "/api/v3/message/create"
TOKEN_TYPE = "Bot"


class MessageType(Enum):
    """KOOK message types accepted by message/create."""

    TEXT = 1
    KMARKDOWN = 9
    CARD = 10


class KookClient:
    """Sends channel messages through the KOOK bot API.

    KOOK answers HTTP 200 for application errors and reports them in the
    body as ``{"code": <non-zero>, "message": ...}``; those are returned as
    failed results too.

    Args:
        token: Bot token
        base_url: KOOK API base URL
        timeout: Request timeout in seconds
        http_client: Pre-built HttpClient (tests inject a mock here)
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30,
        http_client: Optional[HttpClient] = None,
    ) -> None:
        self._token = token
        self._http = http_client or HttpClient(base_url=base_url, timeout=timeout)

    def create_message(
        self, message_type: MessageType, target_id: str, content: str
    ) -> OperationResult:
        """Post a message to a channel.

        Args:
            message_type: MessageType discriminator
            target_id: Channel id
            content: Message body; for CARD messages, the JSON-serialized card list

        Returns:
            OperationResult with ``{"msg_id": ...}`` in data on success
        """
        payload = {
            "type": message_type.value,
            "target_id": target_id,
            "content": content,
        }
        result = self._http.post(
            CREATE_MESSAGE_PATH,
            json_data=payload,
            headers={"Authorization": f"{TOKEN_TYPE} {self._token}"},
        )
        if not result.is_success:
            return result

        body = result.data if isinstance(result.data, dict) else {}
        code = body.get("code")
        if code != 0:
            logger.warning(
                "kook_api_error",
                target_id=target_id,
                code=code,
                error=body.get("message"),
            )
            return OperationResult.permanent_error(
                f"KOOK rejected message: {body.get('message', 'no message')}",
                error_code=f"KOOK_{code}",
            )

        return OperationResult.success(
            data=body.get("data") or {}, message="KOOK message created"
        )
