"""KOOK bot settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class KookSettings(IntegrationSettings):
    """KOOK bot API configuration.

    The card publisher is only enabled when both a token and a target
    channel are configured.

    Environment Variables:
        KOOK_BASE_URL: KOOK API base URL (default: https://www.kookapp.cn)
        KOOK_TOKEN: Bot token, sent as ``Authorization: Bot <token>``
        KOOK_TARGET_ID: Channel id messages are posted to
    """

    KOOK_BASE_URL: str = Field(default="https://www.kookapp.cn", alias="KOOK_BASE_URL")
    KOOK_TOKEN: str | None = Field(default=None, alias="KOOK_TOKEN")
    KOOK_TARGET_ID: str = Field(default="", alias="KOOK_TARGET_ID")

    @property
    def is_configured(self) -> bool:
        return bool(self.KOOK_TOKEN and self.KOOK_TARGET_ID)
