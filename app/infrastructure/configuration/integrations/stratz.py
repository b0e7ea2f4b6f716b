"""STRATZ provider settings."""

from pydantic import AliasChoices, Field

from infrastructure.configuration.base import IntegrationSettings


class StratzSettings(IntegrationSettings):
    """STRATZ GraphQL API configuration.

    Environment Variables:
        STRATZ_API_URL: GraphQL endpoint (default: https://api.stratz.com/graphql)
        STRATZ_TOKEN: API token sent as a bearer token (STRATZ_JWT also accepted)
        STRATZ_TIMEOUT_SECONDS: Request timeout in seconds (default: 30)
    """

    STRATZ_API_URL: str = Field(
        default="https://api.stratz.com/graphql", alias="STRATZ_API_URL"
    )
    STRATZ_TOKEN: str | None = Field(
        default=None,
        validation_alias=AliasChoices("STRATZ_TOKEN", "STRATZ_JWT"),
    )
    STRATZ_TIMEOUT_SECONDS: int = Field(
        default=30, alias="STRATZ_TIMEOUT_SECONDS", ge=1
    )
