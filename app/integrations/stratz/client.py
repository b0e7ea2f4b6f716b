"""STRATZ GraphQL client.

Fetches a guild's most recent matches. Results are returned newest first,
as STRATZ orders them.
"""

from typing import Optional

import structlog
from pydantic import ValidationError

from infrastructure.clients.http import HttpClient
from infrastructure.operations import OperationResult, OperationStatus
from integrations.stratz.queries import GUILD_MATCHES_QUERY
from integrations.stratz.schemas import GraphQLResponse, GuildMatches

logger = structlog.get_logger()

DEFAULT_API_URL = "https://api.stratz.com/graphql"
# STRATZ rejects requests without this user agent
STRATZ_USER_AGENT = "STRATZ_API"


class StratzClient:
    """Thin wrapper around the STRATZ GraphQL endpoint.

    Args:
        token: STRATZ API token (bearer)
        api_url: GraphQL endpoint URL
        timeout: Request timeout in seconds
        http_client: Pre-built HttpClient (tests inject a mock here)
    """

    def __init__(
        self,
        token: Optional[str],
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30,
        http_client: Optional[HttpClient] = None,
    ) -> None:
        self.api_url = api_url
        headers = {"User-Agent": STRATZ_USER_AGENT}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._http = http_client or HttpClient(timeout=timeout, headers=headers)
        self._logger = logger.bind(component="stratz_client")

    def fetch_guild_matches(self, guild_id: int, take: int) -> OperationResult:
        """Fetch up to ``take`` most recent matches of a guild.

        Failure error codes:
            GRAPHQL_ERRORS: the response carried an ``errors`` array
            MISSING_GUILD: no guild data, or guild id/name/logo/matches missing
            INVALID_RESPONSE: the body does not match the schema, or a match
                entry is null
            Transport codes from HttpClient (TIMEOUT, HTTP_5xx, ...)

        Args:
            guild_id: STRATZ guild id
            take: Maximum number of matches

        Returns:
            OperationResult with a GuildMatches in data on success
        """
        self._logger.info("fetching_guild_matches", guild_id=guild_id, take=take)
        result = self._http.post(
            self.api_url,
            json_data={
                "query": GUILD_MATCHES_QUERY,
                "variables": {"guildId": guild_id, "take": take},
            },
        )
        if not result.is_success:
            return result

        try:
            response = GraphQLResponse.model_validate(result.data or {})
        except ValidationError as e:
            self._logger.error("stratz_invalid_response", error=str(e))
            return OperationResult.permanent_error(
                f"Unexpected STRATZ response shape: {e.error_count()} errors",
                error_code="INVALID_RESPONSE",
            )

        if response.errors:
            self._logger.error("stratz_graphql_errors", errors=response.errors)
            messages = "; ".join(
                str(error.get("message", error)) for error in response.errors
            )
            return OperationResult.permanent_error(
                f"STRATZ returned errors: {messages}", error_code="GRAPHQL_ERRORS"
            )

        guild = response.data.guild if response.data else None
        if (
            guild is None
            or guild.id is None
            or guild.name is None
            or guild.logo is None
            or guild.matches is None
        ):
            return OperationResult.error(
                OperationStatus.NOT_FOUND,
                f"STRATZ returned no usable guild data for guild {guild_id}",
                error_code="MISSING_GUILD",
            )

        if any(match is None for match in guild.matches):
            return OperationResult.permanent_error(
                f"STRATZ returned a null match for guild {guild_id}",
                error_code="INVALID_RESPONSE",
            )

        guild_matches = GuildMatches(
            guild_id=guild.id,
            guild_name=guild.name,
            guild_logo=guild.logo,
            matches=list(guild.matches),
        )
        self._logger.info(
            "fetched_guild_matches",
            guild_id=guild_id,
            match_ids=[match.id for match in guild_matches.matches],
        )
        return OperationResult.success(
            data=guild_matches, message="STRATZ guild matches fetched"
        )
