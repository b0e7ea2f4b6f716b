"""
Factory functions for shared infrastructure services.

Provides process-scoped singleton providers for settings and AWS clients.
"""

from functools import lru_cache

from infrastructure.clients.aws import DynamoDBClient, SessionProvider
from infrastructure.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """
    Get process-scoped settings singleton.

    This is the single source of truth for settings across the process.
    The @lru_cache decorator ensures only ONE instance is created, even if
    called from multiple packages:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_dynamodb_client() -> DynamoDBClient:
    """Provider for the DynamoDB client used by the watermark store.

    Credentials are resolved per API call, so caching the client does not
    hold stale credentials.

    Returns:
        DynamoDBClient: Client configured with region, endpoint and role
        from ``settings.aws``
    """
    aws = get_settings().aws
    return DynamoDBClient(
        session_provider=SessionProvider(
            region=aws.AWS_REGION, endpoint_url=aws.DYNAMODB_ENDPOINT_URL
        ),
        default_role_arn=aws.DYNAMODB_ROLE_ARN,
    )
