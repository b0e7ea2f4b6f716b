"""Session provider for AWS client operations.

Centralizes region, endpoint and role configuration so per-service clients
only forward the kwargs it builds.
"""

from typing import Any, Dict, Optional

import structlog

logger = structlog.get_logger()


class SessionProvider:
    """Builds boto3 session and client configuration.

    Args:
        region: AWS region for all clients (e.g., 'us-east-1')
        endpoint_url: Custom endpoint URL (dynamodb-local, LocalStack)
    """

    def __init__(
        self,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ) -> None:
        self.region = region
        self.endpoint_url = endpoint_url

    def build_client_kwargs(self, role_arn: Optional[str] = None) -> Dict[str, Any]:
        """Build kwargs for `execute_aws_api_call`.

        Args:
            role_arn: Optional role to assume for the call

        Returns:
            Dict with session_config, client_config and role_arn
        """
        session_config = {}
        client_config = {}

        if self.region:
            session_config["region_name"] = self.region
            client_config["region_name"] = self.region

        if self.endpoint_url:
            client_config["endpoint_url"] = self.endpoint_url

        logger.debug(
            "built_client_kwargs",
            session_config=session_config,
            client_config=client_config,
            role_arn=role_arn,
        )
        return {
            "session_config": session_config or None,
            "client_config": client_config or None,
            "role_arn": role_arn,
        }
