"""DynamoDB client for AWS operations.

Provides access to the DynamoDB item operations the poller needs, with
consistent error handling and OperationResult return types.
"""

from typing import Any, Dict, Optional

import structlog

from infrastructure.clients.aws import executor
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()


class DynamoDBClient:
    """Client for DynamoDB operations.

    All methods return OperationResult; callers decide whether a failure is
    fatal.

    Args:
        session_provider: SessionProvider instance for region/endpoint config
        default_role_arn: Role assumed when a call does not pass one
    """

    def __init__(
        self,
        session_provider: SessionProvider,
        default_role_arn: Optional[str] = None,
    ) -> None:
        self._session_provider = session_provider
        self._default_role_arn = default_role_arn
        self._service_name = "dynamodb"
        self._logger = logger.bind(component="dynamodb_client")

    def _client_kwargs(self, role_arn: Optional[str]) -> Dict[str, Any]:
        return self._session_provider.build_client_kwargs(
            role_arn=role_arn or self._default_role_arn
        )

    def get_item(
        self,
        table_name: str,
        Key: Dict[str, Any],
        role_arn: Optional[str] = None,
        **kwargs,
    ) -> OperationResult:
        """Get an item from DynamoDB.

        Args:
            table_name: Name of the DynamoDB table
            Key: Primary key of the item (e.g., {"id": {"N": "117311"}})
            role_arn: Optional role ARN
            **kwargs: Additional get_item parameters (ConsistentRead, ...)

        Returns:
            OperationResult with the raw get_item response in data
        """
        return executor.execute_aws_api_call(
            self._service_name,
            "get_item",
            TableName=table_name,
            Key=Key,
            **self._client_kwargs(role_arn),
            **kwargs,
        )

    def put_item(
        self,
        table_name: str,
        Item: Dict[str, Any],
        role_arn: Optional[str] = None,
        **kwargs,
    ) -> OperationResult:
        """Put an item into DynamoDB.

        Args:
            table_name: Name of the DynamoDB table
            Item: Item to store (DynamoDB format with type descriptors)
            role_arn: Optional role ARN
            **kwargs: Additional put_item parameters

        Returns:
            OperationResult with status
        """
        return executor.execute_aws_api_call(
            self._service_name,
            "put_item",
            TableName=table_name,
            Item=Item,
            **self._client_kwargs(role_arn),
            **kwargs,
        )
