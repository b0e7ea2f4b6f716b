"""boto3 call executor for infrastructure clients.

Provides `get_boto3_client` and `execute_aws_api_call` with the
OperationResult pattern. Configuration is passed in by callers; nothing
here reads settings.
"""

import time
from typing import Any, Dict, Optional

import boto3  # type: ignore
from botocore.client import BaseClient  # type: ignore
from botocore.exceptions import BotoCoreError, ClientError  # type: ignore
import structlog

from infrastructure.operations.classifiers import classify_aws_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

logger = structlog.get_logger()


def get_boto3_client(
    service_name: str,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
    role_arn: Optional[str] = None,
    session_name: str = "GuildPollerSession",
) -> BaseClient:
    """Create a boto3 client for the given service.

    Args:
        service_name: AWS service name (e.g., 'dynamodb')
        session_config: Optional boto3 session kwargs (e.g., region_name)
        client_config: Optional client kwargs (e.g., endpoint_url)
        role_arn: Optional role to assume
        session_name: Name for assumed role session

    Returns:
        botocore client instance
    """
    session_config = session_config or {}
    client_config = client_config or {}

    if role_arn:
        sts = boto3.client("sts")
        assumed = sts.assume_role(RoleArn=role_arn, RoleSessionName=session_name)
        creds = assumed["Credentials"]
        session = boto3.Session(
            aws_access_key_id=creds["AccessKeyId"],
            aws_secret_access_key=creds["SecretAccessKey"],
            aws_session_token=creds["SessionToken"],
            **session_config,
        )
    else:
        session = boto3.Session(**session_config)

    return session.client(service_name, **client_config)


def _calculate_retry_delay(attempt: int, backoff_factor: float = 0.5) -> float:
    return backoff_factor * (2**attempt)


def execute_aws_api_call(
    service_name: str,
    method: str,
    role_arn: Optional[str] = None,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
    max_retries: int = 3,
    backoff_factor: float = 0.5,
    **kwargs,
) -> OperationResult:
    """Execute an AWS API call with retries and standardized results.

    Transient failures (throttling, unknown client errors) are retried with
    exponential backoff; everything else is returned on first failure.
    Keyword arguments are passed through to the boto3 method.

    Returns:
        OperationResult wrapping the raw boto3 response on success
    """
    for attempt in range(max_retries + 1):
        try:
            client = get_boto3_client(
                service_name,
                session_config=session_config,
                client_config=client_config,
                role_arn=role_arn,
            )
            response = getattr(client, method)(**kwargs)
            return OperationResult.success(
                data=response, message=f"{service_name}.{method} succeeded"
            )

        except ClientError as e:
            mapped = classify_aws_error(e)

            if (
                mapped.status == OperationStatus.TRANSIENT_ERROR
                and attempt < max_retries
            ):
                delay = _calculate_retry_delay(attempt, backoff_factor)
                logger.warning(
                    "aws_api_retry",
                    service=service_name,
                    method=method,
                    attempt=attempt + 1,
                    error=str(e),
                    delay=delay,
                )
                time.sleep(delay)
                continue

            logger.error(
                "aws_api_error_final", service=service_name, method=method, error=str(e)
            )
            return mapped

        except BotoCoreError as e:
            logger.error(
                "aws_api_connection_error",
                service=service_name,
                method=method,
                error=str(e),
            )
            return classify_aws_error(e)

    return OperationResult.permanent_error(
        message=f"{service_name}.{method} exhausted retries",
        error_code="RETRIES_EXHAUSTED",
    )
