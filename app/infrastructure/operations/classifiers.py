"""Error classifiers for transport exceptions.

Converts ``requests`` and botocore exceptions, and non-2xx HTTP responses,
into ``OperationResult`` objects so every transport reports failures the
same way.

Usage:
    from infrastructure.operations.classifiers import classify_http_error

    try:
        response = session.post(url, json=payload, timeout=30)
    except requests.RequestException as exc:
        return classify_http_error(exc)
"""

from typing import Any, Mapping, Optional

import requests
from botocore.exceptions import ClientError

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

DEFAULT_RETRY_AFTER_SECONDS = 60


def _parse_retry_after(value: Optional[str]) -> int:
    if not value:
        return DEFAULT_RETRY_AFTER_SECONDS
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return DEFAULT_RETRY_AFTER_SECONDS


def classify_http_status(
    status_code: int,
    message: str,
    headers: Optional[Mapping[str, str]] = None,
    data: Optional[Any] = None,
) -> OperationResult:
    """Classify a completed HTTP exchange by its status code.

    Status Code Mapping:
    - 2xx: SUCCESS (``data`` is attached)
    - 401, 403: UNAUTHORIZED
    - 404: NOT_FOUND
    - 429: TRANSIENT_ERROR with retry_after from the Retry-After header
    - 5xx: TRANSIENT_ERROR
    - Other: PERMANENT_ERROR

    Args:
        status_code: HTTP status code of the response
        message: Human-friendly description (usually the remote error text)
        headers: Response headers, used for Retry-After
        data: Parsed response body

    Returns:
        OperationResult with the matching status and ``HTTP_<code>`` error code
    """
    error_code = f"HTTP_{status_code}"

    if 200 <= status_code < 300:
        return OperationResult.success(data=data, message=message)

    if status_code in (401, 403):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED, message, error_code=error_code, data=data
        )

    if status_code == 404:
        return OperationResult.error(
            OperationStatus.NOT_FOUND, message, error_code=error_code, data=data
        )

    if status_code == 429:
        retry_after = _parse_retry_after((headers or {}).get("Retry-After"))
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            message,
            error_code="RATE_LIMITED",
            retry_after=retry_after,
            data=data,
        )

    if 500 <= status_code < 600:
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR, message, error_code=error_code, data=data
        )

    return OperationResult.error(
        OperationStatus.PERMANENT_ERROR, message, error_code=error_code, data=data
    )


def classify_http_error(exc: Exception) -> OperationResult:
    """Classify an exception raised by ``requests``.

    - Timeout: TRANSIENT_ERROR (TIMEOUT)
    - ConnectionError: TRANSIENT_ERROR (CONNECTION_ERROR)
    - HTTPError with a response: classified by status code
    - Anything else: PERMANENT_ERROR (REQUEST_ERROR)

    Args:
        exc: Exception raised while performing the request

    Returns:
        OperationResult describing the failure
    """
    if isinstance(exc, requests.Timeout):
        return OperationResult.transient_error(
            f"Request timed out: {exc}", error_code="TIMEOUT"
        )

    if isinstance(exc, requests.ConnectionError):
        return OperationResult.transient_error(
            f"Connection error: {exc}", error_code="CONNECTION_ERROR"
        )

    response = getattr(exc, "response", None)
    if isinstance(exc, requests.HTTPError) and response is not None:
        return classify_http_status(
            response.status_code, str(exc), headers=response.headers
        )

    return OperationResult.permanent_error(
        f"Request error: {type(exc).__name__}: {exc}", error_code="REQUEST_ERROR"
    )


def classify_aws_error(exc: Exception) -> OperationResult:
    """Classify AWS SDK errors into OperationResult.

    Error Code Mapping:
    - ThrottlingException, ProvisionedThroughputExceededException,
      RequestLimitExceeded: TRANSIENT_ERROR with retry_after
    - AccessDeniedException, UnrecognizedClientException: UNAUTHORIZED
    - ResourceNotFoundException: NOT_FOUND (the table is missing)
    - ValidationException: PERMANENT_ERROR
    - Other ClientError: TRANSIENT_ERROR (AWS convention)
    - Non-ClientError (BotoCoreError, networking): TRANSIENT_ERROR

    Args:
        exc: Exception raised by boto3/botocore

    Returns:
        OperationResult with appropriate status and error code
    """
    if not isinstance(exc, ClientError):
        return OperationResult.transient_error(
            f"AWS connection error: {type(exc).__name__}: {exc}",
            error_code="CONNECTION_ERROR",
        )

    error_info = exc.response.get("Error", {}) if exc.response else {}
    error_code = error_info.get("Code", "Unknown")
    error_message = error_info.get("Message", str(exc))

    if error_code in (
        "ThrottlingException",
        "ProvisionedThroughputExceededException",
        "RequestLimitExceeded",
    ):
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            error_message,
            error_code=error_code,
            retry_after=DEFAULT_RETRY_AFTER_SECONDS,
        )

    if error_code in ("AccessDeniedException", "UnrecognizedClientException"):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED, error_message, error_code=error_code
        )

    if error_code == "ResourceNotFoundException":
        return OperationResult.error(
            OperationStatus.NOT_FOUND, error_message, error_code=error_code
        )

    if error_code == "ValidationException":
        return OperationResult.permanent_error(error_message, error_code=error_code)

    return OperationResult.transient_error(error_message, error_code=error_code)
