"""Operation result dataclass.

Transport clients return an ``OperationResult`` instead of raising so that
the pipeline decides, in one place, which failures abort a run.
"""

from dataclasses import dataclass
from typing import Any, Optional

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from transport operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs and failure reports
        data: Optional[Any] -- parsed payload (JSON body, DynamoDB response, ...)
        error_code: Optional[str] -- machine error code (e.g. ``HTTP_403``)
        retry_after: Optional[int] -- seconds advertised by the remote before retrying
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    retry_after: Optional[int] = None

    @property
    def is_success(self) -> bool:
        """True when status is SUCCESS."""
        return self.status == OperationStatus.SUCCESS

    def describe(self) -> str:
        """Render the result as ``"<message> (<error_code>)"`` for reports."""
        if self.error_code:
            return f"{self.message} ({self.error_code})"
        return self.message

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS result carrying an optional payload."""
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create an error result with an explicit status.

        Args:
            status: OperationStatus indicating error type
            message: Human-friendly error message
            error_code: Optional machine error code
            retry_after: Optional seconds until retry (for rate limiting)
            data: Optional payload, e.g. the remote error body

        Returns:
            OperationResult with the given error status
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            retry_after=retry_after,
            data=data,
        )

    @classmethod
    def transient_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
    ) -> "OperationResult":
        """Create a TRANSIENT_ERROR result (timeouts, throttling, 5xx)."""
        return cls.error(
            OperationStatus.TRANSIENT_ERROR, message, error_code, retry_after
        )

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Create a PERMANENT_ERROR result (bad payloads, unexpected 4xx)."""
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)
