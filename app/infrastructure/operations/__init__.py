"""Operation result types and status enums.

Standardized result type returned by every transport client, plus the
classifiers that turn ``requests`` and botocore failures into results.
"""

from infrastructure.operations.classifiers import (
    classify_aws_error,
    classify_http_error,
    classify_http_status,
)
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_aws_error",
    "classify_http_error",
    "classify_http_status",
]
