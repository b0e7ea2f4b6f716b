"""Operation status enumeration.

Outcome classes shared by every transport in the poller (provider GraphQL
calls, destination webhooks, DynamoDB). The pipeline only distinguishes
success from failure; the finer classes feed logs and error codes.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Remote call completed and returned a usable payload
        TRANSIENT_ERROR: Network failure, timeout, throttling or 5xx
        PERMANENT_ERROR: Malformed request or payload, other 4xx
        UNAUTHORIZED: Rejected credentials (bad token, revoked webhook)
        NOT_FOUND: Remote resource does not exist
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
