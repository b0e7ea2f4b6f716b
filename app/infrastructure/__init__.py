"""Infrastructure modules for the guild poller.

Centralized infrastructure components:
- configuration: Settings management (Settings and one section per concern)
- logging: Structured logging setup and run context
- clients: HTTP and AWS (DynamoDB) transports
- operations: Operation results and error classification
- notifications: Destination channels and the dispatcher
- services: Cached process-wide providers (get_settings, get_dynamodb_client)
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
