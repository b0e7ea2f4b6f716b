"""Infrastructure AWS clients public API.

    from infrastructure.clients.aws import DynamoDBClient, SessionProvider

    client = DynamoDBClient(SessionProvider(region="us-east-1"))
    result = client.get_item("Guilds", {"id": {"N": "117311"}})
    if result.is_success:
        item = result.data.get("Item")
"""

from infrastructure.clients.aws.dynamodb import DynamoDBClient
from infrastructure.clients.aws.session_provider import SessionProvider

__all__ = [
    "DynamoDBClient",
    "SessionProvider",
]
