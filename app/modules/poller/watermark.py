"""Watermark stores: the highest match id already delivered, per guild.

A watermark item is addressed by two fields, the store's table (the
entity group) and the tracked guild id. In DynamoDB the item looks like
``{"id": {"N": "<guild id>"}, "match_id": {"N": "<watermark>"}}``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional

import structlog

from infrastructure.clients.aws import DynamoDBClient
from modules.poller.errors import StoreError

logger = structlog.get_logger()


@dataclass(frozen=True)
class WatermarkKey:
    """Address of one watermark item.

    Attributes:
        table_name: Table holding the tracked entities
        entity_id: Tracked guild id
    """

    table_name: str
    entity_id: int


class WatermarkStore(ABC):
    """Single-integer key/value store for watermarks."""

    @abstractmethod
    def get(self, key: WatermarkKey) -> Optional[int]:
        """Return the stored watermark, or None when no item exists.

        Raises:
            StoreError: the store could not be read
        """
        pass

    @abstractmethod
    def put(self, key: WatermarkKey, value: int) -> None:
        """Store a watermark.

        Raises:
            StoreError: the store could not be written
        """
        pass


class DynamoWatermarkStore(WatermarkStore):
    """Watermarks kept in a DynamoDB table keyed by numeric ``id``."""

    def __init__(self, client: DynamoDBClient):
        self._client = client

    def get(self, key: WatermarkKey) -> Optional[int]:
        result = self._client.get_item(
            key.table_name,
            Key={"id": {"N": str(key.entity_id)}},
            ConsistentRead=True,
        )
        if not result.is_success:
            logger.error(
                "watermark_read_failed",
                table_name=key.table_name,
                entity_id=key.entity_id,
                error=result.message,
            )
            raise StoreError(
                f"Failed to read watermark for {key.entity_id}: {result.describe()}",
                error_code="WATERMARK_READ_FAILED",
                result=result,
            )

        item = (result.data or {}).get("Item")
        if not item or "match_id" not in item:
            return None

        try:
            return int(item["match_id"]["N"])
        except (KeyError, TypeError, ValueError) as e:
            raise StoreError(
                f"Watermark item for {key.entity_id} has an invalid match_id: {e}",
                error_code="WATERMARK_CORRUPT",
            ) from e

    def put(self, key: WatermarkKey, value: int) -> None:
        result = self._client.put_item(
            key.table_name,
            Item={
                "id": {"N": str(key.entity_id)},
                "match_id": {"N": str(value)},
            },
        )
        if not result.is_success:
            logger.error(
                "watermark_write_failed",
                table_name=key.table_name,
                entity_id=key.entity_id,
                value=value,
                error=result.message,
            )
            raise StoreError(
                f"Failed to write watermark {value} for {key.entity_id}: "
                f"{result.describe()}",
                error_code="WATERMARK_WRITE_FAILED",
                result=result,
            )


class InMemoryWatermarkStore(WatermarkStore):
    """Process-local store for development runs and tests."""

    def __init__(self, initial: Optional[Dict[WatermarkKey, int]] = None):
        self._items: Dict[WatermarkKey, int] = dict(initial or {})

    def get(self, key: WatermarkKey) -> Optional[int]:
        return self._items.get(key)

    def put(self, key: WatermarkKey, value: int) -> None:
        self._items[key] = value
