"""Shared fixtures for the guild poller test suite."""

from typing import List, Optional
from unittest.mock import MagicMock

import pytest

from infrastructure.notifications import NotificationDispatcher
from infrastructure.operations import OperationResult
from infrastructure.services import providers as service_providers
from integrations.stratz import StratzClient
from modules.poller import providers as poller_providers
from modules.poller.service import PollerService
from modules.poller.watermark import InMemoryWatermarkStore, WatermarkKey
from tests.factories.channels import FakeChannel
from tests.factories.stratz import GUILD_ID, make_guild_matches

TABLE_NAME = "Guilds"


@pytest.fixture(autouse=True)
def clear_cached_providers():
    """Reset process-scoped singletons so each test sees its own environment."""
    service_providers.get_settings.cache_clear()
    service_providers.get_dynamodb_client.cache_clear()
    poller_providers.get_poller_service.cache_clear()
    yield
    service_providers.get_settings.cache_clear()
    service_providers.get_dynamodb_client.cache_clear()
    poller_providers.get_poller_service.cache_clear()


@pytest.fixture
def watermark_key() -> WatermarkKey:
    return WatermarkKey(table_name=TABLE_NAME, entity_id=GUILD_ID)


@pytest.fixture
def make_fake_channel():
    """Factory fixture for FakeChannel instances.

    Usage:
        def test_something(make_fake_channel):
            channel = make_fake_channel("kook", fail_on=["9"])
    """

    def _factory(name: str = "fake", fail_on=None, raise_on=None) -> FakeChannel:
        return FakeChannel(name=name, fail_on=fail_on, raise_on=raise_on)

    return _factory


@pytest.fixture
def make_provider():
    """Factory fixture for a mocked StratzClient.

    The provider returns the given match ids newest first, exactly in the
    order passed, or the given failed OperationResult.
    """

    def _factory(
        match_ids: Optional[List[int]] = None,
        result: Optional[OperationResult] = None,
    ) -> MagicMock:
        provider = MagicMock(spec=StratzClient)
        provider.fetch_guild_matches.return_value = result or (
            OperationResult.success(data=make_guild_matches(match_ids=match_ids))
        )
        return provider

    return _factory


@pytest.fixture
def make_poller(watermark_key):
    """Factory fixture for a PollerService over in-memory collaborators.

    Usage:
        def test_something(make_poller, make_provider, make_fake_channel):
            channel = make_fake_channel()
            service = make_poller(make_provider([9, 8, 7]), [channel], watermark=6)
    """

    def _factory(
        provider,
        channels,
        watermark: Optional[int] = None,
        store=None,
        concurrent: bool = False,
        fetch_limit: int = 5,
    ) -> PollerService:
        if store is None:
            initial = {watermark_key: watermark} if watermark is not None else None
            store = InMemoryWatermarkStore(initial)
        return PollerService(
            provider=provider,
            store=store,
            dispatcher=NotificationDispatcher(channels, concurrent=concurrent),
            guild_id=GUILD_ID,
            table_name=TABLE_NAME,
            fetch_limit=fetch_limit,
        )

    return _factory
