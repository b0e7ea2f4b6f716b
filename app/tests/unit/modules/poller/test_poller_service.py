"""Tests for PollerService.

Covers match selection against the watermark, oldest-first delivery,
abort-on-failure semantics and watermark advancement.
"""

from unittest.mock import MagicMock

import pytest

from infrastructure.operations import OperationResult
from modules.poller.errors import (
    MissingMatchFieldError,
    ProviderError,
    PublishError,
    StoreError,
)
from modules.poller.service import PollSummary
from modules.poller.watermark import InMemoryWatermarkStore, WatermarkStore
from tests.factories.notifications import make_result
from tests.factories.stratz import make_guild_matches, make_raw_match


@pytest.mark.unit
class TestSelectionAndOrdering:
    """Which matches are delivered, and in what order."""

    def test_delivers_oldest_first(
        self, make_poller, make_provider, make_fake_channel, watermark_key
    ):
        """Provider order [9, 8, 7] with watermark 6 is delivered as 7, 8, 9."""
        channel = make_fake_channel()
        service = make_poller(make_provider([9, 8, 7]), [channel], watermark=6)

        summary = service.run()

        assert channel.published == ["7", "8", "9"]
        assert summary == PollSummary(delivered=3, watermark=9, previous_watermark=6)
        assert service.store.get(watermark_key) == 9

    def test_skips_matches_at_or_below_watermark(
        self, make_poller, make_provider, make_fake_channel, watermark_key
    ):
        channel = make_fake_channel()
        service = make_poller(make_provider([9, 8, 7]), [channel], watermark=8)

        summary = service.run()

        assert channel.attempted == ["9"]
        assert summary.delivered == 1
        assert service.store.get(watermark_key) == 9

    def test_first_run_treats_missing_watermark_as_zero(
        self, make_poller, make_provider, make_fake_channel, watermark_key
    ):
        channel = make_fake_channel()
        service = make_poller(make_provider([3, 2, 1]), [channel])

        summary = service.run()

        assert channel.published == ["1", "2", "3"]
        assert summary.previous_watermark == 0
        assert service.store.get(watermark_key) == 3

    def test_skipped_matches_are_not_normalized(
        self, make_poller, make_provider, make_fake_channel
    ):
        """A malformed match below the watermark is ignored, not an error."""
        provider = make_provider(
            result=OperationResult.success(
                data=make_guild_matches(
                    matches=[
                        make_raw_match(match_id=9),
                        make_raw_match(match_id=5, duration=None, players=[]),
                    ]
                )
            )
        )
        channel = make_fake_channel()
        service = make_poller(provider, [channel], watermark=6)

        summary = service.run()

        assert channel.published == ["9"]
        assert summary.delivered == 1

    def test_requests_configured_fetch_limit(
        self, make_poller, make_provider, make_fake_channel
    ):
        provider = make_provider([1])
        service = make_poller(provider, [make_fake_channel()], fetch_limit=3)

        service.run()

        provider.fetch_guild_matches.assert_called_once_with(117311, 3)

    def test_every_channel_receives_every_match(
        self, make_poller, make_provider, make_fake_channel
    ):
        kook = make_fake_channel("kook")
        discord = make_fake_channel("discord")
        service = make_poller(make_provider([2, 1]), [kook, discord])

        service.run()

        assert kook.published == ["1", "2"]
        assert discord.published == ["1", "2"]


@pytest.mark.unit
class TestWatermarkPolicy:
    """Idempotence and monotonicity of the stored watermark."""

    def test_second_run_dispatches_nothing(
        self, make_poller, make_provider, make_fake_channel, watermark_key
    ):
        channel = make_fake_channel()
        service = make_poller(make_provider([9, 8, 7]), [channel], watermark=6)

        service.run()
        second = service.run()

        assert channel.published == ["7", "8", "9"]
        assert second.delivered == 0
        assert not second.advanced
        assert service.store.get(watermark_key) == 9

    def test_repeat_run_without_commit_dispatches_same_matches(
        self, make_poller, make_provider, make_fake_channel
    ):
        """With the watermark write dropped, two runs produce identical dispatches."""
        store = MagicMock(spec=WatermarkStore)
        store.get.return_value = 6
        channel = make_fake_channel()
        service = make_poller(make_provider([9, 8, 7]), [channel], store=store)

        service.run()
        first = list(channel.published)
        channel.published.clear()
        service.run()

        assert channel.published == first == ["7", "8", "9"]

    def test_no_write_when_nothing_new(
        self, make_poller, make_provider, make_fake_channel
    ):
        store = MagicMock(spec=WatermarkStore)
        store.get.return_value = 10
        service = make_poller(make_provider([9, 8]), [make_fake_channel()], store=store)

        summary = service.run()

        store.put.assert_not_called()
        assert summary == PollSummary(delivered=0, watermark=10, previous_watermark=10)

    def test_empty_match_list_succeeds_without_write(
        self, make_poller, make_provider, make_fake_channel
    ):
        store = MagicMock(spec=WatermarkStore)
        store.get.return_value = None
        provider = make_provider(
            result=OperationResult.success(data=make_guild_matches(matches=[]))
        )
        service = make_poller(provider, [make_fake_channel()], store=store)

        summary = service.run()

        store.put.assert_not_called()
        assert summary.delivered == 0
        assert summary.watermark == 0

    def test_write_failure_is_reported_after_delivery(
        self, make_poller, make_provider, make_fake_channel
    ):
        store = MagicMock(spec=WatermarkStore)
        store.get.return_value = 0
        store.put.side_effect = StoreError(
            "write failed", error_code="WATERMARK_WRITE_FAILED"
        )
        channel = make_fake_channel()
        service = make_poller(make_provider([1]), [channel], store=store)

        with pytest.raises(StoreError) as exc_info:
            service.run()

        assert exc_info.value.error_code == "WATERMARK_WRITE_FAILED"
        assert channel.published == ["1"]
        store.put.assert_called_once_with(service.key, 1)


@pytest.mark.unit
class TestAbortSemantics:
    """Any failure aborts the run and leaves the watermark untouched."""

    def test_publish_failure_on_second_match_aborts(
        self, make_poller, make_provider, make_fake_channel, watermark_key
    ):
        channel = make_fake_channel(fail_on=["8"])
        service = make_poller(make_provider([9, 8, 7]), [channel], watermark=6)

        with pytest.raises(PublishError) as exc_info:
            service.run()

        assert channel.published == ["7"]
        assert channel.attempted == ["7", "8"]
        assert service.store.get(watermark_key) == 6
        assert exc_info.value.channel == "fake"
        assert exc_info.value.match_id == "8"
        assert "Failed to publish match 8" in str(exc_info.value)

    def test_failure_on_second_channel_keeps_watermark(
        self, make_poller, make_provider, make_fake_channel, watermark_key
    ):
        kook = make_fake_channel("kook")
        discord = make_fake_channel("discord", fail_on=["8"])
        service = make_poller(make_provider([9, 8, 7]), [kook, discord], watermark=6)

        with pytest.raises(PublishError) as exc_info:
            service.run()

        assert kook.published == ["7", "8"]
        assert discord.published == ["7"]
        assert exc_info.value.channel == "discord"
        assert service.store.get(watermark_key) == 6

    def test_channel_exception_is_publish_error(
        self, make_poller, make_provider, make_fake_channel, watermark_key
    ):
        channel = make_fake_channel(raise_on=["7"])
        service = make_poller(make_provider([7]), [channel], watermark=6)

        with pytest.raises(PublishError):
            service.run()

        assert service.store.get(watermark_key) == 6

    def test_concurrent_dispatch_keeps_abort_semantics(
        self, make_poller, make_provider, make_fake_channel, watermark_key
    ):
        kook = make_fake_channel("kook", fail_on=["8"])
        discord = make_fake_channel("discord")
        service = make_poller(
            make_provider([9, 8, 7]), [kook, discord], watermark=6, concurrent=True
        )

        with pytest.raises(PublishError) as exc_info:
            service.run()

        assert exc_info.value.channel == "kook"
        assert "9" not in kook.attempted
        assert "9" not in discord.attempted
        assert service.store.get(watermark_key) == 6

    def test_normalization_failure_aborts(
        self, make_poller, make_provider, make_fake_channel, watermark_key
    ):
        provider = make_provider(
            result=OperationResult.success(
                data=make_guild_matches(
                    matches=[
                        make_raw_match(match_id=9),
                        make_raw_match(match_id=8, duration=None),
                        make_raw_match(match_id=7),
                    ]
                )
            )
        )
        channel = make_fake_channel()
        service = make_poller(provider, [channel], watermark=6)

        with pytest.raises(MissingMatchFieldError) as exc_info:
            service.run()

        assert exc_info.value.field == "durationSeconds"
        assert exc_info.value.match_id == 8
        assert channel.published == ["7"]
        assert service.store.get(watermark_key) == 6

    @pytest.mark.parametrize(
        "error_code,expected",
        [
            ("GRAPHQL_ERRORS", "PROVIDER_GRAPHQL_ERRORS"),
            ("MISSING_GUILD", "PROVIDER_MISSING_GUILD"),
            ("INVALID_RESPONSE", "PROVIDER_INVALID_RESPONSE"),
            ("TIMEOUT", "PROVIDER_REQUEST_FAILED"),
            ("HTTP_503", "PROVIDER_REQUEST_FAILED"),
        ],
    )
    def test_provider_failure_is_classified(
        self, make_poller, make_provider, make_fake_channel, error_code, expected
    ):
        store = MagicMock(spec=WatermarkStore)
        provider = make_provider(
            result=OperationResult.permanent_error("nope", error_code=error_code)
        )
        channel = make_fake_channel()
        service = make_poller(provider, [channel], store=store)

        with pytest.raises(ProviderError) as exc_info:
            service.run()

        assert exc_info.value.error_code == expected
        assert f"nope ({error_code})" in str(exc_info.value)
        store.get.assert_not_called()
        store.put.assert_not_called()
        assert channel.attempted == []

    def test_store_read_failure_aborts_before_dispatch(
        self, make_poller, make_provider, make_fake_channel
    ):
        store = MagicMock(spec=WatermarkStore)
        store.get.side_effect = StoreError("read failed")
        channel = make_fake_channel()
        service = make_poller(make_provider([1]), [channel], store=store)

        with pytest.raises(StoreError):
            service.run()

        assert channel.attempted == []
        store.put.assert_not_called()


@pytest.mark.unit
class TestEndToEndScenario:
    def test_single_clash_match(self, make_poller, make_provider, watermark_key):
        """Guild 117311 with match 42 (one win, one loss) from watermark 0."""
        channel = MagicMock()
        channel.channel_name = "recorder"
        channel.publish.side_effect = lambda n: make_result(
            channel="recorder", match_id=n.match_id
        )
        store = InMemoryWatermarkStore({watermark_key: 0})
        service = make_poller(make_provider([42]), [channel], store=store)

        summary = service.run()

        notification = channel.publish.call_args.args[0]
        assert notification.outcome.label == "Clash"
        assert notification.duration_field == "10:00"
        assert notification.title == "Clash - Ranked - All Pick"
        assert notification.guild_id == "117311"
        assert summary.delivered == 1
        assert store.get(watermark_key) == 42
