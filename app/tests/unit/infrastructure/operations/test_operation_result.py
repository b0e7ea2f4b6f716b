"""Tests for OperationResult."""

import pytest

from infrastructure.operations import OperationResult, OperationStatus


@pytest.mark.unit
class TestOperationResult:
    def test_success(self):
        result = OperationResult.success(data={"k": "v"}, message="done")

        assert result.is_success
        assert result.status == OperationStatus.SUCCESS
        assert result.data == {"k": "v"}
        assert result.error_code is None

    def test_transient_error(self):
        result = OperationResult.transient_error(
            "slow down", error_code="RATE_LIMITED", retry_after=30
        )

        assert not result.is_success
        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.retry_after == 30

    def test_permanent_error(self):
        result = OperationResult.permanent_error("bad", error_code="HTTP_400")

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "HTTP_400"

    def test_error_with_explicit_status_keeps_payload(self):
        result = OperationResult.error(
            OperationStatus.NOT_FOUND, "missing", error_code="HTTP_404", data={"x": 1}
        )

        assert result.status == OperationStatus.NOT_FOUND
        assert result.data == {"x": 1}

    def test_describe_includes_error_code(self):
        assert OperationResult.permanent_error("bad", "HTTP_400").describe() == (
            "bad (HTTP_400)"
        )
        assert OperationResult.success(message="ok").describe() == "ok"
