"""
Test Suite for ToolResult and ToolError

Test Categories:
1. TestToolResultFactories - success / failure / partial construction
2. TestToolResultLifecycle - complete() and metadata
3. TestToolResultDocument - camelCase result document
4. TestToolError - fluent error detail
"""

from datetime import timedelta

import pytest

from tool_runtime.models.result import (
    ToolError,
    ToolErrorType,
    ToolResult,
    ToolResultStatus,
)


# =============================================================================
# Factories
# =============================================================================


class TestToolResultFactories:
    """Tests for the ToolResult factory class methods."""

    def test_success(self) -> None:
        result = ToolResult.success({"value": 42})

        assert result.status is ToolResultStatus.SUCCESS
        assert result.is_success()
        assert result.data == {"value": 42}
        assert result.error is None
        assert result.completed_at is not None
        assert result.duration == timedelta(0)

    def test_success_requires_data(self) -> None:
        with pytest.raises(ValueError, match="must carry data"):
            ToolResult.success(None)

    def test_falsy_data_is_still_data(self) -> None:
        assert ToolResult.success(0).data == 0
        assert ToolResult.success([]).is_success()

    def test_failure(self) -> None:
        result = ToolResult.failure("boom")

        assert result.is_error()
        assert result.error == "boom"
        assert result.error_details is None
        assert result.data is None
        assert result.completed_at is not None

    def test_failure_with_details(self) -> None:
        details = ToolError(error_type=ToolErrorType.NOT_FOUND, message="No such city")
        result = ToolResult.failure_with_details("Lookup failed", details)

        assert result.is_error()
        assert result.error_details is details

    def test_partial_is_not_completed(self) -> None:
        result = ToolResult.partial([1, 2])

        assert result.is_partial()
        assert result.completed_at is None
        assert result.duration is None
        assert result.duration_ms is None


# =============================================================================
# Lifecycle
# =============================================================================


class TestToolResultLifecycle:
    """Tests for complete() and with_metadata()."""

    def test_complete_promotes_partial(self) -> None:
        result = ToolResult.partial([1]).complete()

        assert result.is_success()
        assert result.completed_at is not None
        assert result.completed_at >= result.started_at
        assert result.duration_ms is not None
        assert result.duration_ms >= 0

    def test_complete_partial_without_data_rejected(self) -> None:
        with pytest.raises(ValueError):
            ToolResult.partial(None).complete()

    def test_complete_keeps_error_status(self) -> None:
        result = ToolResult.failure("boom").complete()

        assert result.is_error()

    def test_with_metadata_only_touches_metadata(self) -> None:
        result = ToolResult.success("ok")
        returned = result.with_metadata("source", "cache")

        assert returned is result
        assert result.metadata == {"source": "cache"}
        assert result.data == "ok"
        assert result.is_success()


# =============================================================================
# Result Document
# =============================================================================


class TestToolResultDocument:
    """Tests for to_document() and string rendering."""

    def test_success_document(self) -> None:
        document = ToolResult.success({"value": 1}).with_metadata("k", "v").to_document()

        assert document["status"] == "success"
        assert document["data"] == {"value": 1}
        assert document["metadata"] == {"k": "v"}
        assert document["duration"] == 0.0
        assert "startedAt" in document
        assert "completedAt" in document
        assert "error" not in document
        assert "errorDetails" not in document

    def test_error_document_uses_camel_case_details(self) -> None:
        details = (
            ToolError(error_type=ToolErrorType.INVALID_INPUT, message="bad")
            .with_context("parameter", "a")
        )
        document = ToolResult.failure_with_details("Parameter validation failed", details).to_document()

        assert document["status"] == "error"
        assert document["errorDetails"] == {
            "errorType": "invalid_input",
            "message": "bad",
            "context": {"parameter": "a"},
            "retryable": False,
        }

    def test_partial_document_has_empty_metadata(self) -> None:
        document = ToolResult.partial(None).to_document()

        assert document["metadata"] == {}
        assert "completedAt" not in document
        assert "duration" not in document

    @pytest.mark.parametrize(
        "result, expected",
        [
            (ToolResult.success(3), "Success: 3"),
            (ToolResult.failure("boom"), "Error: boom"),
            (ToolResult.partial([1]), "Partial: [1]"),
            (ToolResult.partial(None), "Partial result"),
        ],
    )
    def test_str(self, result: ToolResult, expected: str) -> None:
        assert str(result) == expected


# =============================================================================
# ToolError
# =============================================================================


class TestToolError:
    """Tests for ToolError fluent helpers and labels."""

    def test_fluent_helpers(self) -> None:
        error = (
            ToolError(error_type=ToolErrorType.NETWORK, message="connection reset")
            .with_context("host", "api.example.com")
            .with_cause("ConnectionResetError")
            .mark_retryable()
        )

        assert error.context == {"host": "api.example.com"}
        assert error.cause == "ConnectionResetError"
        assert error.retryable is True

    def test_every_error_type_has_a_label(self) -> None:
        for error_type in ToolErrorType:
            assert error_type.label

    def test_label_text(self) -> None:
        assert ToolErrorType.INVALID_INPUT.label == "Invalid Input"
        assert ToolErrorType.TIMEOUT.label == "Timeout"
