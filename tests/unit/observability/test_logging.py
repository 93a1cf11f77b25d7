"""
Tests for Structured Logging

Test Categories:
1. TestCorrelationId - context variable helpers
2. TestConfigureLogging - JSON output, levels and idempotence
3. TestExecutorLogging - events emitted by ToolExecutor
"""

import asyncio
import io
import json

import pytest

from tool_runtime.models.calls import ToolCall
from tool_runtime.observability.logging import (
    clear_correlation_id,
    configure_logging,
    correlation_id_context,
    get_correlation_id,
    get_logger,
    reset_logging,
    set_correlation_id,
)
from tool_runtime.tools.base import HandlerTool
from tool_runtime.tools.executor import ToolExecutor
from tool_runtime.tools.registry import ToolRegistry


def _events(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


@pytest.fixture
def stream() -> io.StringIO:
    buffer = io.StringIO()
    configure_logging(level="INFO", stream=buffer, force=True)
    return buffer


# =============================================================================
# Correlation ID
# =============================================================================


class TestCorrelationId:
    """Tests for the correlation id context variable."""

    def test_unset_by_default(self) -> None:
        clear_correlation_id()

        assert get_correlation_id() is None

    def test_set_and_clear(self) -> None:
        set_correlation_id("call_1")
        assert get_correlation_id() == "call_1"

        clear_correlation_id()
        assert get_correlation_id() is None

    def test_context_manager_restores_previous(self) -> None:
        set_correlation_id("outer")

        with correlation_id_context("inner"):
            assert get_correlation_id() == "inner"

        assert get_correlation_id() == "outer"
        clear_correlation_id()

    @pytest.mark.asyncio
    async def test_isolated_between_tasks(self) -> None:
        async def read_back(value: str) -> str | None:
            with correlation_id_context(value):
                await asyncio.sleep(0)
                return get_correlation_id()

        results = await asyncio.gather(read_back("a"), read_back("b"))

        assert results == ["a", "b"]


# =============================================================================
# Configuration
# =============================================================================


class TestConfigureLogging:
    """Tests for configure_logging() and get_logger()."""

    def test_json_output(self, stream: io.StringIO) -> None:
        get_logger("tests").info("tool_registered", tool_name="calculator")

        [event] = _events(stream)
        assert event["event"] == "tool_registered"
        assert event["tool_name"] == "calculator"
        assert event["logger"] == "tests"
        assert event["level"] == "info"
        assert "timestamp" in event

    def test_correlation_id_added(self, stream: io.StringIO) -> None:
        with correlation_id_context("call_42"):
            get_logger("tests").info("inside")
        get_logger("tests").info("outside")

        inside, outside = _events(stream)
        assert inside["correlation_id"] == "call_42"
        assert "correlation_id" not in outside

    def test_level_filtering(self, stream: io.StringIO) -> None:
        logger = get_logger("tests")
        logger.debug("hidden")
        logger.warning("shown")

        assert [e["event"] for e in _events(stream)] == ["shown"]

    def test_service_context(self, stream: io.StringIO) -> None:
        get_logger("tests").info("stamped")

        [event] = _events(stream)
        assert event["service"] == "tool-runtime"
        assert event["environment"] == "development"

    def test_level_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOOL_RUNTIME_LOG_LEVEL", "warning")
        buffer = io.StringIO()
        configure_logging(stream=buffer, force=True)

        logger = get_logger("tests")
        logger.info("hidden")
        logger.warning("shown")

        assert [e["event"] for e in _events(buffer)] == ["shown"]

    @pytest.mark.asyncio
    async def test_debug_level_from_environment_reaches_executor(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        registry: ToolRegistry,
        echo_tool: HandlerTool,
    ) -> None:
        """TOOL_RUNTIME_LOG_LEVEL=DEBUG enables the executor's debug events."""
        monkeypatch.setenv("TOOL_RUNTIME_LOG_LEVEL", "DEBUG")
        reset_logging()
        registry.register(echo_tool)

        await ToolExecutor(registry=registry).execute("echo", {"a": 1})

        events = [json.loads(line)["event"] for line in capsys.readouterr().out.splitlines()]
        assert "tool_execution_started" in events

    def test_second_configure_is_noop(self, stream: io.StringIO) -> None:
        other = io.StringIO()
        configure_logging(level="DEBUG", stream=other)

        get_logger("tests").info("still_here")

        assert other.getvalue() == ""
        assert _events(stream)[0]["event"] == "still_here"


# =============================================================================
# Executor Events
# =============================================================================


class TestExecutorLogging:
    """Tests for the events ToolExecutor emits."""

    @pytest.mark.asyncio
    async def test_completed_event(
        self, stream: io.StringIO, registry: ToolRegistry, echo_tool: HandlerTool
    ) -> None:
        registry.register(echo_tool)
        executor = ToolExecutor(registry=registry)

        await executor.execute("echo", {"a": 1})

        [event] = [e for e in _events(stream) if e["event"] == "tool_execution_completed"]
        assert event["tool_name"] == "echo"
        assert event["status"] == "success"

    @pytest.mark.asyncio
    async def test_batch_binds_call_id(
        self, stream: io.StringIO, registry: ToolRegistry, echo_tool: HandlerTool
    ) -> None:
        registry.register(echo_tool)
        executor = ToolExecutor(registry=registry)

        await executor.execute_batch(
            [
                ToolCall(id="call_a", name="echo", arguments={"a": 1}),
                ToolCall(id="call_b", name="echo", arguments={"a": 2}),
            ]
        )

        completed = [e for e in _events(stream) if e["event"] == "tool_execution_completed"]
        assert sorted(e["correlation_id"] for e in completed) == ["call_a", "call_b"]

    @pytest.mark.asyncio
    async def test_timeout_event(
        self, stream: io.StringIO, registry: ToolRegistry, slow_tool: HandlerTool
    ) -> None:
        registry.register(slow_tool)
        executor = ToolExecutor(registry=registry, timeout=0.05)

        await executor.execute("slow_tool", {})

        events = [e["event"] for e in _events(stream)]
        assert "tool_execution_timeout" in events

    @pytest.mark.asyncio
    async def test_failed_event(
        self, stream: io.StringIO, registry: ToolRegistry, failing_tool: HandlerTool
    ) -> None:
        registry.register(failing_tool)
        executor = ToolExecutor(registry=registry)

        await executor.execute("failing_tool", {})

        [event] = [e for e in _events(stream) if e["event"] == "tool_execution_failed"]
        assert event["error"] == "backend exploded"
