"""
Pytest configuration for the Tool Runtime test suite.

This configuration sets up:
- Test markers for categorization
- Shared fixtures for registries, definitions and tools
- Isolation of process-wide state (settings cache, singletons, logging)
"""

import asyncio
import sys
from pathlib import Path

import pytest

# Add project root to Python path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tool_runtime.core.config import get_settings  # noqa: E402
from tool_runtime.models.definition import (  # noqa: E402
    ToolDefinition,
    ToolParameter,
    ToolParameterType,
)
from tool_runtime.models.result import ToolResult  # noqa: E402
from tool_runtime.observability.logging import reset_logging  # noqa: E402
from tool_runtime.tools.base import HandlerTool  # noqa: E402
from tool_runtime.tools.executor import reset_tool_executor  # noqa: E402
from tool_runtime.tools.registry import ToolRegistry, reset_tool_registry  # noqa: E402


# =============================================================================
# Test Markers
# =============================================================================


def pytest_configure(config):
    """
    Register custom markers for test categorization.

    - unit: Tests for individual components
    - integration: Tests spanning registry, executor and tools together
    - slow: Tests that take a long time to run
    """
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across components")
    config.addinivalue_line("markers", "slow: Tests that take a long time to run")


# =============================================================================
# Global State Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_global_state():
    """Clear cached settings and singletons around every test."""
    get_settings.cache_clear()
    reset_tool_registry()
    reset_tool_executor()
    yield
    get_settings.cache_clear()
    reset_tool_registry()
    reset_tool_executor()
    reset_logging()


# =============================================================================
# Registry and Tool Fixtures
# =============================================================================


@pytest.fixture
def registry() -> ToolRegistry:
    """Create a fresh, empty ToolRegistry for each test."""
    return ToolRegistry()


@pytest.fixture
def echo_definition() -> ToolDefinition:
    """
    Definition with one required and one optional enum parameter.

    - a: number, required
    - b: string, optional, one of "x" or "y"
    """
    return (
        ToolDefinition(name="echo", description="Echo the arguments back")
        .with_parameter(
            ToolParameter(name="a", parameter_type=ToolParameterType.NUMBER)
            .with_description("A number")
            .mark_required()
        )
        .with_parameter(
            ToolParameter(name="b", parameter_type=ToolParameterType.STRING)
            .with_description("A choice")
            .with_enum_values(["x", "y"])
        )
    )


@pytest.fixture
def echo_tool(echo_definition: ToolDefinition) -> HandlerTool:
    """Tool that returns its arguments as the result data."""

    async def handler(args: dict) -> ToolResult:
        return ToolResult.success(dict(args))

    return HandlerTool(echo_definition, handler)


@pytest.fixture
def slow_tool() -> HandlerTool:
    """Tool that sleeps far longer than any test timeout."""

    async def handler(args: dict) -> ToolResult:
        await asyncio.sleep(10)
        return ToolResult.success("too late")

    return HandlerTool(ToolDefinition(name="slow_tool", description="Sleeps"), handler)


@pytest.fixture
def failing_tool() -> HandlerTool:
    """Tool whose handler raises an unexpected exception."""

    async def handler(args: dict) -> ToolResult:
        raise RuntimeError("backend exploded")

    return HandlerTool(
        ToolDefinition(name="failing_tool", description="Always raises"), handler
    )
