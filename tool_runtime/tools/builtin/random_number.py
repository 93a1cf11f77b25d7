"""
Random Number Tool

Draws a uniformly distributed integer from an inclusive range.
"""

import random
from typing import Any, Optional

from tool_runtime.models.definition import (
    ToolDefinition,
    ToolParameter,
    ToolParameterType,
)
from tool_runtime.models.result import ToolError, ToolErrorType, ToolResult
from tool_runtime.tools.base import Tool

TOOL_NAME_RANDOM_NUMBER = "random_number"

DEFAULT_MIN = 0
DEFAULT_MAX = 100

RANDOM_NUMBER_DEFINITION = (
    ToolDefinition(
        name=TOOL_NAME_RANDOM_NUMBER,
        description="Generate a random number within a specified range",
    )
    .with_parameter(
        ToolParameter(name="min", parameter_type=ToolParameterType.INTEGER)
        .with_description("Minimum value (inclusive)")
        .with_default(DEFAULT_MIN)
    )
    .with_parameter(
        ToolParameter(name="max", parameter_type=ToolParameterType.INTEGER)
        .with_description("Maximum value (inclusive)")
        .with_default(DEFAULT_MAX)
    )
)


def _bound(arguments: dict[str, Any], key: str, default: int) -> int:
    value = arguments.get(key, default)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Parameter '{key}' must be an integer, got {value!r}")
    return value


class RandomNumberTool(Tool):
    """
    Random integer in [min, max].

    Args:
        rng: Source of randomness; a fresh random.Random by default. Pass a
            seeded instance for reproducible output.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    @property
    def definition(self) -> ToolDefinition:
        return RANDOM_NUMBER_DEFINITION

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        try:
            low = _bound(arguments, "min", DEFAULT_MIN)
            high = _bound(arguments, "max", DEFAULT_MAX)
        except ValueError as e:
            return ToolResult.failure_with_details(
                str(e),
                ToolError(error_type=ToolErrorType.INVALID_INPUT, message="Invalid bound"),
            )

        if low > high:
            return ToolResult.failure_with_details(
                "Minimum value cannot be greater than maximum",
                ToolError(error_type=ToolErrorType.INVALID_INPUT, message="Invalid range")
                .with_context("min", low)
                .with_context("max", high),
            )

        return ToolResult.success({"value": self._rng.randint(low, high), "min": low, "max": high})
