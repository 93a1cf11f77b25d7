"""
Built-in Tools Package

Ready-made tools that can be registered with any ToolRegistry:

- calculator (math): arithmetic on two numbers
- get_timestamp (utility): the current time in several formats
- random_number (utility, math): a random integer from an inclusive range
"""

from tool_runtime.tools.builtin.calculator import (
    CALCULATOR_DEFINITION,
    TOOL_NAME_CALCULATOR,
    CalculatorTool,
)
from tool_runtime.tools.builtin.random_number import (
    RANDOM_NUMBER_DEFINITION,
    TOOL_NAME_RANDOM_NUMBER,
    RandomNumberTool,
)
from tool_runtime.tools.builtin.timestamp import (
    TIMESTAMP_DEFINITION,
    TOOL_NAME_TIMESTAMP,
    TimestampTool,
)
from tool_runtime.tools.registry import ToolRegistry

BUILTIN_CATEGORIES = {
    "math": [TOOL_NAME_CALCULATOR, TOOL_NAME_RANDOM_NUMBER],
    "utility": [TOOL_NAME_TIMESTAMP, TOOL_NAME_RANDOM_NUMBER],
}


def register_builtin_tools(registry: ToolRegistry) -> None:
    """
    Register all built-in tools with the given registry.

    Args:
        registry: The ToolRegistry to register tools with.

    Raises:
        DuplicateToolError: If a built-in name is already taken.
    """
    registry.register(CalculatorTool())
    registry.register(TimestampTool())
    registry.register(RandomNumberTool())

    for category, names in BUILTIN_CATEGORIES.items():
        for name in names:
            registry.add_to_category(category, name)


def create_builtin_registry() -> ToolRegistry:
    """Create a new registry pre-populated with the built-in tools."""
    registry = ToolRegistry()
    register_builtin_tools(registry)
    return registry


__all__ = [
    "BUILTIN_CATEGORIES",
    "CALCULATOR_DEFINITION",
    "CalculatorTool",
    "RANDOM_NUMBER_DEFINITION",
    "RandomNumberTool",
    "TIMESTAMP_DEFINITION",
    "TOOL_NAME_CALCULATOR",
    "TOOL_NAME_RANDOM_NUMBER",
    "TOOL_NAME_TIMESTAMP",
    "TimestampTool",
    "create_builtin_registry",
    "register_builtin_tools",
]
