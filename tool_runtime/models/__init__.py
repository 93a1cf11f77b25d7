"""Models Package - tool definitions, results and invocation requests."""

from tool_runtime.models.calls import ToolCall
from tool_runtime.models.definition import (
    ToolDefinition,
    ToolParameter,
    ToolParameterType,
)
from tool_runtime.models.result import (
    ToolError,
    ToolErrorType,
    ToolResult,
    ToolResultStatus,
)

__all__ = [
    # Definitions
    "ToolDefinition",
    "ToolParameter",
    "ToolParameterType",
    # Results
    "ToolError",
    "ToolErrorType",
    "ToolResult",
    "ToolResultStatus",
    # Calls
    "ToolCall",
]
