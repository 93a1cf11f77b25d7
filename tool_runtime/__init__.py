"""Tool Runtime - register tools, export their schemas, execute tool calls.

Typical use:

    registry = ToolRegistry.with_builtin_tools()
    executor = ToolExecutor(registry)
    result = await executor.execute("calculator", {"operation": "add", "a": 1, "b": 2})
"""

from tool_runtime.core.exceptions import (
    DuplicateToolError,
    RegistryLockError,
    ToolConfigError,
    ToolNotFoundError,
    ToolRuntimeException,
)
from tool_runtime.models import (
    ToolCall,
    ToolDefinition,
    ToolError,
    ToolErrorType,
    ToolParameter,
    ToolParameterType,
    ToolResult,
    ToolResultStatus,
)
from tool_runtime.tools import HandlerTool, Tool, ToolExecutor, ToolRegistry

__version__ = "0.1.0"

__all__ = [
    "DuplicateToolError",
    "HandlerTool",
    "RegistryLockError",
    "Tool",
    "ToolCall",
    "ToolConfigError",
    "ToolDefinition",
    "ToolError",
    "ToolErrorType",
    "ToolExecutor",
    "ToolNotFoundError",
    "ToolParameter",
    "ToolParameterType",
    "ToolRegistry",
    "ToolResult",
    "ToolResultStatus",
    "ToolRuntimeException",
]
