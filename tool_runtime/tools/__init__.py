"""
Tools Package - Tool Registry and Execution

This package provides the tool abstraction, the registry for managing
available tools, and the executor for running tool calls.
"""

from tool_runtime.tools.base import HandlerTool, Tool, ToolHandler
from tool_runtime.tools.executor import (
    ToolExecutor,
    get_tool_executor,
    reset_tool_executor,
)
from tool_runtime.tools.registry import (
    ToolRegistry,
    get_tool_registry,
    reset_tool_registry,
)

__all__ = [
    "Tool",
    "ToolHandler",
    "HandlerTool",
    "ToolRegistry",
    "get_tool_registry",
    "reset_tool_registry",
    "ToolExecutor",
    "get_tool_executor",
    "reset_tool_executor",
]
