"""
Timestamp Tool

Reports the current UTC time as a unix timestamp, an ISO 8601 string or a
human-readable sentence.
"""

from datetime import datetime, timezone
from typing import Any

from tool_runtime.models.definition import (
    ToolDefinition,
    ToolParameter,
    ToolParameterType,
)
from tool_runtime.models.result import ToolError, ToolErrorType, ToolResult
from tool_runtime.tools.base import Tool

TOOL_NAME_TIMESTAMP = "get_timestamp"

FORMATS = ("unix", "iso8601", "human")
DEFAULT_FORMAT = "unix"

HUMAN_FORMAT = "%A, %B %d, %Y at %H:%M:%S UTC"

TIMESTAMP_DEFINITION = ToolDefinition(
    name=TOOL_NAME_TIMESTAMP,
    description="Get the current timestamp in various formats",
).with_parameter(
    ToolParameter(name="format", parameter_type=ToolParameterType.STRING)
    .with_description("The format for the timestamp")
    .with_enum_values(FORMATS)
    .with_default(DEFAULT_FORMAT)
)


class TimestampTool(Tool):
    """Current time in one of several formats."""

    @property
    def definition(self) -> ToolDefinition:
        return TIMESTAMP_DEFINITION

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        fmt = arguments.get("format", DEFAULT_FORMAT)
        now = datetime.now(timezone.utc)

        if fmt == "unix":
            timestamp: Any = int(now.timestamp())
        elif fmt == "iso8601":
            timestamp = now.isoformat()
        elif fmt == "human":
            timestamp = now.strftime(HUMAN_FORMAT)
        else:
            return ToolResult.failure_with_details(
                f"Unknown format: {fmt}",
                ToolError(error_type=ToolErrorType.INVALID_INPUT, message="Invalid format"),
            )

        return ToolResult.success({"timestamp": timestamp, "format": fmt})
