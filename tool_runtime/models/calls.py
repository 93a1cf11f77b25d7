"""
Tool Call Model - invocation request produced from a model response

Pattern: Command pattern (encapsulates a request as an object)
Pattern: Compatible with the OpenAI tool_calls format
"""

import json
import logging
from typing import Any

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ToolCall(BaseModel):
    """
    A request to execute a specific tool with arguments.

    Attributes:
        id: Identifier of this call, used to correlate results and logs.
        name: Name of the tool to execute.
        arguments: Arguments to pass to the tool.

    Example:
        >>> call = ToolCall(id="call_1", name="calculator",
        ...                 arguments={"operation": "add", "a": 1, "b": 2})
    """

    id: str = Field(default="", description="Tool call identifier")
    name: str = Field(..., description="Name of tool to execute")
    arguments: dict[str, Any] = Field(
        default_factory=dict, description="Arguments for tool"
    )

    @classmethod
    def from_openai_format(cls, tool_call: dict[str, Any]) -> "ToolCall":
        """
        Parse a ToolCall from OpenAI's tool_calls format.

        Args:
            tool_call: OpenAI format tool call:
                {
                    "id": "call_xyz",
                    "type": "function",
                    "function": {
                        "name": "tool_name",
                        "arguments": "{\"arg\": \"value\"}"
                    }
                }

        Returns:
            ToolCall with parsed arguments. Arguments that are not valid
            JSON, or not a JSON object, become an empty dict.
        """
        function = tool_call.get("function", {})
        raw_arguments = function.get("arguments", "{}")

        if isinstance(raw_arguments, dict):
            arguments = raw_arguments
        else:
            try:
                arguments = json.loads(raw_arguments) if raw_arguments else {}
            except json.JSONDecodeError:
                logger.warning(
                    "Discarding malformed arguments for tool call %s",
                    tool_call.get("id", ""),
                )
                arguments = {}

        if not isinstance(arguments, dict):
            arguments = {}

        return cls(
            id=tool_call.get("id", ""),
            name=function.get("name", ""),
            arguments=arguments,
        )
