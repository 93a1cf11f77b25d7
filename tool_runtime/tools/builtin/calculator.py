"""
Calculator Tool

Basic arithmetic on two numbers. Mostly useful as a smoke test for a
runtime wired to a model: it has required parameters, an enum and a
failure mode (division by zero).
"""

import logging
from typing import Any

from tool_runtime.models.definition import (
    ToolDefinition,
    ToolParameter,
    ToolParameterType,
)
from tool_runtime.models.result import ToolError, ToolErrorType, ToolResult
from tool_runtime.tools.base import Tool

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

TOOL_NAME_CALCULATOR = "calculator"

OPERATIONS = ("add", "subtract", "multiply", "divide")

CALCULATOR_DEFINITION = (
    ToolDefinition(
        name=TOOL_NAME_CALCULATOR,
        description="Performs basic arithmetic operations on two numbers",
    )
    .with_parameter(
        ToolParameter(name="operation", parameter_type=ToolParameterType.STRING)
        .with_description("The operation to perform")
        .with_enum_values(OPERATIONS)
        .mark_required()
    )
    .with_parameter(
        ToolParameter(name="a", parameter_type=ToolParameterType.NUMBER)
        .with_description("First number")
        .mark_required()
    )
    .with_parameter(
        ToolParameter(name="b", parameter_type=ToolParameterType.NUMBER)
        .with_description("Second number")
        .mark_required()
    )
)


def _invalid(message: str, detail: str) -> ToolResult:
    return ToolResult.failure_with_details(
        message, ToolError(error_type=ToolErrorType.INVALID_INPUT, message=detail)
    )


def _number(arguments: dict[str, Any], key: str) -> float:
    value = arguments.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Missing or invalid parameter '{key}'")
    return value


class CalculatorTool(Tool):
    """Add, subtract, multiply or divide two numbers."""

    @property
    def definition(self) -> ToolDefinition:
        return CALCULATOR_DEFINITION

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        operation = arguments.get("operation")
        try:
            a = _number(arguments, "a")
            b = _number(arguments, "b")
        except ValueError as e:
            return _invalid(str(e), "Invalid operand")

        if operation == "add":
            value = a + b
        elif operation == "subtract":
            value = a - b
        elif operation == "multiply":
            value = a * b
        elif operation == "divide":
            if b == 0:
                return _invalid("Division by zero", "Cannot divide by zero")
            value = a / b
        else:
            return _invalid(f"Unknown operation: {operation}", "Invalid operation")

        logger.debug(f"Calculated {operation}({a}, {b}) = {value}")
        return ToolResult.success(
            {"result": value, "operation": operation, "operands": [a, b]}
        )
