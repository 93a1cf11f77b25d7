"""
Tool Definition Models - Schema Model for tools and their parameters

This module contains the domain models describing a tool: its name, what it
does, and the typed parameters it accepts. Definitions render themselves as
JSON Schema documents that can be handed to an LLM as available tools.

Pattern: Value object (frozen Pydantic model, identified by data)
Pattern: Fluent configuration returning modified copies
Pattern: Validation on demand (definitions are checked before registration,
not on construction)

Example:
    >>> definition = (
    ...     ToolDefinition(name="calculator", description="Basic calculator")
    ...     .with_parameter(
    ...         ToolParameter(name="a", parameter_type=ToolParameterType.NUMBER)
    ...         .with_description("First number")
    ...         .mark_required()
    ...     )
    ... )
    >>> definition.validate_definition()
    >>> definition.to_json_schema()["required"]
    ['a']
"""

import re
from enum import Enum
from typing import Any, Iterable, Optional

from pydantic import BaseModel, Field

from tool_runtime.core.exceptions import ToolConfigError

TOOL_NAME_PATTERN = re.compile(r"[a-z0-9_]+")


# =============================================================================
# ToolParameterType
# =============================================================================


class ToolParameterType(str, Enum):
    """Supported parameter types, one per JSON Schema primitive."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def json_schema_type(self) -> str:
        """JSON Schema type string for this parameter type."""
        return self.value


# =============================================================================
# ToolParameter
# =============================================================================


class ToolParameter(BaseModel):
    """
    One parameter of a tool.

    Constraint fields only apply to the types they make sense for:
    enum_values and min_length/max_length to strings, minimum/maximum to
    numbers and integers, min_items/max_items to arrays. Constraints set on
    other types are kept but never emitted or enforced.

    Attributes:
        name: Parameter name, unique within its tool.
        parameter_type: The JSON type the value must have.
        description: Human-readable description for the model.
        required: Whether the argument must be present.
        default: Value the tool uses when the argument is absent.
        enum_values: Allowed string values.
        minimum: Inclusive lower bound for numbers.
        maximum: Inclusive upper bound for numbers.
        min_length: Minimum string length.
        max_length: Maximum string length.
        min_items: Minimum array size.
        max_items: Maximum array size.
    """

    name: str = Field(..., description="Parameter name")
    parameter_type: ToolParameterType = Field(..., description="Parameter type")
    description: Optional[str] = Field(default=None, description="Parameter description")
    required: bool = Field(default=False, description="Whether the parameter is required")
    default: Optional[Any] = Field(default=None, description="Default value")
    enum_values: Optional[tuple[str, ...]] = Field(
        default=None, description="Allowed string values"
    )
    minimum: Optional[float] = Field(default=None, description="Numeric minimum")
    maximum: Optional[float] = Field(default=None, description="Numeric maximum")
    min_length: Optional[int] = Field(default=None, ge=0, description="Minimum string length")
    max_length: Optional[int] = Field(default=None, ge=0, description="Maximum string length")
    min_items: Optional[int] = Field(default=None, ge=0, description="Minimum array size")
    max_items: Optional[int] = Field(default=None, ge=0, description="Maximum array size")

    model_config = {"frozen": True}

    # =========================================================================
    # Fluent configuration
    # =========================================================================

    def with_description(self, description: str) -> "ToolParameter":
        """Return a copy with the given description."""
        return self.model_copy(update={"description": description})

    def mark_required(self) -> "ToolParameter":
        """Return a copy marked as required."""
        return self.model_copy(update={"required": True})

    def with_default(self, default: Any) -> "ToolParameter":
        """Return a copy with the given default value."""
        return self.model_copy(update={"default": default})

    def with_enum_values(self, values: Iterable[str]) -> "ToolParameter":
        """Return a copy restricted to the given string values."""
        return self.model_copy(update={"enum_values": tuple(values)})

    def with_range(
        self, minimum: Optional[float] = None, maximum: Optional[float] = None
    ) -> "ToolParameter":
        """Return a copy with the given numeric range."""
        return self.model_copy(update={"minimum": minimum, "maximum": maximum})

    def with_length_range(
        self, min_length: Optional[int] = None, max_length: Optional[int] = None
    ) -> "ToolParameter":
        """Return a copy with the given string length range."""
        return self.model_copy(
            update={"min_length": min_length, "max_length": max_length}
        )

    def with_items_range(
        self, min_items: Optional[int] = None, max_items: Optional[int] = None
    ) -> "ToolParameter":
        """Return a copy with the given array size range."""
        return self.model_copy(update={"min_items": min_items, "max_items": max_items})

    # =========================================================================
    # Validation
    # =========================================================================

    def validate_parameter(self) -> None:
        """
        Validate the parameter definition.

        Raises:
            ToolConfigError: If the name is empty or any range has min > max.
        """
        if not self.name:
            raise ToolConfigError("Parameter name cannot be empty")

        if _inverted(self.minimum, self.maximum):
            raise ToolConfigError(
                f"Parameter '{self.name}': minimum value cannot be greater than maximum"
            )
        if _inverted(self.min_length, self.max_length):
            raise ToolConfigError(
                f"Parameter '{self.name}': minimum length cannot be greater than maximum"
            )
        if _inverted(self.min_items, self.max_items):
            raise ToolConfigError(
                f"Parameter '{self.name}': minimum items cannot be greater than maximum"
            )

    # =========================================================================
    # JSON Schema
    # =========================================================================

    def to_json_schema(self) -> dict[str, Any]:
        """
        Convert to a JSON Schema property document.

        Unset constraints are omitted.

        Returns:
            JSON Schema dict for this parameter.
        """
        schema: dict[str, Any] = {"type": self.parameter_type.json_schema_type}

        if self.description is not None:
            schema["description"] = self.description

        if self.parameter_type is ToolParameterType.STRING:
            if self.enum_values is not None:
                schema["enum"] = list(self.enum_values)
            _put(schema, "minLength", self.min_length)
            _put(schema, "maxLength", self.max_length)
        elif self.parameter_type in (ToolParameterType.NUMBER, ToolParameterType.INTEGER):
            _put(schema, "minimum", self.minimum)
            _put(schema, "maximum", self.maximum)
        elif self.parameter_type is ToolParameterType.ARRAY:
            _put(schema, "minItems", self.min_items)
            _put(schema, "maxItems", self.max_items)

        if self.default is not None:
            schema["default"] = self.default

        return schema


# =============================================================================
# ToolDefinition
# =============================================================================


class ToolDefinition(BaseModel):
    """
    Tool definition: name, description and typed parameters.

    This is the metadata describing a tool. It does not include the
    behavior; see tool_runtime.tools.base.Tool for that.

    Attributes:
        name: Unique tool identifier, lowercase snake_case.
        description: Human-readable description of what the tool does.
        parameters: Parameters keyed by their own name.
        deprecated: Whether the tool is deprecated.
    """

    name: str = Field(..., description="Unique tool identifier")
    description: str = Field(..., description="Human-readable description")
    parameters: dict[str, ToolParameter] = Field(
        default_factory=dict, description="Parameters keyed by name"
    )
    deprecated: bool = Field(default=False, description="Whether the tool is deprecated")

    model_config = {"frozen": True}

    def with_parameter(self, parameter: ToolParameter) -> "ToolDefinition":
        """
        Return a copy with the parameter added under its own name.

        A parameter with the same name replaces the existing one.
        """
        parameters = {**self.parameters, parameter.name: parameter}
        return self.model_copy(update={"parameters": parameters})

    def mark_deprecated(self) -> "ToolDefinition":
        """Return a copy marked as deprecated."""
        return self.model_copy(update={"deprecated": True})

    def validate_definition(self) -> None:
        """
        Validate the tool definition.

        Checks that the name is non-empty snake_case, the description is
        non-empty, every parameter is stored under its own name, and every
        parameter is itself valid.

        Raises:
            ToolConfigError: On the first problem found.
        """
        if not self.name:
            raise ToolConfigError("Tool name cannot be empty")

        if not TOOL_NAME_PATTERN.fullmatch(self.name):
            raise ToolConfigError(
                "Tool name should use snake_case "
                "(lowercase letters, numbers, and underscores only)",
                tool_name=self.name,
            )

        if not self.description:
            raise ToolConfigError("Tool description cannot be empty", tool_name=self.name)

        for key, parameter in self.parameters.items():
            if key != parameter.name:
                raise ToolConfigError(
                    f"Parameter name mismatch: key '{key}' vs parameter name "
                    f"'{parameter.name}'",
                    tool_name=self.name,
                )
            parameter.validate_parameter()

    def required_parameters(self) -> list[ToolParameter]:
        """Parameters that must be supplied."""
        return [p for p in self.parameters.values() if p.required]

    def optional_parameters(self) -> list[ToolParameter]:
        """Parameters that may be omitted."""
        return [p for p in self.parameters.values() if not p.required]

    def to_json_schema(self) -> dict[str, Any]:
        """
        Convert the parameters to a JSON Schema object document.

        Returns:
            Dict with type, properties, required and additionalProperties.
        """
        properties = {
            parameter.name: parameter.to_json_schema()
            for parameter in self.parameters.values()
        }
        required = [p.name for p in self.parameters.values() if p.required]

        return {
            "type": "object",
            "properties": properties,
            "required": required,
            "additionalProperties": False,
        }

    def to_function_schema(self) -> dict[str, Any]:
        """
        Convert to an OpenAI-compatible function tool entry.

        Returns:
            {"type": "function", "function": {name, description, parameters}}
        """
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.to_json_schema(),
            },
        }


# =============================================================================
# Helpers
# =============================================================================


def _inverted(low: Optional[float], high: Optional[float]) -> bool:
    return low is not None and high is not None and low > high


def _put(schema: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        schema[key] = value
