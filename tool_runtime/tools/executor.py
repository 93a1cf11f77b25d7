"""
Tool Executor - validation, time bound and timing around tool invocation

This module implements the tool executor for running registered tools. The
executor handles tool lookup, argument validation, bounded execution, timing
metadata, and conversion of tool failures into Error-status results.

Pattern: Command Executor (executes tool calls as commands)
Pattern: Fail-fast validation with graceful error wrapping
Pattern: Timeouts by racing the invocation against a timer

Call-level failures are limited to caller mistakes (ToolNotFoundError) and
runtime faults (RegistryLockError). Everything that goes wrong while
validating or running a tool comes back as an Error-status ToolResult.
The executor never retries; callers may inspect error_details.retryable.
"""

import asyncio
import math
import time
from typing import Any, Awaitable, Optional

from tool_runtime.core.config import Settings, get_settings
from tool_runtime.core.exceptions import ToolNotFoundError, ToolRuntimeException
from tool_runtime.models.calls import ToolCall
from tool_runtime.models.definition import (
    ToolDefinition,
    ToolParameter,
    ToolParameterType,
)
from tool_runtime.models.result import ToolError, ToolErrorType, ToolResult
from tool_runtime.observability.logging import correlation_id_context, get_logger
from tool_runtime.observability.metrics import (
    EXECUTIONS_IN_PROGRESS,
    record_execution,
    record_validation_failure,
)
from tool_runtime.tools.registry import ToolRegistry, get_tool_registry

# Default execution timeout in seconds
DEFAULT_TIMEOUT = 30.0

# Metadata key for elapsed wall-clock time
TIMING_METADATA_KEY = "execution_time_ms"


# =============================================================================
# Validation Errors
# =============================================================================


class ArgumentValidationError(ValueError):
    """Raised internally when arguments do not match a tool's definition."""

    def __init__(self, message: str, parameter: Optional[str] = None) -> None:
        self.parameter = parameter
        super().__init__(message)


# =============================================================================
# ToolExecutor Class
# =============================================================================


class ToolExecutor:
    """
    Executor for running registered tools.

    Configuration is fixed at construction.

    Attributes:
        registry: The ToolRegistry to look up and run tools from.
        timeout: Maximum execution time in seconds.
        validate_parameters: Whether arguments are checked before running.
        include_timing: Whether execution_time_ms is attached to results.

    Example:
        >>> executor = ToolExecutor(registry=ToolRegistry.with_builtin_tools())
        >>> result = await executor.execute(
        ...     "calculator", {"operation": "add", "a": 1, "b": 2}
        ... )
        >>> result.data["result"]
        3
    """

    def __init__(
        self,
        registry: ToolRegistry,
        timeout: float = DEFAULT_TIMEOUT,
        validate_parameters: bool = True,
        include_timing: bool = True,
    ) -> None:
        """
        Initialize the executor with a registry.

        Args:
            registry: The ToolRegistry to use for tool lookup.
            timeout: Maximum execution time in seconds (default: 30).
            validate_parameters: Check arguments before running (default: True).
            include_timing: Attach timing metadata (default: True).
        """
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self._registry = registry
        self._timeout = timeout
        self._validate_parameters = validate_parameters
        self._include_timing = include_timing
        self._log = get_logger(__name__)

    @classmethod
    def from_settings(
        cls, registry: ToolRegistry, settings: Optional[Settings] = None
    ) -> "ToolExecutor":
        """Create an executor configured from Settings."""
        settings = settings or get_settings()
        return cls(
            registry=registry,
            timeout=settings.executor_timeout_seconds,
            validate_parameters=settings.validate_parameters,
            include_timing=settings.include_timing,
        )

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def validate_parameters(self) -> bool:
        return self._validate_parameters

    @property
    def include_timing(self) -> bool:
        return self._include_timing

    def has_tool(self, name: str) -> bool:
        return self._registry.has_tool(name)

    def available_tools(self) -> list[str]:
        return self._registry.tool_names()

    # =========================================================================
    # execute() Method
    # =========================================================================

    async def execute(self, tool_name: str, arguments: Any) -> ToolResult:
        """
        Execute a tool and return its result.

        Args:
            tool_name: Name of a registered tool.
            arguments: JSON object of arguments, keyed by parameter name.

        Returns:
            ToolResult with the tool's output or error information.

        Raises:
            ToolNotFoundError: If the tool is not registered.
            RegistryLockError: If the registry could not be read.
        """
        started = time.perf_counter()

        definition = self._registry.get_definition(tool_name)
        if definition is None:
            raise ToolNotFoundError(tool_name)

        if self._validate_parameters:
            try:
                self._validate_arguments(definition, arguments)
            except ArgumentValidationError as e:
                record_validation_failure(tool_name)
                details = ToolError(error_type=ToolErrorType.INVALID_INPUT, message=str(e))
                if e.parameter is not None:
                    details.with_context("parameter", e.parameter)
                result = ToolResult.failure_with_details(
                    f"Parameter validation failed: {e}", details
                )
                return self._finish(tool_name, result, started, "validation_failed")

        pending = self._registry._execute_tool(tool_name, arguments)

        self._log.debug("tool_execution_started", tool_name=tool_name)
        EXECUTIONS_IN_PROGRESS.labels(tool=tool_name).inc()
        outcome: Optional[str] = None
        try:
            result = await asyncio.wait_for(
                self._contain(tool_name, pending), timeout=self._timeout
            )
        except asyncio.TimeoutError:
            self._log.warning(
                "tool_execution_timeout", tool_name=tool_name, timeout=self._timeout
            )
            result = ToolResult.failure_with_details(
                f"Tool execution timeout after {self._timeout}s",
                ToolError(
                    error_type=ToolErrorType.TIMEOUT,
                    message=f"Tool '{tool_name}' did not finish within {self._timeout}s",
                ).mark_retryable(),
            )
            outcome = "timeout"
        finally:
            EXECUTIONS_IN_PROGRESS.labels(tool=tool_name).dec()

        if not isinstance(result, ToolResult):
            result = ToolResult.failure_with_details(
                f"Tool '{tool_name}' returned {type(result).__name__}, not a ToolResult",
                ToolError(
                    error_type=ToolErrorType.INTERNAL,
                    message="Tool returned an invalid result",
                ),
            )

        return self._finish(tool_name, result, started, outcome)

    async def _contain(self, tool_name: str, pending: Awaitable[Any]) -> Any:
        """
        Await a tool run, turning anything it raises into an internal result.

        Runs inside wait_for, so a TimeoutError raised by the tool itself is
        reported as the tool's failure and never mistaken for the executor's
        own timeout.
        """
        try:
            return await pending
        except Exception as e:
            self._log.error("tool_execution_failed", tool_name=tool_name, error=str(e))
            return ToolResult.failure_with_details(
                f"Tool execution failed: {e}",
                ToolError(
                    error_type=ToolErrorType.INTERNAL,
                    message=str(e),
                    cause=type(e).__name__,
                ),
            )

    def _finish(
        self,
        tool_name: str,
        result: ToolResult,
        started: float,
        outcome: Optional[str] = None,
    ) -> ToolResult:
        """Attach timing to a private copy, record metrics and log the outcome."""
        elapsed = max(time.perf_counter() - started, 0.0)
        # Tools may hand back cached or shared results
        result = result.model_copy(deep=True)
        if self._include_timing:
            result.with_metadata(TIMING_METADATA_KEY, round(elapsed * 1000, 3))

        status = outcome or result.status.value
        record_execution(tool_name, status, elapsed)
        self._log.info(
            "tool_execution_completed",
            tool_name=tool_name,
            status=status,
            duration_ms=round(elapsed * 1000, 3),
        )
        return result

    # =========================================================================
    # Argument Validation
    # =========================================================================

    def _validate_arguments(self, definition: ToolDefinition, arguments: Any) -> None:
        """
        Validate arguments against a tool's definition.

        The schema is closed: unknown keys are rejected.

        Raises:
            ArgumentValidationError: On the first problem found.
        """
        if not isinstance(arguments, dict):
            raise ArgumentValidationError("Arguments must be a JSON object")

        for parameter in definition.required_parameters():
            if parameter.name not in arguments:
                raise ArgumentValidationError(
                    f"Required parameter '{parameter.name}' is missing",
                    parameter=parameter.name,
                )

        for name, value in arguments.items():
            parameter = definition.parameters.get(name)
            if parameter is None:
                raise ArgumentValidationError(f"Unknown parameter '{name}'", parameter=name)
            self._validate_value(parameter, value)

    def _validate_value(self, parameter: ToolParameter, value: Any) -> None:
        """Check one value's JSON kind and constraints, without coercion."""
        name = parameter.name
        kind = parameter.parameter_type

        if not _matches_type(value, kind):
            raise ArgumentValidationError(
                f"Parameter '{name}' must be {_ARTICLES[kind]} {kind.value}, "
                f"got {type(value).__name__}",
                parameter=name,
            )

        if kind is ToolParameterType.STRING:
            if parameter.enum_values is not None and value not in parameter.enum_values:
                raise ArgumentValidationError(
                    f"Parameter '{name}' must be one of: {list(parameter.enum_values)}",
                    parameter=name,
                )
            if parameter.min_length is not None and len(value) < parameter.min_length:
                raise ArgumentValidationError(
                    f"Parameter '{name}' must be at least {parameter.min_length} characters",
                    parameter=name,
                )
            if parameter.max_length is not None and len(value) > parameter.max_length:
                raise ArgumentValidationError(
                    f"Parameter '{name}' must be at most {parameter.max_length} characters",
                    parameter=name,
                )

        elif kind in (ToolParameterType.NUMBER, ToolParameterType.INTEGER):
            if parameter.minimum is not None and value < parameter.minimum:
                raise ArgumentValidationError(
                    f"Parameter '{name}' must be at least {parameter.minimum}",
                    parameter=name,
                )
            if parameter.maximum is not None and value > parameter.maximum:
                raise ArgumentValidationError(
                    f"Parameter '{name}' must be at most {parameter.maximum}",
                    parameter=name,
                )

        elif kind is ToolParameterType.ARRAY:
            if parameter.min_items is not None and len(value) < parameter.min_items:
                raise ArgumentValidationError(
                    f"Parameter '{name}' must have at least {parameter.min_items} items",
                    parameter=name,
                )
            if parameter.max_items is not None and len(value) > parameter.max_items:
                raise ArgumentValidationError(
                    f"Parameter '{name}' must have at most {parameter.max_items} items",
                    parameter=name,
                )

    # =========================================================================
    # Batch Execution
    # =========================================================================

    async def execute_batch(self, tool_calls: list[ToolCall]) -> list[ToolResult]:
        """
        Execute multiple tool calls concurrently.

        Results are returned in the same order as the input. A failure in
        one call, including an unknown tool name, never affects the others:
        it becomes an Error-status result in that call's slot.

        Args:
            tool_calls: ToolCalls to execute.

        Returns:
            List of ToolResults in the same order as tool_calls.
        """
        if not tool_calls:
            return []

        async def safe_execute(tool_call: ToolCall) -> ToolResult:
            with correlation_id_context(tool_call.id or tool_call.name):
                try:
                    return await self.execute(tool_call.name, tool_call.arguments)
                except ToolNotFoundError as e:
                    return ToolResult.failure_with_details(
                        str(e),
                        ToolError(
                            error_type=ToolErrorType.NOT_FOUND, message=str(e)
                        ).with_context("tool_name", tool_call.name),
                    )
                except ToolRuntimeException as e:
                    return ToolResult.failure_with_details(
                        str(e),
                        ToolError(
                            error_type=ToolErrorType.INTERNAL, message=str(e)
                        ).mark_retryable(),
                    )

        results = await asyncio.gather(*[safe_execute(tc) for tc in tool_calls])
        return list(results)


# =============================================================================
# Type Checks
# =============================================================================

_ARTICLES = {
    ToolParameterType.STRING: "a",
    ToolParameterType.NUMBER: "a",
    ToolParameterType.INTEGER: "an",
    ToolParameterType.BOOLEAN: "a",
    ToolParameterType.ARRAY: "an",
    ToolParameterType.OBJECT: "an",
}


def _matches_type(value: Any, kind: ToolParameterType) -> bool:
    """
    Structural JSON kind check.

    bool is a subclass of int in Python but never a JSON number. NaN and
    infinities are not JSON numbers either. Integers accept floats without a
    fractional part (e.g. 3.0).
    """
    if kind is ToolParameterType.STRING:
        return isinstance(value, str)
    if kind is ToolParameterType.BOOLEAN:
        return isinstance(value, bool)
    if kind is ToolParameterType.ARRAY:
        return isinstance(value, list)
    if kind is ToolParameterType.OBJECT:
        return isinstance(value, dict)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float) and not math.isfinite(value):
        return False
    if kind is ToolParameterType.INTEGER:
        return isinstance(value, int) or value.is_integer()
    return True


# =============================================================================
# Singleton Access
# =============================================================================

_executor: Optional[ToolExecutor] = None


def get_tool_executor() -> ToolExecutor:
    """
    Get the global tool executor instance.

    Returns the same ToolExecutor instance on every call (singleton pattern),
    configured from Settings and bound to the global tool registry.
    """
    global _executor
    if _executor is None:
        _executor = ToolExecutor.from_settings(registry=get_tool_registry())
    return _executor


def reset_tool_executor() -> None:
    """
    Reset the global tool executor.

    Primarily used for testing to ensure a clean state.
    """
    global _executor
    _executor = None
