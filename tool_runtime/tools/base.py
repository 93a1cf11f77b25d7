"""
Tool Abstraction - capability interface and handler adapter

A Tool pairs a ToolDefinition with behavior: given a JSON object of
arguments, produce a ToolResult. Concrete tools subclass Tool directly;
simple tools wrap a plain function in a HandlerTool instead.

Pattern: Abstract base class for pluggable tools
Pattern: Adapter (HandlerTool) so simple tools need not subclass Tool
Pattern: Async-first with sync handler support (sync handlers run in the
default thread pool executor so they never block the event loop)
"""

import asyncio
import inspect
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Protocol, Union, runtime_checkable

from tool_runtime.models.definition import ToolDefinition
from tool_runtime.models.result import ToolError, ToolErrorType, ToolResult

logger = logging.getLogger(__name__)


# =============================================================================
# Tool Interface
# =============================================================================


class Tool(ABC):
    """
    A named, schema-described operation invocable with JSON arguments.

    Subclasses provide the definition and implement execute(). execute()
    must report malformed input as an Error-status result rather than
    raising.

    Example:
        >>> class EchoTool(Tool):
        ...     @property
        ...     def definition(self) -> ToolDefinition:
        ...         return ToolDefinition(name="echo", description="Echo input")
        ...
        ...     async def execute(self, arguments):
        ...         return ToolResult.success(arguments)
    """

    @property
    @abstractmethod
    def definition(self) -> ToolDefinition:
        """The tool's static description."""

    @abstractmethod
    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        """
        Run the tool.

        Args:
            arguments: Arguments keyed by parameter name.

        Returns:
            The outcome of the run.
        """

    @property
    def name(self) -> str:
        return self.definition.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


# =============================================================================
# Handler Adapter
# =============================================================================


@runtime_checkable
class ToolHandler(Protocol):
    """Object form of a handler: anything with a handle(arguments) method."""

    def handle(self, arguments: dict[str, Any]) -> Any:
        ...


HandlerCallable = Callable[[dict[str, Any]], Union[Any, Awaitable[Any]]]


class HandlerTool(Tool):
    """
    Tool that delegates execution to an injected handler.

    The handler may be a function, a coroutine function, or a ToolHandler
    object whose handle() is either. It should return a ToolResult; any
    other return value is wrapped in ToolResult.success(), except None,
    which is reported as an internal error.

    Attributes:
        handler: The callable invoked with the arguments dict.

    Example:
        >>> def shout(args: dict) -> ToolResult:
        ...     return ToolResult.success(args["text"].upper())
        ...
        >>> tool = HandlerTool(
        ...     ToolDefinition(name="shout", description="Upper-case text"),
        ...     shout,
        ... )
    """

    def __init__(
        self,
        definition: ToolDefinition,
        handler: Union[HandlerCallable, ToolHandler],
    ) -> None:
        self._definition = definition
        if isinstance(handler, ToolHandler) and not inspect.isroutine(handler):
            self.handler: HandlerCallable = handler.handle
        elif callable(handler):
            self.handler = handler
        else:
            raise TypeError(
                f"Handler for tool '{definition.name}' must be callable "
                f"or expose handle(), got {type(handler).__name__}"
            )

    @property
    def definition(self) -> ToolDefinition:
        return self._definition

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        try:
            outcome = await self._call_handler(arguments)
        except (KeyError, TypeError, ValueError) as e:
            logger.info(f"Tool {self.name} rejected its input: {e}")
            return ToolResult.failure_with_details(
                f"Invalid input for tool '{self.name}': {e}",
                ToolError(error_type=ToolErrorType.INVALID_INPUT, message=str(e)),
            )

        if isinstance(outcome, ToolResult):
            return outcome
        if outcome is None:
            return ToolResult.failure_with_details(
                f"Tool '{self.name}' produced no result",
                ToolError(
                    error_type=ToolErrorType.INTERNAL,
                    message="Handler returned None",
                ),
            )
        return ToolResult.success(outcome)

    async def _call_handler(self, arguments: dict[str, Any]) -> Any:
        """Call the handler, running sync handlers in the default executor."""
        if inspect.iscoroutinefunction(self.handler):
            return await self.handler(arguments)

        loop = asyncio.get_running_loop()
        outcome = await loop.run_in_executor(None, self.handler, arguments)
        # Callables that are not coroutine functions may still return awaitables
        if inspect.isawaitable(outcome):
            return await outcome
        return outcome
