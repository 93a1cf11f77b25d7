"""
Tool Registry - concurrent store of tools plus a category index

This module implements the tool registry for managing available tools.
The registry follows the service registry pattern for tool inventory
management and is safe to share between threads and asyncio tasks.

Pattern: Service Registry (microservices pattern applied to tool management)
Pattern: Singleton for global registry access
Pattern: Multiple readers / single writer locking

The lock only ever guards in-memory map operations. Tool execution looks the
tool up under a brief shared lock, releases it, and only then awaits the
tool, so a slow tool never blocks registration or other lookups.

Category membership is kept referentially consistent: adding a tool to a
category twice is a no-op, and unregistering a tool removes it from every
category.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Any, Coroutine, Generator, Optional

from tool_runtime.core.config import get_settings
from tool_runtime.core.exceptions import (
    DuplicateToolError,
    RegistryLockError,
    ToolNotFoundError,
)
from tool_runtime.models.definition import ToolDefinition
from tool_runtime.models.result import ToolResult
from tool_runtime.tools.base import Tool

logger = logging.getLogger(__name__)

DEFAULT_LOCK_TIMEOUT = 10.0


# =============================================================================
# Read/Write Lock
# =============================================================================


class _ReadWriteLock:
    """
    Writer-preferring readers/writer lock.

    Not reentrant: a holder must not acquire the lock again.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @contextmanager
    def read(self, timeout: float) -> Generator[None, None, None]:
        with self._cond:
            acquired = self._cond.wait_for(
                lambda: not self._writer and not self._waiting_writers, timeout
            )
            if not acquired:
                raise RegistryLockError("read", timeout)
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self, timeout: float) -> Generator[None, None, None]:
        with self._cond:
            self._waiting_writers += 1
            try:
                acquired = self._cond.wait_for(
                    lambda: not self._writer and not self._readers, timeout
                )
            finally:
                self._waiting_writers -= 1
            if not acquired:
                # Readers may have been held back by this waiting writer
                self._cond.notify_all()
                raise RegistryLockError("write", timeout)
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


# =============================================================================
# ToolRegistry Class
# =============================================================================


class ToolRegistry:
    """
    Registry for managing available tools.

    The registry owns every registered Tool instance. Read operations hand
    out deep copies of definitions, never live references, so callers
    cannot mutate registry-owned state.

    Attributes:
        lock_timeout: Seconds to wait for the registry lock before raising
            RegistryLockError.

    Example:
        >>> registry = ToolRegistry()
        >>> registry.register(CalculatorTool())
        >>> registry.add_to_category("math", "calculator")
        >>> registry.tools_in_category("math")
        ['calculator']
    """

    def __init__(self, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> None:
        """Initialize an empty registry."""
        self.lock_timeout = lock_timeout
        self._tools: dict[str, Tool] = {}
        self._categories: dict[str, list[str]] = {}
        self._lock = _ReadWriteLock()

    @classmethod
    def with_builtin_tools(cls) -> "ToolRegistry":
        """Create a registry pre-populated with the built-in tools."""
        from tool_runtime.tools.builtin import create_builtin_registry

        return create_builtin_registry()

    def _read(self) -> Any:
        return self._lock.read(self.lock_timeout)

    def _write(self) -> Any:
        return self._lock.write(self.lock_timeout)

    # =========================================================================
    # Registration
    # =========================================================================

    def register(self, tool: Tool) -> None:
        """
        Register a tool under its definition's name.

        The definition is validated before the registry is touched.

        Args:
            tool: The tool to register.

        Raises:
            ToolConfigError: If the tool's definition is invalid.
            DuplicateToolError: If a tool with the same name is registered.
        """
        definition = tool.definition
        definition.validate_definition()
        name = definition.name

        with self._write():
            if name in self._tools:
                raise DuplicateToolError(name)
            self._tools[name] = tool

        if definition.deprecated:
            logger.warning(f"Registered deprecated tool: {name}")
        else:
            logger.debug(f"Registered tool: {name}")

    def unregister(self, name: str) -> bool:
        """
        Remove a tool and its category memberships.

        Args:
            name: The name of the tool to remove.

        Returns:
            True if a tool was removed, False if none was registered.
        """
        with self._write():
            removed = self._tools.pop(name, None) is not None
            if removed:
                for category in list(self._categories):
                    members = self._categories[category]
                    if name in members:
                        members.remove(name)
                        if not members:
                            del self._categories[category]

        if removed:
            logger.debug(f"Unregistered tool: {name}")
        return removed

    def clear(self) -> None:
        """Remove every tool and category."""
        with self._write():
            self._tools.clear()
            self._categories.clear()
        logger.debug("Cleared tool registry")

    # =========================================================================
    # Lookup
    # =========================================================================

    def get_definition(self, name: str) -> Optional[ToolDefinition]:
        """
        Get a copy of a tool's definition.

        Args:
            name: The name of the tool.

        Returns:
            A deep copy of the definition, or None if not registered.
        """
        with self._read():
            tool = self._tools.get(name)
            if tool is None:
                return None
            return tool.definition.model_copy(deep=True)

    def has_tool(self, name: str) -> bool:
        """Check if a tool is registered."""
        with self._read():
            return name in self._tools

    def tool_names(self) -> list[str]:
        """Names of all registered tools, in registration order."""
        with self._read():
            return list(self._tools)

    def tool_definitions(self) -> list[ToolDefinition]:
        """Copies of all registered definitions, in registration order."""
        with self._read():
            return [tool.definition.model_copy(deep=True) for tool in self._tools.values()]

    def __len__(self) -> int:
        with self._read():
            return len(self._tools)

    def is_empty(self) -> bool:
        return len(self) == 0

    # =========================================================================
    # Categories
    # =========================================================================

    def add_to_category(self, category: str, tool_name: str) -> None:
        """
        Add a registered tool to a category.

        Adding the same tool to the same category again has no effect.

        Args:
            category: Category label.
            tool_name: Name of a registered tool.

        Raises:
            ToolNotFoundError: If the tool is not registered.
        """
        with self._write():
            if tool_name not in self._tools:
                raise ToolNotFoundError(tool_name)
            members = self._categories.setdefault(category, [])
            if tool_name not in members:
                members.append(tool_name)

    def tools_in_category(self, category: str) -> list[str]:
        """Tool names in a category; empty for unknown categories."""
        with self._read():
            return list(self._categories.get(category, []))

    def category_names(self) -> list[str]:
        """Names of all non-empty categories."""
        with self._read():
            return list(self._categories)

    def category_definitions(self, category: str) -> list[ToolDefinition]:
        """Copies of the definitions of every tool in a category."""
        with self._read():
            return [
                self._tools[name].definition.model_copy(deep=True)
                for name in self._categories.get(category, [])
                if name in self._tools
            ]

    # =========================================================================
    # Schema Export
    # =========================================================================

    def to_json_schema(self) -> dict[str, Any]:
        """
        Build the tools document for a prompting layer.

        Returns:
            {"tools": [function schema, ...], "tool_choice": "auto"}
        """
        return {
            "tools": [
                definition.to_function_schema()
                for definition in self.tool_definitions()
            ],
            "tool_choice": "auto",
        }

    # =========================================================================
    # Execution (internal)
    # =========================================================================

    def _execute_tool(
        self, name: str, arguments: dict[str, Any]
    ) -> Coroutine[Any, Any, ToolResult]:
        """
        Look up a registered tool and start running it.

        Only ToolExecutor calls this, so every execution goes through its
        validation, timeout and timing wrapper. Lookup failures are raised
        here, before anything is awaited; the returned coroutine carries
        only the tool's own outcome.

        Raises:
            ToolNotFoundError: If the tool is not registered.
            RegistryLockError: If the registry could not be read.
        """
        with self._read():
            tool = self._tools.get(name)
        if tool is None:
            raise ToolNotFoundError(name)

        async def run() -> ToolResult:
            return await tool.execute(arguments)

        return run()


# =============================================================================
# Singleton Access
# =============================================================================

_registry: Optional[ToolRegistry] = None
_registry_lock = threading.Lock()


def get_tool_registry() -> ToolRegistry:
    """
    Get the global tool registry instance.

    Returns the same ToolRegistry instance on every call (singleton pattern).
    The registry is configured from Settings and, when load_builtin_tools is
    set, starts with the built-in tools registered.

    Returns:
        The global ToolRegistry instance.
    """
    global _registry
    with _registry_lock:
        if _registry is None:
            settings = get_settings()
            registry = ToolRegistry(lock_timeout=settings.registry_lock_timeout_seconds)
            if settings.load_builtin_tools:
                from tool_runtime.tools.builtin import register_builtin_tools

                register_builtin_tools(registry)
            _registry = registry
        return _registry


def reset_tool_registry() -> None:
    """
    Reset the global tool registry.

    Primarily used for testing to ensure a clean state.
    """
    global _registry
    with _registry_lock:
        _registry = None
