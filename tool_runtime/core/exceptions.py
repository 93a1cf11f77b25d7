"""
Custom exceptions for the Tool Runtime.

This module provides the hierarchy of call-level exceptions raised by the
registry and executor. All exceptions inherit from ToolRuntimeException and
carry an error code for consistent handling and logging.

Call-level exceptions describe mistakes in the calling code (bad tool
names, duplicate registration, unknown tools). Failures that happen while
a tool runs are never raised; they are reported inside an Error-status
ToolResult (see tool_runtime.models.result).
"""

from enum import Enum
from typing import Any


# =============================================================================
# Error Codes
# =============================================================================


class ErrorCode(str, Enum):
    """
    Error codes for Tool Runtime exceptions.

    These codes provide a consistent way to identify error kinds
    in logs and in callers' error handling.
    """

    RUNTIME_ERROR = "RUNTIME_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Base Exception
# =============================================================================


class ToolRuntimeException(Exception):
    """
    Base exception for all Tool Runtime errors.

    Attributes:
        message: Human-readable error message.
        error_code: Machine-readable error code from ErrorCode enum.
    """

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.RUNTIME_ERROR,
        **kwargs: Any,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            error_code: Machine-readable error code.
            **kwargs: Additional attributes to set on the exception.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code

        for key, value in kwargs.items():
            setattr(self, key, value)


# =============================================================================
# Config Errors
# =============================================================================


class ToolConfigError(ToolRuntimeException):
    """
    Exception for setup and programming mistakes.

    Raised for invalid tool or parameter definitions, duplicate
    registrations, and references to tools that are not registered.

    Attributes:
        tool_name: Name of the tool involved (if known).
    """

    def __init__(
        self,
        message: str,
        tool_name: str | None = None,
        error_code: str = ErrorCode.CONFIG_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.tool_name = tool_name


class DuplicateToolError(ToolConfigError):
    """Raised when a tool name is already taken in a registry."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(
            f"Tool with name '{tool_name}' is already registered",
            tool_name=tool_name,
        )


class ToolNotFoundError(ToolConfigError):
    """Raised when a requested tool is not found in the registry."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Tool '{tool_name}' not found", tool_name=tool_name)


# =============================================================================
# Internal Errors
# =============================================================================


class ToolRuntimeInternalError(ToolRuntimeException):
    """
    Exception for failures inside the runtime itself.

    These are not caused by the caller or by a tool; they indicate the
    runtime could not carry out an operation.
    """

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.INTERNAL_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)


class RegistryLockError(ToolRuntimeInternalError):
    """
    Raised when the registry lock cannot be acquired in time.

    Attributes:
        mode: "read" or "write".
        timeout: Seconds waited before giving up.
    """

    def __init__(self, mode: str, timeout: float) -> None:
        super().__init__(
            f"Failed to acquire {mode} lock on tool registry within {timeout}s"
        )
        self.mode = mode
        self.timeout = timeout
