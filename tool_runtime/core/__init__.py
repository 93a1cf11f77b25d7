"""
Core module for the Tool Runtime.

This module contains configuration and the call-level exception hierarchy.
"""

from tool_runtime.core.config import Settings, get_settings
from tool_runtime.core.exceptions import (
    DuplicateToolError,
    ErrorCode,
    RegistryLockError,
    ToolConfigError,
    ToolNotFoundError,
    ToolRuntimeException,
    ToolRuntimeInternalError,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Exceptions
    "ErrorCode",
    "ToolRuntimeException",
    "ToolConfigError",
    "DuplicateToolError",
    "ToolNotFoundError",
    "ToolRuntimeInternalError",
    "RegistryLockError",
]
