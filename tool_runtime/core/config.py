"""
Core configuration module for the Tool Runtime.

This module provides centralized configuration management using Pydantic
Settings. All configuration is loaded from environment variables with the
TOOL_RUNTIME_ prefix.

Example:
    TOOL_RUNTIME_EXECUTOR_TIMEOUT_SECONDS=5 TOOL_RUNTIME_LOG_LEVEL=debug
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Runtime settings loaded from environment variables.

    All fields use the TOOL_RUNTIME_ prefix for environment variables.
    """

    # =========================================================================
    # Service Configuration
    # =========================================================================
    service_name: str = Field(
        default="tool-runtime",
        description="Name of the service for logging and identification",
    )
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for structured logging",
    )

    # =========================================================================
    # Executor Configuration
    # =========================================================================
    executor_timeout_seconds: float = Field(
        default=30.0,
        gt=0.0,
        le=3600.0,
        description="Maximum time a single tool execution may take",
    )
    validate_parameters: bool = Field(
        default=True,
        description="Validate arguments against tool definitions before execution",
    )
    include_timing: bool = Field(
        default=True,
        description="Attach execution_time_ms metadata to every result",
    )

    # =========================================================================
    # Registry Configuration
    # =========================================================================
    registry_lock_timeout_seconds: float = Field(
        default=10.0,
        gt=0.0,
        description="Maximum time to wait for the registry lock",
    )
    load_builtin_tools: bool = Field(
        default=False,
        description="Pre-populate the global registry with built-in tools",
    )

    model_config = {
        "env_prefix": "TOOL_RUNTIME_",
        "case_sensitive": False,
        "extra": "ignore",
    }

    # =========================================================================
    # Field Validators
    # =========================================================================
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = v.upper()
        if level not in valid_levels:
            raise ValueError(f"Log level must be one of: {sorted(valid_levels)}")
        return level


@lru_cache
def get_settings() -> Settings:
    """
    Get the runtime settings singleton.

    Uses functools.lru_cache to ensure only one Settings instance is created.
    Call get_settings.cache_clear() to reload from the environment.

    Returns:
        Settings: The runtime settings instance.
    """
    return Settings()
