"""
Structured Logging Module

This module provides structured JSON logging with correlation ID support.
The executor binds each tool call's id as the correlation id so that every
event emitted while the call runs can be joined back to it.

Pattern: Structured logging for observability
Pattern: Singleton configuration (configure once at startup)
"""

import contextvars
import logging
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Generator, Optional, TextIO

import structlog
from structlog.types import EventDict, Processor

from tool_runtime.core.config import Settings, get_settings


_configured: bool = False


# =============================================================================
# Correlation ID Context
# =============================================================================

_correlation_id_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "correlation_id", default=None
)


def set_correlation_id(correlation_id: str) -> None:
    """
    Set the correlation ID for the current context.

    Args:
        correlation_id: Identifier used to join related log events
    """
    _correlation_id_var.set(correlation_id)


def get_correlation_id() -> Optional[str]:
    """
    Get the current correlation ID.

    Returns:
        Correlation ID if set, None otherwise
    """
    return _correlation_id_var.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id_var.set(None)


@contextmanager
def correlation_id_context(correlation_id: str) -> Generator[None, None, None]:
    """
    Context manager for setting correlation ID.

    Args:
        correlation_id: Identifier used to join related log events

    Example:
        >>> with correlation_id_context("call_12345"):
        ...     logger.info("tool_execution_started")
    """
    token = _correlation_id_var.set(correlation_id)
    try:
        yield
    finally:
        _correlation_id_var.reset(token)


# =============================================================================
# Custom Processors
# =============================================================================


def add_correlation_id(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add correlation ID to log event if set."""
    correlation_id = get_correlation_id()
    if correlation_id is not None:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def add_timestamp(
    logger: logging.Logger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def service_context(settings: Settings) -> Processor:
    """Build a processor stamping every event with the service and environment."""

    def add_service_context(
        logger: logging.Logger, _method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("service", settings.service_name)
        event_dict.setdefault("environment", settings.environment)
        return event_dict

    return add_service_context


def rename_level(
    logger: logging.Logger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Rename log_level to level for cleaner output."""
    if "log_level" in event_dict:
        event_dict["level"] = event_dict.pop("log_level")
    return event_dict


# =============================================================================
# Singleton Configuration
# =============================================================================


def configure_logging(
    level: Optional[str] = None,
    stream: Optional[TextIO] = None,
    force: bool = False,
) -> None:
    """
    Configure structlog for the runtime.

    This should be called once at application startup. Subsequent calls
    are no-ops unless force=True.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            defaults to Settings.log_level
        stream: Output stream (default: sys.stdout)
        force: Force reconfiguration (for testing only)
    """
    global _configured

    if _configured and not force:
        return

    settings = get_settings()
    level = level or settings.log_level

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        add_timestamp,
        add_correlation_id,
        service_context(settings),
        rename_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_to_int(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stdout),
        cache_logger_on_first_use=False,
    )

    _configured = True


def reset_logging() -> None:
    """
    Reset logging configuration state.

    WARNING: This should only be used in tests.
    """
    global _configured
    _configured = False


# =============================================================================
# Logger Factory
# =============================================================================


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a configured structured logger.

    Configures logging from Settings on first use if configure_logging()
    has not been called yet.

    Args:
        name: Logger name (typically module name)

    Returns:
        Configured structlog BoundLogger

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("tool_registered", tool_name="calculator")
    """
    configure_logging()
    return structlog.get_logger().bind(logger=name)


def _level_to_int(level: str) -> int:
    """Convert level string to logging int."""
    levels = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return levels.get(level.upper(), logging.INFO)
