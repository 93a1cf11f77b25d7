"""
Observability Package

This package provides observability infrastructure for tool execution:
- Structured JSON logging with correlation ids (structlog)
- Prometheus metrics (prometheus-client)
"""

from tool_runtime.observability.logging import (
    clear_correlation_id,
    configure_logging,
    correlation_id_context,
    get_correlation_id,
    get_logger,
    set_correlation_id,
)
from tool_runtime.observability.metrics import (
    EXECUTIONS_IN_PROGRESS,
    generate_metrics,
    record_execution,
    record_validation_failure,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
    "correlation_id_context",
    # Metrics
    "EXECUTIONS_IN_PROGRESS",
    "generate_metrics",
    "record_execution",
    "record_validation_failure",
]
