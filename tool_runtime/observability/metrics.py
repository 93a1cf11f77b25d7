"""
Prometheus Metrics Module

This module provides Prometheus metrics for tool execution: how often each
tool runs, how each run ended, how long it took, and how many runs are in
flight.

Pattern: Metrics collection for observability

Label cardinality is bounded by the number of registered tools; arguments
and error messages are never used as labels.
"""

from prometheus_client import REGISTRY, Counter, Gauge, Histogram, generate_latest

# =============================================================================
# Execution Counter
# =============================================================================

EXECUTIONS_TOTAL = Counter(
    name="tool_runtime_executions_total",
    documentation="Total number of tool executions by outcome",
    labelnames=["tool", "status"],
)

# =============================================================================
# Execution Latency Histogram
# =============================================================================

EXECUTION_DURATION_SECONDS = Histogram(
    name="tool_runtime_execution_duration_seconds",
    documentation="Tool execution duration in seconds",
    labelnames=["tool"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

# =============================================================================
# In-Progress Gauge
# =============================================================================

EXECUTIONS_IN_PROGRESS = Gauge(
    name="tool_runtime_executions_in_progress",
    documentation="Number of tool executions currently running",
    labelnames=["tool"],
)

# =============================================================================
# Validation Metrics
# =============================================================================

VALIDATION_FAILURES_TOTAL = Counter(
    name="tool_runtime_validation_failures_total",
    documentation="Total number of argument validation failures",
    labelnames=["tool"],
)


# =============================================================================
# Helper Functions
# =============================================================================


def record_execution(tool: str, status: str, duration: float) -> None:
    """
    Record a finished tool execution.

    Args:
        tool: Tool name
        status: Result status (success, error, partial) or "timeout"
        duration: Wall-clock duration in seconds
    """
    EXECUTIONS_TOTAL.labels(tool=tool, status=status).inc()
    EXECUTION_DURATION_SECONDS.labels(tool=tool).observe(duration)


def record_validation_failure(tool: str) -> None:
    """Record an argument validation failure for a tool."""
    VALIDATION_FAILURES_TOTAL.labels(tool=tool).inc()


def generate_metrics() -> str:
    """
    Generate Prometheus metrics text format.

    Returns:
        Prometheus exposition format text
    """
    return generate_latest(REGISTRY).decode("utf-8")
