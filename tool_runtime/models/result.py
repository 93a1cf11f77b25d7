"""
Tool Result Models - structured outcome of one tool execution

This module contains the result returned by every tool execution together
with the structured error detail attached to failures.

Pattern: Result object (success / error / partial) instead of exceptions
Pattern: Factory methods construct a result at the moment the outcome is known

The result document handed to a conversation layer uses camelCase keys:

    {
        "status": "success",
        "data": {...},
        "startedAt": "2026-01-01T00:00:00+00:00",
        "completedAt": "2026-01-01T00:00:00+00:00",
        "duration": 0.0,
        "metadata": {"execution_time_ms": 1.25}
    }
"""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_serializer
from pydantic.alias_generators import to_camel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# ToolResultStatus
# =============================================================================


class ToolResultStatus(str, Enum):
    """Status of a tool execution."""

    SUCCESS = "success"
    ERROR = "error"
    PARTIAL = "partial"


# =============================================================================
# ToolErrorType
# =============================================================================


class ToolErrorType(str, Enum):
    """Kinds of failure a tool execution can report."""

    INVALID_INPUT = "invalid_input"
    AUTHENTICATION = "authentication"
    NETWORK = "network"
    EXTERNAL_SERVICE = "external_service"
    INTERNAL = "internal"
    TIMEOUT = "timeout"
    RATE_LIMIT = "rate_limit"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    UNKNOWN = "unknown"

    @property
    def label(self) -> str:
        """Human-readable label, e.g. "Invalid Input"."""
        return _ERROR_TYPE_LABELS[self]


_ERROR_TYPE_LABELS = {
    ToolErrorType.INVALID_INPUT: "Invalid Input",
    ToolErrorType.AUTHENTICATION: "Authentication Error",
    ToolErrorType.NETWORK: "Network Error",
    ToolErrorType.EXTERNAL_SERVICE: "External Service Error",
    ToolErrorType.INTERNAL: "Internal Error",
    ToolErrorType.TIMEOUT: "Timeout",
    ToolErrorType.RATE_LIMIT: "Rate Limit",
    ToolErrorType.NOT_FOUND: "Not Found",
    ToolErrorType.PERMISSION_DENIED: "Permission Denied",
    ToolErrorType.UNKNOWN: "Unknown Error",
}


# =============================================================================
# ToolError
# =============================================================================


class ToolError(BaseModel):
    """
    Structured detail for a failed execution.

    Attributes:
        error_type: Kind of failure.
        message: Error message.
        context: Extra key/value detail (e.g. the offending parameter).
        cause: Underlying cause, typically an exception message.
        retryable: Hint that re-invoking the tool may succeed.
    """

    error_type: ToolErrorType = Field(..., description="Kind of failure")
    message: str = Field(..., description="Error message")
    context: Optional[dict[str, Any]] = Field(default=None, description="Error context")
    cause: Optional[str] = Field(default=None, description="Underlying cause")
    retryable: bool = Field(default=False, description="Whether a retry may succeed")

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    def with_context(self, key: str, value: Any) -> "ToolError":
        """Add a context entry and return self."""
        if self.context is None:
            self.context = {}
        self.context[key] = value
        return self

    def with_cause(self, cause: str) -> "ToolError":
        """Set the underlying cause and return self."""
        self.cause = cause
        return self

    def mark_retryable(self) -> "ToolError":
        """Mark the error as retryable and return self."""
        self.retryable = True
        return self


# =============================================================================
# ToolResult
# =============================================================================


class ToolResult(BaseModel):
    """
    Outcome of one tool execution.

    Use the factory class methods rather than the constructor so that the
    status/data/error combination is always consistent.

    Attributes:
        status: success, error or partial.
        data: Result payload (success and partial).
        error: Error message (error).
        error_details: Structured error information.
        started_at: When the execution started.
        completed_at: When the execution completed (None while partial).
        duration: How long the execution took.
        metadata: Extra annotations, e.g. execution_time_ms.

    Example:
        >>> result = ToolResult.success({"temperature": 22.5})
        >>> result.is_success()
        True
    """

    status: ToolResultStatus = Field(..., description="Execution status")
    data: Optional[Any] = Field(default=None, description="Result payload")
    error: Optional[str] = Field(default=None, description="Error message")
    error_details: Optional[ToolError] = Field(
        default=None, description="Structured error details"
    )
    started_at: datetime = Field(default_factory=_utcnow, description="Start time")
    completed_at: Optional[datetime] = Field(default=None, description="Completion time")
    duration: Optional[timedelta] = Field(default=None, description="Execution duration")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Extra metadata")

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def success(cls, data: Any) -> "ToolResult":
        """
        Create a successful, completed result.

        Raises:
            ValueError: If data is None; a success always carries data.
        """
        if data is None:
            raise ValueError("A successful result must carry data")
        now = _utcnow()
        return cls(
            status=ToolResultStatus.SUCCESS,
            data=data,
            started_at=now,
            completed_at=now,
            duration=timedelta(0),
        )

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        """Create a failed, completed result."""
        return cls.failure_with_details(message, None)

    @classmethod
    def failure_with_details(
        cls, message: str, details: Optional[ToolError]
    ) -> "ToolResult":
        """Create a failed, completed result with structured detail."""
        now = _utcnow()
        return cls(
            status=ToolResultStatus.ERROR,
            error=message,
            error_details=details,
            started_at=now,
            completed_at=now,
            duration=timedelta(0),
        )

    @classmethod
    def partial(cls, data: Any) -> "ToolResult":
        """Create a partial result that has not completed yet."""
        return cls(status=ToolResultStatus.PARTIAL, data=data, started_at=_utcnow())

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def complete(self) -> "ToolResult":
        """
        Mark the result completed, compute its duration and return self.

        A partial result is promoted to success, which requires data.

        Raises:
            ValueError: If a partial result without data is completed.
        """
        if self.status is ToolResultStatus.PARTIAL and self.data is None:
            raise ValueError("A partial result needs data before it can complete")
        now = _utcnow()
        self.completed_at = now
        if now >= self.started_at:
            self.duration = now - self.started_at
        if self.status is ToolResultStatus.PARTIAL:
            self.status = ToolResultStatus.SUCCESS
        return self

    def with_metadata(self, key: str, value: Any) -> "ToolResult":
        """Add a metadata entry without touching status or data; returns self."""
        self.metadata[key] = value
        return self

    # =========================================================================
    # Accessors
    # =========================================================================

    def is_success(self) -> bool:
        return self.status is ToolResultStatus.SUCCESS

    def is_error(self) -> bool:
        return self.status is ToolResultStatus.ERROR

    def is_partial(self) -> bool:
        return self.status is ToolResultStatus.PARTIAL

    @property
    def duration_ms(self) -> Optional[int]:
        """Duration in whole milliseconds, if known."""
        if self.duration is None:
            return None
        return int(self.duration.total_seconds() * 1000)

    # =========================================================================
    # Serialization
    # =========================================================================

    @field_serializer("duration", when_used="json-unless-none")
    def serialize_duration(self, duration: timedelta) -> float:
        return duration.total_seconds()

    def to_document(self) -> dict[str, Any]:
        """
        Render the result document for a conversation layer.

        Returns:
            JSON-compatible dict with camelCase keys; absent fields omitted.
        """
        document = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        document.setdefault("metadata", {})
        return document

    def __str__(self) -> str:
        if self.status is ToolResultStatus.SUCCESS:
            return f"Success: {self.data}" if self.data is not None else "Success"
        if self.status is ToolResultStatus.ERROR:
            return f"Error: {self.error or 'Unknown error'}"
        return f"Partial: {self.data}" if self.data is not None else "Partial result"
