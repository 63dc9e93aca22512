"""Error Hierarchy - typed, categorized exceptions for every resolution failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Exactly two failure kinds leave the resolver: NoAvailableMembersError
      (generated by the core) and InventoryUnavailableError (generated by
      accessors, passed through unchanged)
    - to_dict() produces a flat, JSON-serializable envelope for log/status sinks

Design Decisions:
    - Single hierarchy with NodeRefsError base: the outer loop can catch one type
      and branch on code to pick its remediation (retry fetch vs. wait for registration)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    cluster: str | None = None
    backend: str | None = None
    requested_count: int | None = None


class NodeRefsError(Exception):
    """Base exception for all node reference resolution errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "cluster": self.context.cluster,
                    "backend": self.context.backend,
                    "requested_count": self.context.requested_count,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class NoAvailableMembersError(NodeRefsError):
    """None of the requested provider IDs matched a registered member."""
    def __init__(self, requested_count: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.requested_count = requested_count
        super().__init__(
            f"Cannot find any registered members for {requested_count} "
            "requested provider ID(s)",
            "NO_AVAILABLE_MEMBERS", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx,
        )


# ─── Infrastructure Errors ──────────────────────────────────────

class InventoryUnavailableError(NodeRefsError):
    """Bulk member listing failed; the resolver never generates this itself."""
    def __init__(
        self,
        message: str,
        operation: str,
        category: ErrorCategory = ErrorCategory.EXTERNAL_API,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Member inventory {operation} failed: {message}",
            "INVENTORY_UNAVAILABLE", category,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
