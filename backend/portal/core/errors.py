"""Error Hierarchy: typed, categorized exceptions for all portal failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the {success, message} envelope the frontend reads
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PortalError base: FastAPI global handler catches all
    - Schema validation is NOT part of this hierarchy: pydantic owns it and the
      400 handler formats it (see api/error_handlers.py)
    - ResourceNotFoundError keeps its 404 status for callers outside the routes;
      the routes collapse it into OperationError like any other failure
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    OPERATION = "operation"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class PortalError(Exception):
    """Base exception for all portal errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "success": False,
            "message": self.message,
            "code": self.code,
        }


class OperationError(PortalError):
    """A route could not complete its storage call. Message is client-safe and static."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "OPERATION_FAILED", ErrorCategory.OPERATION,
            ErrorSeverity.ERROR, context, 500,
        )


class ResourceNotFoundError(PortalError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type


class StorageError(PortalError):
    """The relational store rejected a read or write."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
