"""Error Hierarchy - typed, categorized exceptions for every collection failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; store errors (500-level) are critical
    - to_response() produces the REST envelope used by every error handler
    - Exactly one of GameValidationError / ResourceNotFoundError / DatabaseError
      surfaces from a failed mutation

Design Decisions:
    - Single hierarchy with GameCollectionError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    game_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


@dataclass(frozen=True)
class FieldViolation:
    """One field-level validation failure."""
    field: str
    message: str
    type: str = "value_error"

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message, "type": self.type}


class GameCollectionError(Exception):
    """Base exception for all collection errors."""

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
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "game_id": self.context.game_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class GameValidationError(GameCollectionError):
    """Create/update payload violates the record invariants."""
    def __init__(
        self,
        violations: list[FieldViolation],
        context: ErrorContext | None = None,
    ):
        fields = ", ".join(sorted({v.field for v in violations})) or "payload"
        super().__init__(
            f"Invalid game data: {fields}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.violations = violations

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [v.to_dict() for v in self.violations]
        return response


class ResourceNotFoundError(GameCollectionError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.game_id = ctx.game_id or resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(GameCollectionError):
    """Store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation
