"""Error Hierarchy — typed, categorized exceptions for every request failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/409) render as status "failed"; server errors (500) as status "error"
    - to_response() produces the wire envelope — message only, no internal detail

Design Decisions:
    - Single hierarchy with CoachHubError base: one global handler catches all (ADR: uniform error shape)
    - Missing referenced entities are 400, not 404: the admin panel treats them as bad input
    - ErrorContext as dataclass: log-side detail (fields, ids) kept off the wire
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from app.core import messages
from app.core.domain_types import ResponseStatus


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories, mirrors the failure taxonomy."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    BUSINESS_RULE = "business_rule"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Log-only context for error observability."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None
    fields: list[str] | None = None
    debug_info: dict[str, Any] | None = None


class CoachHubError(Exception):
    """Base exception for all CoachHub errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        context: ErrorContext | None = None,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def response_status(self) -> ResponseStatus:
        if self.http_status >= 500:
            return ResponseStatus.ERROR
        return ResponseStatus.FAILED

    def to_response(self) -> dict:
        """Convert to the standard response envelope."""
        return {
            "status": self.response_status.value,
            "message": self.message,
        }


# ─── Client Errors (400/409) ────────────────────────────────────

class FieldValidationError(CoachHubError):
    """Request fields missing or malformed."""
    def __init__(self, fields: list[str], context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.fields = list(fields)
        super().__init__(
            messages.INVALID_FIELDS, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.fields = list(fields)


class InvalidIdError(CoachHubError):
    """Path identifier malformed or matching no row."""
    def __init__(self, resource_type: str, resource_id: str | None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            messages.INVALID_ID, "INVALID_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )


class ConflictError(CoachHubError):
    """Unique field already taken."""
    def __init__(self, resource_type: str, field_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.fields = [field_name]
        super().__init__(
            messages.DUPLICATE, "DUPLICATE", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )


class ResourceNotFoundError(CoachHubError):
    """Referenced or targeted entity does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, message: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 400,
        )


class BusinessRuleError(CoachHubError):
    """Entity exists but is in the wrong state for the operation."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Server Errors (500) ────────────────────────────────────────

class DatabaseError(CoachHubError):
    """Database operation failed. Client only ever sees the generic message."""
    def __init__(self, detail: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"detail": detail, "operation": operation}
        super().__init__(
            messages.SERVER_ERROR, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
        self.detail = detail
