"""Error Hierarchy — typed, categorized exceptions for all Flashdeck failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400/401/404) are recoverable; upstream errors are 500
    - to_response() produces the REST error envelope
    - UnauthorizedError carries one fixed message whatever the cause

Design Decisions:
    - Single hierarchy with FlashdeckError base: one FastAPI handler catches all
    - Upstream messages (database, model) are surfaced verbatim, undiscriminated
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
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    table: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class FlashdeckError(Exception):
    """Base exception for all Flashdeck errors."""

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
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class InvalidRequestError(FlashdeckError):
    """Request body or path failed shape validation."""
    def __init__(self, message: str, field: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field

    def to_response(self) -> dict:
        response = super().to_response()
        if self.field:
            response["error"]["field"] = self.field
        return response


class UnauthorizedError(FlashdeckError):
    """Credential missing, malformed, or rejected. Never says which."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Unauthorized", "UNAUTHORIZED", ErrorCategory.UNAUTHORIZED,
            ErrorSeverity.WARNING, context, 401,
        )


class ResourceNotFoundError(FlashdeckError):
    """Update or delete matched zero rows."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Upstream Errors (500-level) ────────────────────────────────

class DatabaseError(FlashdeckError):
    """Database service returned an error."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            message, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation


class ModelAPIError(FlashdeckError):
    """Model service call failed."""
    def __init__(
        self, message: str, api_error_type: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Model API error ({api_error_type}): {message}",
            "MODEL_API_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.api_error_type = api_error_type


class InvalidModelOutputError(FlashdeckError):
    """Model answered with text that is not valid JSON."""
    def __init__(self, raw: str, context: ErrorContext | None = None):
        super().__init__(
            "AI returned invalid JSON", "INVALID_MODEL_OUTPUT",
            ErrorCategory.EXTERNAL_API, ErrorSeverity.CRITICAL, context, 500,
        )
        self.raw = raw

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["raw"] = self.raw
        return response
