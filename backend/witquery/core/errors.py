"""Error Hierarchy — typed, categorized exceptions for witquery failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Filtering and sorting never raise; only external calls and request validation do
    - ExternalServiceError subclasses are propagated unchanged by the services layer
    - to_response() produces the REST envelope; no internal details leaked in messages

Design Decisions:
    - Single hierarchy with WitQueryError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
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
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    work_item_id: int | None = None
    collection: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class WitQueryError(Exception):
    """Base exception for all witquery errors."""

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
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "work_item_id": self.context.work_item_id,
                    "collection": self.context.collection,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class QueryValidationError(WitQueryError):
    """Request for a related-work-item query is malformed."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ConcurrencyError(WitQueryError):
    """Document was modified by someone else (etag mismatch)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONCURRENCY_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


# ─── External Service Errors (500-level) ────────────────────────

class ExternalServiceError(WitQueryError):
    """A call to an external collaborator failed."""
    def __init__(
        self,
        message: str,
        service: str,
        code: str = "EXTERNAL_SERVICE_ERROR",
        category: ErrorCategory = ErrorCategory.EXTERNAL_API,
        context: ErrorContext | None = None,
        http_status: int = 502,
    ):
        super().__init__(
            f"{service} error: {message}", code, category,
            ErrorSeverity.CRITICAL, context, http_status,
        )
        self.service = service


class FormServiceError(ExternalServiceError):
    """Work item form service call failed."""
    def __init__(
        self, message: str, operation: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{operation} failed: {message}", "work item form service",
            "FORM_SERVICE_ERROR", context=context,
        )
        self.operation = operation


class DocumentStoreError(ExternalServiceError):
    """Document store read or write failed."""
    def __init__(
        self,
        message: str,
        operation: str,
        code: str = "DOCUMENT_STORE_ERROR",
        category: ErrorCategory = ErrorCategory.EXTERNAL_API,
        context: ErrorContext | None = None,
        http_status: int = 502,
    ):
        super().__init__(
            f"{operation} failed: {message}", "document store",
            code, category, context, http_status,
        )
        self.operation = operation


class DatabaseError(DocumentStoreError):
    """Database operation behind the SQL document store failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            message, operation, "DATABASE_ERROR", ErrorCategory.DATABASE,
            context, 503,
        )
