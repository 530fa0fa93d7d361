"""Error Hierarchy: typed, categorized exceptions for all Lofty API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the failure envelope body (responseObject always null)
    - No internal details leaked in user-facing messages

Design Decisions:
    - Storage raises typed errors (DuplicateRecordError) instead of free-text
      exceptions, so services classify failures by type, never by substring
    - Single hierarchy with LoftyError base: FastAPI global handler catches all
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone

from lofty_api.core.service_response import ServiceResponse, failure


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    STORAGE = "storage"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    record_id: int | None = None


class LoftyError(Exception):
    """Base exception for all Lofty API errors."""

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

    def to_envelope(self) -> ServiceResponse:
        """Failure envelope carrying this error's message and status."""
        return failure(self.message, status_code=self.http_status)

    def to_response(self) -> dict:
        """Convert to the failure envelope body."""
        return self.to_envelope().to_body()


# ─── Domain Errors (400-level) ──────────────────────────────────

class RecordNotFoundError(LoftyError):
    """Requested record does not exist."""
    def __init__(self, resource: str, record_id: int | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource = resource
        ctx.record_id = record_id
        super().__init__(
            f"{resource} not found",
            "RECORD_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


class DuplicateRecordError(LoftyError):
    """A unique field collides (case-insensitively) with an existing record."""
    def __init__(self, resource: str, field: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource = resource
        super().__init__(
            f"{resource} with this {field} already exists",
            "DUPLICATE_RECORD", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.field = field


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(LoftyError):
    """Storage operation failed unexpectedly."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
