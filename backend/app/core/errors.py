"""Error Hierarchy — typed, categorized exceptions for all Exercise Tracker failure modes.

Invariants:
    - Every error has a message (str), code (str), category, severity and http_status
    - Client errors (400-level) are recoverable; storage errors (500-level) are critical
    - to_response() produces the uniform REST envelope {success, status, message}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ExerciseTrackerError base: one global handler catches all
      (ADR: uniform error shape)
    - DuplicateKeyError subclasses DatabaseError: the store reports it, but the user
      service needs to tell it apart from connection failures
"""

from enum import Enum


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
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


class ExerciseTrackerError(Exception):
    """Base exception for all Exercise Tracker errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "success": False,
            "status": self.http_status,
            "message": self.message,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InputValidationError(ExerciseTrackerError):
    """Request field failed validation."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class ResourceNotFoundError(ExerciseTrackerError):
    """Requested user or exercise log does not exist."""
    def __init__(self, message: str):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )


class DuplicateUsernameError(ExerciseTrackerError):
    """Username already taken after normalization."""
    def __init__(self, username: str):
        super().__init__(
            "User already exists", "DUPLICATE_USERNAME", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 400,
        )
        self.username = username


class RouteNotFoundError(ExerciseTrackerError):
    """No route matches the requested path."""
    def __init__(self, message: str, status: int = 404):
        super().__init__(
            message, "ROUTE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, status,
        )


# ─── Storage Errors (500-level) ─────────────────────────────────

class DatabaseError(ExerciseTrackerError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str = "unknown"):
        super().__init__(
            message, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation


class DuplicateKeyError(DatabaseError):
    """Unique constraint violated on insert."""
    def __init__(self, field: str, value: str):
        super().__init__(f"Duplicate value for {field}", "insert")
        self.code = "DUPLICATE_KEY"
        self.category = ErrorCategory.CONFLICT
        self.severity = ErrorSeverity.ERROR
        self.http_status = 400
        self.field = field
        self.value = value


class InternalError(ExerciseTrackerError):
    """Unexpected failure inside an operation, reported with its own message."""
    def __init__(self, message: str):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )
