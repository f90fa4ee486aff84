"""Error Hierarchy — typed, categorized failures for the booking API.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (4xx) are expected outcomes; infrastructure errors (5xx) are critical
    - to_response() produces the single REST error envelope used by every endpoint
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with BookingError base: one FastAPI handler renders all of them
    - Handlers return these errors inside PreconditionFailed instead of raising them;
      only the API layer raises, so the exception handlers stay the one renderer
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    request_type: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class BookingError(Exception):
    """Base exception for all booking API errors."""

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

    def details(self) -> list[dict] | None:
        """Field-level details, when the error carries any."""
        return None

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        body = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "context": {
                "request_type": self.context.request_type,
                "resource_id": self.context.resource_id,
            },
        }
        details = self.details()
        if details is not None:
            body["details"] = details
        return {"error": body}


# ─── Domain Errors (4xx) ────────────────────────────────────────

class RequestValidationFailedError(BookingError):
    """One or more required fields are missing or empty."""
    def __init__(self, violations: list, context: ErrorContext | None = None):
        super().__init__(
            "Invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.violations = list(violations)

    def details(self) -> list[dict]:
        return [
            {"field": v.field, "message": v.message, "type": v.kind}
            for v in self.violations
        ]


class AirportAlreadyExistError(BookingError):
    """A live airport already owns the requested code."""
    def __init__(self, code: str, context: ErrorContext | None = None):
        super().__init__(
            f"Airport with code '{code}' already exists",
            "AIRPORT_ALREADY_EXISTS", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.airport_code = code


class AirportIdConflictError(BookingError):
    """The requested airport id is already taken by another airport row."""
    def __init__(self, airport_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_id = airport_id
        super().__init__(
            f"Airport with id '{airport_id}' already exists",
            "AIRPORT_ID_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.airport_id = airport_id


class ResourceNotFoundError(BookingError):
    """Requested resource does not exist (or is soft-deleted)."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            f"{resource_type.upper()}_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type


class AirportNotFoundError(ResourceNotFoundError):
    def __init__(self, airport_id: str, context: ErrorContext | None = None):
        super().__init__("Airport", airport_id, context)


class PassengerNotFoundError(ResourceNotFoundError):
    def __init__(self, passenger_id: str, context: ErrorContext | None = None):
        super().__init__("Passenger", passenger_id, context)


class AuthenticationError(BookingError):
    """Caller did not present a valid bearer token."""
    def __init__(self, message: str = "Authentication required", context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


# ─── Infrastructure Errors (5xx) ────────────────────────────────

class DatabaseError(BookingError):
    """Database operation failed. Rendered like any unexpected fault: generic 500.

    The operation and driver detail go to debug_info, which is logged and
    never included in to_response().
    """
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"operation": operation, "detail": message}
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
        self.detail = message


class RequestTimeoutError(BookingError):
    """Pipeline did not finish within the configured request timeout."""
    def __init__(self, request_type: str, timeout_seconds: float):
        super().__init__(
            f"{request_type} did not complete within {timeout_seconds:g}s",
            "REQUEST_TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.CRITICAL, ErrorContext(request_type=request_type), 504,
        )
        self.timeout_seconds = timeout_seconds


class UnknownRequestError(BookingError):
    """No handler registered for the request type."""
    def __init__(self, request_type: str):
        super().__init__(
            f"No handler registered for {request_type}",
            "UNKNOWN_REQUEST", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ErrorContext(request_type=request_type), 500,
        )
