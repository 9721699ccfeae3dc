"""Error Hierarchy: typed, categorized exceptions for every expected Roster failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors carry the exact user-facing message; it is sent verbatim on the wire
    - Anything that is not a RosterError is an internal fault and is never shown to clients

Design Decisions:
    - Single hierarchy with RosterError base: one FastAPI handler maps all of them
      (ADR: uniform error shape)
    - InvalidTokenError is built by the token stage and rendered directly, it never
      propagates through the stack (the stage short-circuits instead)
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHENTICATION = "authentication"
    INTERNAL = "internal"


# Fixed body for contained faults. Never varies with the fault.
INTERNAL_ERROR_BODY = {"error": "Internal server error."}


class RosterError(Exception):
    """Base exception for all expected Roster errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> str:
        """Wire body: the message itself, serialized as a JSON string."""
        return self.message


# ─── Client Errors (400-level) ──────────────────────────────────

class UserValidationError(RosterError):
    """Client-supplied user data violates a field or uniqueness rule."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class UserNotFoundError(RosterError):
    """Referenced user id does not exist."""
    def __init__(self, user_id: int, message: str = "User not found"):
        super().__init__(
            message, "USER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.user_id = user_id


class InvalidTokenError(RosterError):
    """Missing, malformed or rejected bearer token."""

    MISSING = "Unauthorized: Missing or invalid token."
    REJECTED = "Unauthorized: Token validation failed."

    def __init__(self, message: str):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, 401,
        )
