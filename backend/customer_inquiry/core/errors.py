"""Error Taxonomy — error codes, caller-safe messages, and infrastructure exceptions.

Invariants:
    - Every externally visible failure carries a stable code (ErrorCode) and a caller-safe message
    - Validation and not-found are modeled outcomes (core/outcome.py), never raised across the core
    - Only infrastructure faults are exceptions (InquiryError subclasses)
    - to_response() never includes the underlying cause or store-specific text

Design Decisions:
    - Single hierarchy with InquiryError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    TIMEOUT = "timeout"
    INTERNAL = "internal"


class ErrorCode(str, Enum):
    """Stable `error` values of the response payload."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# ─── Caller-safe messages ────────────────────────────────────────

IDENTIFIER_REQUIRED = "identifier required"
IDENTIFIER_NOT_POSITIVE = "identifier must be positive"
IDENTIFIER_TOO_LARGE = "identifier exceeds maximum"
IDENTIFIER_NOT_NUMERIC = "identifier must be numeric"
CUSTOMER_NOT_FOUND = "Customer not found"
UNEXPECTED_ERROR = "An unexpected error occurred"
INVALID_REQUEST = "Invalid request data"


def error_payload(code: ErrorCode, message: str) -> dict:
    """Build the two-key error envelope shared by every failure response."""
    return {"message": message, "error": code.value}


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    request_id: str | None = None
    customer_number: int | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class InquiryError(Exception):
    """Base exception for all infrastructure errors raised below the service boundary."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
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
        """Caller-safe envelope. self.message stays in logs only."""
        return error_payload(self.code, UNEXPECTED_ERROR)


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(InquiryError):
    """Record store operation failed (connectivity, driver, serialization)."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Store {operation} failed: {message}",
            ErrorCode.INTERNAL_ERROR, ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class StoreTimeoutError(StoreError):
    """Record store did not answer within the configured bound."""
    def __init__(self, timeout_seconds: float, context: ErrorContext | None = None):
        super().__init__(
            f"no response after {timeout_seconds}s", "lookup", context,
        )
        self.category = ErrorCategory.TIMEOUT
        self.timeout_seconds = timeout_seconds
