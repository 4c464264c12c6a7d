"""Error Taxonomy — returned outcomes for caller errors, raised exceptions for infrastructure.

Invariants:
    - ValidationError and NotFound are VALUES returned by store operations,
      never raised; a returned outcome means no mutation happened
    - RentStoreError subclasses are RAISED and only for infrastructure failures
    - Both render the same REST envelope via to_response()
    - No internal details leaked in caller-facing messages

Design Decisions:
    - Outcomes as frozen dataclasses: the route layer maps them with isinstance()
      and can never mutate them
    - No conflict outcome: put() overwrites by id, and the rare id collision
      on create surfaces as DatabaseError
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar


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


def _envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    **details: object,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **details,
        }
    }


# ─── Returned outcomes (400-level) ───────────────────────────────

@dataclass(frozen=True)
class ValidationError:
    """Bad, missing or out-of-range input. No mutation was performed."""
    field: str
    reason: str

    code: ClassVar[str] = "VALIDATION_ERROR"
    http_status: ClassVar[int] = 400

    @property
    def message(self) -> str:
        return f"{self.field}: {self.reason}"

    def to_response(self) -> dict:
        return _envelope(
            self.code, self.message,
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            field=self.field,
        )


@dataclass(frozen=True)
class NotFound:
    """Lookup, update or delete on an absent id."""
    entity: str
    id: str

    code: ClassVar[str] = "RESOURCE_NOT_FOUND"
    http_status: ClassVar[int] = 404

    @property
    def message(self) -> str:
        return f"{self.entity} '{self.id}' not found"

    def to_response(self) -> dict:
        return _envelope(
            self.code, self.message,
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.ERROR,
        )


# ─── Raised exceptions (500-level) ───────────────────────────────

class RentStoreError(Exception):
    """Base exception for all record-store infrastructure failures."""

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
        return _envelope(self.code, self.message, self.category, self.severity)


class DatabaseError(RentStoreError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation


class StoreNotInitializedError(RentStoreError):
    """get_store() called before init_store()."""
    def __init__(self):
        super().__init__(
            "Record store not initialized",
            "STORE_NOT_INITIALIZED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )
