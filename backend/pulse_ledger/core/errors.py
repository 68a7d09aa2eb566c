"""Error Hierarchy: typed, categorized exceptions for ledger boundary failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - The core never raises these for validation: a rejected candidate is a value (Rejected)
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with LedgerError base: one FastAPI handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging
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
    CONFLICT = "conflict"
    SERIALIZATION = "serialization"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    block_index: int | None = None
    reason: str | None = None
    block: dict[str, Any] | None = None
    debug_info: dict[str, Any] | None = None


class LedgerError(Exception):
    """Base exception for all Pulse Ledger errors."""

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
                    "block_index": self.context.block_index,
                    "reason": self.context.reason,
                    "block": self.context.block,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class BlockRejectedError(LedgerError):
    """Candidate block failed linkage validation and was discarded."""
    def __init__(self, block: dict, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.block_index = block.get("index")
        ctx.reason = reason
        ctx.block = block
        super().__init__(
            f"Block {block.get('index')} rejected: {reason}",
            "BLOCK_REJECTED", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.reason = reason


class InvalidPayloadError(LedgerError):
    """Append body could not be decoded into an integer payload."""
    def __init__(self, details: list[dict[str, str]], context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"details": details}
        fields = sorted({d["field"] for d in details}) or ["body"]
        super().__init__(
            f"Invalid append request: {', '.join(fields)}",
            "INVALID_PAYLOAD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        """Ledger envelope plus field-level details; no block context applies."""
        response = super().to_response()
        response["error"].pop("context")
        response["error"]["details"] = self.details
        return response


# ─── Infrastructure Errors (500-level) ──────────────────────────

class SerializationError(LedgerError):
    """A block or snapshot could not be rendered to JSON."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Serialization failed: {message}",
            "SERIALIZATION_ERROR", ErrorCategory.SERIALIZATION,
            ErrorSeverity.CRITICAL, context, 500,
        )


class LedgerNotInitializedError(LedgerError):
    """Ledger handle requested before startup created it."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Ledger not initialized",
            "LEDGER_NOT_INITIALIZED", ErrorCategory.UNAVAILABLE,
            ErrorSeverity.CRITICAL, context, 503,
        )
