"""Error Handlers: global exception handlers for the Pulse Ledger API.

Invariants:
    - Every error body is a LedgerError envelope rendered as indented JSON
    - RequestValidationError becomes InvalidPayloadError (400) before the ledger is called
    - Exception (catch-all) → INTERNAL_ERROR, never leaks internal details
    - Log level follows the error's severity

Design Decisions:
    - Validation and unexpected failures are converted into the ledger hierarchy,
      so one renderer produces every error response
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from pulse_ledger.api.responses import PrettyJSONResponse
from pulse_ledger.core.errors import (
    ErrorCategory, ErrorSeverity, InvalidPayloadError, LedgerError,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(LedgerError, _handle_ledger_error)
    app.add_exception_handler(RequestValidationError, _handle_invalid_payload)
    app.add_exception_handler(Exception, _handle_unexpected_error)


def ledger_error_response(request: Request, exc: LedgerError) -> PrettyJSONResponse:
    """Log exc at its severity and render its envelope."""
    logger.log(
        _LOG_LEVELS[exc.severity],
        f"LedgerError: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "block_index": exc.context.block_index,
            "reason": exc.context.reason,
        },
    )
    return PrettyJSONResponse(
        status_code=exc.http_status, content=exc.to_response(),
    )


async def _handle_ledger_error(request: Request, exc: LedgerError):
    return ledger_error_response(request, exc)


async def _handle_invalid_payload(request: Request, exc: RequestValidationError):
    """Malformed append bodies never reach the ledger."""
    return ledger_error_response(
        request, InvalidPayloadError(_field_details(exc)),
    )


async def _handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
    )
    internal = LedgerError(
        "An unexpected error occurred", "INTERNAL_ERROR",
        ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, http_status=500,
    )
    return PrettyJSONResponse(
        status_code=internal.http_status, content=internal.to_response(),
    )


def _field_details(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors; the leading "body" location is dropped."""
    details = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"]]
        if loc and loc[0] == "body":
            loc = loc[1:]
        details.append({
            "field": ".".join(loc) or "body",
            "message": e["msg"],
            "type": e["type"],
        })
    return details
