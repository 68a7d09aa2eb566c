"""Health & Readiness Checks: liveness and readiness endpoints.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the ledger is missing or fails its audit
    - Readiness is a sync handler: the audit runs in the threadpool, off the event loop
"""

import logging

from fastapi import APIRouter, status

from pulse_ledger.api.responses import render_json
from pulse_ledger.infrastructure import ledger_handle as handle_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "pulse-ledger-api"
SERVICE_VERSION = "1.0.0"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return render_json({
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    })


@router.get("/ready")
def readiness_check():
    """Readiness check: ledger initialized and chain sound."""
    ledger = handle_module.ledger_handle
    if ledger is None:
        return render_json(
            {"status": "not_ready", "reason": "ledger_uninitialized"},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    first_invalid, length = ledger.verify()
    if first_invalid is not None:
        logger.error(
            "Readiness check found a broken chain",
            extra={"block_index": first_invalid, "chain_length": length},
        )
        return render_json(
            {"status": "not_ready", "reason": "chain_invalid"},
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return render_json(
        {"status": "ready", "checks": {"ledger": "healthy", "length": length}},
    )
