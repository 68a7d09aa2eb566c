"""Chain Routes: read the ledger and append new blocks.

Invariants:
    - GET /api/v1/chain returns the full chain as one consistent snapshot
    - POST /api/v1/chain appends exactly once; the body is validated before the ledger sees it
    - A committed append returns 201 with the new block
    - A rejected append returns 409 with the discarded candidate in error.context.block

Design Decisions:
    - Sync handlers: FastAPI runs them in its threadpool, so the handle's
      threading.Lock is what serializes concurrent requests
"""

import logging

from fastapi import APIRouter, Depends, status

from pulse_ledger.api.responses import render_json
from pulse_ledger.core.errors import BlockRejectedError
from pulse_ledger.infrastructure.ledger_handle import SharedLedger, get_ledger
from pulse_ledger.schemas.chain import AppendRequest, BlockResponse, VerifyResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/chain", tags=["chain"])


@router.get("", response_model=list[BlockResponse])
def read_chain(ledger: SharedLedger = Depends(get_ledger)):
    """Full chain, genesis first."""
    blocks = ledger.snapshot()
    return render_json(
        [BlockResponse.from_block(b).model_dump() for b in blocks],
    )


@router.post(
    "", response_model=BlockResponse,
    status_code=status.HTTP_201_CREATED,
)
def append_block(
    body: AppendRequest, ledger: SharedLedger = Depends(get_ledger),
):
    """Append a block carrying body.payload on top of the current tail."""
    result = ledger.append(body.payload)
    block = BlockResponse.from_block(result.block).model_dump()
    if not result.committed:
        raise BlockRejectedError(block, result.reason.value)
    return render_json(block, status_code=status.HTTP_201_CREATED)


@router.get("/tail", response_model=BlockResponse)
def read_tail(ledger: SharedLedger = Depends(get_ledger)):
    """Most recently committed block."""
    return render_json(BlockResponse.from_block(ledger.tail()).model_dump())


@router.get("/verify", response_model=VerifyResponse)
def audit_chain(ledger: SharedLedger = Depends(get_ledger)):
    """Audit every adjacent pair of the current chain."""
    first_invalid, length = ledger.verify()
    if first_invalid is not None:
        logger.error(
            f"Chain audit failed at position {first_invalid}",
            extra={"block_index": first_invalid, "chain_length": length},
        )
    return render_json(VerifyResponse(
        valid=first_invalid is None,
        length=length,
        first_invalid_index=first_invalid,
    ).model_dump())
