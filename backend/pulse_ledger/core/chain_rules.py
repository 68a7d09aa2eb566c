"""Chain Rules: pure genesis, candidate construction, linkage validation and audit.

Invariants:
    - generate_candidate never fails and has no side effects
    - check_linkage runs index → prev_hash → content hash, first failure wins
    - is_valid(c, r) is exactly check_linkage(c, r) is None
    - verify_chain reports the first position breaking the adjacent-pair invariant
"""

from typing import Sequence

from pulse_ledger.core.block import Block, hash_block, seal_block
from pulse_ledger.core.clock import Clock
from pulse_ledger.core.domain_types import (
    GENESIS_INDEX, GENESIS_PREV_HASH, RejectionReason,
)


def create_genesis(clock: Clock, payload: int = 0) -> Block:
    """Genesis block: index 0, empty prev_hash, hashed like any other block."""
    return seal_block(GENESIS_INDEX, clock(), payload, GENESIS_PREV_HASH)


def generate_candidate(tail: Block, payload: int, clock: Clock) -> Block:
    """Build the block that would follow tail. Not yet part of any ledger."""
    return seal_block(tail.index + 1, clock(), payload, tail.hash)


def check_linkage(
    candidate: Block, reference: Block,
) -> RejectionReason | None:
    """Return the first failed check, or None when candidate may follow reference."""
    if reference.index + 1 != candidate.index:
        return RejectionReason.INDEX_MISMATCH
    if reference.hash != candidate.prev_hash:
        return RejectionReason.PREV_HASH_MISMATCH
    if hash_block(candidate) != candidate.hash:
        return RejectionReason.HASH_MISMATCH
    return None


def is_valid(candidate: Block, reference: Block) -> bool:
    return check_linkage(candidate, reference) is None


def is_valid_genesis(block: Block) -> bool:
    return (
        block.index == GENESIS_INDEX
        and block.prev_hash == GENESIS_PREV_HASH
        and hash_block(block) == block.hash
    )


def verify_chain(blocks: Sequence[Block]) -> int | None:
    """Position of the first unsound block, or None if the chain is sound.

    An empty sequence is unsound at position 0 (a ledger always has genesis).
    """
    if not blocks or not is_valid_genesis(blocks[0]):
        return 0
    for position in range(1, len(blocks)):
        if not is_valid(blocks[position], blocks[position - 1]):
            return position
    return None
