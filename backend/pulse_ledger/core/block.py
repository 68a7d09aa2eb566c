"""Block & Hasher: immutable ledger entry and its deterministic digest.

Invariants:
    - Block is frozen: hash is sealed at construction and never recomputed
    - calculate_hash is pure: same (index, timestamp, payload, prev_hash) → same digest
    - Record layout is str(index) + timestamp + str(payload) + prev_hash, SHA-256, lowercase hex

Design Decisions:
    - Frozen dataclass over pydantic model: the core stays free of boundary libraries
    - dataclasses.replace() is the only way to derive a modified block (tests use it to tamper)
"""

import hashlib
from dataclasses import asdict, dataclass

from pulse_ledger.core.domain_types import BlockIndex, Digest, Timestamp


@dataclass(frozen=True)
class Block:
    """One hash-sealed entry in the ledger."""
    index: BlockIndex
    timestamp: Timestamp
    payload: int
    hash: Digest
    prev_hash: Digest

    def to_dict(self) -> dict:
        """JSON-safe dict with the five wire fields."""
        return asdict(self)


def calculate_hash(
    index: int, timestamp: str, payload: int, prev_hash: str,
) -> Digest:
    """SHA-256 digest of a block's content fields."""
    record = f"{index}{timestamp}{payload}{prev_hash}"
    return Digest(hashlib.sha256(record.encode("utf-8")).hexdigest())


def hash_block(block: Block) -> Digest:
    """Recompute the digest of an existing block (ignores block.hash)."""
    return calculate_hash(
        block.index, block.timestamp, block.payload, block.prev_hash,
    )


def seal_block(
    index: int, timestamp: str, payload: int, prev_hash: str,
) -> Block:
    """Build a block and seal it with its digest."""
    return Block(
        index=BlockIndex(index),
        timestamp=Timestamp(timestamp),
        payload=payload,
        hash=calculate_hash(index, timestamp, payload, prev_hash),
        prev_hash=Digest(prev_hash),
    )
