"""Ledger: ordered, append-only sequence of blocks with validated append.

Invariants:
    - Never empty: genesis is created in __init__
    - append either commits exactly one block or changes nothing
    - snapshot returns an immutable copy; callers cannot reach the internal list
    - Not thread-safe on its own: concurrent callers go through SharedLedger

Design Decisions:
    - Plain class over dataclass: the block list is private and never reassigned
"""

from pulse_ledger.core.append_result import AppendResult, Committed, Rejected
from pulse_ledger.core.block import Block
from pulse_ledger.core.chain_rules import (
    check_linkage, create_genesis, generate_candidate, verify_chain,
)
from pulse_ledger.core.clock import Clock, SystemClock


class Ledger:
    """In-memory hash-linked chain rooted at a genesis block."""

    def __init__(self, clock: Clock | None = None, genesis_payload: int = 0):
        self._clock = clock or SystemClock()
        self._blocks: list[Block] = [create_genesis(self._clock, genesis_payload)]

    def __len__(self) -> int:
        return len(self._blocks)

    @property
    def genesis(self) -> Block:
        return self._blocks[0]

    @property
    def tail(self) -> Block:
        return self._blocks[-1]

    def snapshot(self) -> tuple[Block, ...]:
        return tuple(self._blocks)

    def append(self, payload: int) -> AppendResult:
        """Build a candidate on the current tail, validate, commit if sound."""
        tail = self.tail
        candidate = generate_candidate(tail, payload, self._clock)
        reason = check_linkage(candidate, tail)
        if reason is not None:
            return Rejected(candidate, reason)
        self._blocks.append(candidate)
        return Committed(candidate)

    def verify(self) -> int | None:
        """First unsound position in the chain, None if sound."""
        return verify_chain(self._blocks)
