"""Shared Ledger Handle: lock-guarded access to the process-wide Ledger.

Invariants:
    - One threading.Lock guards every read and every append on the Ledger
    - Critical sections are O(1) work or a reference copy; full-chain audits run outside
    - append holds the lock across read-tail → build candidate → validate → commit
    - Nothing inside the lock does IO; logging happens after release
    - The lock is never taken re-entrantly

Design Decisions:
    - threading.Lock over asyncio.Lock: FastAPI may run handlers in a threadpool,
      and every critical section is short and CPU-bound
    - Singleton ledger_handle initialized on startup: FastAPI lifespan manages lifecycle
      (no global import side effects)
"""

import logging
import threading

from pulse_ledger.core.append_result import AppendResult
from pulse_ledger.core.block import Block
from pulse_ledger.core.chain_rules import verify_chain
from pulse_ledger.core.clock import Clock
from pulse_ledger.core.errors import LedgerNotInitializedError
from pulse_ledger.core.ledger import Ledger

logger = logging.getLogger(__name__)


class SharedLedger:
    """Thread-safe wrapper granting exclusive mutation and consistent reads."""

    def __init__(self, ledger: Ledger):
        self._ledger = ledger
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._ledger)

    def snapshot(self) -> tuple[Block, ...]:
        with self._lock:
            return self._ledger.snapshot()

    def tail(self) -> Block:
        with self._lock:
            return self._ledger.tail

    def append(self, payload: int) -> AppendResult:
        """Append atomically with respect to every other append and read."""
        with self._lock:
            result = self._ledger.append(payload)
            length = len(self._ledger)

        block = result.block
        if result.committed:
            logger.info(
                f"Committed block {block.index}",
                extra={
                    "block_index": block.index, "block_hash": block.hash,
                    "prev_hash": block.prev_hash, "chain_length": length,
                    "outcome": result.outcome.value,
                },
            )
        else:
            logger.warning(
                f"Rejected candidate block {block.index}: {result.reason.value}",
                extra={
                    "block_index": block.index, "block_hash": block.hash,
                    "reason": result.reason.value, "chain_length": length,
                    "outcome": result.outcome.value,
                },
            )
        return result

    def verify(self) -> tuple[int | None, int]:
        """(first unsound position or None, chain length) from one consistent read.

        Only the copy happens under the lock; rehashing runs on the immutable
        snapshot so appends never wait on an audit.
        """
        blocks = self.snapshot()
        return verify_chain(blocks), len(blocks)


# Singleton (initialized on startup)
ledger_handle: SharedLedger | None = None


def init_ledger(clock: Clock | None = None, genesis_payload: int = 0) -> SharedLedger:
    """Create a fresh ledger with a single genesis block and install it."""
    global ledger_handle
    ledger = Ledger(clock=clock, genesis_payload=genesis_payload)
    genesis = ledger.genesis
    logger.info(
        "Ledger initialized with genesis block",
        extra={"block_index": genesis.index, "block_hash": genesis.hash},
    )
    ledger_handle = SharedLedger(ledger)
    return ledger_handle


def get_ledger() -> SharedLedger:
    """FastAPI dependency for the shared ledger."""
    if ledger_handle is None:
        raise LedgerNotInitializedError()
    return ledger_handle
