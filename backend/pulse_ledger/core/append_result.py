"""Append Result: tagged outcome of Ledger.append.

Invariants:
    - Both variants carry the candidate block (committed or not)
    - Only Rejected carries a reason; `committed` is the sole discriminator callers need
"""

from dataclasses import dataclass

from pulse_ledger.core.block import Block
from pulse_ledger.core.domain_types import AppendOutcome, RejectionReason


@dataclass(frozen=True)
class Committed:
    """Candidate became the new tail."""
    block: Block

    committed = True
    outcome = AppendOutcome.COMMITTED


@dataclass(frozen=True)
class Rejected:
    """Candidate failed validation; ledger unchanged."""
    block: Block
    reason: RejectionReason

    committed = False
    outcome = AppendOutcome.REJECTED


AppendResult = Committed | Rejected
