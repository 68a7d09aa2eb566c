"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - BlockIndex is non-negative; genesis is BlockIndex(0)
    - Digest is 64 lowercase hex chars (SHA-256)
    - All rejection causes encoded as Enums: no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

BlockIndex = NewType("BlockIndex", int)
Digest = NewType("Digest", str)
Timestamp = NewType("Timestamp", str)

GENESIS_INDEX = BlockIndex(0)
GENESIS_PREV_HASH = Digest("")


# ─── Enums ───────────────────────────────────────────────────────

class RejectionReason(str, Enum):
    """Why a candidate failed validation, in check order."""
    INDEX_MISMATCH = "index_mismatch"
    PREV_HASH_MISMATCH = "prev_hash_mismatch"
    HASH_MISMATCH = "hash_mismatch"


class AppendOutcome(str, Enum):
    """Observable result of an append."""
    COMMITTED = "committed"
    REJECTED = "rejected"
