"""Clock: the single boundary through which wall-clock time enters the core.

Invariants:
    - Core functions never call datetime.now() directly; they receive a Clock
    - SystemClock renders UTC as "YYYY-MM-DD HH:MM:SS.ffffff UTC"

Design Decisions:
    - Protocol over ABC: any zero-arg callable object returning str qualifies
"""

from datetime import datetime, timezone
from typing import Protocol

from pulse_ledger.core.domain_types import Timestamp

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f UTC"


class Clock(Protocol):
    """Source of block timestamps."""
    def __call__(self) -> Timestamp: ...


class SystemClock:
    """Wall-clock UTC timestamps."""

    def __call__(self) -> Timestamp:
        return Timestamp(datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT))
