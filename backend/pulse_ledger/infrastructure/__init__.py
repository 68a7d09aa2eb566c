"""Infrastructure Layer: process-wide ledger handle and cross-cutting concerns.

Invariants:
    - Owns every piece of mutable process state (the shared ledger, logging setup)
"""
