"""Core Layer: pure ledger logic, no IO, no async, no locks.

Invariants:
    - No module in core/ imports from api/, schemas/, or infrastructure/
    - Functions are deterministic given their inputs (time enters only via Clock)

Design Decisions:
    - Functional core, imperative shell: locking and logging live in infrastructure/
"""
