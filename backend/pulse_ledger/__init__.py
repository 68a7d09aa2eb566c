"""Pulse Ledger: append-only, hash-linked ledger served over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
