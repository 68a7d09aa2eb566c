"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary; the core never sees raw JSON

Design Decisions:
    - Separate from core/block.py: schemas are API contracts, Block is the domain value
"""
