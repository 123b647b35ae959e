"""Pydantic Schemas — request/response validation for the Facility boundary.

Invariants:
    - Schemas validate at system boundary (caller input, API responses)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
