"""Pydantic Schemas: request validation for path parameters and bodies.

Invariants:
    - Schemas validate at the system boundary, before any service runs

Design Decisions:
    - Separate from core.domain_types: schemas are what clients send, records are what storage owns
"""
