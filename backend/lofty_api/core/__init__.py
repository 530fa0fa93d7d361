"""Core Layer: envelope, errors, record types and storage contracts.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - No IO: everything here is importable and testable in isolation
"""
