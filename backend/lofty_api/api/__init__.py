"""API Layer: FastAPI routes, validation gate and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every endpoint answers with the ServiceResponse envelope (204 excepted)

Design Decisions:
    - Thin routes delegate to services
"""
