"""Services Layer: one service per resource, each returning ServiceResponse envelopes.

Invariants:
    - Services depend on repository Protocols, never on a concrete store
"""
