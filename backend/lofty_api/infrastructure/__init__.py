"""Infrastructure Layer: in-memory storage and logging setup.

Invariants:
    - Storage owns ids and timestamps; nothing above it assigns them
"""
