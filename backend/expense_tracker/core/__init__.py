"""Core Layer - pure domain logic and boundary contracts, no IO, no driver calls.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/ or repositories/
    - Filter and pipeline builders are pure and deterministic
"""
