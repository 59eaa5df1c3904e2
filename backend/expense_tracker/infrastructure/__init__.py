"""Infrastructure Layer - storage connection and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver failures are mapped to core/errors.py types
"""
