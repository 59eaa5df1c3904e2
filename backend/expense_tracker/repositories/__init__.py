"""Repositories - collection-scoped CRUD and the project details aggregation.

Invariants:
    - Every repository talks to exactly one collection through the shared database handle
    - Driver errors surface as DatabaseError, never as process exits
"""
