"""Document Models - Pydantic models of the documents stored in MongoDB.

Invariants:
    - Stored key `_id` is exposed as `id` (string) on every model
    - Models describe what is persisted; request contracts live in schemas/

Design Decisions:
    - One file per entity, mirroring the collections
"""
