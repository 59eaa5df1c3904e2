"""API Layer - FastAPI routes, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every endpoint answers with the {code, data, message, success} envelope

Design Decisions:
    - Thin routes delegate to services/ (orchestrators own ID parsing and lookups)
"""
