"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary, before any storage call
    - Domain enums from core/domain_types.py used for role and status fields
"""
