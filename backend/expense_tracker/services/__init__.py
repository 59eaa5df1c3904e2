"""Services - per-entity orchestrators between routes and repositories.

Invariants:
    - IDs and query parameters are parsed before any repository call
    - Zero matched documents on get/update/delete raise ResourceNotFoundError
"""
