"""Service Helpers - shared not-found and empty-patch checks."""

from typing import TypeVar

from pydantic import BaseModel

from expense_tracker.core.errors import InvalidArgumentError, ResourceNotFoundError

T = TypeVar("T")


def require_found(document: T | None, resource: str, resource_id: object) -> T:
    if document is None:
        raise ResourceNotFoundError(resource, str(resource_id))
    return document


def require_affected(count: int, resource: str, resource_id: object) -> int:
    """Zero modified/deleted documents means the filter matched nothing."""
    if count == 0:
        raise ResourceNotFoundError(resource, str(resource_id))
    return count


def patch_from(body: BaseModel) -> dict:
    """Fields explicitly provided in an update body; rejects an empty update."""
    patch = body.model_dump(exclude_none=True, mode="json")
    if not patch:
        raise InvalidArgumentError("no fields to update", "body")
    return patch
