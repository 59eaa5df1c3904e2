"""Mongo Repository - generic CRUD scoped to one collection.

Invariants:
    - insert() generates _id, created_at and updated_at server-side
    - update_one() is always a $set partial merge that also refreshes updated_at
    - find_one() returns None on no match; counts of 0 are returned, not raised
    - PyMongoError is mapped to DatabaseError with the driver message (no retry)

Design Decisions:
    - Generic over the document model; subclasses only bind collection_name and model
    - Documents are validated into Pydantic models on the way out, never on the way in
"""

import logging
from datetime import datetime, timezone
from typing import Any, ClassVar, Generic, TypeVar

from bson import ObjectId
from pydantic import BaseModel
from pymongo.errors import PyMongoError

from expense_tracker.core.errors import DatabaseError, ErrorContext

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

Sort = list[tuple[str, int]]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MongoRepository(Generic[ModelT]):
    """CRUD over a single collection of the shared database."""

    collection_name: ClassVar[str]
    model: type[ModelT]
    default_sort: ClassVar[Sort | None] = None

    def __init__(self, database: Any):
        self.collection = database[self.collection_name]

    async def insert(self, document: dict) -> ObjectId:
        now = utcnow()
        doc = {**document, "_id": ObjectId(), "created_at": now, "updated_at": now}
        try:
            result = await self.collection.insert_one(doc)
        except PyMongoError as e:
            raise self._database_error(e, "insert")
        return result.inserted_id

    async def find_many(self, filter: dict, sort: Sort | None = None) -> list[ModelT]:
        try:
            cursor = self.collection.find(filter, sort=sort or self.default_sort)
            return [self.model.model_validate(doc) async for doc in cursor]
        except PyMongoError as e:
            raise self._database_error(e, "find")

    async def find_one(self, filter: dict) -> ModelT | None:
        try:
            doc = await self.collection.find_one(filter)
        except PyMongoError as e:
            raise self._database_error(e, "find_one")
        if doc is None:
            return None
        return self.model.model_validate(doc)

    async def update_one(self, patch: dict, filter: dict) -> int:
        """$set the given fields (plus updated_at); returns the modified count."""
        update = {"$set": {**patch, "updated_at": utcnow()}}
        try:
            result = await self.collection.update_one(filter, update)
        except PyMongoError as e:
            raise self._database_error(e, "update")
        return result.modified_count

    async def delete_one(self, filter: dict) -> int:
        try:
            result = await self.collection.delete_one(filter)
        except PyMongoError as e:
            raise self._database_error(e, "delete")
        return result.deleted_count

    def _database_error(self, exc: PyMongoError, operation: str) -> DatabaseError:
        logger.error(
            f"MongoDB {operation} on '{self.collection_name}' failed: {exc}",
            extra={"collection": self.collection_name, "operation": operation},
        )
        return DatabaseError(
            str(exc), operation,
            ErrorContext(resource=self.collection_name, operation=operation),
        )
