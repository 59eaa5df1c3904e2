"""Category Service - CRUD orchestration for categories.

Rename never touches expenses: they hold their own category snapshot.
"""

from collections.abc import Mapping

from bson import ObjectId

from expense_tracker.core.filters import build_category_filter, parse_object_id
from expense_tracker.core.repository_protocols import Repository
from expense_tracker.models.category import Category
from expense_tracker.schemas.category import CategoryCreate, CategoryUpdate
from expense_tracker.services.common import require_affected, require_found


class CategoryService:
    def __init__(self, categories: Repository[Category]):
        self.categories = categories

    async def create(self, body: CategoryCreate) -> ObjectId:
        return await self.categories.insert(body.model_dump())

    async def list_all(self, params: Mapping[str, str]) -> list[Category]:
        return await self.categories.find_many(build_category_filter(params))

    async def get(self, category_id: str) -> Category:
        oid = parse_object_id(category_id)
        return require_found(
            await self.categories.find_one({"_id": oid}), "Category", oid,
        )

    async def rename(self, category_id: str, body: CategoryUpdate) -> int:
        oid = parse_object_id(category_id)
        count = await self.categories.update_one({"name": body.name}, {"_id": oid})
        return require_affected(count, "Category", oid)

    async def delete(self, category_id: str) -> int:
        oid = parse_object_id(category_id)
        return require_affected(
            await self.categories.delete_one({"_id": oid}), "Category", oid,
        )
