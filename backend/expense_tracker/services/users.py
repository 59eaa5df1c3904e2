"""User Service - CRUD orchestration for users (hard delete)."""

from collections.abc import Mapping

from bson import ObjectId

from expense_tracker.core.filters import build_user_filter, parse_object_id
from expense_tracker.core.repository_protocols import Repository
from expense_tracker.models.user import User
from expense_tracker.schemas.user import UserCreate, UserUpdate
from expense_tracker.services.common import patch_from, require_affected, require_found


class UserService:
    def __init__(self, users: Repository[User]):
        self.users = users

    async def create(self, body: UserCreate) -> ObjectId:
        return await self.users.insert(body.model_dump(mode="json"))

    async def list_all(self, params: Mapping[str, str]) -> list[User]:
        return await self.users.find_many(build_user_filter(params))

    async def get(self, user_id: str) -> User:
        oid = parse_object_id(user_id)
        return require_found(await self.users.find_one({"_id": oid}), "User", oid)

    async def update(self, user_id: str, body: UserUpdate) -> int:
        oid = parse_object_id(user_id)
        patch = patch_from(body)
        return require_affected(await self.users.update_one(patch, {"_id": oid}), "User", oid)

    async def delete(self, user_id: str) -> int:
        oid = parse_object_id(user_id)
        return require_affected(await self.users.delete_one({"_id": oid}), "User", oid)
