"""Expense Service - expenses with snapshotted category and submitter.

Invariants:
    - Every id and the date are parsed before the first storage call
    - Project, category and user must exist at write time (else ResourceNotFoundError)
    - category/inserted_by are copied into the expense; later edits to the source
      documents never reach existing expenses
    - Reads and the insert are independent round trips (no transaction); a reference
      deleted in between still yields an expense holding the stale snapshot

Design Decisions:
    - Update re-snapshots only the references it names; other fields are a plain $set
    - Delete is physical: expenses carry no active flag
"""

from collections.abc import Mapping

from bson import ObjectId

from expense_tracker.core.errors import InvalidArgumentError
from expense_tracker.core.filters import build_expense_filter, parse_date, parse_object_id
from expense_tracker.core.repository_protocols import Repository
from expense_tracker.models.category import Category
from expense_tracker.models.expense import Expense
from expense_tracker.models.project import Project
from expense_tracker.models.user import User
from expense_tracker.schemas.expense import ExpenseCreate, ExpenseUpdate
from expense_tracker.services.common import require_affected, require_found


class ExpenseService:
    def __init__(
        self,
        expenses: Repository[Expense],
        projects: Repository[Project],
        categories: Repository[Category],
        users: Repository[User],
    ):
        self.expenses = expenses
        self.projects = projects
        self.categories = categories
        self.users = users

    async def create(self, body: ExpenseCreate) -> ObjectId:
        project_id = parse_object_id(body.project_id, "project_id")
        category_id = parse_object_id(body.category_id, "category_id")
        user_id = parse_object_id(body.inserted_by, "inserted_by")
        date = parse_date(body.date, "date")

        await self._project(project_id)
        category = await self._category(category_id)
        user = await self._user(user_id)

        return await self.expenses.insert({
            "project_id": project_id,
            "date": date,
            "title": body.title,
            "description": body.description,
            "location": body.location,
            "total": body.total,
            "status": body.status,
            "category": category.to_snapshot(),
            "inserted_by": user.to_snapshot(),
        })

    async def list_all(self, params: Mapping[str, str]) -> list[Expense]:
        """Expenses in the optional [start, end) window, newest first."""
        return await self.expenses.find_many(build_expense_filter(params))

    async def get(self, expense_id: str) -> Expense:
        oid = parse_object_id(expense_id)
        return require_found(await self.expenses.find_one({"_id": oid}), "Expense", oid)

    async def update(self, expense_id: str, body: ExpenseUpdate) -> int:
        oid = parse_object_id(expense_id)
        patch = body.model_dump(exclude_none=True)
        if not patch:
            raise InvalidArgumentError("no fields to update", "body")

        project_id = category_id = user_id = None
        if "project_id" in patch:
            project_id = parse_object_id(patch.pop("project_id"), "project_id")
        if "category_id" in patch:
            category_id = parse_object_id(patch.pop("category_id"), "category_id")
        if "inserted_by" in patch:
            user_id = parse_object_id(patch.pop("inserted_by"), "inserted_by")
        if "date" in patch:
            patch["date"] = parse_date(patch["date"], "date")

        if project_id is not None:
            await self._project(project_id)
            patch["project_id"] = project_id
        if category_id is not None:
            patch["category"] = (await self._category(category_id)).to_snapshot()
        if user_id is not None:
            patch["inserted_by"] = (await self._user(user_id)).to_snapshot()

        return require_affected(
            await self.expenses.update_one(patch, {"_id": oid}), "Expense", oid,
        )

    async def delete(self, expense_id: str) -> int:
        oid = parse_object_id(expense_id)
        return require_affected(
            await self.expenses.delete_one({"_id": oid}), "Expense", oid,
        )

    async def _project(self, project_id: ObjectId) -> Project:
        return require_found(
            await self.projects.find_one({"_id": project_id}), "Project", project_id,
        )

    async def _category(self, category_id: ObjectId) -> Category:
        return require_found(
            await self.categories.find_one({"_id": category_id}), "Category", category_id,
        )

    async def _user(self, user_id: ObjectId) -> User:
        return require_found(
            await self.users.find_one({"_id": user_id}), "User", user_id,
        )
