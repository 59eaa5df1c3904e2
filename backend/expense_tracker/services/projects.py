"""Project Service - projects (soft delete) and the joined details view.

Invariants:
    - delete flips is_active to false; the project stays listable without an is_active filter
    - details() parses window and active flag before touching storage
    - details() window defaults to the calendar month containing `now`
"""

from collections.abc import Mapping
from datetime import datetime

from bson import ObjectId

from expense_tracker.core.filters import (
    build_project_filter, parse_object_id, resolve_active_flag, resolve_details_window,
)
from expense_tracker.core.repository_protocols import ProjectDetailsReader, Repository
from expense_tracker.models.project import Project, ProjectDetails
from expense_tracker.schemas.project import ProjectCreate, ProjectUpdate
from expense_tracker.services.common import patch_from, require_affected, require_found


class ProjectService:
    def __init__(
        self,
        projects: Repository[Project],
        details: ProjectDetailsReader[ProjectDetails],
    ):
        self.projects = projects
        self.details_reader = details

    async def create(self, body: ProjectCreate) -> ObjectId:
        return await self.projects.insert(body.model_dump())

    async def list_all(self, params: Mapping[str, str]) -> list[Project]:
        return await self.projects.find_many(build_project_filter(params))

    async def get(self, project_id: str) -> Project:
        oid = parse_object_id(project_id)
        return require_found(await self.projects.find_one({"_id": oid}), "Project", oid)

    async def update(self, project_id: str, body: ProjectUpdate) -> int:
        oid = parse_object_id(project_id)
        patch = patch_from(body)
        return require_affected(
            await self.projects.update_one(patch, {"_id": oid}), "Project", oid,
        )

    async def delete(self, project_id: str) -> int:
        oid = parse_object_id(project_id)
        return require_affected(
            await self.projects.update_one({"is_active": False}, {"_id": oid}),
            "Project", oid,
        )

    async def details(
        self, project_id: str, params: Mapping[str, str], now: datetime,
    ) -> ProjectDetails:
        oid = parse_object_id(project_id)
        window = resolve_details_window(params, now)
        active_only = resolve_active_flag(params, default=True)
        return await self.details_reader.lookup(oid, window, active_only)
