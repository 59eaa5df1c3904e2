"""Project Member Service - members scoped to an existing project (soft delete)."""

from collections.abc import Mapping

from bson import ObjectId

from expense_tracker.core.filters import build_project_member_filter, parse_object_id
from expense_tracker.core.repository_protocols import Repository
from expense_tracker.models.project import Project, ProjectMember
from expense_tracker.schemas.project import ProjectMemberCreate, ProjectMemberUpdate
from expense_tracker.services.common import patch_from, require_affected, require_found


class ProjectMemberService:
    def __init__(
        self, members: Repository[ProjectMember], projects: Repository[Project],
    ):
        self.members = members
        self.projects = projects

    async def create(self, project_id: str, body: ProjectMemberCreate) -> ObjectId:
        pid = parse_object_id(project_id)
        require_found(await self.projects.find_one({"_id": pid}), "Project", pid)
        document = body.model_dump(mode="json")
        document["project_id"] = pid
        return await self.members.insert(document)

    async def list_all(self, project_id: str, params: Mapping[str, str]) -> list[ProjectMember]:
        pid = parse_object_id(project_id)
        return await self.members.find_many(build_project_member_filter(pid, params))

    async def get(self, project_id: str, member_id: str) -> ProjectMember:
        filter, mid = self._member_filter(project_id, member_id)
        return require_found(await self.members.find_one(filter), "ProjectMember", mid)

    async def update(
        self, project_id: str, member_id: str, body: ProjectMemberUpdate,
    ) -> int:
        filter, mid = self._member_filter(project_id, member_id)
        patch = patch_from(body)
        return require_affected(
            await self.members.update_one(patch, filter), "ProjectMember", mid,
        )

    async def delete(self, project_id: str, member_id: str) -> int:
        filter, mid = self._member_filter(project_id, member_id)
        return require_affected(
            await self.members.update_one({"is_active": False}, filter),
            "ProjectMember", mid,
        )

    @staticmethod
    def _member_filter(project_id: str, member_id: str) -> tuple[dict, ObjectId]:
        pid = parse_object_id(project_id)
        mid = parse_object_id(member_id, "member_id")
        return {"_id": mid, "project_id": pid}, mid
