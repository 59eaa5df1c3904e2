"""Project Routes - /api/v1/projects, members and the details view.

Invariants:
    - DELETE on a project or member is a soft delete (is_active=false)
    - /details defaults to the current calendar month and active members
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query, status

from expense_tracker.api.dependencies import (
    get_project_member_service, get_project_service, query_params,
)
from expense_tracker.models.project import Project, ProjectDetails, ProjectMember
from expense_tracker.schemas.envelope import Envelope
from expense_tracker.schemas.project import (
    ProjectCreate, ProjectMemberCreate, ProjectMemberUpdate, ProjectUpdate,
)
from expense_tracker.services.project_members import ProjectMemberService
from expense_tracker.services.projects import ProjectService

router = APIRouter(prefix="/api/v1/projects", tags=["projects"])


@router.post("", response_model=Envelope[str], status_code=status.HTTP_201_CREATED)
async def create_project(
    body: ProjectCreate, service: ProjectService = Depends(get_project_service),
):
    project_id = await service.create(body)
    return Envelope(code=201, data=str(project_id), message="projects created")


@router.get("", response_model=Envelope[list[Project]])
async def list_projects(
    name: str | None = Query(None, description="search by title"),
    is_active: str | None = Query(None),
    service: ProjectService = Depends(get_project_service),
):
    projects = await service.list_all(query_params(name=name, is_active=is_active))
    return Envelope(code=200, data=projects, message="project details")


@router.get("/{project_id}", response_model=Envelope[Project])
async def get_project(
    project_id: str, service: ProjectService = Depends(get_project_service),
):
    project = await service.get(project_id)
    return Envelope(code=200, data=project, message="project detail")


@router.put("/{project_id}", response_model=Envelope[int])
async def update_project(
    project_id: str, body: ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
):
    count = await service.update(project_id, body)
    return Envelope(code=200, data=count, message="project updated")


@router.delete(
    "/{project_id}", response_model=Envelope[int],
    status_code=status.HTTP_202_ACCEPTED,
)
async def delete_project(
    project_id: str, service: ProjectService = Depends(get_project_service),
):
    count = await service.delete(project_id)
    return Envelope(code=202, data=count, message="project removed")


@router.get("/{project_id}/details", response_model=Envelope[ProjectDetails])
async def get_project_details(
    project_id: str,
    start: str | None = Query(None, description="period start, YYYY-MM-DD (inclusive)"),
    end: str | None = Query(None, description="period end, YYYY-MM-DD (exclusive)"),
    is_active: str | None = Query(None, description="member active state, default true"),
    service: ProjectService = Depends(get_project_service),
):
    details = await service.details(
        project_id,
        query_params(start=start, end=end, is_active=is_active),
        now=datetime.now(timezone.utc),
    )
    return Envelope(code=200, data=details, message="complete project details")


# ─── Members ─────────────────────────────────────────────────────

@router.post(
    "/{project_id}/members", response_model=Envelope[str],
    status_code=status.HTTP_201_CREATED,
)
async def create_project_member(
    project_id: str, body: ProjectMemberCreate,
    service: ProjectMemberService = Depends(get_project_member_service),
):
    member_id = await service.create(project_id, body)
    return Envelope(code=201, data=str(member_id), message="project member created")


@router.get("/{project_id}/members", response_model=Envelope[list[ProjectMember]])
async def list_project_members(
    project_id: str,
    is_active: str | None = Query(None),
    service: ProjectMemberService = Depends(get_project_member_service),
):
    members = await service.list_all(project_id, query_params(is_active=is_active))
    return Envelope(code=200, data=members, message="project member details")


@router.get(
    "/{project_id}/members/{member_id}", response_model=Envelope[ProjectMember],
)
async def get_project_member(
    project_id: str, member_id: str,
    service: ProjectMemberService = Depends(get_project_member_service),
):
    member = await service.get(project_id, member_id)
    return Envelope(code=200, data=member, message="project member detail")


@router.put("/{project_id}/members/{member_id}", response_model=Envelope[int])
async def update_project_member(
    project_id: str, member_id: str, body: ProjectMemberUpdate,
    service: ProjectMemberService = Depends(get_project_member_service),
):
    count = await service.update(project_id, member_id, body)
    return Envelope(code=200, data=count, message="project member updated")


@router.delete(
    "/{project_id}/members/{member_id}", response_model=Envelope[int],
    status_code=status.HTTP_202_ACCEPTED,
)
async def delete_project_member(
    project_id: str, member_id: str,
    service: ProjectMemberService = Depends(get_project_member_service),
):
    count = await service.delete(project_id, member_id)
    return Envelope(code=202, data=count, message="project member removed")
