"""User Routes - /api/v1/users."""

from fastapi import APIRouter, Depends, Query, status

from expense_tracker.api.dependencies import get_user_service, query_params
from expense_tracker.models.user import User
from expense_tracker.schemas.envelope import Envelope
from expense_tracker.schemas.user import UserCreate, UserUpdate
from expense_tracker.services.users import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.post("", response_model=Envelope[str], status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserCreate, service: UserService = Depends(get_user_service),
):
    user_id = await service.create(body)
    return Envelope(code=201, data=str(user_id), message="user created")


@router.get("", response_model=Envelope[list[User]])
async def list_users(
    is_active: str | None = Query(None, description="true/false"),
    role: str | None = Query(None, description="ADMIN, SUPERVISOR, STAFF or USER"),
    service: UserService = Depends(get_user_service),
):
    users = await service.list_all(query_params(is_active=is_active, role=role))
    return Envelope(code=200, data=users, message="user details")


@router.get("/{user_id}", response_model=Envelope[User])
async def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    user = await service.get(user_id)
    return Envelope(code=200, data=user, message="user detail")


@router.put("/{user_id}", response_model=Envelope[int])
async def update_user(
    user_id: str, body: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    count = await service.update(user_id, body)
    return Envelope(code=200, data=count, message="user updated")


@router.delete(
    "/{user_id}", response_model=Envelope[int], status_code=status.HTTP_202_ACCEPTED,
)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    count = await service.delete(user_id)
    return Envelope(code=202, data=count, message="user removed")
