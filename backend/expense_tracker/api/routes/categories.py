"""Category Routes - /api/v1/categories."""

from fastapi import APIRouter, Depends, Query, status

from expense_tracker.api.dependencies import get_category_service, query_params
from expense_tracker.models.category import Category
from expense_tracker.schemas.category import CategoryCreate, CategoryUpdate
from expense_tracker.schemas.envelope import Envelope
from expense_tracker.services.categories import CategoryService

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


@router.post("", response_model=Envelope[str], status_code=status.HTTP_201_CREATED)
async def create_category(
    body: CategoryCreate, service: CategoryService = Depends(get_category_service),
):
    category_id = await service.create(body)
    return Envelope(code=201, data=str(category_id), message="category created")


@router.get("", response_model=Envelope[list[Category]])
async def list_categories(
    name: str | None = Query(None),
    service: CategoryService = Depends(get_category_service),
):
    categories = await service.list_all(query_params(name=name))
    return Envelope(code=200, data=categories, message="category details")


@router.get("/{category_id}", response_model=Envelope[Category])
async def get_category(
    category_id: str, service: CategoryService = Depends(get_category_service),
):
    category = await service.get(category_id)
    return Envelope(code=200, data=category, message="category detail")


@router.put("/{category_id}", response_model=Envelope[int])
async def update_category(
    category_id: str, body: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
):
    count = await service.rename(category_id, body)
    return Envelope(code=200, data=count, message="category updated")


@router.delete(
    "/{category_id}", response_model=Envelope[int],
    status_code=status.HTTP_202_ACCEPTED,
)
async def delete_category(
    category_id: str, service: CategoryService = Depends(get_category_service),
):
    count = await service.delete(category_id)
    return Envelope(code=202, data=count, message="category removed")
