"""Expense Routes - /api/v1/expenses."""

from fastapi import APIRouter, Depends, Query, status

from expense_tracker.api.dependencies import get_expense_service, query_params
from expense_tracker.models.expense import Expense
from expense_tracker.schemas.envelope import Envelope
from expense_tracker.schemas.expense import ExpenseCreate, ExpenseUpdate
from expense_tracker.services.expenses import ExpenseService

router = APIRouter(prefix="/api/v1/expenses", tags=["expenses"])


@router.post("", response_model=Envelope[str], status_code=status.HTTP_201_CREATED)
async def create_expense(
    body: ExpenseCreate, service: ExpenseService = Depends(get_expense_service),
):
    expense_id = await service.create(body)
    return Envelope(code=201, data=str(expense_id), message="expense created")


@router.get("", response_model=Envelope[list[Expense]])
async def list_expenses(
    start: str | None = Query(None, description="YYYY-MM-DD, inclusive; requires end"),
    end: str | None = Query(None, description="YYYY-MM-DD, exclusive; requires start"),
    service: ExpenseService = Depends(get_expense_service),
):
    expenses = await service.list_all(query_params(start=start, end=end))
    return Envelope(code=200, data=expenses, message="expense details")


@router.get("/{expense_id}", response_model=Envelope[Expense])
async def get_expense(
    expense_id: str, service: ExpenseService = Depends(get_expense_service),
):
    expense = await service.get(expense_id)
    return Envelope(code=200, data=expense, message="expense detail")


@router.put("/{expense_id}", response_model=Envelope[int])
async def update_expense(
    expense_id: str, body: ExpenseUpdate,
    service: ExpenseService = Depends(get_expense_service),
):
    count = await service.update(expense_id, body)
    return Envelope(code=200, data=count, message="expense updated")


@router.delete(
    "/{expense_id}", response_model=Envelope[int],
    status_code=status.HTTP_202_ACCEPTED,
)
async def delete_expense(
    expense_id: str, service: ExpenseService = Depends(get_expense_service),
):
    count = await service.delete(expense_id)
    return Envelope(code=202, data=count, message="expense removed")
