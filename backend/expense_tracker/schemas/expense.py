"""Expense Schemas - create/update payloads.

Invariants:
    - Referenced ids (project_id, category_id, inserted_by) stay strings here;
      the service parses and resolves them before any write
    - date stays a YYYY-MM-DD string here; the service parses it with the shared date parser
    - total is a positive decimal with at most 2 fraction digits
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from expense_tracker.core.domain_types import ExpenseStatus


class ExpenseCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    project_id: str
    date: str
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=2000)
    location: str = Field("", max_length=200)
    total: Decimal = Field(gt=0, max_digits=14, decimal_places=2)
    status: ExpenseStatus
    category_id: str
    inserted_by: str


class ExpenseUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    project_id: str | None = None
    date: str | None = None
    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, min_length=1, max_length=2000)
    location: str | None = Field(None, max_length=200)
    total: Decimal | None = Field(None, gt=0, max_digits=14, decimal_places=2)
    status: ExpenseStatus | None = None
    category_id: str | None = None
    inserted_by: str | None = None
