"""Expense Document - one spend entry with snapshotted category and submitter.

Invariants:
    - category and inserted_by are copies taken at write time, not live references
    - date is a calendar day stored as UTC midnight
    - total is an exact decimal amount (Decimal128 in storage)
"""

from datetime import datetime
from decimal import Decimal

from expense_tracker.core.domain_types import ExpenseStatus
from expense_tracker.models.base import Document, ObjectIdStr
from expense_tracker.models.category import Category
from expense_tracker.models.user import User


class Expense(Document):
    project_id: ObjectIdStr | None = None
    date: datetime
    title: str
    description: str
    location: str = ""
    total: Decimal
    status: ExpenseStatus
    category: Category
    inserted_by: User
