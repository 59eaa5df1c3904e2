"""Service Dependencies - wire repositories onto the shared database per request.

Invariants:
    - Repositories are cheap, stateless wrappers built per request
    - The only shared object underneath is the database handle from get_database
"""

from typing import Any

from fastapi import Depends

from expense_tracker.infrastructure.connection import get_database
from expense_tracker.repositories.entities import (
    CategoryRepository, ExpenseRepository, ProjectMemberRepository,
    ProjectRepository, UserRepository,
)
from expense_tracker.repositories.project_details import ProjectDetailsAggregator
from expense_tracker.services.categories import CategoryService
from expense_tracker.services.expenses import ExpenseService
from expense_tracker.services.project_members import ProjectMemberService
from expense_tracker.services.projects import ProjectService
from expense_tracker.services.users import UserService


def get_user_service(db: Any = Depends(get_database)) -> UserService:
    return UserService(UserRepository(db))


def get_category_service(db: Any = Depends(get_database)) -> CategoryService:
    return CategoryService(CategoryRepository(db))


def get_project_service(db: Any = Depends(get_database)) -> ProjectService:
    return ProjectService(ProjectRepository(db), ProjectDetailsAggregator(db))


def get_project_member_service(db: Any = Depends(get_database)) -> ProjectMemberService:
    return ProjectMemberService(ProjectMemberRepository(db), ProjectRepository(db))


def get_expense_service(db: Any = Depends(get_database)) -> ExpenseService:
    return ExpenseService(
        ExpenseRepository(db), ProjectRepository(db),
        CategoryRepository(db), UserRepository(db),
    )


def query_params(**values: str | None) -> dict[str, str]:
    """Only the query parameters the client actually sent."""
    return {key: value for key, value in values.items() if value is not None}
