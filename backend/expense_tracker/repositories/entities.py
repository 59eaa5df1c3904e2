"""Entity Repositories - MongoRepository bound to each collection."""

from expense_tracker.core.project_details import EXPENSES, PROJECT_MEMBERS, PROJECTS
from expense_tracker.models.category import Category
from expense_tracker.models.expense import Expense
from expense_tracker.models.project import Project, ProjectMember
from expense_tracker.models.user import User
from expense_tracker.repositories.base import MongoRepository


class UserRepository(MongoRepository[User]):
    collection_name = "users"
    model = User


class CategoryRepository(MongoRepository[Category]):
    collection_name = "categories"
    model = Category


class ProjectRepository(MongoRepository[Project]):
    collection_name = PROJECTS
    model = Project


class ProjectMemberRepository(MongoRepository[ProjectMember]):
    collection_name = PROJECT_MEMBERS
    model = ProjectMember


class ExpenseRepository(MongoRepository[Expense]):
    """Expenses list newest first; _id breaks ties between same-day entries."""
    collection_name = EXPENSES
    model = Expense
    default_sort = [("date", -1), ("_id", -1)]
