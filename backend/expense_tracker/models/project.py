"""Project Documents - projects, their members, and the joined details view.

Invariants:
    - Project and ProjectMember are soft-deleted (is_active=false), never removed
    - ProjectDetails is derived on demand by the aggregation pipeline, never stored
    - ProjectDetails.expenses is ordered by date descending
"""

from pydantic import Field

from expense_tracker.core.domain_types import Role
from expense_tracker.models.base import Document, ObjectIdStr
from expense_tracker.models.expense import Expense


class Project(Document):
    title: str
    description: str = ""
    is_active: bool = True


class ProjectMember(Document):
    project_id: ObjectIdStr
    email: str
    phone_number: str
    name: str
    role: Role
    is_active: bool


class ProjectDetails(Project):
    """Project scalars plus the filtered expense and member sets."""
    expenses: list[Expense] = Field(default_factory=list)
    members: list[ProjectMember] = Field(default_factory=list)
