"""User document (collection `users`)."""

from expense_tracker.core.domain_types import Role
from expense_tracker.models.base import Document


class User(Document):
    email: str
    phone_number: str
    name: str
    role: Role
    is_active: bool
