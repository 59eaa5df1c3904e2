"""Category document (collection `categories`)."""

from expense_tracker.models.base import Document


class Category(Document):
    name: str
