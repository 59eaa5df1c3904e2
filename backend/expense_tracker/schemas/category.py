"""Category Schemas - names are alphabetic only."""

from pydantic import BaseModel, Field

ALPHA_PATTERN = r"^[A-Za-z]+$"


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=50, pattern=ALPHA_PATTERN)


class CategoryUpdate(BaseModel):
    """Rename - the only mutation a category supports."""
    name: str = Field(min_length=1, max_length=50, pattern=ALPHA_PATTERN)
