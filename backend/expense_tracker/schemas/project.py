"""Project Schemas - projects and their members.

Invariants:
    - New projects and members are active unless stated otherwise
    - Update schemas are partial: unset fields are left untouched
"""

from pydantic import BaseModel, EmailStr, Field, field_validator

from expense_tracker.core.domain_types import Role
from expense_tracker.schemas.user import PERSON_NAME_PATTERN, PHONE_PATTERN


def strip_title(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("title cannot be empty or whitespace")
    return v


class ProjectCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str = Field("", max_length=2000)
    is_active: bool = True

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str) -> str:
        return strip_title(v)


class ProjectUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=2000)

    @field_validator("title")
    @classmethod
    def check_title(cls, v: str | None) -> str | None:
        return v if v is None else strip_title(v)


class ProjectMemberCreate(BaseModel):
    email: EmailStr
    phone_number: str = Field(min_length=3, max_length=20, pattern=PHONE_PATTERN)
    name: str = Field(min_length=1, max_length=100, pattern=PERSON_NAME_PATTERN)
    role: Role
    is_active: bool = True


class ProjectMemberUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100, pattern=PERSON_NAME_PATTERN)
    role: Role | None = None
    is_active: bool | None = None
