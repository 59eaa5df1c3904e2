"""User Schemas - field-level validation for user requests.

Invariants:
    - email must be syntactically valid; phone_number digits only
    - role is one of ADMIN, SUPERVISOR, STAFF, USER
    - UserUpdate only carries name and is_active; both optional (partial $set)
"""

from pydantic import BaseModel, EmailStr, Field, field_validator

from expense_tracker.core.domain_types import Role

PHONE_PATTERN = r"^[0-9]+$"
PERSON_NAME_PATTERN = r"^[A-Za-z]+( [A-Za-z]+)*$"


class UserCreate(BaseModel):
    email: EmailStr
    phone_number: str = Field(min_length=3, max_length=20, pattern=PHONE_PATTERN)
    name: str = Field(min_length=1, max_length=100, pattern=PERSON_NAME_PATTERN)
    role: Role
    is_active: bool = True

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class UserUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=20, pattern=PERSON_NAME_PATTERN)
    is_active: bool | None = None
