"""Document Base - shared identity and timestamp fields for every stored document.

Invariants:
    - `_id` (ObjectId) is read into `id` (str); `id` is accepted too, so dumped models re-validate
    - created_at/updated_at are server-populated, never client-supplied
    - Enum fields hold plain values, so model_dump() output is BSON-encodable as-is
"""

from datetime import datetime
from typing import Annotated

from bson import ObjectId
from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field


def _stringify_object_id(value):
    if isinstance(value, ObjectId):
        return str(value)
    return value


ObjectIdStr = Annotated[str, BeforeValidator(_stringify_object_id)]


class Document(BaseModel):
    """Base class for all stored documents."""
    model_config = ConfigDict(use_enum_values=True)

    id: ObjectIdStr = Field(validation_alias=AliasChoices("_id", "id"))
    created_at: datetime
    updated_at: datetime

    def to_snapshot(self) -> dict:
        """Stored form of this document, for embedding into another document."""
        snapshot = self.model_dump(exclude={"id"})
        snapshot["_id"] = ObjectId(self.id)
        return snapshot
