"""Response Envelope - the uniform {code, data, message, success} wrapper."""

from typing import Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    code: int
    data: DataT | None = None
    message: str
    success: bool = True
