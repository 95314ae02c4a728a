# models/envelope.py
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    status: bool = True
    message: str = "success"
    data: Optional[DataT] = None


def failure(message: str) -> dict[str, Any]:
    return Envelope[Any](status=False, message=message, data=None).model_dump()
