# models/contact.py
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Contact(SQLModel, table=True):
    __tablename__ = "contacts"

    id: Optional[int] = Field(default=None, primary_key=True)
    owner: Optional[str] = None

    name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = None
    avatar: Optional[str] = None
    link_to_website: Optional[str] = None
    tags: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class ContactPayload(BaseModel):
    """
    Fields a caller may set on a contact (POST / PATCH).
    Accepts camelCase (wire) or snake_case names; anything else,
    including id/owner/timestamps, is dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = None
    avatar: Optional[str] = None
    link_to_website: Optional[str] = None
    tags: Optional[str] = None

    @field_validator("age", mode="before")
    @classmethod
    def _blank_age(cls, value: Any) -> Any:
        # empty form inputs arrive as ""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _flatten_tags(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return ",".join(str(t).strip() for t in value if str(t).strip())
        return value

    def attributes(self) -> dict[str, Any]:
        """Only the fields the caller actually sent, keyed by column name."""
        return self.model_dump(exclude_unset=True)


class ContactRead(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    owner: Optional[str] = None
    name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = None
    avatar: Optional[str] = None
    link_to_website: Optional[str] = None
    tags: Optional[str] = None
    created_at: datetime
    updated_at: datetime
