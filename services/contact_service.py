# path: services/contact_service.py

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from models.contact import Contact, utcnow

logger = logging.getLogger(__name__)

# columns the caller never writes directly
_PROTECTED = {"id", "created_at", "updated_at"}


class ContactStorageError(Exception):
    """Any failure of the underlying database while handling contacts."""


@contextmanager
def _storage_operation(session: Session, action: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Contact %s failed: %s", action, exc)
        raise ContactStorageError(f"Failed to {action} contact: {exc}") from exc


def _writable(attributes: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in attributes.items() if k not in _PROTECTED}


def find_by_id(session: Session, contact_id: int) -> Contact | None:
    with _storage_operation(session, "load"):
        return session.exec(select(Contact).where(Contact.id == contact_id)).first()


def find_page(session: Session, *, limit: int, offset: int) -> list[Contact]:
    with _storage_operation(session, "list"):
        return list(
            session.exec(
                select(Contact)
                .order_by(Contact.id.asc())
                .offset(offset)
                .limit(limit)
            ).all()
        )


def insert(session: Session, attributes: dict[str, Any]) -> Contact:
    contact = Contact(**_writable(attributes))

    with _storage_operation(session, "create"):
        session.add(contact)
        session.commit()
        session.refresh(contact)

    logger.info("Created contact #%s", contact.id)
    return contact


def update_by_id(session: Session, contact_id: int, attributes: dict[str, Any]) -> int:
    """
    Partial update. Returns how many rows changed (0 or 1);
    a missing id is not an error.
    """
    with _storage_operation(session, "update"):
        contact = session.get(Contact, contact_id)
        if contact is None:
            return 0

        for key, value in _writable(attributes).items():
            setattr(contact, key, value)
        contact.updated_at = utcnow()

        session.add(contact)
        session.commit()

    logger.info("Updated contact #%s", contact_id)
    return 1


def delete_by_id(session: Session, contact_id: int) -> int:
    with _storage_operation(session, "delete"):
        contact = session.get(Contact, contact_id)
        if contact is None:
            return 0

        session.delete(contact)
        session.commit()

    logger.info("Deleted contact #%s", contact_id)
    return 1
