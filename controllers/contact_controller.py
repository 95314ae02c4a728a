# path: controllers/contact_controller.py

from __future__ import annotations

import logging
from pathlib import Path

from sqlmodel import Session

from dependencies.payload import ContactSubmission
from models.contact import Contact, ContactPayload, ContactRead
from models.envelope import Envelope
from services import contact_service
from services.avatar_service import store_avatar

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1


def _to_read(contact: Contact | None) -> ContactRead | None:
    return ContactRead.model_validate(contact) if contact is not None else None


def _positive_int(raw: str | None, default: int) -> int:
    """Query value as a positive int; anything else falls back to default."""
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def page_window(limit: str | None, page: str | None) -> tuple[int, int]:
    """(limit, offset) for the list endpoint."""
    size = _positive_int(limit, DEFAULT_LIMIT)
    number = _positive_int(page, DEFAULT_PAGE)
    return size, (number - 1) * size


def _attributes(
    submission: ContactSubmission,
    *,
    owner: str,
    assets_dir: str | Path,
    base_url: str,
) -> dict:
    attrs = ContactPayload.model_validate(submission.fields).attributes()
    attrs["owner"] = owner

    if submission.avatar_file is not None:
        # the upload wins over any avatar string in the body
        attrs["avatar"] = store_avatar(
            submission.avatar_file,
            assets_dir=assets_dir,
            base_url=base_url,
        )
    return attrs


def _warn_orphan(submission: ContactSubmission, attrs: dict) -> None:
    if submission.avatar_file is not None:
        logger.warning("Avatar stored but contact not saved: %s", attrs.get("avatar"))


def create_contact(
    *,
    submission: ContactSubmission,
    owner: str,
    assets_dir: str | Path,
    base_url: str,
    session: Session,
) -> Envelope[ContactRead]:
    attrs = _attributes(submission, owner=owner, assets_dir=assets_dir, base_url=base_url)

    try:
        contact = contact_service.insert(session, attrs)
    except contact_service.ContactStorageError:
        _warn_orphan(submission, attrs)
        raise

    return Envelope[ContactRead](
        message="Contact created successfully!",
        data=_to_read(contact),
    )


def get_contact(contact_id: int, session: Session) -> Envelope[ContactRead]:
    contact = contact_service.find_by_id(session, contact_id)
    if contact is None:
        logger.debug("Contact #%s not found", contact_id)
    return Envelope[ContactRead](data=_to_read(contact))


def list_contacts(
    *,
    limit: str | None,
    page: str | None,
    session: Session,
) -> Envelope[list[ContactRead]]:
    size, offset = page_window(limit, page)
    contacts = contact_service.find_page(session, limit=size, offset=offset)
    return Envelope[list[ContactRead]](data=[_to_read(c) for c in contacts])


def update_contact(
    contact_id: int,
    *,
    submission: ContactSubmission,
    owner: str,
    assets_dir: str | Path,
    base_url: str,
    session: Session,
) -> Envelope[ContactRead]:
    attrs = _attributes(submission, owner=owner, assets_dir=assets_dir, base_url=base_url)

    try:
        affected = contact_service.update_by_id(session, contact_id, attrs)
    except contact_service.ContactStorageError:
        _warn_orphan(submission, attrs)
        raise

    if not affected:
        logger.debug("Nothing to update for contact #%s", contact_id)
        _warn_orphan(submission, attrs)

    contact = contact_service.find_by_id(session, contact_id)
    return Envelope[ContactRead](data=_to_read(contact))


def delete_contact(contact_id: int, session: Session) -> Envelope[ContactRead]:
    contact = contact_service.find_by_id(session, contact_id)
    snapshot = _to_read(contact)

    contact_service.delete_by_id(session, contact_id)
    return Envelope[ContactRead](data=snapshot)
