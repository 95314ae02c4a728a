# path: routes/contact_routes.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse
from sqlmodel import Session

from config import Settings
from controllers.contact_controller import (
    create_contact,
    delete_contact,
    get_contact,
    list_contacts,
    update_contact,
)
from controllers.error_handlers import handle_contact_errors
from database import get_session
from dependencies.owner import get_app_settings, get_current_owner
from dependencies.payload import ContactSubmission, get_contact_submission
from models.contact import ContactRead
from models.envelope import Envelope
from services.avatar_service import public_base_url

router = APIRouter(tags=["Contacts"])


@router.get("/ping", response_class=PlainTextResponse)
def ping():
    return "Hi from server"


@router.post("", response_model=Envelope[ContactRead], include_in_schema=False)
@router.post("/", response_model=Envelope[ContactRead])
@handle_contact_errors
def create(
    request: Request,
    submission: ContactSubmission = Depends(get_contact_submission),
    owner: str = Depends(get_current_owner),
    settings: Settings = Depends(get_app_settings),
    session: Session = Depends(get_session),
):
    return create_contact(
        submission=submission,
        owner=owner,
        assets_dir=settings.assets_dir,
        base_url=public_base_url(request, settings.public_base_url),
        session=session,
    )


@router.get("/{contact_id}", response_model=Envelope[ContactRead])
@handle_contact_errors
def detail(
    contact_id: int,
    session: Session = Depends(get_session),
):
    return get_contact(contact_id, session)


@router.get("", response_model=Envelope[list[ContactRead]], include_in_schema=False)
@router.get("/", response_model=Envelope[list[ContactRead]])
@handle_contact_errors
def listing(
    limit: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
    session: Session = Depends(get_session),
):
    return list_contacts(limit=limit, page=page, session=session)


@router.patch("/{contact_id}", response_model=Envelope[ContactRead])
@handle_contact_errors
def update(
    contact_id: int,
    request: Request,
    submission: ContactSubmission = Depends(get_contact_submission),
    owner: str = Depends(get_current_owner),
    settings: Settings = Depends(get_app_settings),
    session: Session = Depends(get_session),
):
    return update_contact(
        contact_id,
        submission=submission,
        owner=owner,
        assets_dir=settings.assets_dir,
        base_url=public_base_url(request, settings.public_base_url),
        session=session,
    )


@router.delete("/{contact_id}", response_model=Envelope[ContactRead])
@handle_contact_errors
def remove(
    contact_id: int,
    session: Session = Depends(get_session),
):
    return delete_contact(contact_id, session)
