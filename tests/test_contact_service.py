# tests/test_contact_service.py
from __future__ import annotations

import pytest
from sqlmodel import SQLModel

from services import contact_service
from services.contact_service import ContactStorageError


def test_insert_assigns_id_and_timestamps(session):
    contact = contact_service.insert(session, {"name": "Ada", "last_name": "Lovelace", "age": 36})

    assert contact.id is not None and contact.id > 0
    assert contact.created_at is not None
    assert contact.updated_at is not None
    assert contact.email is None


def test_insert_ignores_caller_id(session):
    contact = contact_service.insert(session, {"id": 999, "name": "Grace"})

    assert contact.id != 999
    assert contact_service.find_by_id(session, 999) is None


def test_find_by_id_missing_returns_none(session):
    assert contact_service.find_by_id(session, 12345) is None


def test_find_page_uses_insertion_order(session):
    ids = [contact_service.insert(session, {"name": f"c{i}"}).id for i in range(7)]

    first = contact_service.find_page(session, limit=3, offset=0)
    second = contact_service.find_page(session, limit=3, offset=3)
    tail = contact_service.find_page(session, limit=3, offset=6)

    assert [c.id for c in first] == ids[:3]
    assert [c.id for c in second] == ids[3:6]
    assert [c.id for c in tail] == ids[6:]


def test_update_by_id_is_partial_and_touches_updated_at(session):
    contact = contact_service.insert(session, {"name": "Ada", "email": "ada@example.com"})
    created_at = contact.created_at
    before = contact.updated_at

    affected = contact_service.update_by_id(session, contact.id, {"name": "Augusta"})

    refreshed = contact_service.find_by_id(session, contact.id)
    assert affected == 1
    assert refreshed.name == "Augusta"
    assert refreshed.email == "ada@example.com"
    assert refreshed.created_at == created_at
    assert refreshed.updated_at >= before


def test_update_by_id_cannot_rewrite_protected_columns(session):
    contact = contact_service.insert(session, {"name": "Ada"})
    original_id, created_at = contact.id, contact.created_at

    contact_service.update_by_id(session, contact.id, {"id": 77, "created_at": None})

    refreshed = contact_service.find_by_id(session, original_id)
    assert refreshed is not None
    assert refreshed.created_at == created_at


def test_update_missing_id_returns_zero(session):
    assert contact_service.update_by_id(session, 404, {"name": "nobody"}) == 0


def test_delete_by_id(session):
    contact = contact_service.insert(session, {"name": "Ada"})

    assert contact_service.delete_by_id(session, contact.id) == 1
    assert contact_service.find_by_id(session, contact.id) is None
    assert contact_service.delete_by_id(session, contact.id) == 0


def test_storage_errors_are_wrapped(session):
    SQLModel.metadata.drop_all(session.get_bind())

    with pytest.raises(ContactStorageError):
        contact_service.find_page(session, limit=10, offset=0)

    with pytest.raises(ContactStorageError):
        contact_service.insert(session, {"name": "Ada"})


def test_timestamps_survive_a_reload(session):
    contact = contact_service.insert(session, {"name": "Ada"})
    contact_id, created_at, updated_at = contact.id, contact.created_at, contact.updated_at

    session.expire_all()
    reloaded = contact_service.find_by_id(session, contact_id)

    assert reloaded.created_at == created_at
    assert reloaded.updated_at == updated_at
