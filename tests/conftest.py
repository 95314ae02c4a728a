# tests/conftest.py
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

import models  # noqa: F401
from app import create_app
from config import Settings
from database import build_engine


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url="sqlite://",
        assets_dir=str(tmp_path / "assets"),
        contact_owner="owner-under-test",
        cors_origins=("http://localhost:3000",),
        log_level="DEBUG",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def session():
    engine = build_engine(Settings(database_url="sqlite://"))
    SQLModel.metadata.create_all(engine)
    with Session(engine) as s:
        yield s
    engine.dispose()
