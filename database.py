# path: database.py
from fastapi import Request
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine, Session

from config import Settings

_MEMORY_URLS = {"sqlite://", "sqlite:///:memory:"}


def build_engine(settings: Settings):
    kwargs = {"echo": settings.sql_echo}

    if settings.database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if settings.database_url in _MEMORY_URLS:
            # one shared connection, otherwise each checkout sees an empty db
            kwargs["poolclass"] = StaticPool

    return create_engine(settings.database_url, **kwargs)


def get_session(request: Request):
    with Session(request.app.state.engine) as session:
        yield session
