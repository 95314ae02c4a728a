# path: controllers/error_handlers.py
"""
Shared failure responder for the contact routes.

Every handler is wrapped with ``handle_contact_errors`` so that any
exception leaving it becomes the same ``{status: false, message, data: null}``
envelope instead of a framework error page.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Callable, TypeVar

from fastapi import HTTPException
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from models.envelope import failure
from services.contact_service import ContactStorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _describe_validation(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid input"


def error_response(error: Exception) -> JSONResponse:
    if isinstance(error, HTTPException):
        return JSONResponse(status_code=error.status_code, content=failure(str(error.detail)))

    if isinstance(error, ValidationError):
        logger.warning("Rejected contact payload: %s", error)
        return JSONResponse(status_code=400, content=failure(_describe_validation(error)))

    if isinstance(error, ContactStorageError):
        return JSONResponse(status_code=500, content=failure(str(error)))

    logger.exception("Unexpected error: %s", error)
    return JSONResponse(status_code=500, content=failure(str(error) or error.__class__.__name__))


def handle_contact_errors(fn: Callable[..., T]) -> Callable[..., T]:
    @wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            return error_response(e)

    return wrapper


__all__ = ["error_response", "handle_contact_errors"]
