# path: dependencies/owner.py
from __future__ import annotations

from fastapi import Depends, Request

from config import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_owner(settings: Settings = Depends(get_app_settings)) -> str:
    """
    Identity stamped on every written contact.
    There is no login yet, so this is the configured owner;
    swap in the authenticated principal once auth exists.
    """
    return settings.contact_owner
