# tests/test_config.py
from __future__ import annotations

import pytest

from config import Settings


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("/people", "/people"),
        ("people/", "/people"),
        ("/", "/contacts"),
        ("", "/contacts"),
    ],
)
def test_contacts_prefix_is_never_empty(monkeypatch, raw, expected):
    monkeypatch.setenv("CONTACTS_PREFIX", raw)
    assert Settings.from_env().contacts_prefix == expected
