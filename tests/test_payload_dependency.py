# tests/test_payload_dependency.py
from __future__ import annotations

import io

from fastapi import UploadFile
from starlette.datastructures import UploadFile as FormUpload

from dependencies.payload import _is_upload


def test_form_uploads_are_recognized():
    assert _is_upload(FormUpload(file=io.BytesIO(b"x"), filename="a.png"))
    assert _is_upload(UploadFile(file=io.BytesIO(b"x"), filename="a.png"))


def test_plain_form_values_are_not_uploads():
    assert not _is_upload("a.png")
    assert not _is_upload(None)
