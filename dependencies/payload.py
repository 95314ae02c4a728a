# path: dependencies/payload.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from fastapi import HTTPException, Request, UploadFile
from starlette.datastructures import UploadFile as FormUpload

AVATAR_FIELD = "avatarFile"


@dataclass
class ContactSubmission:
    """Raw body of a POST/PATCH plus the optional avatar upload."""

    fields: dict[str, Any] = field(default_factory=dict)
    avatar_file: UploadFile | None = None


def _is_upload(value: Any) -> bool:
    return isinstance(value, FormUpload)


async def _read_json(request: Request) -> dict[str, Any]:
    body = await request.body()
    if not body.strip():
        return {}

    try:
        data = json.loads(body)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid JSON body")

    if not isinstance(data, dict):
        raise HTTPException(status_code=400, detail="JSON body must be an object")
    return data


async def get_contact_submission(request: Request) -> ContactSubmission:
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("application/json"):
        return ContactSubmission(fields=await _read_json(request))

    if not content_type.startswith(("multipart/form-data", "application/x-www-form-urlencoded")):
        return ContactSubmission()

    form = await request.form()
    submission = ContactSubmission()

    for key in form.keys():
        values = form.getlist(key)

        if key == AVATAR_FIELD:
            upload = values[0]
            # browsers send an empty part when no file is picked
            if _is_upload(upload) and upload.filename:
                submission.avatar_file = upload
            continue

        values = [v for v in values if not _is_upload(v)]
        if not values:
            continue
        submission.fields[key] = values[0] if len(values) == 1 else values

    return submission
