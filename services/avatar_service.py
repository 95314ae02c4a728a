# path: services/avatar_service.py

from __future__ import annotations

import logging
import shutil
import uuid
from pathlib import Path, PurePath

from fastapi import Request, UploadFile

logger = logging.getLogger(__name__)


def _safe_mkdir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def avatar_filename(original_filename: str | None) -> str:
    """
    Random unique name that keeps the uploaded file's extension
    ("me.final.png" -> "<hex>.png"). Names without a usable
    extension get the bare identifier.
    """
    base = PurePath(original_filename or "").name
    stem = uuid.uuid4().hex

    if "." not in base:
        return stem

    ext = base.rsplit(".", 1)[1]
    if not ext or not ext.isalnum():
        return stem
    return f"{stem}.{ext}"


def public_base_url(request: Request, configured: str | None = None) -> str:
    if configured:
        return configured.rstrip("/")
    return f"{request.url.scheme}://{request.url.netloc}"


def store_avatar(upload: UploadFile, *, assets_dir: str | Path, base_url: str) -> str:
    """
    Writes the uploaded file into the public asset directory under a
    generated name and returns the URL it is served from.
    """
    dest_dir = Path(assets_dir)
    _safe_mkdir(dest_dir)

    filename = avatar_filename(upload.filename)
    dest = dest_dir / filename

    upload.file.seek(0)
    with dest.open("wb") as out:
        shutil.copyfileobj(upload.file, out)

    logger.info("Stored avatar %r as %s", upload.filename, dest)
    return f"{base_url.rstrip('/')}/{filename}"
