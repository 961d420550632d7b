# -*- coding: utf-8 -*-
"""Uploads - persist image uploads under the static upload directory."""

from __future__ import annotations

import logging
import re
import time
from pathlib import Path
from typing import Dict

from fastapi import UploadFile

from ..config import settings
from ..errors import AppError

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}
DEFAULT_SUFFIX = ".jpg"
CHUNK_SIZE = 1024 * 256

# kind -> (subdirectory, filename prefix)
UPLOAD_KINDS: Dict[str, tuple[str, str]] = {
    "avatar": ("avatars", "avatar"),
    "food": ("foods", "food"),
}


def _safe_suffix(filename: str) -> str:
    suffix = Path(filename or "").suffix.lower()
    if not suffix or len(suffix) > 12:
        return DEFAULT_SUFFIX
    if not re.fullmatch(r"\.[a-z0-9]+", suffix):
        return DEFAULT_SUFFIX
    return suffix


def save_image_upload(*, user_id: str, upload: UploadFile | None, kind: str) -> Dict[str, str]:
    """Stream ``upload`` to disk and return ``{subdir, filename}``."""
    if upload is None or not upload.filename:
        raise AppError("No file uploaded", 400)
    if (upload.content_type or "").lower() not in ALLOWED_IMAGE_TYPES:
        raise AppError("Only image files are allowed", 400)

    subdir, prefix = UPLOAD_KINDS[kind]
    target_dir = settings.upload_dir / subdir
    target_dir.mkdir(parents=True, exist_ok=True)

    filename = f"{prefix}-{user_id}-{int(time.time() * 1000)}{_safe_suffix(upload.filename)}"
    path = target_dir / filename

    size = 0
    max_bytes = int(settings.max_upload_mb) * 1024 * 1024
    try:
        with path.open("wb") as f:
            while True:
                chunk = upload.file.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > max_bytes:
                    raise AppError(f"File too large (> {settings.max_upload_mb} MB)", 400)
                f.write(chunk)
    except AppError:
        path.unlink(missing_ok=True)
        raise
    finally:
        upload.file.close()

    logger.info("Stored %s upload %s (%d bytes)", kind, filename, size)
    return {"subdir": subdir, "filename": filename}
