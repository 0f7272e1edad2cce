# menuboard/utils/uploads.py

import os
import uuid
from typing import Tuple

from fastapi import UploadFile

from menuboard.core.config import settings
from menuboard.core.constants import ALLOWED_IMAGE_EXTS, UPLOAD_PATHS
from menuboard.core.exceptions import ValidationFailed
from menuboard.utils import spaces

UPLOAD_DIR = UPLOAD_PATHS["menu_item_images"]


def _ensure_upload_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def image_extension(filename: str) -> str:
    ext = os.path.splitext(filename or "")[1].lower()
    if ext not in ALLOWED_IMAGE_EXTS:
        raise ValidationFailed("Invalid image type. Allowed: jpg, jpeg, png, webp")
    return ext


async def validate_and_read_image(file: UploadFile) -> Tuple[bytes, str]:
    ext = image_extension(file.filename)
    contents = await file.read()

    if len(contents) > settings.max_upload_bytes:
        raise ValidationFailed("File too large (10MB max).")

    return contents, ext


async def save_item_image(file: UploadFile, base_url: str) -> str:
    """
    Stores an uploaded item photo and returns its public URL.
    Goes to Spaces when configured, otherwise to UPLOAD_DIR served at /uploads.
    """
    contents, ext = await validate_and_read_image(file)
    filename = f"{uuid.uuid4().hex}{ext}"

    if settings.spaces_enabled:
        key = f"{settings.do_spaces_prefix}/menu/items/{filename}"
        await spaces.put_public_object(key=key, body=contents, content_type=file.content_type)
        return spaces.public_url(key)

    _ensure_upload_dir(UPLOAD_DIR)
    with open(os.path.join(UPLOAD_DIR, filename), "wb") as f:
        f.write(contents)

    return f"{base_url.rstrip('/')}/uploads/items/{filename}"
