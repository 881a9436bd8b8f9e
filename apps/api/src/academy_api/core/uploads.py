"""
Multipart Upload Handling

Image uploads are checked (type and size) before any form field is parsed or
any service is called. Accepted files are written under
`settings.upload_dir/<subdir>/` and referenced by their public path.
"""

import asyncio
import logging
import os
import secrets
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from fastapi import status
from pydantic import BaseModel, ValidationError
from starlette.datastructures import FormData, UploadFile

from academy_api.core.config import settings
from academy_api.core.error_handlers import format_validation_errors
from academy_api.core.exceptions import UploadRejectedError, ValidationFailedError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)

ALLOWED_IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif"}
ALLOWED_IMAGE_MIME_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif"}


@dataclass(frozen=True)
class PendingUpload:
    """An accepted upload that has not been written to disk yet."""

    field_name: str
    extension: str
    content: bytes


def get_upload(form: FormData, field_name: str) -> UploadFile | None:
    """Return the file sent under `field_name`, ignoring empty file inputs."""
    value = form.get(field_name)
    if not isinstance(value, UploadFile) or not value.filename:
        return None
    return value


async def read_image_upload(upload: UploadFile, field_name: str) -> PendingUpload:
    """
    Validate an image upload and read it into memory.

    Raises:
        UploadRejectedError: 400 for a non-image type, 413 above the size ceiling
    """
    extension = os.path.splitext(upload.filename or "")[1].lower()
    content_type = (upload.content_type or "").lower()

    if extension not in ALLOWED_IMAGE_EXTENSIONS or content_type not in ALLOWED_IMAGE_MIME_TYPES:
        logger.warning(f"Upload rejected: field={field_name}, type={content_type or 'unknown'}")
        raise UploadRejectedError("Only image files are allowed (jpeg, jpg, png, gif)")

    limit = settings.max_upload_size_bytes
    # One byte past the limit is enough to know it is too large
    content = await upload.read(limit + 1)
    if len(content) > limit:
        logger.warning(f"Upload rejected: field={field_name}, exceeds {settings.max_upload_size_mb}MB")
        raise UploadRejectedError(
            f"File too large. Maximum size is {settings.max_upload_size_mb}MB",
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
        )

    return PendingUpload(field_name=field_name, extension=extension, content=content)


def _unique_filename(pending: PendingUpload) -> str:
    millis = int(time.time() * 1000)
    return f"{pending.field_name}-{millis}-{secrets.randbelow(10**9)}{pending.extension}"


def _write_file(path: Path, content: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)


async def store_upload(pending: PendingUpload, subdir: str) -> str:
    """
    Write an accepted upload to disk.

    Returns:
        Public path of the stored file, e.g. "/uploads/enrollments/studentPhoto-...png"
    """
    filename = _unique_filename(pending)
    target = Path(settings.upload_dir) / subdir / filename
    await asyncio.to_thread(_write_file, target, pending.content)
    logger.info(f"Stored upload: {subdir}/{filename} ({len(pending.content)} bytes)")
    return f"/uploads/{subdir}/{filename}"


async def remove_upload(public_path: str) -> None:
    """Delete a file written by store_upload, given its public path."""
    target = Path(settings.upload_dir) / public_path.removeprefix("/uploads/")
    try:
        await asyncio.to_thread(target.unlink, missing_ok=True)
    except OSError as e:
        logger.error(f"Failed to remove upload {public_path}: {e}")
        return
    logger.info(f"Removed upload: {public_path}")


def form_fields(form: FormData) -> dict[str, str]:
    """Non-file multipart fields as a plain dict."""
    return {key: value for key, value in form.multi_items() if isinstance(value, str)}


def parse_form_fields(schema: type[SchemaT], form: FormData) -> SchemaT:
    """
    Validate the non-file fields of a multipart body through a pydantic schema.

    Raises:
        ValidationFailedError: with one "field: message" entry per failure
    """
    try:
        return schema.model_validate(form_fields(form))
    except ValidationError as e:
        raise ValidationFailedError("Validation failed", format_validation_errors(e.errors())) from e
