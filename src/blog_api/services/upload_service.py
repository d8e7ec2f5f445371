"""
blog_api.services.upload_service - File upload handling
========================================================

Uploads are stored on local disk under ``<UPLOAD_DIR>/<folder>/<sub_folder>/``
and served back through the static mount at ``UPLOAD_URL_PREFIX``.
"""

from __future__ import annotations

import asyncio
import logging
import re
import secrets
from pathlib import Path

from blog_api.core.settings import settings
from blog_api.schemas.upload import UploadResponse

logger = logging.getLogger(__name__)

# Path segments are taken from the URL, so only plain names are accepted.
_SEGMENT_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")
_SUBTYPE_RE = re.compile(r"[^A-Za-z0-9.+-]")
DEFAULT_MIME_TYPE = "application/octet-stream"


def upload_root() -> Path:
    """Return the configured upload root directory."""
    return Path(settings.upload_dir)


def _validate_segment(name: str, value: str) -> str:
    if not _SEGMENT_RE.match(value):
        raise ValueError(f"Invalid {name}: {value!r}")
    return value


def generate_filename(original_name: str, content_type: str | None) -> str:
    """Build ``<32 hex chars><original extension>.<mime subtype>``."""
    random_name = secrets.token_hex(16)
    extension = Path(original_name).suffix.lower()
    mime = content_type or DEFAULT_MIME_TYPE
    subtype = mime.split("/", 1)[-1].split(";", 1)[0].strip()
    subtype = _SUBTYPE_RE.sub("", subtype) or "bin"
    return f"{random_name}{extension}.{subtype}"


async def save_upload(
    folder: str,
    sub_folder: str,
    original_name: str,
    content: bytes,
    content_type: str | None = None,
) -> UploadResponse:
    """Validate and persist an uploaded file.

    Raises:
        ValueError: If a path segment is unsafe or the file is too large.
    """
    _validate_segment("folder", folder)
    _validate_segment("sub folder", sub_folder)

    if len(content) > settings.max_upload_bytes:
        raise ValueError(
            f"File too large: {len(content)} bytes (max {settings.max_upload_bytes} bytes)"
        )

    filename = generate_filename(original_name, content_type)
    directory = upload_root() / folder / sub_folder
    await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)
    await asyncio.to_thread((directory / filename).write_bytes, content)

    relative_path = f"{folder}/{sub_folder}/{filename}"
    logger.info("Stored upload %s (%d bytes)", relative_path, len(content))
    return UploadResponse(
        original_name=original_name,
        filename=filename,
        path=relative_path,
        url=f"{settings.upload_url_prefix.rstrip('/')}/{relative_path}",
        size=len(content),
        mimetype=content_type or DEFAULT_MIME_TYPE,
    )
