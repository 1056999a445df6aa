"""
Media storage on the local filesystem
"""
from pathlib import Path
from typing import Optional
import logging
import re
import time
import uuid

from app.config import UPLOAD_DIR, UPLOAD_URL_PREFIX

logger = logging.getLogger(__name__)

UPLOAD_TYPE_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def normalize_original_name(original_name: Optional[str]) -> str:
    """
    Keep only the final path component of a client-supplied filename and
    make it safe to use on disk.
    """
    name = Path((original_name or "").replace("\\", "/")).name
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"[^A-Za-z0-9\-\._]", "", name)
    name = name.strip(".-")
    return name or "upload"


def generate_filename(original_name: Optional[str]) -> str:
    """Timestamp-prefixed unique name, e.g. 1714557600123-1a2b3c4d-photo.jpg"""
    timestamp_ms = int(time.time() * 1000)
    return f"{timestamp_ms}-{uuid.uuid4().hex[:8]}-{normalize_original_name(original_name)}"


def store_upload(
    content: bytes,
    original_name: Optional[str],
    upload_type: Optional[str] = None,
    upload_dir: Optional[Path] = None,
) -> str:
    """
    Write an uploaded file under the public upload directory.

    Args:
        content: raw file bytes
        original_name: filename sent by the client
        upload_type: optional sub-directory (e.g. "carousel_images")
        upload_dir: root directory, defaults to UPLOAD_DIR

    Returns:
        Relative URL of the stored file, e.g. /uploads/carousel_images/<name>

    Raises:
        ValueError: upload_type contains anything but letters, digits, - and _
    """
    root = Path(upload_dir or UPLOAD_DIR)
    url_parts = [UPLOAD_URL_PREFIX]

    if upload_type:
        if not UPLOAD_TYPE_PATTERN.fullmatch(upload_type):
            raise ValueError(f"Invalid upload type: {upload_type}")
        root = root / upload_type
        url_parts.append(upload_type)

    root.mkdir(parents=True, exist_ok=True)

    filename = generate_filename(original_name)
    (root / filename).write_bytes(content)
    url_parts.append(filename)

    file_path = "/".join(url_parts)
    logger.info(f"Stored upload {file_path} ({len(content)} bytes)")
    return file_path
