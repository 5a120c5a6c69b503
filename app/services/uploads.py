from __future__ import annotations

import re
import time
from dataclasses import dataclass
from pathlib import Path

from app.core.config import StoragePaths

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9_.-]")


class UploadTooLargeError(ValueError):
    def __init__(self, size: int, limit: int):
        super().__init__(f"Upload is {size} bytes; the limit is {limit} bytes.")
        self.size = size
        self.limit = limit


@dataclass(frozen=True)
class StoredUpload:
    file_name: str
    path: Path
    extension: str
    size: int


def sanitize_filename(name: str | None) -> str:
    base = Path((name or "").replace("\\", "/")).name.strip()
    safe = _UNSAFE_FILENAME_CHARS.sub("_", base)
    if not safe.strip("._"):
        return "resume"
    return safe


def stored_file_name(original_name: str | None, *, now_ms: int | None = None) -> str:
    timestamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"{timestamp}_{sanitize_filename(original_name)}"


def save_upload(
    paths: StoragePaths,
    original_name: str | None,
    content: bytes,
    *,
    max_bytes: int | None = None,
) -> StoredUpload:
    if max_bytes is not None and len(content) > max_bytes:
        raise UploadTooLargeError(len(content), max_bytes)

    paths.ensure()
    file_name = stored_file_name(original_name)
    path = paths.uploads_dir / file_name
    path.write_bytes(content)
    return StoredUpload(
        file_name=file_name,
        path=path,
        extension=path.suffix.lower().lstrip("."),
        size=len(content),
    )
