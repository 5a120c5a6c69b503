from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from app.core.config import StoragePaths
from app.schemas.resume import ResumeContext

logger = logging.getLogger(__name__)


class ContextStore:
    """Flat-file persistence for upload contexts.

    Records are written once per upload and never updated, so no locking is
    needed: every key is unique to its upload.
    """

    def __init__(self, paths: StoragePaths):
        self._paths = paths

    @property
    def paths(self) -> StoragePaths:
        return self._paths

    def _record_path(self, context_id: str) -> Path | None:
        value = (context_id or "").strip()
        if not value or "\x00" in value or value != Path(value).name or value in {".", ".."}:
            return None
        try:
            candidate = (self._paths.data_dir / f"{value}.json").resolve()
        except (OSError, ValueError):
            return None
        if candidate.parent != self._paths.data_dir.resolve():
            return None
        return candidate

    def extracted_path(self, extracted_file: str) -> Path:
        return self._paths.extracted_dir / Path(extracted_file).name

    def write(self, context: ResumeContext, extracted_text: str) -> str:
        self._paths.ensure()
        self.extracted_path(context.extracted_file).write_text(extracted_text, encoding="utf-8")

        record_path = self._record_path(context.context_id)
        if record_path is None:
            raise ValueError(f"Invalid context id: {context.context_id!r}")
        payload = context.model_dump(mode="json", by_alias=True)
        record_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        return context.context_id

    def read(self, context_id: str) -> ResumeContext | None:
        record_path = self._record_path(context_id)
        if record_path is None:
            return None
        try:
            if not record_path.is_file():
                return None
            raw = json.loads(record_path.read_text(encoding="utf-8"))
            return ResumeContext.model_validate(raw)
        except (OSError, ValueError, ValidationError) as exc:
            logger.warning("context_record_unreadable context_id=%s: %s", context_id, exc)
            return None

    def read_text(self, context: ResumeContext) -> str | None:
        path = self.extracted_path(context.extracted_file)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as exc:
            logger.warning("extracted_text_unreadable file=%s: %s", path.name, exc)
            return None
