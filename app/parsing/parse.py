from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from app.ai.types import AIClient
from app.core.config import ExtractionConfig
from app.parsing import stages
from app.parsing.models import ExtractionResult
from app.parsing.normalize import normalize_text

logger = logging.getLogger(__name__)

PDF_EXTENSIONS = {"pdf"}
IMAGE_EXTENSIONS = set(stages.IMAGE_MIME_TYPES)


def _always(current: str) -> bool:
    return True


def _longer(candidate: str, current: str) -> bool:
    return len(candidate.strip()) > len(current.strip())


def _non_empty(candidate: str, current: str) -> bool:
    return bool(candidate.strip())


@dataclass(frozen=True)
class ExtractionStage:
    """One fallible way of getting text out of a file.

    ``should_run`` sees the best text so far and decides whether the stage is
    still needed; ``accept`` decides whether the stage output replaces it.
    """

    name: str
    run: Callable[[Path], str]
    should_run: Callable[[str], bool] = _always
    accept: Callable[[str, str], bool] = _longer


def _below(threshold: int) -> Callable[[str], bool]:
    def check(current: str) -> bool:
        return len(current.strip()) < threshold

    return check


def declared_extension(file_name: str) -> str:
    return Path(file_name).suffix.lower().lstrip(".")


class TextExtractor:
    def __init__(self, config: ExtractionConfig, ai_client: AIClient | None = None):
        self._config = config
        self._ai_client = ai_client

    def stages_for(self, extension: str) -> list[ExtractionStage]:
        ext = (extension or "").lower().lstrip(".")
        cfg = self._config

        if ext in PDF_EXTENSIONS:
            plan = [ExtractionStage(name="pdf_text", run=stages.read_pdf_text)]
            if cfg.pdf_ocr_mode != "off":
                forced = cfg.pdf_ocr_mode == "force"
                plan.append(
                    ExtractionStage(
                        name="pdf_ocr",
                        run=lambda path: stages.ocr_pdf_pages(path, language=cfg.ocr_language, dpi=cfg.ocr_dpi),
                        should_run=_always if forced else _below(cfg.pdf_ocr_min_chars),
                        accept=_non_empty if forced else _longer,
                    )
                )
            return plan

        if ext in IMAGE_EXTENSIONS:
            plan = [
                ExtractionStage(
                    name="image_ocr",
                    run=lambda path: stages.ocr_image(path, language=cfg.ocr_language),
                )
            ]
            client = self._ai_client
            if client is not None:
                plan.append(
                    ExtractionStage(
                        name="vision",
                        run=lambda path: stages.vision_image_text(path, client),
                        should_run=_below(cfg.image_ocr_min_chars),
                    )
                )
            return plan

        return [ExtractionStage(name="plain_text", run=stages.read_plain_text)]

    def run(self, file_path: str | Path, extension: str) -> ExtractionResult:
        path = Path(file_path)
        ext = (extension or "").lower().lstrip(".")
        result = ExtractionResult(text="", extension=ext)
        best = ""

        for stage in self.stages_for(ext):
            if not stage.should_run(best):
                continue
            result.stages_run.append(stage.name)
            try:
                candidate = stage.run(path) or ""
            except Exception as exc:
                logger.warning("extraction_stage_failed stage=%s path=%s: %s", stage.name, path.name, exc)
                result.warnings.append(f"{stage.name} failed: {exc}")
                continue
            if stage.accept(candidate, best):
                best = candidate
                result.chosen_stage = stage.name

        result.text = normalize_text(best)
        logger.info(
            "text_extracted file=%s ext=%s stages=%s chosen=%s chars=%s",
            path.name,
            ext,
            ",".join(result.stages_run),
            result.chosen_stage,
            result.length,
        )
        return result

    def extract(self, file_path: str | Path, extension: str) -> str:
        return self.run(file_path, extension).text
