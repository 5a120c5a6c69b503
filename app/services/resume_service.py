from __future__ import annotations

import json
import logging
import time

from app.ai.types import AIClient
from app.core.context_store import ContextStore
from app.parsing.parse import TextExtractor
from app.schemas.resume import ResumeContext, ScoreResult, UploadResumeResponse
from app.scoring import analyze_resume, score_resume, score_with_llm
from app.services.uploads import save_upload

logger = logging.getLogger(__name__)


class ResumeProcessor:
    """Upload -> extraction -> scoring -> analysis -> persisted context."""

    def __init__(
        self,
        store: ContextStore,
        extractor: TextExtractor,
        *,
        ai_client: AIClient | None = None,
        llm_scoring: bool = False,
        max_upload_bytes: int | None = None,
    ):
        self._store = store
        self._extractor = extractor
        self._ai_client = ai_client
        self._llm_scoring = llm_scoring
        self._max_upload_bytes = max_upload_bytes

    def _score(self, text: str) -> ScoreResult:
        heuristic = score_resume(text)
        if not self._llm_scoring or self._ai_client is None:
            return heuristic
        enriched = score_with_llm(text, self._ai_client, signals=heuristic.signals)
        return enriched or heuristic

    def process(self, original_name: str | None, content: bytes) -> UploadResumeResponse:
        started_at = time.perf_counter()
        upload = save_upload(
            self._store.paths,
            original_name,
            content,
            max_bytes=self._max_upload_bytes,
        )

        extraction = self._extractor.run(upload.path, upload.extension)
        text = extraction.text
        score = self._score(text)
        report = analyze_resume(text, score)

        context = ResumeContext(
            resume_file=upload.file_name,
            extracted_file=f"{upload.file_name}.txt",
            extracted_text_length=len(text),
            score=score,
            report=report,
        )
        context_id = self._store.write(context, text)

        logger.info(
            json.dumps(
                {
                    "event": "resume_processed",
                    "context_id": context_id,
                    "extension": upload.extension,
                    "bytes": upload.size,
                    "stages": extraction.stages_run,
                    "chosen_stage": extraction.chosen_stage,
                    "text_len": len(text),
                    "score": score.score,
                    "ats_score": report.ats_score,
                    "duration_ms": int((time.perf_counter() - started_at) * 1000),
                }
            )
        )

        return UploadResumeResponse(
            context_id=context_id,
            score=score.score,
            signals=score.signals,
            strengths=report.strengths,
            improvements=report.improvements,
            report=report,
        )
