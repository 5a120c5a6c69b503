from __future__ import annotations

import json
import logging
import math

from app.ai.types import AIClient, ChatMessage
from app.schemas.resume import ScoreResult
from app.scoring.heuristic import round_half_up

logger = logging.getLogger(__name__)

MAX_RESUME_CHARS = 12000


def build_scoring_prompt(resume_text: str) -> str:
    return (
        "You are an expert technical recruiter. Read the resume text below and return a strict JSON object "
        "assessing candidate readiness for software/tech roles.\n\n"
        "Rules:\n"
        "- Output ONLY valid JSON. No backticks. No commentary.\n"
        "- JSON shape:\n"
        "  {\n"
        '    "score": number,            // integer from 0 to 100\n'
        '    "strengths": string[],      // 3-6 short bullets\n'
        '    "improvements": string[]    // 3-6 short bullets\n'
        "  }\n"
        "- Weigh: technical skills depth, projects impact, internships/experience, quantified achievements, "
        "leadership/community, clarity.\n\n"
        f'Resume:\n"""\n{(resume_text or "")[:MAX_RESUME_CHARS]}\n"""'
    )


def _json_slice(text: str) -> str:
    start = text.find("{")
    end = text.rfind("}")
    if start >= 0 and end > start:
        return text[start : end + 1]
    return text


def _string_list(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if str(item).strip()]


def score_with_llm(
    resume_text: str,
    client: AIClient | None,
    *,
    signals: dict[str, int] | None = None,
) -> ScoreResult | None:
    if client is None:
        return None

    try:
        raw = client.complete([ChatMessage(role="user", content=build_scoring_prompt(resume_text))])
        parsed = json.loads(_json_slice(raw))
    except Exception as exc:  # noqa: BLE001 - heuristic fallback is expected
        logger.warning("llm_scoring_failed prompt_len=%s: %s", len(resume_text or ""), exc)
        return None

    if not isinstance(parsed, dict):
        logger.warning("llm_scoring_invalid_payload type=%s", type(parsed).__name__)
        return None
    score = parsed.get("score")
    if isinstance(score, bool) or not isinstance(score, (int, float)) or not math.isfinite(score):
        logger.warning("llm_scoring_invalid_score value=%r", score)
        return None

    return ScoreResult(
        score=max(0, min(100, round_half_up(score))),
        signals=dict(signals or {}),
        strengths=_string_list(parsed.get("strengths")),
        improvements=_string_list(parsed.get("improvements")),
    )
