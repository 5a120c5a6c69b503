from __future__ import annotations

import math
import re

from app.schemas.resume import ScoreResult

_SIGNAL_PATTERNS: dict[str, re.Pattern[str]] = {
    "projects": re.compile(r"\b(?:projects?|built|developed)\b", re.IGNORECASE),
    "internships": re.compile(r"\b(?:intern|interns|internships?)\b", re.IGNORECASE),
    "leadership": re.compile(r"\b(?:led|leader|captain|president)\b", re.IGNORECASE),
    "impact": re.compile(
        r"\b(?:increased|reduced|improved|optimized|achieved|percent)\b|%",
        re.IGNORECASE,
    ),
    "skills": re.compile(
        r"\b(?:react|node|python|java|aws|sql|typescript|ml|ai)\b",
        re.IGNORECASE,
    ),
}

# (signal, strength when present, improvement when absent), in report order.
_FEEDBACK: tuple[tuple[str, str, str], ...] = (
    ("projects", "Shows projects built or developed", "Add 1-2 impact-driven projects with metrics"),
    ("internships", "Includes internship/industry exposure", "Pursue internships or add practical experience"),
    ("impact", "Uses quantified impact and action verbs", "Quantify outcomes (%, time saved, revenue, users)"),
    ("leadership", "Demonstrates leadership or ownership", "Highlight leadership, ownership, or initiatives"),
    ("skills", "Lists in-demand technical skills", "Add relevant technical skills aligned to target roles"),
)

SIGNAL_NAMES = tuple(_SIGNAL_PATTERNS)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def detect_signals(text: str) -> dict[str, int]:
    value = text or ""
    return {name: 1 if pattern.search(value) else 0 for name, pattern in _SIGNAL_PATTERNS.items()}


def score_resume(text: str) -> ScoreResult:
    signals = detect_signals(text)
    score = round_half_up(100 * sum(signals.values()) / len(signals))

    strengths: list[str] = []
    improvements: list[str] = []
    for name, strength, improvement in _FEEDBACK:
        if signals[name]:
            strengths.append(strength)
        else:
            improvements.append(improvement)

    return ScoreResult(score=score, signals=signals, strengths=strengths, improvements=improvements)
