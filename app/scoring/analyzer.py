from __future__ import annotations

import re

from app.schemas.resume import AnalysisReport, ScoreResult
from app.scoring.heuristic import round_half_up

_SECTION_PATTERNS: dict[str, re.Pattern[str]] = {
    "contact_info": re.compile(r"\b(?:email|phone|linkedin|github)\b", re.IGNORECASE),
    "summary": re.compile(r"\b(?:summary|objective)\b", re.IGNORECASE),
    "experience": re.compile(r"\b(?:experience|work experience|employment)\b", re.IGNORECASE),
    "education": re.compile(
        r"\b(?:education|b\.tech|btech|bachelor|master|b\.e\.)(?!\w)",
        re.IGNORECASE,
    ),
    "skills": re.compile(r"\b(?:skills|technologies|technical skills)\b", re.IGNORECASE),
    "projects": re.compile(r"\b(?:projects?)\b", re.IGNORECASE),
    "certifications": re.compile(r"\b(?:certifications?|certificates?)\b", re.IGNORECASE),
}

# section -> (score when present, score when absent), 0-10 scale
SECTION_SCORES: dict[str, tuple[int, int]] = {
    "contact_info": (9, 4),
    "summary": (7, 4),
    "experience": (8, 3),
    "education": (9, 5),
    "skills": (8, 4),
    "projects": (8, 3),
    "certifications": (6, 4),
}

KEYWORDS: tuple[str, ...] = (
    "react",
    "node",
    "typescript",
    "javascript",
    "python",
    "java",
    "aws",
    "docker",
    "kubernetes",
    "sql",
    "mongodb",
    "postgres",
    "ml",
    "ai",
    "data structures",
    "algorithms",
    "rest",
    "graphql",
)

_KEYWORD_PATTERNS = {keyword: re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE) for keyword in KEYWORDS}

_QUANTIFIED = re.compile(
    r"\d+(?:\.\d+)?\s*%"
    r"|\bpercent\b"
    r"|\b\d+(?:[.,]\d+)?\s*(?:users|ms|sec|minutes|hours|x|times|issues|tickets|revenue|sales)\b",
    re.IGNORECASE,
)


def detect_sections(text: str) -> dict[str, bool]:
    value = text or ""
    return {name: bool(pattern.search(value)) for name, pattern in _SECTION_PATTERNS.items()}


def keyword_density(text: str) -> dict[str, int]:
    value = text or ""
    return {keyword: len(pattern.findall(value)) for keyword, pattern in _KEYWORD_PATTERNS.items()}


def has_quantified_achievement(text: str) -> bool:
    return bool(_QUANTIFIED.search(text or ""))


def analyze_resume(text: str, heuristic: ScoreResult) -> AnalysisReport:
    presence = detect_sections(text)
    sections = {
        name: present_score if presence[name] else absent_score
        for name, (present_score, absent_score) in SECTION_SCORES.items()
    }
    density = keyword_density(text)
    quantified = has_quantified_achievement(text)

    strengths = list(heuristic.strengths)
    improvements = list(heuristic.improvements)
    if quantified:
        strengths.append("Uses numbers/metrics to show impact")
    else:
        improvements.append("Add quantified impact (%, time saved, users, revenue)")
    if presence["projects"]:
        strengths.append("Has a projects section")
    else:
        improvements.append("Add a projects section with 2-3 concise bullets each")
    if presence["skills"]:
        strengths.append("Includes a skills section")
    else:
        improvements.append("Add a concise, role-aligned skills section")

    ats_signals = (
        presence["skills"],
        presence["experience"],
        presence["education"],
        any(count > 0 for count in density.values()),
        quantified,
    )
    ats_score = round_half_up(100 * sum(1 for hit in ats_signals if hit) / len(ats_signals))
    overall_score = round_half_up(10 * sum(sections.values()) / (len(sections) * 10))

    return AnalysisReport(
        overall_score=overall_score,
        sections=sections,
        ats_score=ats_score,
        keyword_density=density,
        strengths=strengths,
        improvements=improvements,
    )
