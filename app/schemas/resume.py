from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class ScoreResult(BaseModel):
    score: int = Field(ge=0, le=100)
    signals: dict[str, int] = Field(default_factory=dict)
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)


class AnalysisReport(BaseModel):
    overall_score: int = Field(ge=0, le=10)
    sections: dict[str, int] = Field(default_factory=dict)
    ats_score: int = Field(ge=0, le=100)
    keyword_density: dict[str, int] = Field(default_factory=dict)
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ResumeContext(BaseModel):
    """Persisted record tying a stored upload to its extracted text and scores."""

    model_config = ConfigDict(populate_by_name=True)

    resume_file: str = Field(alias="resumeFile")
    extracted_file: str = Field(alias="extractedFile")
    extracted_text_length: int = Field(alias="extractedTextLength", ge=0)
    score: ScoreResult
    report: AnalysisReport
    created_at: datetime = Field(alias="createdAt", default_factory=_utc_now)

    @property
    def context_id(self) -> str:
        return self.resume_file


class UploadResumeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    context_id: str = Field(alias="contextId")
    score: int
    signals: dict[str, int]
    strengths: list[str]
    improvements: list[str]
    report: AnalysisReport
