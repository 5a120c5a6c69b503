from __future__ import annotations

from pydantic import BaseModel, Field


class ExtractionResult(BaseModel):
    text: str
    extension: str
    stages_run: list[str] = Field(default_factory=list)
    chosen_stage: str | None = None
    warnings: list[str] = Field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.text)
