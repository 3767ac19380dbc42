from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

SECTION_NAMES: tuple[str, ...] = ("contact", "experience", "education", "skills")


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SectionFlags(_FrozenModel):
    contact: bool = False
    experience: bool = False
    education: bool = False
    skills: bool = False

    @property
    def present_count(self) -> int:
        return sum(1 for name in SECTION_NAMES if getattr(self, name))


class KeywordCoverage(_FrozenModel):
    found: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()


class ScoreCard(_FrozenModel):
    formatting: int = Field(ge=0, le=100)
    content: int = Field(ge=0, le=100)
    keywords: int = Field(ge=0, le=100)
    overall: int = Field(ge=0, le=100)


class AnalysisResult(_FrozenModel):
    """Outcome of one resume analysis. Serialized with camelCase keys."""

    sections: SectionFlags
    missing_elements: tuple[str, ...] = Field(default=(), alias="missingElements")
    formatting_issues: tuple[str, ...] = Field(default=(), alias="formattingIssues")
    keywords: KeywordCoverage
    recommendations: tuple[str, ...] = ()
    scores: ScoreCard
