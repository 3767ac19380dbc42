from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from app.schemas.analysis import AnalysisResult

ScoreLabel = Literal["Excellent", "Good", "Fair", "Needs Improvement"]
ScoreTone = Literal["green", "yellow", "red"]


class AnalyzeTextRequest(BaseModel):
    text: str = Field(default="", max_length=200000)
    file_name: str = Field(default="pasted-resume.txt", min_length=1, max_length=255)


class AnalyzeResponse(BaseModel):
    file_name: str
    analysis: AnalysisResult
    score_label: ScoreLabel
    score_tone: ScoreTone
    saved: bool = False
    resume_id: int | None = None
    parsing_warnings: list[str] = Field(default_factory=list)


class ResumeSummary(BaseModel):
    id: int
    file_name: str
    ats_score: int = Field(ge=0, le=100)
    score_label: ScoreLabel
    created_at: datetime


class ResumeListResponse(BaseModel):
    items: list[ResumeSummary]


class ResumeRecordResponse(BaseModel):
    id: int
    file_name: str
    file_content: str
    ats_score: int = Field(ge=0, le=100)
    score_label: ScoreLabel
    score_tone: ScoreTone
    analysis_data: AnalysisResult
    created_at: datetime
    updated_at: datetime
