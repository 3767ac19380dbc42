from __future__ import annotations

import logging
import sqlite3

from app.analyzer import analyze_resume
from app.parsing.parse import parse_upload
from app.persistence import resume_store
from app.schemas.analysis import AnalysisResult
from app.schemas.resumes import (
    AnalyzeResponse,
    ResumeListResponse,
    ResumeRecordResponse,
    ResumeSummary,
)
from app.services.report import score_label, score_tone

logger = logging.getLogger(__name__)

ANALYSIS_FAILED_MESSAGE = "Failed to analyze resume. Please try again."


class AnalysisFailedError(RuntimeError):
    def __init__(self, message: str = ANALYSIS_FAILED_MESSAGE, *, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


def _analyze(text: str) -> AnalysisResult:
    try:
        return analyze_resume(text)
    except Exception as exc:
        logger.exception("resume_analysis_failed text_len=%s", len(text))
        raise AnalysisFailedError() from exc


def _persist(*, user_id: str | None, file_name: str, text: str, analysis: AnalysisResult) -> int | None:
    if user_id is None:
        return None
    try:
        return resume_store.save_resume_analysis(
            user_id=user_id,
            file_name=file_name,
            file_content=text,
            analysis=analysis,
        )
    except (sqlite3.Error, OSError) as exc:
        logger.warning("resume_save_failed user_id=%s file_name=%s: %s", user_id, file_name, exc)
        return None


def run_text_analysis(
    *,
    text: str,
    file_name: str,
    user_id: str | None = None,
    parsing_warnings: list[str] | None = None,
) -> AnalyzeResponse:
    analysis = _analyze(text)
    resume_id = _persist(user_id=user_id, file_name=file_name, text=text, analysis=analysis)
    overall = analysis.scores.overall
    logger.info(
        "resume_analyzed file_name=%s text_len=%s overall=%s saved=%s",
        file_name,
        len(text),
        overall,
        resume_id is not None,
    )
    return AnalyzeResponse(
        file_name=file_name,
        analysis=analysis,
        score_label=score_label(overall),
        score_tone=score_tone(overall),
        saved=resume_id is not None,
        resume_id=resume_id,
        parsing_warnings=parsing_warnings or [],
    )


def run_upload_analysis(
    *,
    filename: str,
    content: bytes,
    content_type: str | None = None,
    user_id: str | None = None,
) -> AnalyzeResponse:
    parsed = parse_upload(filename=filename, content=content, content_type=content_type)
    return run_text_analysis(
        text=parsed.text,
        file_name=parsed.file_name,
        user_id=user_id,
        parsing_warnings=parsed.parsing_warnings,
    )


def list_saved_resumes(user_id: str, limit: int = 20) -> ResumeListResponse:
    records = resume_store.list_resumes(user_id, limit=limit)
    return ResumeListResponse(
        items=[
            ResumeSummary(
                id=record["id"],
                file_name=record["file_name"],
                ats_score=record["ats_score"],
                score_label=score_label(record["ats_score"]),
                created_at=record["created_at"],
            )
            for record in records
        ]
    )


def get_saved_resume(user_id: str, resume_id: int) -> ResumeRecordResponse | None:
    record = resume_store.get_resume(user_id, resume_id)
    if record is None:
        return None
    return ResumeRecordResponse(
        **record,
        score_label=score_label(record["ats_score"]),
        score_tone=score_tone(record["ats_score"]),
    )
