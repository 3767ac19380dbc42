from __future__ import annotations

import json
from contextlib import closing
import sqlite3
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

from app.core.config import settings
from app.schemas.analysis import AnalysisResult

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS resumes (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id TEXT NOT NULL,
        file_name TEXT NOT NULL,
        file_content TEXT NOT NULL,
        ats_score INTEGER NOT NULL,
        analysis_data TEXT NOT NULL,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_resumes_user_created
    ON resumes (user_id, created_at)
    """,
)

_RECORD_COLUMNS = "id, user_id, file_name, file_content, ats_score, analysis_data, created_at, updated_at"


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _get_db_path() -> Path:
    return Path(settings.resume_db_path)


def _connect() -> sqlite3.Connection:
    db_path = _get_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path, timeout=5)
    for statement in _SCHEMA:
        conn.execute(statement)
    return conn


def init_db() -> None:
    if not settings.persistence_enabled:
        return
    with closing(_connect()) as conn:
        conn.commit()
    purge_old_records()


def save_resume_analysis(
    *,
    user_id: str,
    file_name: str,
    file_content: str,
    analysis: AnalysisResult,
) -> int | None:
    """Insert one analysis record and return its id, or None when persistence is off."""
    if not settings.persistence_enabled:
        return None
    now = _utc_now()
    analysis_json = json.dumps(analysis.model_dump(mode="json", by_alias=True), ensure_ascii=False)
    with closing(_connect()) as conn:
        cur = conn.execute(
            """
            INSERT INTO resumes (
                user_id, file_name, file_content, ats_score, analysis_data, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                user_id,
                file_name,
                file_content,
                analysis.scores.overall,
                analysis_json,
                now,
                now,
            ),
        )
        conn.commit()
        return int(cur.lastrowid)


def _row_to_record(cursor: sqlite3.Cursor, row: tuple) -> dict[str, Any]:
    record = {col[0]: row[idx] for idx, col in enumerate(cursor.description)}
    record["analysis_data"] = AnalysisResult.model_validate(json.loads(record["analysis_data"]))
    return record


def list_resumes(user_id: str, limit: int = 20) -> list[dict[str, Any]]:
    if not settings.persistence_enabled:
        return []
    with closing(_connect()) as conn:
        cur = conn.execute(
            f"""
            SELECT {_RECORD_COLUMNS}
            FROM resumes
            WHERE user_id = ?
            ORDER BY id DESC
            LIMIT ?
            """,
            (user_id, limit),
        )
        rows = cur.fetchall()
        return [_row_to_record(cur, row) for row in rows]


def get_resume(user_id: str, resume_id: int) -> dict[str, Any] | None:
    if not settings.persistence_enabled:
        return None
    with closing(_connect()) as conn:
        cur = conn.execute(
            f"""
            SELECT {_RECORD_COLUMNS}
            FROM resumes
            WHERE user_id = ? AND id = ?
            """,
            (user_id, resume_id),
        )
        row = cur.fetchone()
        if row is None:
            return None
        return _row_to_record(cur, row)


def purge_old_records() -> int:
    if not settings.persistence_enabled:
        return 0
    retention_days = max(1, int(settings.resume_retention_days))
    with closing(_connect()) as conn:
        cur = conn.execute(
            "DELETE FROM resumes WHERE created_at < ?",
            ((datetime.now(timezone.utc) - timedelta(days=retention_days)).isoformat(),),
        )
        conn.commit()
        return int(cur.rowcount or 0)
