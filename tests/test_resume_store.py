import sqlite3
import sys
import tempfile
import unittest
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.analyzer import analyze_resume  # noqa: E402
from app.core.config import settings  # noqa: E402
from app.persistence import resume_store  # noqa: E402


class ResumeStoreTests(unittest.TestCase):
    def setUp(self):
        self._tmp_dir = tempfile.TemporaryDirectory()
        self.db_path = Path(self._tmp_dir.name) / "nested" / "resumes.db"
        store_settings = replace(settings, resume_db_path=str(self.db_path), persistence_enabled=True)
        patcher = patch.object(resume_store, "settings", store_settings)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp_dir.cleanup)
        self.text = "Experience Education Skills Contact: email@x.com"
        self.analysis = analyze_resume(self.text)

    def _save(self, user_id: str = "user-1", file_name: str = "cv.txt") -> int:
        resume_id = resume_store.save_resume_analysis(
            user_id=user_id,
            file_name=file_name,
            file_content=self.text,
            analysis=self.analysis,
        )
        self.assertIsNotNone(resume_id)
        return resume_id

    def test_save_and_read_back_round_trip(self):
        resume_id = self._save()
        self.assertTrue(self.db_path.exists())

        record = resume_store.get_resume("user-1", resume_id)
        self.assertIsNotNone(record)
        self.assertEqual(record["file_name"], "cv.txt")
        self.assertEqual(record["file_content"], self.text)
        self.assertEqual(record["ats_score"], self.analysis.scores.overall)
        self.assertEqual(record["analysis_data"], self.analysis)
        self.assertEqual(record["created_at"], record["updated_at"])

    def test_stored_analysis_uses_camel_case_keys(self):
        self._save()
        with sqlite3.connect(self.db_path) as conn:
            raw = conn.execute("SELECT analysis_data FROM resumes").fetchone()[0]
        self.assertIn('"missingElements"', raw)
        self.assertIn('"formattingIssues"', raw)

    def test_records_are_scoped_to_their_owner(self):
        resume_id = self._save(user_id="user-1")
        self._save(user_id="user-2", file_name="other.txt")

        self.assertIsNone(resume_store.get_resume("user-2", resume_id))
        items = resume_store.list_resumes("user-1")
        self.assertEqual([item["file_name"] for item in items], ["cv.txt"])

    def test_list_returns_latest_first_and_honours_limit(self):
        for index in range(3):
            self._save(file_name=f"cv-{index}.txt")
        items = resume_store.list_resumes("user-1", limit=2)
        self.assertEqual([item["file_name"] for item in items], ["cv-2.txt", "cv-1.txt"])

    def test_purge_removes_records_past_retention(self):
        self._save(file_name="fresh.txt")
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                """
                INSERT INTO resumes (
                    user_id, file_name, file_content, ats_score, analysis_data, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                ("user-1", "old.txt", "", 0, "{}", "2000-01-01T00:00:00+00:00", "2000-01-01T00:00:00+00:00"),
            )
            conn.commit()

        self.assertEqual(resume_store.purge_old_records(), 1)
        self.assertEqual([item["file_name"] for item in resume_store.list_resumes("user-1")], ["fresh.txt"])

    def test_connections_are_closed_after_each_operation(self):
        opened: list[sqlite3.Connection] = []
        real_connect = resume_store._connect

        def tracking_connect():
            conn = real_connect()
            opened.append(conn)
            return conn

        with patch.object(resume_store, "_connect", tracking_connect):
            resume_store.init_db()
            resume_id = self._save()
            resume_store.list_resumes("user-1")
            resume_store.get_resume("user-1", resume_id)
            resume_store.get_resume("user-1", resume_id + 1)
            resume_store.purge_old_records()

        self.assertEqual(len(opened), 7)
        for conn in opened:
            with self.assertRaises(sqlite3.ProgrammingError):
                conn.execute("SELECT 1")

    def test_disabled_persistence_is_a_no_op(self):
        disabled = replace(settings, resume_db_path=str(self.db_path), persistence_enabled=False)
        with patch.object(resume_store, "settings", disabled):
            resume_store.init_db()
            self.assertIsNone(
                resume_store.save_resume_analysis(
                    user_id="user-1", file_name="cv.txt", file_content=self.text, analysis=self.analysis
                )
            )
            self.assertEqual(resume_store.list_resumes("user-1"), [])
            self.assertEqual(resume_store.purge_old_records(), 0)
        self.assertFalse(self.db_path.exists())


if __name__ == "__main__":
    unittest.main()
