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

from fastapi.testclient import TestClient  # noqa: E402

from app.api.v1 import resumes as resumes_api  # noqa: E402
from app.core.config import settings  # noqa: E402
from app.main import app  # noqa: E402
from app.persistence import resume_store  # noqa: E402
from tests.sample_resumes import STRONG_RESUME  # noqa: E402


class ResumesApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        self._tmp_dir = tempfile.TemporaryDirectory()
        db_path = Path(self._tmp_dir.name) / "resumes.db"
        store_settings = replace(settings, resume_db_path=str(db_path), persistence_enabled=True)
        patcher = patch.object(resume_store, "settings", store_settings)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp_dir.cleanup)

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")

    def test_analyze_text_contract_shape(self):
        response = self.client.post(
            "/v1/resumes/analyze",
            json={"text": STRONG_RESUME, "file_name": "john.txt"},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["file_name"], "john.txt")
        self.assertEqual(body["score_label"], "Excellent")
        self.assertEqual(body["score_tone"], "green")
        self.assertFalse(body["saved"])
        self.assertIsNone(body["resume_id"])
        analysis = body["analysis"]
        self.assertEqual(analysis["scores"]["overall"], 100)
        self.assertEqual(analysis["missingElements"], [])
        self.assertEqual(analysis["formattingIssues"], [])
        self.assertEqual(len(analysis["keywords"]["found"]), 15)
        self.assertEqual(
            analysis["sections"],
            {"contact": True, "experience": True, "education": True, "skills": True},
        )

    def test_empty_text_still_returns_result(self):
        response = self.client.post("/v1/resumes/analyze", json={"text": ""})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["analysis"]["scores"]["overall"], 18)
        self.assertEqual(body["score_label"], "Needs Improvement")
        self.assertEqual(body["score_tone"], "red")
        self.assertEqual(len(body["analysis"]["missingElements"]), 4)

    def test_signed_in_analysis_is_saved_and_listed(self):
        headers = {"X-User-Id": "user-abc"}
        response = self.client.post(
            "/v1/resumes/analyze",
            json={"text": STRONG_RESUME, "file_name": "john.txt"},
            headers=headers,
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["saved"])
        resume_id = body["resume_id"]
        self.assertIsInstance(resume_id, int)

        listing = self.client.get("/v1/resumes", headers=headers)
        self.assertEqual(listing.status_code, 200)
        items = listing.json()["items"]
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0]["id"], resume_id)
        self.assertEqual(items[0]["ats_score"], 100)
        self.assertEqual(items[0]["score_label"], "Excellent")

        record = self.client.get(f"/v1/resumes/{resume_id}", headers=headers)
        self.assertEqual(record.status_code, 200)
        record_body = record.json()
        self.assertEqual(record_body["file_content"], STRONG_RESUME)
        self.assertEqual(record_body["analysis_data"], body["analysis"])

        other = self.client.get(f"/v1/resumes/{resume_id}", headers={"X-User-Id": "someone-else"})
        self.assertEqual(other.status_code, 404)

    def test_history_requires_user_identity(self):
        self.assertEqual(self.client.get("/v1/resumes").status_code, 401)
        self.assertEqual(self.client.get("/v1/resumes/1").status_code, 401)

    def test_persistence_failure_does_not_block_result(self):
        with patch.object(
            resume_store,
            "save_resume_analysis",
            side_effect=sqlite3.OperationalError("database is locked"),
        ):
            response = self.client.post(
                "/v1/resumes/analyze",
                json={"text": STRONG_RESUME},
                headers={"X-User-Id": "user-abc"},
            )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertFalse(body["saved"])
        self.assertEqual(body["analysis"]["scores"]["overall"], 100)

    def test_analysis_failure_returns_generic_retry_message(self):
        with patch("app.services.resume_service.analyze_resume", side_effect=RuntimeError("boom")):
            response = self.client.post("/v1/resumes/analyze", json={"text": STRONG_RESUME})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"], "Failed to analyze resume. Please try again.")

    def test_upload_txt(self):
        response = self.client.post(
            "/v1/resumes/upload",
            files={"file": ("john.txt", STRONG_RESUME.encode("utf-8"), "text/plain")},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["file_name"], "john.txt")
        self.assertEqual(body["analysis"]["scores"]["overall"], 100)
        self.assertEqual(body["parsing_warnings"], [])

    def test_upload_empty_txt_is_analyzed(self):
        response = self.client.post(
            "/v1/resumes/upload",
            files={"file": ("empty.txt", b"", "text/plain")},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["analysis"]["scores"]["overall"], 18)
        self.assertEqual(len(body["analysis"]["missingElements"]), 4)

    def test_upload_pdf_is_read_as_plain_text(self):
        response = self.client.post(
            "/v1/resumes/upload",
            files={"file": ("john.pdf", b"%PDF-1.4\nExperience Education Skills", "application/pdf")},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["analysis"]["sections"]["experience"])
        self.assertEqual(len(body["parsing_warnings"]), 1)

    def test_upload_rejects_unsupported_type(self):
        response = self.client.post(
            "/v1/resumes/upload",
            files={"file": ("resume.exe", b"MZ\x90\x00", "application/octet-stream")},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Please upload a valid resume file (.txt, .pdf, or .docx)")

    def test_upload_unreadable_text_prompts_retry(self):
        response = self.client.post(
            "/v1/resumes/upload",
            files={"file": ("resume.txt", b"Resume \xff\xfe broken bytes", "text/plain")},
        )
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["detail"], "Error reading file. Please try again.")

    def test_upload_too_large(self):
        with patch.object(resumes_api, "settings", replace(settings, max_upload_bytes=16)):
            response = self.client.post(
                "/v1/resumes/upload",
                files={"file": ("resume.txt", b"x" * 64, "text/plain")},
            )
        self.assertEqual(response.status_code, 413)


if __name__ == "__main__":
    unittest.main()
