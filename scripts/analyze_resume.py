from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.analyzer import analyze_resume  # noqa: E402
from app.parsing.file_security import InvalidUploadError, UnreadableUploadError  # noqa: E402
from app.parsing.parse import parse_document  # noqa: E402
from app.services.report import render_text_report, score_label  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score a resume file against common ATS screening rules.")
    parser.add_argument("path", help="Resume file (.txt, .pdf or .docx)")
    parser.add_argument("--json", action="store_true", help="Print the analysis as JSON instead of a report")
    args = parser.parse_args(argv)

    try:
        parsed = parse_document(args.path)
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except (InvalidUploadError, UnreadableUploadError) as exc:
        print(f"{args.path}: {exc}", file=sys.stderr)
        return 2

    for warning in parsed.parsing_warnings:
        print(f"warning: {warning}", file=sys.stderr)

    result = analyze_resume(parsed.text)
    if args.json:
        payload = {
            "file_name": parsed.file_name,
            "score_label": score_label(result.scores.overall),
            "analysis": result.model_dump(mode="json", by_alias=True),
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(render_text_report(result, parsed.file_name))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
