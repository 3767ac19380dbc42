from __future__ import annotations

from app.schemas.analysis import KeywordCoverage

COMMON_ATS_KEYWORDS: tuple[str, ...] = (
    "experience",
    "skills",
    "education",
    "certification",
    "achievement",
    "management",
    "leadership",
    "project",
    "development",
    "analysis",
    "communication",
    "team",
    "results",
    "performance",
    "strategy",
)


def analyze_keywords(text: str) -> KeywordCoverage:
    lowered = text.lower()
    found = tuple(keyword for keyword in COMMON_ATS_KEYWORDS if keyword in lowered)
    missing = tuple(keyword for keyword in COMMON_ATS_KEYWORDS if keyword not in lowered)
    return KeywordCoverage(found=found, missing=missing)
