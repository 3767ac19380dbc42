from __future__ import annotations

import re

from app.schemas.analysis import SectionFlags

SECTION_PATTERNS: dict[str, re.Pattern[str]] = {
    "contact": re.compile(r"\b(email|phone|linkedin|address|github)\b", re.IGNORECASE | re.ASCII),
    "experience": re.compile(
        r"\b(experience|employment|work history|professional background)\b",
        re.IGNORECASE | re.ASCII,
    ),
    "education": re.compile(
        r"\b(education|degree|university|college|bachelor|master|phd)\b",
        re.IGNORECASE | re.ASCII,
    ),
    "skills": re.compile(
        r"\b(skills|technical skills|competencies|expertise|proficiencies)\b",
        re.IGNORECASE | re.ASCII,
    ),
}

MISSING_SECTION_LABELS: dict[str, str] = {
    "contact": "Contact information section",
    "experience": "Work experience section",
    "education": "Education section",
    "skills": "Skills section",
}


def detect_sections(text: str) -> SectionFlags:
    return SectionFlags(**{name: bool(pattern.search(text)) for name, pattern in SECTION_PATTERNS.items()})


def find_missing_elements(sections: SectionFlags) -> tuple[str, ...]:
    return tuple(label for name, label in MISSING_SECTION_LABELS.items() if not getattr(sections, name))
