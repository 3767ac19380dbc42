from __future__ import annotations

import math

from app.analyzer.formatting import MAX_LENGTH, MIN_LENGTH, text_length
from app.analyzer.keywords import COMMON_ATS_KEYWORDS
from app.schemas.analysis import KeywordCoverage, SectionFlags

ISSUE_PENALTY = 10
SHORT_TEXT_PENALTY = 20
LONG_TEXT_PENALTY = 15
MISSING_SECTION_PENALTY = 20
FEW_SECTIONS_PENALTY = 15
MIN_PRESENT_SECTIONS = 3


def _clamp(score: float) -> int:
    return int(max(0, min(100, score)))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_formatting_score(issues: tuple[str, ...], text: str) -> int:
    # Short/long text is penalized here on top of its issue entry.
    length = text_length(text)
    score = 100 - len(issues) * ISSUE_PENALTY
    if length < MIN_LENGTH:
        score -= SHORT_TEXT_PENALTY
    if length > MAX_LENGTH:
        score -= LONG_TEXT_PENALTY
    return _clamp(score)


def calculate_content_score(sections: SectionFlags, missing_elements: tuple[str, ...]) -> int:
    score = 100 - len(missing_elements) * MISSING_SECTION_PENALTY
    if sections.present_count < MIN_PRESENT_SECTIONS:
        score -= FEW_SECTIONS_PENALTY
    return _clamp(score)


def calculate_keyword_score(keywords: KeywordCoverage) -> int:
    return _clamp(round_half_up(len(keywords.found) / len(COMMON_ATS_KEYWORDS) * 100))


def calculate_overall_score(formatting: int, content: int, keywords: int) -> int:
    return _clamp(round_half_up((formatting + content + keywords) / 3))
