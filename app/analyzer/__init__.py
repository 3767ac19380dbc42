from .formatting import detect_formatting_issues, text_length
from .keywords import COMMON_ATS_KEYWORDS, analyze_keywords
from .recommendations import GENERAL_RECOMMENDATIONS, generate_recommendations
from .resume_analyzer import analyze_resume
from .scoring import (
    calculate_content_score,
    calculate_formatting_score,
    calculate_keyword_score,
    calculate_overall_score,
)
from .sections import SECTION_PATTERNS, detect_sections, find_missing_elements

__all__ = [
    "analyze_resume",
    "SECTION_PATTERNS",
    "detect_sections",
    "find_missing_elements",
    "detect_formatting_issues",
    "text_length",
    "COMMON_ATS_KEYWORDS",
    "analyze_keywords",
    "calculate_formatting_score",
    "calculate_content_score",
    "calculate_keyword_score",
    "calculate_overall_score",
    "GENERAL_RECOMMENDATIONS",
    "generate_recommendations",
]
