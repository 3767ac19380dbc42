from __future__ import annotations

from app.schemas.analysis import KeywordCoverage, SectionFlags

CONTACT_RECOMMENDATION = "Include clear contact information at the top (name, email, phone, LinkedIn)"
FORMATTING_RECOMMENDATION = "Address formatting issues to improve ATS readability"
MORE_KEYWORDS_RECOMMENDATION = "Include more relevant industry keywords and action verbs"
SPECIFIC_SKILLS_RECOMMENDATION = "Consider adding more specific technical skills and accomplishments"

GENERAL_RECOMMENDATIONS: tuple[str, ...] = (
    'Use standard section headings like "Work Experience", "Education", "Skills"',
    "Quantify achievements with metrics and numbers where possible",
    "Avoid headers, footers, tables, and complex formatting",
    "Save as .docx or .pdf format for best ATS compatibility",
)

MAX_FORMATTING_ISSUES = 2
LOW_KEYWORD_COUNT = 5
GOOD_KEYWORD_COUNT = 10


def generate_recommendations(
    sections: SectionFlags,
    missing_elements: tuple[str, ...],
    formatting_issues: tuple[str, ...],
    keywords: KeywordCoverage,
) -> tuple[str, ...]:
    recommendations: list[str] = []
    found_count = len(keywords.found)

    if missing_elements:
        recommendations.append(f"Add missing sections: {', '.join(missing_elements)}")
    if not sections.contact:
        recommendations.append(CONTACT_RECOMMENDATION)
    if len(formatting_issues) > MAX_FORMATTING_ISSUES:
        recommendations.append(FORMATTING_RECOMMENDATION)
    if found_count < LOW_KEYWORD_COUNT:
        recommendations.append(MORE_KEYWORDS_RECOMMENDATION)
    if LOW_KEYWORD_COUNT <= found_count < GOOD_KEYWORD_COUNT:
        recommendations.append(SPECIFIC_SKILLS_RECOMMENDATION)

    recommendations.extend(GENERAL_RECOMMENDATIONS)
    return tuple(recommendations)
