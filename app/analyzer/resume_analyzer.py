from __future__ import annotations

from app.analyzer.formatting import detect_formatting_issues
from app.analyzer.keywords import analyze_keywords
from app.analyzer.recommendations import generate_recommendations
from app.analyzer.scoring import (
    calculate_content_score,
    calculate_formatting_score,
    calculate_keyword_score,
    calculate_overall_score,
)
from app.analyzer.sections import detect_sections, find_missing_elements
from app.schemas.analysis import AnalysisResult, ScoreCard


def analyze_resume(text: str) -> AnalysisResult:
    """Score plain resume text against common ATS screening heuristics.

    Pure and total: any string, including an empty one, yields a complete
    result with every score in [0, 100].
    """
    sections = detect_sections(text)
    missing_elements = find_missing_elements(sections)
    formatting_issues = detect_formatting_issues(text)
    keywords = analyze_keywords(text)

    formatting_score = calculate_formatting_score(formatting_issues, text)
    content_score = calculate_content_score(sections, missing_elements)
    keyword_score = calculate_keyword_score(keywords)
    overall_score = calculate_overall_score(formatting_score, content_score, keyword_score)

    recommendations = generate_recommendations(sections, missing_elements, formatting_issues, keywords)

    return AnalysisResult(
        sections=sections,
        missing_elements=missing_elements,
        formatting_issues=formatting_issues,
        keywords=keywords,
        recommendations=recommendations,
        scores=ScoreCard(
            formatting=formatting_score,
            content=content_score,
            keywords=keyword_score,
            overall=overall_score,
        ),
    )
