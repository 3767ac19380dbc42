from __future__ import annotations

from app.core.config.scoring import get_scoring_value
from app.schemas.analysis import SECTION_NAMES, AnalysisResult


def score_label(score: int) -> str:
    if score >= int(get_scoring_value("labels.excellent", 80)):
        return "Excellent"
    if score >= int(get_scoring_value("labels.good", 60)):
        return "Good"
    if score >= int(get_scoring_value("labels.fair", 40)):
        return "Fair"
    return "Needs Improvement"


def score_tone(score: int) -> str:
    if score >= int(get_scoring_value("tones.green", 80)):
        return "green"
    if score >= int(get_scoring_value("tones.yellow", 60)):
        return "yellow"
    return "red"


def _bullet_block(title: str, items: tuple[str, ...] | list[str], empty: str = "none") -> list[str]:
    lines = [f"{title}:"]
    if not items:
        lines.append(f"  {empty}")
        return lines
    lines.extend(f"  - {item}" for item in items)
    return lines


def render_text_report(result: AnalysisResult, file_name: str) -> str:
    """Render an analysis as a plain-text report for terminals and logs."""
    scores = result.scores
    lines = [
        f"ATS analysis: {file_name}",
        f"Overall score: {scores.overall}/100 ({score_label(scores.overall)})",
        f"  Formatting: {scores.formatting}/100",
        f"  Content:    {scores.content}/100",
        f"  Keywords:   {scores.keywords}/100",
        "",
        "Detected sections:",
    ]
    for name in SECTION_NAMES:
        mark = "x" if getattr(result.sections, name) else " "
        lines.append(f"  [{mark}] {name.capitalize()}")
    lines.append("")
    lines.extend(_bullet_block("Missing elements", result.missing_elements))
    lines.extend(_bullet_block("Formatting issues", result.formatting_issues))
    lines.append("")
    found = result.keywords.found
    missing = result.keywords.missing
    lines.append(f"Keywords found ({len(found)}): {', '.join(found) or 'none'}")
    lines.append(f"Keywords missing ({len(missing)}): {', '.join(missing) or 'none'}")
    lines.append("")
    lines.extend(_bullet_block("Recommendations", result.recommendations))
    return "\n".join(lines)
