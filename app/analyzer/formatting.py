from __future__ import annotations

import re

MIN_LENGTH = 200
MAX_LENGTH = 10000
MAX_SPECIAL_CHARS = 50
BULLET_HINT_MIN_LENGTH = 500

ISSUE_TOO_SHORT = "Resume appears too short (less than 200 characters)"
ISSUE_TOO_LONG = "Resume is too long - consider condensing to 1-2 pages"
ISSUE_SPECIAL_CHARS = "Contains unusual special characters that may confuse ATS"
ISSUE_NO_EMAIL = "No email address detected"
ISSUE_NO_PHONE = "No phone number detected"
ISSUE_NO_BULLETS = "Consider using bullet points for better readability"

# ECMAScript whitespace and line terminators. Other control characters
# (\x1c-\x1f, \x85) count as special; U+FEFF does not.
_WHITESPACE = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_SPECIAL_CHAR_PATTERN = re.compile(r"[^A-Za-z0-9_" + _WHITESPACE + r"@.\-,():;'\"/]")
_EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b", re.ASCII)
_PHONE_PATTERN = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b", re.ASCII)
_BULLET_PATTERN = re.compile(r"[•●◦▪▫]")


def text_length(text: str) -> int:
    """Length in UTF-16 code units, so astral characters count twice."""
    return len(text.encode("utf-16-le")) // 2


def count_special_characters(text: str) -> int:
    return text_length("".join(_SPECIAL_CHAR_PATTERN.findall(text)))


def has_email(text: str) -> bool:
    return _EMAIL_PATTERN.search(text) is not None


def has_phone(text: str) -> bool:
    return _PHONE_PATTERN.search(text) is not None


def count_bullets(text: str) -> int:
    return len(_BULLET_PATTERN.findall(text))


def detect_formatting_issues(text: str) -> tuple[str, ...]:
    length = text_length(text)
    issues: list[str] = []

    if length < MIN_LENGTH:
        issues.append(ISSUE_TOO_SHORT)
    if length > MAX_LENGTH:
        issues.append(ISSUE_TOO_LONG)
    if count_special_characters(text) > MAX_SPECIAL_CHARS:
        issues.append(ISSUE_SPECIAL_CHARS)
    if not has_email(text):
        issues.append(ISSUE_NO_EMAIL)
    if not has_phone(text):
        issues.append(ISSUE_NO_PHONE)
    if count_bullets(text) == 0 and length > BULLET_HINT_MIN_LENGTH:
        issues.append(ISSUE_NO_BULLETS)

    return tuple(issues)
