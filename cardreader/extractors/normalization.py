"""Text normalization helpers applied before line analysis."""

from typing import List, Optional

from cardreader.config import MAX_TEXT_LENGTH, MAX_LINES, MAX_LINE_LENGTH
from cardreader.rules import (
    COMPANY_KEYWORDS,
    EMAIL_PATTERN,
    LINE_BREAKS,
    PHONE_DIGIT_RUN,
    PHONE_INTERNATIONAL,
    PHONE_SEPARATORS,
)


def normalize_lines(text: Optional[str]) -> List[str]:
    """
    Split raw OCR text into the lines the extractor analyzes.

    The text is cut to its first 10,000 characters, split on CR/LF, each
    line is trimmed and empty lines are dropped. At most the first 20
    non-empty lines are kept, in their original order.

    Args:
        text: Raw OCR text (may be None)

    Returns:
        List of trimmed, non-empty lines
    """
    if not text or not text.strip():
        return []

    text = text[:MAX_TEXT_LENGTH]

    lines = []
    for raw_line in LINE_BREAKS.split(text):
        line = raw_line.strip()
        if not line:
            continue
        lines.append(line)
        if len(lines) == MAX_LINES:
            break
    return lines


def is_oversized(line: str) -> bool:
    return len(line) > MAX_LINE_LENGTH


def strip_phone_separators(text: str) -> str:
    """Remove spaces, hyphens, parentheses and periods."""
    return PHONE_SEPARATORS.sub("", text)


def contains_company_keyword(text: str) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in COMPANY_KEYWORDS)


def looks_like_email(text: str) -> bool:
    return EMAIL_PATTERN.search(text) is not None


def looks_like_phone(text: str) -> bool:
    """True when the line carries a phone-shaped digit run once separators are removed."""
    cleaned = strip_phone_separators(text)
    return bool(PHONE_DIGIT_RUN.search(cleaned) or PHONE_INTERNATIONAL.search(cleaned))
