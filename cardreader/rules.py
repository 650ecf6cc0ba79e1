"""Compiled patterns and validity predicates shared across the package.

Patterns are compiled once at import and never mutated.
"""

import re
from typing import Optional

from cardreader.config import MIN_PHONE_LENGTH, MAX_PHONE_LENGTH, MAX_FIELD_LENGTH

EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

# Characters dropped before phone matching
PHONE_SEPARATORS = re.compile(r"[ \-().]")

PHONE_DIGIT_RUN = re.compile(r"\b\d{7,15}\b")
PHONE_INTERNATIONAL = re.compile(r"\+?[1-9]\d{6,14}")
PHONE_FORMATTED = re.compile(r"\b\d{3}[-.\s]?\d{3}[-.\s]?\d{4,5}\b")
PHONE_FORMATTED_SEPARATORS = re.compile(r"[-.\s]")

PHONE_DISALLOWED = re.compile(r"[^\d+]")
PHONE_SHAPE = re.compile(r"^\+?\d+$")
PHONE_REJECTED_SHAPES = [
    re.compile(r"^\d{1,6}$"),   # too short
    re.compile(r"^0+$"),        # all zeros
    re.compile(r"^1+$"),        # all ones
    re.compile(r"^1234567"),    # sequential
    re.compile(r"^999"),        # test numbers
    re.compile(r"^000"),
]

UNSAFE_TEXT_CHARS = re.compile(r"[<>\"'&]")

LINE_BREAKS = re.compile(r"[\r\n]")

COMPANY_KEYWORDS = (
    "inc", "corp", "company", "ltd", "llc", "gmbh", "co", "group",
    "enterprises", "technologies", "solutions", "consulting", "services",
    "corporation", "limited",
)


def is_valid_phone(phone: Optional[str]) -> bool:
    """
    Strict phone number check.

    The value must be 7-15 characters long, an optional leading '+'
    followed by digits only, and its digits must not look like a
    placeholder (all zeros, all ones, 1234567..., 999..., 000...).

    Args:
        phone: Normalized phone string

    Returns:
        True if the phone number is acceptable
    """
    if not phone or not phone.strip():
        return False

    if len(phone) < MIN_PHONE_LENGTH or len(phone) > MAX_PHONE_LENGTH:
        return False

    if not PHONE_SHAPE.fullmatch(phone):
        return False

    # Placeholder shapes apply to the digits, with or without a leading '+'
    digits = phone[1:] if phone.startswith("+") else phone
    return not any(pattern.search(digits) for pattern in PHONE_REJECTED_SHAPES)


def is_safe_text(value: str, max_length: int = MAX_FIELD_LENGTH) -> bool:
    """True when a trusted text value is non-blank, bounded and free of markup characters."""
    return (
        bool(value)
        and bool(value.strip())
        and len(value) <= max_length
        and UNSAFE_TEXT_CHARS.search(value) is None
    )
