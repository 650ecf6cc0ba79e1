"""Sanitization of untrusted field candidates into trusted contact records."""

from typing import Optional

from cardreader.config import MAX_FIELD_LENGTH, MAX_PHONE_LENGTH
from cardreader.rules import (
    EMAIL_PATTERN,
    PHONE_DISALLOWED,
    UNSAFE_TEXT_CHARS,
    is_valid_phone,
)
from cardreader.schema import CandidateRecord, ContactRecord


def sanitize_text(value: Optional[str], max_length: int = MAX_FIELD_LENGTH) -> Optional[str]:
    """
    Clean a free-text field (name, email, company).

    Markup characters < > " ' & are removed outright (not escaped), the
    result is trimmed and cut to max_length.

    Args:
        value: Untrusted candidate
        max_length: Maximum length of the result

    Returns:
        Sanitized value, or None if nothing usable is left
    """
    if value is None or not value.strip():
        return None

    sanitized = UNSAFE_TEXT_CHARS.sub("", value).strip()
    if not sanitized:
        return None

    return sanitized[:max_length]


def sanitize_email(value: Optional[str]) -> Optional[str]:
    """Sanitize like any text field, then require the result to still be an email address."""
    sanitized = sanitize_text(value)
    if sanitized is None or not EMAIL_PATTERN.search(sanitized):
        return None
    return sanitized


def sanitize_phone(value: Optional[str]) -> Optional[str]:
    """
    Normalize a phone candidate to digits with an optional leading '+'.

    Args:
        value: Untrusted phone candidate

    Returns:
        Normalized phone number, or None if it fails validation
    """
    if value is None or not value.strip():
        return None

    digits = PHONE_DISALLOWED.sub("", value)

    if not is_valid_phone(digits):
        return None

    return digits[:MAX_PHONE_LENGTH]


def sanitize_candidate(candidate: CandidateRecord) -> ContactRecord:
    """
    Turn extraction candidates into a trusted record.

    Each field is handled independently; an invalid candidate only unsets
    its own field.

    Args:
        candidate: CandidateRecord from the extractor

    Returns:
        ContactRecord with no identity assigned yet
    """
    return ContactRecord(
        name=sanitize_text(candidate.name),
        email=sanitize_email(candidate.email),
        phone=sanitize_phone(candidate.phone),
        company=sanitize_text(candidate.company),
    )
