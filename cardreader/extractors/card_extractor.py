"""Line-order field extraction from raw business card OCR text."""

from typing import List, Optional

from cardreader.config import MAX_FIELD_LENGTH, MAX_PHONE_SCAN_LENGTH
from cardreader.rules import (
    EMAIL_PATTERN,
    PHONE_DIGIT_RUN,
    PHONE_FORMATTED,
    PHONE_FORMATTED_SEPARATORS,
    PHONE_INTERNATIONAL,
    is_valid_phone,
)
from cardreader.schema import CandidateRecord
from cardreader.extractors.normalization import (
    contains_company_keyword,
    is_oversized,
    looks_like_email,
    looks_like_phone,
    normalize_lines,
    strip_phone_separators,
)


def extract_phone_number(line: str) -> Optional[str]:
    """
    Pull a phone number candidate out of a single line.

    Tried in order, first hit wins:
    1. 7-15 digit run in the line with separators removed (a '+' right
       before the run is re-attached)
    2. international form (+ and a non-zero digit, 6-14 more digits)
    3. ddd-ddd-dddd(d) on the original line, separators stripped

    Args:
        line: One OCR line (only the first 100 characters are scanned)

    Returns:
        Phone candidate or None
    """
    line = line[:MAX_PHONE_SCAN_LENGTH]

    cleaned = strip_phone_separators(line)

    simple_match = PHONE_DIGIT_RUN.search(cleaned)
    if simple_match:
        start = simple_match.start()
        if start > 0 and cleaned[start - 1] == "+":
            return "+" + simple_match.group()
        return simple_match.group()

    international_match = PHONE_INTERNATIONAL.search(cleaned)
    if international_match:
        return international_match.group()

    formatted_match = PHONE_FORMATTED.search(line)
    if formatted_match:
        return PHONE_FORMATTED_SEPARATORS.sub("", formatted_match.group())

    return None


class CardTextExtractor:
    """Rule-based extractor assigning at most one candidate per contact field."""

    def __init__(self, text: Optional[str]):
        """
        Initialize extractor with raw OCR text.

        Args:
            text: Raw OCR text; None and empty strings are accepted
        """
        self.lines: List[str] = normalize_lines(text)

    def extract(self) -> CandidateRecord:
        """
        Extract name, email, phone and company candidates.

        Returns:
            CandidateRecord (all fields None when nothing was found)
        """
        if not self.lines:
            return CandidateRecord()

        email = None
        phone = None
        company = None

        for line in self.lines:
            if is_oversized(line):
                continue

            if email is None:
                email = self._match_email(line)

            if phone is None:
                phone = self._match_phone(line)

            if company is None and self._is_company_line(line, email, phone):
                company = line[:MAX_FIELD_LENGTH]

        return CandidateRecord(
            name=self._find_name(),
            email=email,
            phone=phone,
            company=company,
        )

    def _match_email(self, line: str) -> Optional[str]:
        match = EMAIL_PATTERN.search(line)
        if match and len(match.group()) <= MAX_FIELD_LENGTH:
            return match.group()
        return None

    def _match_phone(self, line: str) -> Optional[str]:
        candidate = extract_phone_number(line)
        if candidate is not None and is_valid_phone(candidate):
            return candidate
        return None

    def _is_company_line(self, line: str, email: Optional[str], phone: Optional[str]) -> bool:
        return contains_company_keyword(line) and line != email and line != phone

    def _find_name(self) -> Optional[str]:
        """First line that is neither email, phone nor company, with 2 < length <= 100."""
        for line in self.lines:
            if looks_like_email(line) or looks_like_phone(line):
                continue
            if contains_company_keyword(line):
                continue
            if 2 < len(line) <= MAX_FIELD_LENGTH:
                return line
        return None


def extract(text: Optional[str]) -> CandidateRecord:
    """Extract field candidates from raw OCR text."""
    return CardTextExtractor(text).extract()
