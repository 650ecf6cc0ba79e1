"""Field extraction logic for business card OCR text."""

from .card_extractor import CardTextExtractor, extract, extract_phone_number
from .normalization import normalize_lines

__all__ = ['CardTextExtractor', 'extract', 'extract_phone_number', 'normalize_lines']
