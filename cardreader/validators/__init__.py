"""Sanitizers and validators for extracted fields and uploads."""

from .sanitizer import sanitize_candidate, sanitize_email, sanitize_phone, sanitize_text
from .upload import validate_image_upload, detect_image_format

__all__ = [
    'sanitize_candidate',
    'sanitize_email',
    'sanitize_phone',
    'sanitize_text',
    'validate_image_upload',
    'detect_image_format',
]
