"""Business card reader: OCR text to sanitized contact records."""

__version__ = "0.1.0"
