"""Runtime configuration for the business card reader."""

import os

# Extraction limits
MAX_TEXT_LENGTH = 10_000
MAX_LINES = 20
MAX_LINE_LENGTH = 200
MAX_FIELD_LENGTH = 100
MAX_PHONE_SCAN_LENGTH = 100

# Phone number bounds (international standards)
MIN_PHONE_LENGTH = 7
MAX_PHONE_LENGTH = 15

# Upload gate
MAX_UPLOAD_BYTES = 5 * 1024 * 1024
ALLOWED_EXTENSIONS = ['.png', '.jpg', '.jpeg', '.bmp', '.tiff']

# OCR preprocessing
OCR_MAX_DIMENSION = 1600
OCR_CONTRAST_FACTOR = 1.1
OCR_BINARY_THRESHOLD = 0.5

# Storage
DEFAULT_DB_PATH = "cards.db"


def get_db_path() -> str:
    """Database file from CARDREADER_DB_PATH, falling back to cards.db."""
    return os.getenv("CARDREADER_DB_PATH") or DEFAULT_DB_PATH
