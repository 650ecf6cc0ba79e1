"""Logging utilities for card processing and debugging."""

import os
import re
import logging
from typing import Optional, Any

# Global debug mode flag
DEBUG_MODE = os.getenv("CARDREADER_DEBUG", "false").lower() == "true"

# Logger instance
_logger: Optional[logging.Logger] = None

_EMAIL_PATTERN = re.compile(r'[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}')
_DIGIT_RUN_PATTERN = re.compile(r'\+?\d[\d\s().-]{5,}\d')

MAX_LOGGED_TEXT = 2000


def setup_logger(level: int = logging.INFO, debug_mode: bool = None) -> logging.Logger:
    """
    Set up logger for card processing.

    Args:
        level: Logging level (default: INFO)
        debug_mode: Override debug mode (default: from env var)

    Returns:
        Configured logger instance
    """
    global _logger, DEBUG_MODE

    if debug_mode is not None:
        DEBUG_MODE = debug_mode

    if _logger is None:
        _logger = logging.getLogger("cardreader")
        _logger.setLevel(logging.DEBUG if DEBUG_MODE else level)

        handler = logging.StreamHandler()
        handler.setLevel(logging.DEBUG if DEBUG_MODE else level)

        if DEBUG_MODE:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
        else:
            formatter = logging.Formatter('%(levelname)s - %(message)s')

        handler.setFormatter(formatter)
        _logger.addHandler(handler)

        # Prevent duplicate logs
        _logger.propagate = False

    return _logger


def get_logger() -> logging.Logger:
    """Get the global logger instance."""
    if _logger is None:
        return setup_logger()
    return _logger


def redact_contact_data(text: str) -> str:
    """
    Mask email addresses and phone-like digit runs.

    Args:
        text: Text to redact

    Returns:
        Redacted text
    """
    text = _EMAIL_PATTERN.sub('[EMAIL]', text)
    return _DIGIT_RUN_PATTERN.sub('[PHONE]', text)


def log_ocr_text(logger: logging.Logger, text: str, redact: bool = True):
    """
    Log recognized OCR text.

    Only the length is logged outside debug mode.

    Args:
        logger: Logger instance
        text: Raw OCR text
        redact: Whether to mask contact data in the debug dump
    """
    logger.info(f"OCR text length: {len(text)} characters")

    if not DEBUG_MODE:
        return

    shown = text[:MAX_LOGGED_TEXT]
    if redact:
        shown = redact_contact_data(shown)

    logger.debug("=" * 60)
    logger.debug("RAW OCR TEXT:")
    logger.debug("=" * 60)
    logger.debug(shown)
    if len(text) > MAX_LOGGED_TEXT:
        logger.debug(f"... (truncated, total length: {len(text)})")


def log_field_extraction(logger: logging.Logger, field_name: str, value: Any, candidate: Any = None):
    """
    Log field extraction result.

    Args:
        logger: Logger instance
        field_name: Name of the field
        value: Sanitized value (None when unset)
        candidate: Raw candidate, used to tell "not found" from "rejected"

    Contact data in the value is masked unless debug mode is on.
    """
    if value is not None:
        shown = value if DEBUG_MODE else redact_contact_data(str(value))
        logger.info(f"  ✓ {field_name:10s}: {shown}")
    elif candidate is not None:
        logger.info(f"  ✗ {field_name:10s}: None (candidate rejected)")
    else:
        logger.info(f"  ✗ {field_name:10s}: None (not found)")
