"""Utility modules for logging and debugging."""

from .logger import (
    setup_logger,
    get_logger,
    log_ocr_text,
    log_field_extraction,
    redact_contact_data,
    DEBUG_MODE,
)

__all__ = [
    'setup_logger',
    'get_logger',
    'log_ocr_text',
    'log_field_extraction',
    'redact_contact_data',
    'DEBUG_MODE',
]
