"""Coarse file-type and size gate for uploaded card images."""

from pathlib import Path
from typing import Optional

from cardreader.config import ALLOWED_EXTENSIONS, MAX_UPLOAD_BYTES
from cardreader.exceptions import InvalidImageError

# Magic bytes of the accepted image formats
IMAGE_SIGNATURES = {
    'PNG': b'\x89PNG',
    'JPEG': b'\xff\xd8\xff',
    'BMP': b'BM',
    'TIFF_LE': b'II*\x00',
    'TIFF_BE': b'MM\x00*',
}


def detect_image_format(header: bytes) -> Optional[str]:
    """Return the format name matching the file header, if any."""
    for name, signature in IMAGE_SIGNATURES.items():
        if header.startswith(signature):
            return name.split('_')[0]
    return None


def validate_image_upload(filename: Optional[str], content: Optional[bytes]) -> str:
    """
    Check an uploaded file before it is sent to OCR.

    Args:
        filename: Original file name (used for the extension check)
        content: Raw file bytes

    Returns:
        Detected image format (PNG, JPEG, BMP or TIFF)

    Raises:
        InvalidImageError: with a message suitable for showing to the user
    """
    if not content:
        raise InvalidImageError("Please select a file.")

    if len(content) > MAX_UPLOAD_BYTES:
        raise InvalidImageError("File size too large. Maximum size is 5MB.")

    extension = Path(filename or "").suffix.lower()
    if extension not in ALLOWED_EXTENSIONS:
        raise InvalidImageError(
            "Invalid file format. Supported formats: PNG, JPG, JPEG, BMP, TIFF."
        )

    image_format = detect_image_format(content[:8])
    if image_format is None:
        raise InvalidImageError("Invalid image file.")

    return image_format
