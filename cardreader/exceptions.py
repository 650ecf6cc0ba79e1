"""Exceptions raised by the collaborators around the extraction core."""


class CardReaderError(Exception):
    """Base class for card reader errors."""


class InvalidImageError(CardReaderError, ValueError):
    """Uploaded file failed the type/size gate. The message is user-facing."""


class OCRError(CardReaderError):
    """OCR backend failed or the image could not be decoded."""


class StorageError(CardReaderError):
    """Persisting or listing cards failed."""
