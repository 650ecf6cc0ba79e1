"""Card processing pipeline: OCR, extraction, sanitization and storage."""

import time
from typing import Any, Dict, List, Optional

from cardreader.exceptions import InvalidImageError
from cardreader.extractors import CardTextExtractor
from cardreader.schema import CONTACT_FIELDS, ContactRecord
from cardreader.utils import get_logger, log_field_extraction
from cardreader.validators import sanitize_candidate, validate_image_upload

GENERIC_ERROR = "Processing failed. Please try again."


class CardProcessor:
    """Extractor followed by sanitizer. Stateless; safe to share."""

    def process(self, raw_text: Optional[str]) -> ContactRecord:
        """
        Turn raw OCR text into a trusted contact record.

        Never raises for any text input. Fields that could not be found or
        failed validation are None.

        Args:
            raw_text: Raw OCR text (None is treated as empty)

        Returns:
            ContactRecord without storage identity
        """
        logger = get_logger()

        candidate = CardTextExtractor(raw_text).extract()
        record = sanitize_candidate(candidate)

        for field_name in CONTACT_FIELDS:
            log_field_extraction(
                logger,
                field_name,
                getattr(record, field_name),
                candidate=getattr(candidate, field_name)
            )

        return record


_default_processor = CardProcessor()


def process(raw_text: Optional[str]) -> ContactRecord:
    """Extract and sanitize contact fields from raw OCR text."""
    return _default_processor.process(raw_text)


class CardProcessResult:
    """Outcome of processing one uploaded card."""

    def __init__(
        self,
        success: bool,
        data: Optional[ContactRecord] = None,
        error: Optional[str] = None,
        processing_time: float = 0.0
    ):
        """
        Initialize processing result.

        Args:
            success: Whether the card was processed and stored
            data: Stored record (None on failure)
            error: User-facing error message (None on success)
            processing_time: Total processing time in seconds
        """
        self.success = success
        self.data = data
        self.error = error
        self.processing_time = processing_time

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'success': self.success,
            'data': self.data.to_json_dict() if self.data else None,
            'error': self.error,
            'processing_time_seconds': self.processing_time
        }

    def __repr__(self) -> str:
        return f"CardProcessResult(success={self.success}, error={self.error!r})"


class CardPipeline:
    """Full card pipeline orchestrating all steps."""

    def __init__(self, ocr_client, repository, processor: Optional[CardProcessor] = None):
        """
        Initialize card pipeline.

        Args:
            ocr_client: Anything with recognize(image_bytes) -> str
                        (normally a VisionOCRClient)
            repository: Card storage with persist() and list_all()
            processor: Text processor (default: CardProcessor())
        """
        self.ocr_client = ocr_client
        self.repository = repository
        self.processor = processor or CardProcessor()

    def process_and_save(self, image_bytes: bytes) -> ContactRecord:
        """
        Run OCR on an image, extract the contact and store it.

        Pipeline steps:
        1. OCR
        2. Field extraction and sanitization
        3. Persist

        Args:
            image_bytes: Raw image file bytes

        Returns:
            Stored ContactRecord carrying its identity
        """
        logger = get_logger()

        logger.info("Step 1: Performing OCR...")
        text = self.ocr_client.recognize(image_bytes) or ""

        logger.info("Step 2: Extracting fields...")
        record = self.processor.process(text)

        logger.info("Step 3: Saving card...")
        card_id = self.repository.persist(record)

        return record.with_identity(card_id)

    def process_card(self, filename: Optional[str], content: Optional[bytes]) -> CardProcessResult:
        """
        Validate an upload and process it. Never raises.

        Upload gate errors are reported with their own message; any other
        failure is logged and reported with a generic message.

        Args:
            filename: Original upload file name
            content: Uploaded file bytes

        Returns:
            CardProcessResult
        """
        logger = get_logger()
        start_time = time.time()

        logger.info("=" * 60)
        logger.info(f"CARD PIPELINE: {filename}")
        logger.info("=" * 60)

        try:
            validate_image_upload(filename, content)
        except InvalidImageError as e:
            logger.warning(f"Upload rejected: {e}")
            return CardProcessResult(
                success=False,
                error=str(e),
                processing_time=time.time() - start_time
            )

        try:
            record = self.process_and_save(content)
        except Exception:
            logger.exception("Card processing failed")
            return CardProcessResult(
                success=False,
                error=GENERIC_ERROR,
                processing_time=time.time() - start_time
            )

        processing_time = time.time() - start_time
        logger.info(f"Processing time: {processing_time:.2f}s")

        return CardProcessResult(
            success=True,
            data=record,
            processing_time=processing_time
        )

    def get_all(self) -> List[ContactRecord]:
        """All stored cards, newest first."""
        return self.repository.list_all()
