"""Google Cloud Vision API client for business card OCR."""

import os
from typing import Any, Dict, List, Optional

from google.cloud import vision

from cardreader.exceptions import OCRError
from cardreader.ocr.preprocessing import preprocess_image


class OCRResult:
    """Container for OCR extraction results."""

    def __init__(
        self,
        full_text: str,
        confidence: Optional[float],
        raw_response: Dict[str, Any]
    ):
        """
        Initialize OCR result.

        Args:
            full_text: Complete extracted text
            confidence: Mean word confidence (None if the API gave none)
            raw_response: Raw API response for debugging
        """
        self.full_text = full_text
        self.confidence = confidence
        self.raw_response = raw_response

    def to_dict(self) -> Dict[str, Any]:
        """Convert OCR result to dictionary."""
        return {
            'full_text': self.full_text,
            'confidence': self.confidence,
            'raw_response': self.raw_response
        }

    def __repr__(self) -> str:
        return f"OCRResult(full_text_length={len(self.full_text)}, confidence={self.confidence})"


class VisionOCRClient:
    """Client for Google Cloud Vision API OCR operations."""

    def __init__(self, credentials_path: Optional[str] = None, preprocess: bool = True):
        """
        Initialize Vision OCR client.

        Args:
            credentials_path: Path to Google Cloud service account JSON file.
                            If None, uses GOOGLE_APPLICATION_CREDENTIALS env var.
            preprocess: Whether to grayscale/threshold the image before OCR
        """
        if credentials_path:
            os.environ['GOOGLE_APPLICATION_CREDENTIALS'] = credentials_path

        self.preprocess = preprocess
        self.client = vision.ImageAnnotatorClient()

    def recognize(self, image_bytes: bytes) -> str:
        """
        Recognize the text on a card image.

        Args:
            image_bytes: Raw image file bytes

        Returns:
            Recognized text ("" when the card has no text)
        """
        return self.extract_text(image_bytes).full_text

    def extract_text(self, image_bytes: bytes) -> OCRResult:
        """
        Run DOCUMENT_TEXT_DETECTION on an image.

        Args:
            image_bytes: Raw image file bytes

        Returns:
            OCRResult with the full text and confidence

        Raises:
            OCRError: if the image cannot be decoded or the API reports an error
        """
        from cardreader.utils import get_logger, log_ocr_text
        logger = get_logger()

        content = preprocess_image(image_bytes) if self.preprocess else image_bytes
        image = vision.Image(content=content)

        response = self.client.document_text_detection(image=image)

        if response.error.message:
            raise OCRError(f"API Error: {response.error.message}")

        full_text_annotation = response.full_text_annotation
        full_text = full_text_annotation.text if full_text_annotation else ""

        confidence = self._mean_word_confidence(full_text_annotation)

        log_ocr_text(logger, full_text)
        if confidence is not None:
            logger.info(f"OCR word confidence: mean={confidence:.3f}")

        return OCRResult(
            full_text=full_text,
            confidence=confidence,
            raw_response=self._serialize_response(response)
        )

    def _mean_word_confidence(self, full_text_annotation) -> Optional[float]:
        """Average confidence over all recognized words."""
        if not full_text_annotation or not full_text_annotation.pages:
            return None

        confidences: List[float] = []
        for page in full_text_annotation.pages:
            for block in page.blocks:
                for paragraph in block.paragraphs:
                    for word in paragraph.words:
                        if word.confidence is not None:
                            confidences.append(word.confidence)

        if confidences:
            return sum(confidences) / len(confidences)
        return None

    def _serialize_response(self, response) -> Dict[str, Any]:
        """Serialize API response to dictionary for debugging."""
        try:
            from google.protobuf.json_format import MessageToDict
            return MessageToDict(response._pb)
        except (ImportError, AttributeError) as e:
            return {
                'has_full_text_annotation': response.full_text_annotation is not None,
                'serialization_error': str(e)
            }
