"""OCR module for reading card images with Google Cloud Vision API."""

from .vision_client import VisionOCRClient, OCRResult
from .preprocessing import preprocess_image

__all__ = ['VisionOCRClient', 'OCRResult', 'preprocess_image']
