"""Pytest configuration and fixtures."""

import io

import pytest
from PIL import Image

from cardreader.pipeline import CardPipeline, CardProcessor
from cardreader.storage import CardRepository


class FakeOCRClient:
    """Stands in for VisionOCRClient; returns canned text."""

    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def recognize(self, image_bytes):
        self.calls.append(image_bytes)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def sample_card_text():
    """OCR text of a typical card."""
    return "John Smith\njohn@example.com\n+1 415 555 0100\nAcme Corp Inc"


@pytest.fixture
def processor():
    return CardProcessor()


@pytest.fixture
def repository():
    """In-memory card repository."""
    repo = CardRepository(":memory:")
    yield repo
    repo.close()


@pytest.fixture
def fake_ocr(sample_card_text):
    return FakeOCRClient(text=sample_card_text)


@pytest.fixture
def pipeline(fake_ocr, repository):
    """Pipeline wired to the fake OCR client and in-memory storage."""
    return CardPipeline(ocr_client=fake_ocr, repository=repository)


@pytest.fixture
def png_bytes():
    """A small white PNG with a dark bar."""
    image = Image.new("RGB", (400, 200), "white")
    for x in range(50, 350):
        for y in range(90, 110):
            image.putpixel((x, y), (20, 20, 20))
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def ocr_factory():
    """Build fake OCR clients with custom text or errors."""
    return FakeOCRClient
