"""Image preprocessing applied before OCR."""

import io

from PIL import Image, ImageEnhance, ImageOps, UnidentifiedImageError

from cardreader.config import OCR_MAX_DIMENSION, OCR_CONTRAST_FACTOR, OCR_BINARY_THRESHOLD
from cardreader.exceptions import OCRError


def preprocess_image(image_bytes: bytes) -> bytes:
    """
    Prepare a card photo for text detection.

    Steps: orient from EXIF, shrink to fit 1600x1600, grayscale, slight
    contrast boost, binary threshold at 50%. The result is PNG encoded.

    Args:
        image_bytes: Raw image file bytes

    Returns:
        PNG bytes of the processed image

    Raises:
        OCRError: if the bytes cannot be decoded as an image
    """
    try:
        image = Image.open(io.BytesIO(image_bytes))
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise OCRError(f"Cannot decode image: {e}") from e

    image = ImageOps.exif_transpose(image)
    image.thumbnail((OCR_MAX_DIMENSION, OCR_MAX_DIMENSION))

    image = image.convert("L")
    image = ImageEnhance.Contrast(image).enhance(OCR_CONTRAST_FACTOR)

    threshold = int(255 * OCR_BINARY_THRESHOLD)
    image = image.point(lambda p: 255 if p > threshold else 0)

    output = io.BytesIO()
    image.save(output, format="PNG")
    return output.getvalue()
