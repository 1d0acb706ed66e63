"""Label scanning: OCR an image and parse the recognized text."""

import base64
import logging
from dataclasses import dataclass
from typing import Protocol

from calorie_hunter.domain.labels import NutritionFacts
from calorie_hunter.services.label_parser import LabelParser

_logger = logging.getLogger(__name__)


class EmptyImageError(ValueError):
    """Raised when a label image has no content."""


class TextRecognizer(Protocol):
    """Interface for OCR engines returning text lines top to bottom."""

    async def recognize_lines(self, image_data_url: str) -> list[str]:
        """Return recognized text lines for an image."""


class ImageClient(Protocol):
    """Interface for downloading label images."""

    async def download_image(self, url: str) -> bytes:
        """Download an image and return its bytes."""


@dataclass(frozen=True)
class LabelScanResult:
    """Recognized label text and the facts parsed from it."""

    text: str
    facts: NutritionFacts


@dataclass
class LabelScanService:
    """Service that runs OCR on label photos and parses the result."""

    recognizer: TextRecognizer
    parser: LabelParser
    image_client: ImageClient | None = None

    async def scan(self, image_bytes: bytes) -> LabelScanResult:
        """Recognize text in a label photo and extract nutrition facts."""
        if not image_bytes:
            raise EmptyImageError("Label image is empty")
        lines = await self.recognizer.recognize_lines(_to_data_url(image_bytes))
        text = "\n".join(lines)
        if self.parser.debug:
            _logger.info("Label scan recognized %s lines", len(lines))
        return LabelScanResult(text=text, facts=self.parser.parse(text))

    async def scan_url(self, url: str) -> LabelScanResult:
        """Download a label photo and scan it."""
        if self.image_client is None:
            raise RuntimeError("No image client configured")
        image_bytes = await self.image_client.download_image(url)
        return await self.scan(image_bytes)


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
