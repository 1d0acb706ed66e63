"""Tests for the label scan service."""

import asyncio

import pytest

from calorie_hunter.domain.labels import NutritionFacts
from calorie_hunter.services.label_parser import LabelParser
from calorie_hunter.services.label_scan import LabelScanService, _to_data_url
from tests.conftest import FakeImageClient, FakeTextRecognizer


def test_scan_joins_lines_and_parses() -> None:
    recognizer = FakeTextRecognizer(lines=["Energie", "1046 kJ", "250 kcal"])
    service = LabelScanService(recognizer=recognizer, parser=LabelParser())

    result = asyncio.run(service.scan(b"\xff\xd8\xffimage"))

    assert result.text == "Energie\n1046 kJ\n250 kcal"
    assert result.facts == NutritionFacts(calories=250)
    assert recognizer.calls[0].startswith("data:image/jpeg;base64,")


def test_scan_rejects_empty_image() -> None:
    recognizer = FakeTextRecognizer()
    service = LabelScanService(recognizer=recognizer, parser=LabelParser())

    with pytest.raises(ValueError, match="empty"):
        asyncio.run(service.scan(b""))
    assert not recognizer.calls


def test_scan_propagates_recognizer_errors() -> None:
    recognizer = FakeTextRecognizer(error=RuntimeError("ocr down"))
    service = LabelScanService(recognizer=recognizer, parser=LabelParser())

    with pytest.raises(RuntimeError, match="ocr down"):
        asyncio.run(service.scan(b"image"))


def test_scan_with_no_text_returns_empty_facts() -> None:
    service = LabelScanService(
        recognizer=FakeTextRecognizer(lines=[]), parser=LabelParser()
    )

    result = asyncio.run(service.scan(b"image"))

    assert result.text == ""
    assert result.facts == NutritionFacts()


def test_scan_url_downloads_then_scans() -> None:
    image_client = FakeImageClient()
    recognizer = FakeTextRecognizer(lines=["Fett", "10 g"])
    service = LabelScanService(
        recognizer=recognizer, parser=LabelParser(), image_client=image_client
    )

    result = asyncio.run(service.scan_url("https://example.com/label.png"))

    assert image_client.urls == ["https://example.com/label.png"]
    assert recognizer.calls[0].startswith("data:image/png;base64,")
    assert result.facts.fat == 10


def test_scan_url_requires_image_client() -> None:
    service = LabelScanService(recognizer=FakeTextRecognizer(), parser=LabelParser())

    with pytest.raises(RuntimeError):
        asyncio.run(service.scan_url("https://example.com/label.png"))


def test_to_data_url_detects_webp() -> None:
    data = b"RIFF\x00\x00\x00\x00WEBPrest"

    assert _to_data_url(data).startswith("data:image/webp;base64,")


def test_to_data_url_defaults_to_jpeg() -> None:
    assert _to_data_url(b"unknown").startswith("data:image/jpeg;base64,")
