"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from calorie_hunter.adapters.memory_food_repository import InMemoryFoodRepository
from calorie_hunter.config import Settings
from calorie_hunter.containers import AppContainer
from calorie_hunter.services.food_entry import FoodEntryService
from calorie_hunter.services.label_parser import LabelParser
from calorie_hunter.services.label_scan import (
    ImageClient,
    LabelScanService,
    TextRecognizer,
)

GERMAN_LABEL_LINES = [
    "Nährwerte pro 100 g",
    "Brennwert",
    "1046 kJ",
    "250 kcal",
    "Fett",
    "10 g",
    "davon gesättigte Fettsäuren",
    "3 g",
    "Kohlenhydrate",
    "20,5 g",
    "davon Zucker",
    "12 g",
    "Eiweiß",
    "5 g",
    "Salz",
    "0,8 g",
]


@dataclass
class FakeTextRecognizer(TextRecognizer):
    """Fake recognizer returning fixed lines and recording calls."""

    lines: list[str] = field(default_factory=lambda: list(GERMAN_LABEL_LINES))
    error: Exception | None = None
    calls: list[str] = field(default_factory=list)

    async def recognize_lines(self, image_data_url: str) -> list[str]:
        self.calls.append(image_data_url)
        if self.error is not None:
            raise self.error
        return self.lines


@dataclass
class FakeImageClient(ImageClient):
    """Fake image client that returns static bytes."""

    content: bytes = b"\x89PNG\r\n\x1a\nlabel"
    urls: list[str] = field(default_factory=list)

    async def download_image(self, url: str) -> bytes:
        self.urls.append(url)
        return self.content


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture
def recognizer() -> FakeTextRecognizer:
    return FakeTextRecognizer()


@pytest.fixture
def image_client() -> FakeImageClient:
    return FakeImageClient()


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def container(
    settings: Settings,
    recognizer: FakeTextRecognizer,
    image_client: FakeImageClient,
    food_repository: InMemoryFoodRepository,
) -> AppContainer:
    label_parser = LabelParser(debug=settings.label_parser_debug)
    label_scan_service = LabelScanService(
        recognizer=recognizer,
        parser=label_parser,
        image_client=image_client,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        label_parser=label_parser,
        label_scan_service=label_scan_service,
        food_entry_service=FoodEntryService(food_repository),
        close_resources=close_resources,
    )
