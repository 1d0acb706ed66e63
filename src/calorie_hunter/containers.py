"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from calorie_hunter.adapters.image_client import HttpxImageClient
from calorie_hunter.adapters.memory_food_repository import InMemoryFoodRepository
from calorie_hunter.adapters.openai_text_recognizer import OpenAITextRecognizer
from calorie_hunter.config import Settings
from calorie_hunter.domain.predefined_foods import predefined_food_names
from calorie_hunter.services.food_entry import FoodEntryService
from calorie_hunter.services.label_parser import LabelParser
from calorie_hunter.services.label_scan import LabelScanService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    label_parser: LabelParser
    label_scan_service: LabelScanService
    food_entry_service: FoodEntryService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    label_parser = LabelParser(debug=resolved_settings.label_parser_debug)
    recognizer = OpenAITextRecognizer.create(
        api_key=resolved_settings.openai_api_key,
        model=resolved_settings.openai_model,
        store=resolved_settings.openai_store,
    )
    image_client = HttpxImageClient.create()
    label_scan_service = LabelScanService(
        recognizer=recognizer,
        parser=label_parser,
        image_client=image_client,
    )
    food_entry_service = FoodEntryService(
        InMemoryFoodRepository(), reserved_names=predefined_food_names()
    )

    async def close_resources() -> None:
        await recognizer.close()
        await image_client.close()

    return AppContainer(
        settings=resolved_settings,
        label_parser=label_parser,
        label_scan_service=label_scan_service,
        food_entry_service=food_entry_service,
        close_resources=close_resources,
    )
