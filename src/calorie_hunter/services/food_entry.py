"""Manual food entry: label prefill, validation and storage."""

import math
from dataclasses import dataclass, field, replace
from typing import Protocol
from uuid import UUID

from calorie_hunter.domain.foods import FoodEntryForm, FoodItem, MealType
from calorie_hunter.domain.labels import NutritionFacts

REFERENCE_GRAMS = 100.0


class FoodEntryError(ValueError):
    """Raised when a manual food entry fails validation."""

    def __init__(self, messages: list[str]) -> None:
        super().__init__("; ".join(messages))
        self.messages = messages


class FoodRepository(Protocol):
    """Persistence interface for user-defined foods."""

    def list_foods(self) -> list[FoodItem]:
        """Return all stored foods."""

    def add_food(self, food: FoodItem) -> None:
        """Store a food."""

    def remove_food(self, food_id: UUID) -> bool:
        """Remove a food by id; return whether it existed."""


def prefill(form: FoodEntryForm, facts: NutritionFacts) -> FoodEntryForm:
    """Copy parsed label values into the form, keeping fields the label lacked."""
    updates: dict[str, str] = {}
    if facts.calories is not None:
        updates["calories"] = str(facts.calories)
    if facts.protein is not None:
        updates["protein"] = str(facts.protein)
    if facts.carbs is not None:
        updates["carbs"] = str(facts.carbs)
    if facts.fat is not None:
        updates["fat"] = str(facts.fat)
    return replace(form, **updates)


def parse_decimal(text: str) -> float | None:
    """Parse user-typed decimal text, accepting a comma separator."""
    try:
        value = float(text.strip().replace(",", "."))
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


@dataclass
class FoodEntryService:
    """Application service for manually entered foods."""

    repository: FoodRepository
    reserved_names: frozenset[str] = field(default_factory=frozenset)

    def list_foods(self) -> list[FoodItem]:
        """Return stored foods."""
        return self.repository.list_foods()

    def add_food(self, form: FoodEntryForm) -> FoodItem:
        """Validate the form and store it as a food per 100 g."""
        food = self._validate(form)
        self.repository.add_food(food)
        return food

    def remove_food(self, food_id: UUID) -> bool:
        """Remove a stored food."""
        return self.repository.remove_food(food_id)

    def _validate(self, form: FoodEntryForm) -> FoodItem:
        numbers = [
            parse_decimal(text)
            for text in (form.grams, form.calories, form.protein, form.carbs, form.fat)
        ]
        if not form.name.strip() or any(number is None for number in numbers):
            raise FoodEntryError(["All fields must be filled correctly."])
        grams, calories, protein, carbs, fat = numbers

        if grams != REFERENCE_GRAMS:
            raise FoodEntryError(["Grams must be exactly 100."])

        name = form.name.strip()
        taken = {existing.lower() for existing in self.reserved_names}
        taken.update(food.name.lower() for food in self.repository.list_foods())
        if name.lower() in taken:
            raise FoodEntryError(["A food with this name already exists."])

        meal_types = [meal.value for meal in MealType]
        if form.meal_type not in meal_types:
            raise FoodEntryError(
                [f"Meal type must be one of: {', '.join(meal_types)}."]
            )

        return FoodItem(
            name=name,
            calories=int(calories),
            protein=protein,
            carbs=carbs,
            fat=fat,
            grams=REFERENCE_GRAMS,
            meal_type=form.meal_type,
            barcode=form.barcode,
        )
