"""Domain models for manually entered foods."""

from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID, uuid4


class MealType(Enum):
    """Meal a food entry is filed under."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


@dataclass(frozen=True)
class FoodEntryForm:
    """Raw text of the manual food-entry form."""

    name: str = ""
    grams: str = ""
    calories: str = ""
    protein: str = ""
    carbs: str = ""
    fat: str = ""
    meal_type: str = MealType.BREAKFAST.value
    barcode: str | None = None


@dataclass(frozen=True)
class FoodItem:
    """A saved food, macros per `grams`."""

    name: str
    calories: int
    protein: float
    carbs: float
    fat: float
    grams: float
    meal_type: str
    barcode: str | None = None
    id: UUID = field(default_factory=uuid4)
