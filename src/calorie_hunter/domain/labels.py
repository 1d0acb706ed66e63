"""Domain models for nutrition label parsing."""

from dataclasses import dataclass
from enum import Enum


class RowKind(Enum):
    """Semantic kind of a nutrition label headline row."""

    ENERGY = "energy"
    FAT = "fat"
    SATURATED_FAT = "saturated-fat"
    CARBOHYDRATE = "carbohydrate"
    SUGAR = "sugar"
    FIBER = "fiber"
    PROTEIN = "protein"
    SALT = "salt"
    OTHER = "other"


@dataclass(frozen=True)
class ValueLine:
    """A label line carrying a nutrient amount."""

    raw: str
    value: float
    is_kcal: bool


@dataclass(frozen=True)
class NutritionFacts:
    """Macros read from a nutrition label; unset fields were not found."""

    calories: int | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
