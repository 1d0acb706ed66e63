"""Pydantic request and response models for the HTTP API."""

from uuid import UUID

from pydantic import BaseModel, Field


class NutritionFactsModel(BaseModel):
    """Parsed label macros; null means the label did not yield the value."""

    calories: int | None = None
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None


class ParseLabelRequest(BaseModel):
    """OCR text to parse."""

    text: str
    debug: bool = False


class ScanUrlRequest(BaseModel):
    """Location of a label photo."""

    url: str = Field(min_length=1)


class LabelScanResponse(BaseModel):
    """Recognized text and parsed macros."""

    text: str
    facts: NutritionFactsModel


class FoodEntryFormModel(BaseModel):
    """Manual food-entry form as typed by the user."""

    name: str = ""
    grams: str = ""
    calories: str = ""
    protein: str = ""
    carbs: str = ""
    fat: str = ""
    meal_type: str = "Breakfast"
    barcode: str | None = None


class PrefillRequest(BaseModel):
    """Form state plus label facts to merge into it."""

    form: FoodEntryFormModel = Field(default_factory=FoodEntryFormModel)
    facts: NutritionFactsModel


class FoodItemModel(BaseModel):
    """Stored food."""

    id: UUID
    name: str
    calories: int
    protein: float
    carbs: float
    fat: float
    grams: float
    meal_type: str
    barcode: str | None = None
