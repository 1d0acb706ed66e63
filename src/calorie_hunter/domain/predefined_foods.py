"""Built-in foods available to every user, macros per 100 g."""

from calorie_hunter.domain.foods import FoodItem


def _food(  # noqa: PLR0913
    name: str, calories: int, protein: float, carbs: float, fat: float, meal_type: str
) -> FoodItem:
    return FoodItem(
        name=name,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        grams=100.0,
        meal_type=meal_type,
    )


PREDEFINED_FOODS: tuple[FoodItem, ...] = (
    _food("Apple", 52, 0.3, 14, 0.2, "Snack"),
    _food("Chicken Breast", 165, 31, 0, 3.6, "Lunch"),
    _food("Rice", 130, 2.7, 28, 0.3, "Dinner"),
    _food("Banana", 89, 1.1, 23, 0.3, "Snack"),
    _food("Egg", 155, 13, 1.1, 11, "Breakfast"),
    _food("Salmon", 208, 20, 0, 13, "Dinner"),
    _food("Potato", 77, 2, 17, 0.1, "Lunch"),
    _food("Bread", 265, 9, 49, 3.2, "Breakfast"),
    _food("Cheese", 402, 25, 1.3, 33, "Snack"),
    _food("Milk", 42, 3.4, 5, 1, "Breakfast"),
    _food("Peanut Butter", 588, 25, 20, 50, "Snack"),
    _food("Pasta", 131, 5, 25, 1.2, "Dinner"),
    _food("Avocado", 160, 2, 9, 15, "Lunch"),
    _food("Steak", 271, 25, 0, 19, "Dinner"),
)


def predefined_food_names() -> frozenset[str]:
    """Return names of the built-in foods."""
    return frozenset(food.name for food in PREDEFINED_FOODS)
