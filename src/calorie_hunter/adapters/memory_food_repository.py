"""Process-local food repository."""

from dataclasses import dataclass, field
from uuid import UUID

from calorie_hunter.domain.foods import FoodItem
from calorie_hunter.services.food_entry import FoodRepository


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """Keeps user foods in insertion order for the process lifetime."""

    foods: dict[UUID, FoodItem] = field(default_factory=dict)

    def list_foods(self) -> list[FoodItem]:
        return list(self.foods.values())

    def add_food(self, food: FoodItem) -> None:
        self.foods[food.id] = food

    def remove_food(self, food_id: UUID) -> bool:
        return self.foods.pop(food_id, None) is not None
