"""Scales supplemental foods to close the daily calorie gap."""

import logging
from dataclasses import dataclass, field

from fitfood_menu.domain.menu import Food, Menu

_logger = logging.getLogger(__name__)

DEFAULT_SUPPLEMENTS: tuple[Food, ...] = (
    Food(description="Chicken breast", quantity=100, calories=110, proteins=20),
    Food(description="Whey protein", quantity=100, calories=388, proteins=80),
)


@dataclass(frozen=True)
class SupplementResult:
    """Outcome of supplementing a menu."""

    original: Menu
    menu: Menu
    added: tuple[Food, ...]
    daily_calories: int
    daily_proteins: int

    @property
    def needed_food(self) -> bool:
        return self.original.total_calories < self.daily_calories


@dataclass
class SupplementService:
    """Adds scaled supplements so a menu reaches its calorie target."""

    foods: tuple[Food, ...] = DEFAULT_SUPPLEMENTS
    weights: tuple[float, ...] = field(default=())

    def __post_init__(self) -> None:
        if not self.weights:
            self.weights = tuple(1 / len(self.foods) for _ in self.foods)
        if len(self.weights) != len(self.foods):
            raise ValueError(
                f"Got {len(self.weights)} weights for {len(self.foods)} supplements"
            )

    def supplement(
        self, menu: Menu, daily_calories: int, daily_proteins: int
    ) -> SupplementResult:
        """Return ``menu`` with supplements appended when calories fall short."""
        deficit = daily_calories - menu.total_calories
        added: list[Food] = []
        if deficit > 0:
            for food, weight in zip(self.foods, self.weights, strict=True):
                scale = weight * deficit / food.calories
                added.append(food.scaled(scale))
            _logger.info("Added %s supplements for %s kcal", len(added), deficit)
        return SupplementResult(
            original=menu,
            menu=menu.with_foods(added),
            added=tuple(added),
            daily_calories=daily_calories,
            daily_proteins=daily_proteins,
        )
