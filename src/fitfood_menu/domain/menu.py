"""Menu domain models."""

import math
from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class Food:
    """Single food entry of a daily menu."""

    description: str
    quantity: int
    calories: int
    proteins: int

    def scaled(self, factor: float) -> "Food":
        """Return a copy with quantity and macros multiplied by ``factor``."""
        return Food(
            description=self.description,
            quantity=_round_half_away_from_zero(self.quantity * factor),
            calories=_round_half_away_from_zero(self.calories * factor),
            proteins=_round_half_away_from_zero(self.proteins * factor),
        )


@dataclass(frozen=True)
class Menu:
    """Foods served on a given date, in page order."""

    date: str
    foods: tuple[Food, ...] = ()

    @property
    def total_calories(self) -> int:
        return sum(food.calories for food in self.foods)

    @property
    def total_proteins(self) -> int:
        return sum(food.proteins for food in self.foods)

    def with_foods(self, foods: list[Food] | tuple[Food, ...]) -> "Menu":
        """Return a new menu with ``foods`` appended."""
        return Menu(date=self.date, foods=(*self.foods, *foods))


class MenuArguments(NamedTuple):
    """Arguments of the details request embedded in the program page."""

    id: str
    date: str
    program_id: str


def _round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
