"""Assembles foods from text fragments one field at a time."""

import logging
from collections.abc import Callable
from enum import Enum

from fitfood_menu.domain.errors import (
    DuplicateFieldError,
    FoodValidationError,
    IncompleteRecordError,
)
from fitfood_menu.domain.menu import Food
from fitfood_menu.services.matchers import (
    match_calories,
    match_description,
    match_proteins,
    match_quantity,
)

_logger = logging.getLogger(__name__)


class FoodField(Enum):
    """Fields that make up a food."""

    DESCRIPTION = "description"
    QUANTITY = "quantity"
    CALORIES = "calories"
    PROTEINS = "proteins"


_MATCHERS: dict[FoodField, Callable[[str], str | int | None]] = {
    FoodField.DESCRIPTION: match_description,
    FoodField.QUANTITY: match_quantity,
    FoodField.CALORIES: match_calories,
    FoodField.PROTEINS: match_proteins,
}


class FoodAccumulator:
    """Tracks the food currently being assembled.

    Every fragment is checked against all field matchers. A field seen twice
    before the food is complete is an error, and so is ending the input with
    a partially filled food.
    """

    def __init__(self) -> None:
        self._values: dict[FoodField, str | int] = {}

    @property
    def seen_fields(self) -> frozenset[FoodField]:
        return frozenset(self._values)

    @property
    def is_empty(self) -> bool:
        return not self._values

    def ingest(self, fragment: str) -> Food | None:
        """Feed one fragment; return the food it completes, if any."""
        for field, matcher in _MATCHERS.items():
            value = matcher(fragment)
            if value is None:
                continue
            if field in self._values:
                raise DuplicateFieldError(field.value, fragment)
            _logger.debug("Found %s in %r", field.value, fragment)
            self._values[field] = value

        if len(self._values) < len(FoodField):
            return None
        food = self._build()
        self._values = {}
        return food

    def finish(self) -> None:
        """Check that no partial food is left over."""
        if self._values:
            raise IncompleteRecordError(
                [field.value for field in FoodField if field in self._values]
            )

    def _build(self) -> Food:
        food = Food(
            description=str(self._values[FoodField.DESCRIPTION]),
            quantity=int(self._values[FoodField.QUANTITY]),
            calories=int(self._values[FoodField.CALORIES]),
            proteins=int(self._values[FoodField.PROTEINS]),
        )
        if not food.description:
            raise FoodValidationError("Food description is empty")
        for field in (FoodField.QUANTITY, FoodField.CALORIES, FoodField.PROTEINS):
            if getattr(food, field.value) <= 0:
                raise FoodValidationError(
                    f"Food {food.description!r} has {field.value} equal to 0"
                )
        return food
