"""Builds a menu from the text nodes of the menu details popup."""

import logging
from collections.abc import Iterable

from fitfood_menu.domain.menu import Food, Menu
from fitfood_menu.services.accumulator import FoodAccumulator

_logger = logging.getLogger(__name__)


def collect_foods(fragments: Iterable[str]) -> list[Food]:
    """Fold fragments into complete foods, in the order they complete."""
    accumulator = FoodAccumulator()
    foods: list[Food] = []
    for fragment in fragments:
        food = accumulator.ingest(fragment)
        if food is not None:
            foods.append(food)
    accumulator.finish()
    return foods


def build_menu(date: str, text_nodes: Iterable[str]) -> Menu:
    """Build the menu for ``date``, skipping the popup header node."""
    nodes = iter(text_nodes)
    next(nodes, None)
    menu = Menu(date=date, foods=tuple(collect_foods(nodes)))
    _logger.info("Parsed %s foods for %s", len(menu.foods), date)
    return menu
