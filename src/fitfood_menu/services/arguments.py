"""Parser for the arguments of the menu details button."""

import re

from fitfood_menu.domain.errors import ArgumentsFormatError
from fitfood_menu.domain.menu import MenuArguments

_ARGUMENTS_PATTERN = re.compile(r"\(([0-9]+), '([0-9\-]+)', '([0-9]+)'\)")


def parse_menu_arguments(text: str) -> MenuArguments:
    """Extract ``(id, date, program_id)`` from an ``onclick`` call string."""
    match = _ARGUMENTS_PATTERN.search(text)
    if match is None:
        raise ArgumentsFormatError(
            f"Details button arguments {text!r} do not match the expected call"
        )
    menu_id, date, program_id = match.groups()
    return MenuArguments(id=menu_id, date=date, program_id=program_id)
