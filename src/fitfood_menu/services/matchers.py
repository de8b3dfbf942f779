"""Field recognizers for menu text fragments."""

import re

from fitfood_menu.domain.errors import FragmentFormatError

LIST_ITEM_PREFIX = "\n-"
_MAX_VALUE = 2**32 - 1
_MAX_DIGITS = len(str(_MAX_VALUE))

QUANTITY_PATTERN = re.compile(r"Gramaje?\s*:?\s*([0-9]+)\s*[gm]")
CALORIES_PATTERN = re.compile(r"([0-9]+)\s*kcal")
PROTEINS_PATTERN = re.compile(r"proteine\s*:?\s*([0-9]+)\s*g")
DESCRIPTION_PATTERN = re.compile(r"\n[^*][^:0-9]+:[^:0-9]+")


def match_description(fragment: str) -> str | None:
    """Return the food description carried by ``fragment``, if any."""
    if fragment.startswith(LIST_ITEM_PREFIX):
        return fragment[len(LIST_ITEM_PREFIX) :]
    if DESCRIPTION_PATTERN.fullmatch(fragment):
        return fragment[1:]
    return None


def match_quantity(fragment: str) -> int | None:
    """Return the weight in grams (or millilitres) from ``fragment``."""
    return _extract_number(QUANTITY_PATTERN, fragment)


def match_calories(fragment: str) -> int | None:
    """Return the kcal value from ``fragment``."""
    return _extract_number(CALORIES_PATTERN, fragment)


def match_proteins(fragment: str) -> int | None:
    """Return the proteins in grams from ``fragment``."""
    return _extract_number(PROTEINS_PATTERN, fragment)


def _extract_number(pattern: re.Pattern[str], fragment: str) -> int | None:
    match = pattern.search(fragment)
    if match is None:
        return None
    digits = match.group(1).lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS or int(digits) > _MAX_VALUE:
        raise FragmentFormatError(
            f"Number in {fragment[:60]!r} does not fit in 32 bits"
        )
    return int(digits)
