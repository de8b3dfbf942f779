"""Errors raised while reading a daily menu."""


class MenuError(Exception):
    """Base class for fatal menu errors."""


class MenuParseError(MenuError):
    """The page does not have the expected structure."""


class DuplicateFieldError(MenuParseError):
    """A field was detected twice for the same food."""

    def __init__(self, field: str, fragment: str) -> None:
        super().__init__(f"{field} found twice, second time in {fragment!r}")
        self.field = field
        self.fragment = fragment


class IncompleteRecordError(MenuParseError):
    """Input ended while a food still had detected fields."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__(
            "Input ended with an incomplete food, remaining fields: "
            + ", ".join(fields)
        )
        self.fields = fields


class FragmentFormatError(MenuParseError):
    """A fragment matched a field pattern but its value is unusable."""


class ArgumentsFormatError(MenuParseError):
    """The details button arguments do not have the expected shape."""


class MissingElementError(MenuParseError):
    """An expected HTML element is not on the page."""


class FoodValidationError(MenuError):
    """A complete food has an empty or zero-valued field."""


class ProductFormatError(MenuParseError):
    """A product page does not list its price and macros as expected."""


class UnknownProductError(MenuError):
    """A week plan refers to a product missing from the catalogue."""

    def __init__(self, day: str, product_id: str) -> None:
        super().__init__(f"Product {product_id} planned on {day} is not for sale")
        self.day = day
        self.product_id = product_id
