"""Product catalogue domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductMacros:
    """Nutrition values of one product portion."""

    grams: float
    kcal: float
    carbohydrates: float
    fats: float
    proteins: float
    fibers: float

    def __add__(self, other: "ProductMacros") -> "ProductMacros":
        return ProductMacros(
            grams=self.grams + other.grams,
            kcal=self.kcal + other.kcal,
            carbohydrates=self.carbohydrates + other.carbohydrates,
            fats=self.fats + other.fats,
            proteins=self.proteins + other.proteins,
            fibers=self.fibers + other.fibers,
        )


EMPTY_MACROS = ProductMacros(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class ProductLink:
    """Catalogue entry pointing to a product page."""

    product_id: str
    slug: str


@dataclass(frozen=True)
class Product:
    """Product with its discounted price and macros."""

    product_id: str
    slug: str
    name: str
    price: float
    macros: ProductMacros


@dataclass(frozen=True)
class DayPlan:
    """Products planned for one day and their totals."""

    day: str
    names: tuple[str, ...]
    price: float
    macros: ProductMacros
