"""Product catalogue reader and week plan totals."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from pydantic import TypeAdapter

from fitfood_menu.adapters.fitfood_client import FitFoodClient
from fitfood_menu.adapters.html_pages import (
    extract_product_details,
    extract_product_links,
)
from fitfood_menu.domain.catalogue import (
    EMPTY_MACROS,
    DayPlan,
    Product,
    ProductLink,
    ProductMacros,
)
from fitfood_menu.domain.errors import UnknownProductError

_logger = logging.getLogger(__name__)

_WEEK_PLAN_ADAPTER = TypeAdapter(dict[str, list[int | str]])


@dataclass
class CatalogueService:
    """Reads every product of the shop with its price and macros."""

    client: FitFoodClient
    catalogue_url: str
    product_url_template: str
    discount_percent: float = 0

    def list_products(self) -> dict[str, Product]:
        """Return catalogue products keyed by product id."""
        _logger.info("Fetching product catalogue %s", self.catalogue_url)
        links = extract_product_links(self.client.get_page(self.catalogue_url))
        products = {link.product_id: self._get_product(link) for link in links}
        _logger.info("Read %s products", len(products))
        return products

    def _get_product(self, link: ProductLink) -> Product:
        url = self.product_url_template.format(slug=link.slug)
        name, values = extract_product_details(self.client.get_page(url))
        price, grams, kcal, carbohydrates, fats, proteins, fibers = values
        _logger.debug("Read product %s (%s) from %s", link.product_id, name, url)
        return Product(
            product_id=link.product_id,
            slug=link.slug,
            name=name,
            price=price * (100 - self.discount_percent) / 100,
            macros=ProductMacros(
                grams=grams,
                kcal=kcal,
                carbohydrates=carbohydrates,
                fats=fats,
                proteins=proteins,
                fibers=fibers,
            ),
        )


def summarize_week(
    products: Mapping[str, Product], plan: Mapping[str, Sequence[str]]
) -> list[DayPlan]:
    """Total price and macros of the products planned for each day."""
    days: list[DayPlan] = []
    for day, product_ids in plan.items():
        names: list[str] = []
        price = 0.0
        macros = EMPTY_MACROS
        for product_id in product_ids:
            product = products.get(str(product_id))
            if product is None:
                raise UnknownProductError(day, str(product_id))
            names.append(product.name)
            price += product.price
            macros = macros + product.macros
        days.append(DayPlan(day=day, names=tuple(names), price=price, macros=macros))
    return days


def parse_week_plan(raw: str) -> dict[str, list[str]]:
    """Parse a JSON object mapping day names to product ids."""
    plan = _WEEK_PLAN_ADAPTER.validate_json(raw)
    return {day: [str(product_id) for product_id in ids] for day, ids in plan.items()}
