"""Element lookups on fitfoodway HTML pages."""

import re

from bs4 import BeautifulSoup

from fitfood_menu.domain.catalogue import ProductLink
from fitfood_menu.domain.errors import MissingElementError, ProductFormatError

DETAILS_BUTTON_SELECTOR = "div.btn-detalii > a"
MENU_DETAILS_SELECTOR = "div.modal-body"
CATALOGUE_ITEM_SELECTOR = ".menu-item-wrap > div.content"
PRODUCT_NAME_SELECTOR = ".banner-text h1"
PRODUCT_VALUES_SELECTOR = ".price, div.amount-per-serving > div"

_CART_CALL_PATTERN = re.compile(r"adauga_in_cos\((\d+),")
_VALUE_PATTERN = re.compile(r"(\d+(?:[.,]\d+)?)")
# price, grams, kcal, carbohydrates, fats, proteins, fibers
_PRODUCT_VALUE_COUNT = 7


def extract_details_arguments(html: str) -> str:
    """Return the ``onclick`` call of the menu details button."""
    soup = BeautifulSoup(html, "html.parser")
    button = soup.select_one(DETAILS_BUTTON_SELECTOR)
    if button is None:
        raise MissingElementError('Button "Detalii" is not on page')
    onclick = button.get("onclick")
    if not isinstance(onclick, str):
        raise MissingElementError('Button "Detalii" has no onclick event')
    return onclick


def extract_menu_text_nodes(html: str) -> list[str]:
    """Return every text node of the details popup, in document order.

    Line endings are normalized to ``\\n`` so pages served with CRLF read
    the same as LF ones.
    """
    soup = BeautifulSoup(html, "html.parser")
    container = soup.select_one(MENU_DETAILS_SELECTOR)
    if container is None:
        raise MissingElementError("Menu details container is not on page")
    return [_normalize_newlines(str(text)) for text in container.strings]


def extract_product_links(html: str) -> list[ProductLink]:
    """Return the product id and page slug of every catalogue entry."""
    soup = BeautifulSoup(html, "html.parser")
    links: list[ProductLink] = []
    for item in soup.select(CATALOGUE_ITEM_SELECTOR):
        anchor = item.select_one("h2 > a")
        button = item.select_one("a.btn")
        href = anchor.get("href") if anchor is not None else None
        onclick = button.get("onclick") if button is not None else None
        if not isinstance(href, str) or not isinstance(onclick, str):
            raise MissingElementError("Catalogue entry has no product link")
        match = _CART_CALL_PATTERN.search(onclick)
        if match is None:
            raise ProductFormatError(f"No product id in {onclick!r}")
        slug = href.rstrip("/").rsplit("/", maxsplit=1)[-1]
        links.append(ProductLink(product_id=match.group(1), slug=slug))
    return links


def extract_product_details(html: str) -> tuple[str, list[float]]:
    """Return the product name and its price followed by its macro values."""
    soup = BeautifulSoup(html, "html.parser")
    title = soup.select_one(PRODUCT_NAME_SELECTOR)
    if title is None:
        raise MissingElementError("Product name is not on page")
    values: list[float] = []
    for element in soup.select(PRODUCT_VALUES_SELECTOR):
        text = _normalize_newlines(element.get_text("\n"))
        for line in text.split("\n"):
            match = _VALUE_PATTERN.search(line)
            if match is not None:
                values.append(float(match.group(1).replace(",", ".")))
    if len(values) < _PRODUCT_VALUE_COUNT:
        raise ProductFormatError(
            f"Expected {_PRODUCT_VALUE_COUNT} product values but found {len(values)}"
        )
    return title.get_text(strip=True), values[:_PRODUCT_VALUE_COUNT]


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")
