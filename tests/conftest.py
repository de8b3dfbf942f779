"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from fitfood_menu.adapters.fitfood_client import FitFoodClient
from fitfood_menu.config import Settings
from fitfood_menu.domain.menu import MenuArguments

PROGRAM_URL = "https://fitfood.test/programe/creste-masa-musculara"
DETAILS_URL = "https://fitfood.test/fitfoodway/detalii_meniu"
CATALOGUE_URL = "https://fitfood.test/produse"
PRODUCT_URL_TEMPLATE = "https://fitfood.test/p/{slug}"

PROGRAM_PAGE = (
    "<html><body>"
    '<div class="program"><h2>Creste masa musculara</h2>'
    '<div class="btn-detalii">'
    "<a href=\"#\" onclick=\"detalii_meniu(42, '2024-01-05', '7')\">Detalii</a>"
    "</div></div>"
    "</body></html>"
)

DETAILS_PAGE = (
    "<html><body>"
    '<div class="modal-body">'
    "<h4>Meniul zilei</h4>"
    "<p>\nOmleta cu legume: mic dejun</p>"
    "<p>Gramaj: 250g</p>"
    "<p>410 kcal</p>"
    "<p>proteine: 28g</p>"
    "<p>\n- Piept de pui cu orez</p>"
    "<p>proteine: 45 g</p>"
    "<p>Gramaje: 300 g</p>"
    "<p>620 kcal</p>"
    "</div>"
    "</body></html>"
)

CATALOGUE_PAGE = (
    "<html><body>"
    '<div class="menu-item-wrap"><div class="content">'
    '<h2><a href="https://fitfood.test/p/omleta-cu-legume">Omleta</a></h2>'
    "<a class=\"btn\" onclick=\"adauga_in_cos(28, 'produs')\">Adauga</a>"
    "</div></div>"
    '<div class="menu-item-wrap"><div class="content">'
    '<h2><a href="https://fitfood.test/p/piept-de-pui">Pui</a></h2>'
    "<a class=\"btn\" onclick=\"adauga_in_cos(39, 'produs')\">Adauga</a>"
    "</div></div>"
    "</body></html>"
)


def product_page(name: str, price: str, values: list[str]) -> str:
    labels = ["Gramaj", "Kcal", "Carbohidrati", "Grasimi", "Proteine", "Fibre"]
    rows = "".join(
        f"<div>{label} {value}</div>" for label, value in zip(labels, values)
    )
    return (
        "<html><body>"
        f'<div class="banner-text"><h1>{name}</h1></div>'
        f'<span class="price">{price} Lei</span>'
        f'<div class="amount-per-serving">{rows}</div>'
        "</body></html>"
    )


PRODUCT_PAGES = {
    "https://fitfood.test/p/omleta-cu-legume": product_page(
        "Omleta cu legume",
        "20,00",
        ["250 g", "410", "12,5 g", "20 g", "28 g", "4 g"],
    ),
    "https://fitfood.test/p/piept-de-pui": product_page(
        "Piept de pui cu orez",
        "30,00",
        ["300 g", "620", "55 g", "18 g", "45 g", "6 g"],
    ),
}


@dataclass
class FakeFitFoodClient(FitFoodClient):
    """Fake client serving static pages and recording requests."""

    program_page: str = PROGRAM_PAGE
    details_page: str = DETAILS_PAGE
    pages: dict[str, str] = field(
        default_factory=lambda: {CATALOGUE_URL: CATALOGUE_PAGE, **PRODUCT_PAGES}
    )
    pages_requested: list[str] = field(default_factory=list)
    details_requested: list[tuple[str, MenuArguments]] = field(default_factory=list)
    closed: bool = False

    def get_page(self, url: str) -> str:
        self.pages_requested.append(url)
        return self.pages.get(url, self.program_page)

    def post_menu_details(self, url: str, arguments: MenuArguments) -> str:
        self.details_requested.append((url, arguments))
        return self.details_page

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        daily_calories=2000,
        daily_proteins=150,
        program_url=PROGRAM_URL,
        menu_details_url=DETAILS_URL,
        catalogue_url=CATALOGUE_URL,
        product_url_template=PRODUCT_URL_TEMPLATE,
    )


@pytest.fixture
def fitfood_client() -> FakeFitFoodClient:
    return FakeFitFoodClient()
