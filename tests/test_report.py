"""Tests for report rendering."""

from fitfood_menu.domain.catalogue import DayPlan, Product, ProductMacros
from fitfood_menu.domain.menu import Food, Menu
from fitfood_menu.services.report import (
    RULE,
    format_food,
    format_menu,
    format_products,
    format_supplement,
    format_targets,
    format_week,
)
from fitfood_menu.services.supplements import SupplementService

TUNA = Food(" Ton", 100, 130, 26)


def test_format_food() -> None:
    assert format_food(TUNA) == " Ton\nCalories: 130 kcals\nProteins: 26g\n"


def test_format_menu_separates_foods_with_rules() -> None:
    menu = Menu(date="2024-01-05", foods=(TUNA,))

    assert format_menu(menu) == (
        "Menu for date 2024-01-05\n"
        f"{RULE}\n"
        " Ton\nCalories: 130 kcals\nProteins: 26g\n"
        f"{RULE}\n"
        "Total menu calories 130 kcals\n"
        "Total menu proteins 26g\n"
    )
    assert len(RULE) == 60


def test_format_targets() -> None:
    assert format_targets(2500, 160) == (
        "Total calories for today 2500 kcals\nTotal proteins for today 160g\n"
    )


def test_format_supplement_when_nothing_needed() -> None:
    menu = Menu(date="2024-01-05", foods=(Food("Paste: bolognese", 400, 2100, 140),))
    result = SupplementService().supplement(menu, 2000, 150)

    assert format_supplement(result) == (
        "The menu has a total of 2000(+100) = 2100 kcals. "
        "No additional food is needed.\n"
        "The menu has a total of 150(-10) = 140g of proteins.\n"
    )


def test_format_supplement_lists_added_food() -> None:
    menu = Menu(date="2024-01-05", foods=(Food("Omleta: mic dejun", 250, 1000, 60),))
    result = SupplementService().supplement(menu, 2000, 150)

    lines = format_supplement(result).splitlines()

    assert lines[0] == (
        "The menu has a total of 2000(-1000) = 1000 kcals. "
        "Computing additional food ..."
    )
    assert lines[1] == 'Added food "Chicken breast" with weight 455 grams'
    assert lines[2] == 'Added food "Whey protein" with weight 129 grams'
    assert lines[3] == "The new menu has a total of 2000(+0) = 2000 kcals."
    assert lines[4] == "The menu has a total of 150(+104) = 254g of proteins."


def test_format_products_and_week() -> None:
    product = Product(
        product_id="28",
        slug="omleta-cu-legume",
        name="Omleta cu legume",
        price=18.0,
        macros=ProductMacros(250, 410, 12.5, 20, 28, 4),
    )
    day = DayPlan(
        day="Monday", names=("Omleta cu legume",), price=18.0, macros=product.macros
    )
    macros = "grams 250, kcal 410, carbohydrates 12.5, fats 20, proteins 28, fibers 4"

    assert format_products({"28": product}) == (
        f"28 - Omleta cu legume: 18.00 Lei => {macros}\n"
    )
    assert format_week([day]) == (
        f"On Monday the menu is: Omleta cu legume - 18.00 Lei:\n{macros}.\n"
    )
