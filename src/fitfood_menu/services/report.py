"""Plain-text rendering of menus and supplement outcomes."""

from fitfood_menu.domain.catalogue import DayPlan, Product, ProductMacros
from fitfood_menu.domain.menu import Food, Menu
from fitfood_menu.services.supplements import SupplementResult

RULE = "-" * 60


def format_food(food: Food) -> str:
    return (
        f"{food.description}\n"
        f"Calories: {food.calories} kcals\n"
        f"Proteins: {food.proteins}g\n"
    )


def format_menu(menu: Menu) -> str:
    """Render the menu with a rule after every food and the totals."""
    lines = [f"Menu for date {menu.date}\n", f"{RULE}\n"]
    for food in menu.foods:
        lines.append(format_food(food))
        lines.append(f"{RULE}\n")
    lines.append(f"Total menu calories {menu.total_calories} kcals\n")
    lines.append(f"Total menu proteins {menu.total_proteins}g\n")
    return "".join(lines)


def format_targets(daily_calories: int, daily_proteins: int) -> str:
    return (
        f"Total calories for today {daily_calories} kcals\n"
        f"Total proteins for today {daily_proteins}g\n"
    )


def format_supplement(result: SupplementResult) -> str:
    """Describe which supplements were added and the resulting balances."""
    calories = _balance(result.daily_calories, result.original.total_calories)
    if not result.needed_food:
        lines = [
            f"The menu has a total of {calories} kcals. "
            "No additional food is needed."
        ]
    else:
        lines = [
            f"The menu has a total of {calories} kcals. Computing additional food ..."
        ]
        lines.extend(
            f'Added food "{food.description}" with weight {food.quantity} grams'
            for food in result.added
        )
        new_calories = _balance(result.daily_calories, result.menu.total_calories)
        lines.append(f"The new menu has a total of {new_calories} kcals.")
    proteins = _balance(result.daily_proteins, result.menu.total_proteins)
    lines.append(f"The menu has a total of {proteins}g of proteins.")
    return "\n".join(lines) + "\n"


def _balance(target: int, actual: int) -> str:
    return f"{target}({actual - target:+d}) = {actual}"


def format_macros(macros: ProductMacros) -> str:
    return (
        f"grams {macros.grams:g}, kcal {macros.kcal:g}, "
        f"carbohydrates {macros.carbohydrates:g}, fats {macros.fats:g}, "
        f"proteins {macros.proteins:g}, fibers {macros.fibers:g}"
    )


def format_products(products: dict[str, Product]) -> str:
    """One line per product: id, name, discounted price and macros."""
    return "".join(
        f"{product.product_id} - {product.name}: {product.price:.2f} Lei "
        f"=> {format_macros(product.macros)}\n"
        for product in products.values()
    )


def format_week(days: list[DayPlan]) -> str:
    return "".join(
        f"On {day.day} the menu is: {', '.join(day.names)} - {day.price:.2f} Lei:\n"
        f"{format_macros(day.macros)}.\n"
        for day in days
    )
