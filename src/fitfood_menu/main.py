"""Command-line entry point: print today's menu and the supplements it needs."""

import argparse
import logging
import sys
from pathlib import Path

import httpx
from pydantic import ValidationError

from fitfood_menu.app_logging import configure_logging
from fitfood_menu.containers import AppContainer, build_container
from fitfood_menu.domain.errors import MenuError
from fitfood_menu.services.catalogue import parse_week_plan, summarize_week
from fitfood_menu.services.report import (
    format_menu,
    format_products,
    format_supplement,
    format_targets,
    format_week,
)

_logger = logging.getLogger("fitfood_menu.main")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fitfood-menu",
        description="Show today's fitfoodway menu against your daily targets.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log every detected field"
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("menu", help="today's menu with supplements (default)")
    commands.add_parser("products", help="price and macros of every product")
    week = commands.add_parser("week", help="daily totals of a planned week")
    week.add_argument(
        "plan", type=Path, help='JSON file such as {"Monday": [28, 39, 16]}'
    )
    return parser.parse_args(argv)


def _print_menu(container: AppContainer) -> None:
    menu = container.menu_service.get_today_menu()
    settings = container.settings
    print(format_targets(settings.daily_calories, settings.daily_proteins), end="")
    print(format_menu(menu))
    result = container.supplement_service.supplement(
        menu, settings.daily_calories, settings.daily_proteins
    )
    print(format_supplement(result), end="")


def _print_products(container: AppContainer) -> None:
    products = container.catalogue_service.list_products()
    print(format_products(products), end="")


def _print_week(container: AppContainer, plan_path: Path) -> None:
    plan = parse_week_plan(plan_path.read_text(encoding="utf-8"))
    products = container.catalogue_service.list_products()
    print(format_week(summarize_week(products, plan)), end="")


def main(argv: list[str] | None = None) -> int:
    """Run the selected report and return the process exit status."""
    args = _parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        container = build_container()
    except ValidationError as exc:
        _logger.error("Invalid configuration: %s", exc)
        return 1

    try:
        if args.command == "products":
            _print_products(container)
        elif args.command == "week":
            _print_week(container, args.plan)
        else:
            _print_menu(container)
    except httpx.HTTPError as exc:
        _logger.error("Request failed: %s", exc)
        return 1
    except MenuError as exc:
        _logger.error("Page could not be read: %s", exc)
        return 1
    except (OSError, ValidationError) as exc:
        _logger.error("Week plan could not be read: %s", exc)
        return 1
    finally:
        container.close_resources()
    return 0


if __name__ == "__main__":
    sys.exit(main())
