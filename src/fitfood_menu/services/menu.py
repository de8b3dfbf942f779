"""Service that retrieves today's menu."""

import logging
from dataclasses import dataclass

from fitfood_menu.adapters.fitfood_client import FitFoodClient
from fitfood_menu.adapters.html_pages import (
    extract_details_arguments,
    extract_menu_text_nodes,
)
from fitfood_menu.domain.menu import Menu
from fitfood_menu.services.arguments import parse_menu_arguments
from fitfood_menu.services.menu_builder import build_menu

_logger = logging.getLogger(__name__)


@dataclass
class MenuService:
    """Fetches the program page, then the details of its current menu."""

    client: FitFoodClient
    program_url: str
    menu_details_url: str

    def get_today_menu(self) -> Menu:
        """Return today's menu for the configured program."""
        _logger.info("Fetching program page %s", self.program_url)
        program_page = self.client.get_page(self.program_url)
        arguments = parse_menu_arguments(extract_details_arguments(program_page))
        _logger.info(
            "Fetching menu details: id=%s date=%s program_id=%s",
            arguments.id,
            arguments.date,
            arguments.program_id,
        )
        details_page = self.client.post_menu_details(self.menu_details_url, arguments)
        return build_menu(arguments.date, extract_menu_text_nodes(details_page))
