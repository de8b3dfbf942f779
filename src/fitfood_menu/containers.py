"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass

from fitfood_menu.adapters.fitfood_client import FitFoodClient, HttpxFitFoodClient
from fitfood_menu.config import Settings
from fitfood_menu.services.catalogue import CatalogueService
from fitfood_menu.services.menu import MenuService
from fitfood_menu.services.supplements import SupplementService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    client: FitFoodClient
    menu_service: MenuService
    supplement_service: SupplementService
    catalogue_service: CatalogueService
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    client = HttpxFitFoodClient.create(
        timeout_seconds=resolved_settings.request_timeout_seconds
    )
    menu_service = MenuService(
        client=client,
        program_url=resolved_settings.program_url,
        menu_details_url=resolved_settings.menu_details_url,
    )
    catalogue_service = CatalogueService(
        client=client,
        catalogue_url=resolved_settings.catalogue_url,
        product_url_template=resolved_settings.product_url_template,
        discount_percent=resolved_settings.product_discount_percent,
    )

    return AppContainer(
        settings=resolved_settings,
        client=client,
        menu_service=menu_service,
        supplement_service=SupplementService(),
        catalogue_service=catalogue_service,
        close_resources=client.close,
    )
