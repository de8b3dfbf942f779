"""HTTP client for the fitfoodway website."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from fitfood_menu.domain.menu import MenuArguments


class FitFoodClient(Protocol):
    """Interface for fitfoodway page retrieval."""

    def get_page(self, url: str) -> str:
        """Fetch a page and return its HTML."""

    def post_menu_details(self, url: str, arguments: MenuArguments) -> str:
        """Submit the details form and return the response HTML."""


@dataclass
class HttpxFitFoodClient(FitFoodClient):
    """HTTPX-backed fitfoodway client."""

    http_client: httpx.Client
    timeout_seconds: float = 15

    @classmethod
    def create(cls, timeout_seconds: float = 15) -> "HttpxFitFoodClient":
        """Create a client with a managed httpx session."""
        return cls(
            http_client=httpx.Client(follow_redirects=True),
            timeout_seconds=timeout_seconds,
        )

    def get_page(self, url: str) -> str:
        """Fetch a page."""
        response = self.http_client.get(url, timeout=self.timeout_seconds)
        response.raise_for_status()
        return response.text

    def post_menu_details(self, url: str, arguments: MenuArguments) -> str:
        """Request the details popup of a daily menu."""
        response = self.http_client.post(
            url,
            data={
                "id": arguments.id,
                "data": arguments.date,
                "program_id": arguments.program_id,
            },
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.text

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()
