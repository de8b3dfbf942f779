"""Application configuration."""

import os

from pydantic import Field, NonNegativeInt
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    daily_calories: NonNegativeInt
    daily_proteins: NonNegativeInt
    program_url: str = "https://fitfoodway.ro/programe/creste-masa-musculara"
    menu_details_url: str = "https://fitfoodway.ro/fitfoodway/detalii_meniu"
    catalogue_url: str = "https://fitfoodway.ro/produse"
    product_url_template: str = "https://fitfoodway.ro/p/{slug}"
    product_discount_percent: float = Field(default=10, ge=0, le=100)
    request_timeout_seconds: float = 15
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
