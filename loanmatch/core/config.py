# This project was developed with assistance from AI tools.
"""
Application configuration.

All settings read from environment variables with sensible local dev defaults.
Scoring weights and breakpoints are policy and live next to the scorers, not here.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "loanmatch"
    DEBUG: bool = False
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level applied at app startup.",
    )

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:3000"]

    # -- Offer catalog --
    OFFER_AMOUNT_CEILING: float = Field(
        default=1.5,
        gt=0,
        description="Offers above requested amount * ceiling are not shown.",
    )
    BUNDLE_AMOUNT_CEILING: float = Field(
        default=2.0,
        gt=0,
        description="Bundles above requested amount * ceiling are not shown.",
    )

    # -- Demo data --
    SEED_DEMO_DATA: bool = Field(
        default=True,
        description="Load demo profiles, financial data and offers into the in-memory store.",
    )


settings = Settings()
