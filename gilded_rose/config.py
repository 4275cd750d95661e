"""Application configuration loaded from environment variables and .env file."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Inventory settings
    SEED_ITEMS_PATH: Path = PACKAGE_DIR / "data" / "seed_items.json"
    MAX_SIMULATION_DAYS: int = 365
    DEFAULT_REPORT_DAYS: int = 2


settings = Settings()
