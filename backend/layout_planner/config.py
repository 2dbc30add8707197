"""
Application Settings

Environment-driven configuration for the Room Layout Planner API.
Values are read from the process environment or a local .env file.
"""

import functools
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_CATALOG_PATH = PACKAGE_DIR / "data" / "furniture.json"

PLACEHOLDER_API_KEYS = {"", "your-api-key-here"}


class Settings(BaseSettings):
    """Runtime settings for the API and its AI collaborator."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Room Layout Planner API"
    app_version: str = "1.0.0"
    debug: bool = False
    api_prefix: str = "/api"
    cors_origins: List[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    # Furniture catalog seed file; the bundled catalog is used when unset
    catalog_path: Optional[Path] = None

    # Gemini layout advisor
    google_api_key: str = ""
    model_name: str = "gemini-2.5-flash"
    ai_timeout_seconds: float = 30.0
    ai_temperature: float = 0.7
    ai_max_output_tokens: int = 2000

    @property
    def resolved_catalog_path(self) -> Path:
        return self.catalog_path or DEFAULT_CATALOG_PATH

    @property
    def ai_configured(self) -> bool:
        """True when a real (non-placeholder) Gemini key is set."""
        return self.google_api_key.strip() not in PLACEHOLDER_API_KEYS


@functools.lru_cache()
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
