"""
Configuration of the backend.

Values are read from environment variables (a local .env file is picked up as well). Never hardcode secrets here.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///./guess_the_word.db"
DEFAULT_LOG_LEVEL = "INFO"

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    database_echo: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            database_echo=os.getenv("DATABASE_ECHO", "false").strip().lower() in TRUTHY,
            log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper(),
        )


@lru_cache
def get_settings() -> Settings:
    """Load the .env file once and cache the resulting settings. Call get_settings.cache_clear() to reload."""
    load_dotenv()
    return Settings.from_env()
