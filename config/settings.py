from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv


load_dotenv()


DEFAULT_FACT_API_URL = "https://cat-fact.herokuapp.com/facts/random"
DEFAULT_FALLBACK_FACT = (
    "I couldn't fetch a fun fact just now, but ask me again in a moment!"
)


class Settings:
    """Application settings loaded from environment variables.

    Keep all webhook and fact service config centralized here.
    """

    def __init__(self) -> None:
        self.app_env: str = os.getenv("APP_ENV", "development")
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "5000"))
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.fact_api_url: str = os.getenv("FACT_API_URL", DEFAULT_FACT_API_URL)
        self.fact_amount: int = int(os.getenv("FACT_AMOUNT", "1"))
        self.fact_api_timeout: float = float(os.getenv("FACT_API_TIMEOUT", "10.0"))
        self.default_animal: str = os.getenv("DEFAULT_ANIMAL", "cat")
        self.fallback_fact: str = os.getenv("FALLBACK_FACT", DEFAULT_FALLBACK_FACT)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
