# app/core/settings.py
from functools import lru_cache
from typing import Dict, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from quotedoc.engine.config import (
    DETAILED_ITEM_LIST_NAME,
    QUOTE_TEMPLATE_NAME,
    TemplatePaths,
    build_template_paths,
)


class Settings(BaseSettings):
    APP_NAME: str = "Roller Blind Quotes"

    # --- Templates ---
    # Zet TEMPLATE_BASE_URL om de partials van de front end / CDN te halen
    TEMPLATE_BASE_URL: Optional[str] = None
    TEMPLATE_DIR: Optional[str] = None
    QUOTE_TEMPLATE_NAME: str = QUOTE_TEMPLATE_NAME
    DETAILED_ITEM_LIST_NAME: str = DETAILED_ITEM_LIST_NAME
    TEMPLATE_FETCH_TIMEOUT: float = 10.0

    # --- Pricing ---
    # Unit prices for motorised accessories (env: JSON object)
    ACCESSORY_PRICES: Dict[str, float] = {
        "motor": 270.0,
        "remote": 100.0,
        "remote-single": 80.0,
        "charger": 50.0,
        "cord": 10.0,
    }

    # --- Logging / HTTP ---
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def resolve_template_paths(s: "Settings") -> TemplatePaths:
    return build_template_paths(
        base_url=s.TEMPLATE_BASE_URL,
        template_dir=s.TEMPLATE_DIR,
        quote_template_name=s.QUOTE_TEMPLATE_NAME,
        detailed_item_list_name=s.DETAILED_ITEM_LIST_NAME,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()  # leest .env
