# core/config.py
"""
Runtime settings for the lookup tool.

Values come from the environment (prefix ``YOUDAO_``) or an optional ``.env``
file next to the working directory, e.g. ``YOUDAO_APP_KEY=...``.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="YOUDAO_",
        env_file=".env",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Provider credentials & endpoint
    # ------------------------------------------------------------------
    APP_KEY: str = ""
    APP_SECRET: str = ""
    API_URL: str = "https://openapi.youdao.com/api"
    PROVIDER: str = "youdao"

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    REQUEST_TIMEOUT: float = 10.0
    # The dictionary page is read as single-byte text; titles taken from it
    # are repaired back to UTF-8 by ``services.extraction.encoding``.
    PAGE_ENCODING: str = "latin-1"
    DEFAULT_USER_AGENT: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36"
    )

    # ------------------------------------------------------------------
    # Optional payload sections
    # ------------------------------------------------------------------
    INCLUDE_BASIC: bool = False
    INCLUDE_WEB: bool = False

    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
