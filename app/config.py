from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized runtime configuration loaded from environment variables.
    """

    SUPABASE_URL: str
    SUPABASE_SERVICE_ROLE_KEY: str
    REVIEWS_TABLE: str = "reviews"

    SHOPIFY_STORE: str | None = None
    SHOPIFY_API_KEY: str | None = None
    SHOPIFY_API_VERSION: str = "2024-01"
    ORDER_WINDOW_HOURS: int = 48
    # Cosmetic 1-6 bump added to the order count, redrawn once per day.
    ORDER_COUNT_DAILY_OFFSET: bool = True

    SELF_PING_URL: str | None = None
    PING_INTERVAL_SECONDS: int = 14 * 60
    HTTP_TIMEOUT_SECONDS: float = 15.0

    APP_NAME: str = "Review Service"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    ALLOWED_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
