"""Application configuration using pydantic-settings."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from HOTEL_* environment variables or .env"""

    model_config = SettingsConfigDict(
        env_prefix="HOTEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Hotel Booking API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # JWT Auth
    secret_key: str = "change-me-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    # Demo account seeded at startup
    demo_user_email: str = "demo@example.com"
    demo_user_password: str = "demo1234"
    demo_user_display_name: str = "Demo User"


@lru_cache
def get_settings() -> Settings:
    return Settings()
