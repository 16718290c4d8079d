"""Pricing Service Configuration"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PRICING_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Pricing Service"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8001
    log_level: str = "INFO"

    # Currency for seeded prices, cart subtotals and order totals
    default_currency: str = "USD"

    # CORS
    cors_origins: list[str] = ["*"]

    # Load the sample catalog, promotions and inventory on startup
    seed_sample_data: bool = True

    # Days either side of startup that the sample promotions run
    widget_promotion_days: int = 7
    clearance_promotion_days: int = 30


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
