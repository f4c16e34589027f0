"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Data provider
    provider_api_base: str = "http://localhost:8001"
    provider_api_key: str | None = None

    # Service
    service_name: str = "limit-gateway"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0

    # Limit policy (percentages of the daily limit)
    warning_threshold: Decimal = Decimal("70")
    critical_threshold: Decimal = Decimal("90")
    approaching_threshold: Decimal = Decimal("80")
    upgrade_after_days: int = 7
    upgraded_daily_limit: Decimal = Decimal("10000")

    # Default limit tiers
    new_account_daily_limit: Decimal = Decimal("3000")
    established_daily_limit: Decimal = Decimal("10000")


settings = Settings()
