"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Evaluator configuration loaded from CARD_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="CARD_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Service
    service_name: str = "credit-card-applications"
    log_level: str = "INFO"

    # Income thresholds (gross annual)
    high_income_threshold: Decimal = Decimal("100000")
    low_income_threshold: Decimal = Decimal("20000")

    # Age rules
    auto_referral_max_age: int = 20
    detailed_lookup_min_age: int = 30

    # Validator licence key that forces a human referral
    expired_licence_key: str = "EXPIRED"

    # Reference fraud policy
    fraud_watch_last_name: str = "Smith"


settings = Settings()
