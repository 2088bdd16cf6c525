"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict

from claimcraft_engine.domain.statutory import StatutoryConfig


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "claimcraft-engine"
    log_level: str = "INFO"

    # Statutory rates and thresholds
    base_rate_percent: Decimal = Decimal("4.75")  # Bank of England base rate
    late_payment_uplift_percent: Decimal = Decimal("8.0")
    county_court_rate_percent: Decimal = Decimal("8.0")
    default_payment_terms_days: int = 30
    limitation_period_years: int = 6
    small_claims_ceiling: Decimal = Decimal("10000")
    days_per_year_divisor: int = 365

    def statutory_config(self) -> StatutoryConfig:
        """Build the immutable config the calculators take; raises ConfigurationError if invalid"""
        return StatutoryConfig(
            base_rate_percent=self.base_rate_percent,
            late_payment_uplift_percent=self.late_payment_uplift_percent,
            county_court_rate_percent=self.county_court_rate_percent,
            default_payment_terms_days=self.default_payment_terms_days,
            limitation_period_years=self.limitation_period_years,
            small_claims_ceiling=self.small_claims_ceiling,
            days_per_year_divisor=self.days_per_year_divisor,
        )


settings = Settings()
