"""Unit tests for statutory configuration"""

import pytest
from decimal import Decimal
from pydantic import ValidationError

from claimcraft_engine.config import Settings
from claimcraft_engine.domain.exceptions import ConfigurationError
from claimcraft_engine.domain.statutory import StatutoryConfig


def test_defaults():
    config = StatutoryConfig()

    assert config.late_payment_rate_percent == Decimal("12.75")
    assert config.county_court_rate_percent == Decimal("8.0")
    assert config.default_payment_terms_days == 30
    assert config.limitation_period_years == 6
    assert config.small_claims_ceiling == Decimal("10000")


@pytest.mark.parametrize(
    "overrides",
    [
        {"days_per_year_divisor": 0},
        {"default_payment_terms_days": -1},
        {"limitation_period_years": 0},
        {"small_claims_ceiling": Decimal("-1")},
        {"base_rate_percent": Decimal("-0.5")},
        {"county_court_rate_percent": Decimal("-8")},
    ],
)
def test_invalid_config_rejected(overrides):
    with pytest.raises(ConfigurationError):
        StatutoryConfig(**overrides)


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("BASE_RATE_PERCENT", "5.25")
    monkeypatch.setenv("SMALL_CLAIMS_CEILING", "12000")

    config = Settings().statutory_config()

    assert config.late_payment_rate_percent == Decimal("13.25")
    assert config.small_claims_ceiling == Decimal("12000")


def test_non_numeric_environment_value_rejected(monkeypatch):
    monkeypatch.setenv("DEFAULT_PAYMENT_TERMS_DAYS", "thirty")

    with pytest.raises(ValidationError):
        Settings()


def test_nonsensical_environment_value_rejected(monkeypatch):
    monkeypatch.setenv("DAYS_PER_YEAR_DIVISOR", "0")

    with pytest.raises(ConfigurationError):
        Settings().statutory_config()
