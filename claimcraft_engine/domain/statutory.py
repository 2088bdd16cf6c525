"""Statutory constants injected into the calculators"""

from dataclasses import dataclass
from decimal import Decimal

from claimcraft_engine.domain.exceptions import ConfigurationError


@dataclass(frozen=True)
class StatutoryConfig:
    """
    Rates, periods and thresholds the calculators apply.

    Defaults:
    - base_rate_percent: Bank of England base rate (4.75%)
    - late_payment_uplift_percent: Late Payment Act 1998 uplift over base (8%)
    - county_court_rate_percent: County Courts Act 1984 s.69 flat rate (8%)
    - default_payment_terms_days: assumed terms when an invoice has no due date
    - limitation_period_years: Limitation Act 1980 s.5
    - small_claims_ceiling: CPR 26.9 small claims track limit
    - days_per_year_divisor: day count for daily interest (365, not leap-aware)
    """

    base_rate_percent: Decimal = Decimal("4.75")
    late_payment_uplift_percent: Decimal = Decimal("8.0")
    county_court_rate_percent: Decimal = Decimal("8.0")
    default_payment_terms_days: int = 30
    limitation_period_years: int = 6
    small_claims_ceiling: Decimal = Decimal("10000")
    days_per_year_divisor: int = 365

    def __post_init__(self) -> None:
        if self.days_per_year_divisor <= 0:
            raise ConfigurationError("days_per_year_divisor must be positive")
        if self.default_payment_terms_days <= 0:
            raise ConfigurationError("default_payment_terms_days must be positive")
        if self.limitation_period_years <= 0:
            raise ConfigurationError("limitation_period_years must be positive")
        if self.small_claims_ceiling < 0:
            raise ConfigurationError("small_claims_ceiling cannot be negative")
        for name in ("base_rate_percent", "late_payment_uplift_percent", "county_court_rate_percent"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} cannot be negative")

    @property
    def late_payment_rate_percent(self) -> Decimal:
        """Late Payment Act rate: base rate plus the statutory uplift"""
        return self.base_rate_percent + self.late_payment_uplift_percent


