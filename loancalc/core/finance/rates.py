# loancalc/core/finance/rates.py

from __future__ import annotations

from loancalc.schemas.models import RateInputType

from .rounding import round_to_cents

UNKNOWN_RATE_ESTIMATE = 7.0  # % used when the borrower does not know their rate


def apr_to_nominal(apr: float, ppy: float = 12.0) -> float:
    """
    Effective annual rate (TAE, %) → nominal annual rate (TAN, %).

        nominal = ppy * ((1 + apr)^(1/ppy) - 1)
    """
    if apr <= 0 or ppy <= 0:
        return 0.0
    nominal = ppy * ((1.0 + apr / 100.0) ** (1.0 / ppy) - 1.0)
    return round_to_cents(nominal * 100.0)


def nominal_to_apr(nominal: float, ppy: float = 12.0) -> float:
    """
    Nominal annual rate (TAN, %) → effective annual rate (TAE, %).

        apr = (1 + nominal/ppy)^ppy - 1
    """
    if nominal <= 0 or ppy <= 0:
        return 0.0
    apr = (1.0 + nominal / 100.0 / ppy) ** ppy - 1.0
    return round_to_cents(apr * 100.0)


def resolve_nominal_rate(rate_type: RateInputType, nominal: float, apr: float, ppy: float = 12.0) -> float:
    """Pick the nominal rate the engine should use from whatever the borrower entered."""
    if rate_type == "apr":
        return apr_to_nominal(apr, ppy)
    if rate_type == "unknown":
        return UNKNOWN_RATE_ESTIMATE
    # "nominal" and "both" both calculate from the nominal input
    return nominal
