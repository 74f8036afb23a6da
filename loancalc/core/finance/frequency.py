# loancalc/core/finance/frequency.py

from __future__ import annotations

from datetime import date, timedelta

from loancalc.schemas.models import PaymentFrequency

from .rounding import round_half_up

# 365-day year for the sub-monthly cadences, so both are non-integer
_PERIODS_PER_YEAR: dict[str, float] = {
    "monthly": 12.0,
    "biweekly": 365.0 / 14.0,
    "weekly": 365.0 / 7.0,
}


def periods_per_year(frequency: PaymentFrequency) -> float:
    """Payment periods per year: 12, 365/14 (≈26.07) or 365/7 (≈52.14)."""
    try:
        return _PERIODS_PER_YEAR[frequency]
    except KeyError:
        raise ValueError(f"Unknown payment frequency: {frequency!r}") from None


def periodic_rate(annual_rate_pct: float, frequency: PaymentFrequency) -> float:
    """
    Nominal annual rate (percent) → rate per payment period (fraction).

    A 0% rate yields 0.0; callers take the straight-line branch for it instead of
    dividing through the annuity formula.
    """
    return annual_rate_pct / 100.0 / periods_per_year(frequency)


def total_periods(term_months: int, frequency: PaymentFrequency) -> int:
    """Number of payments over a term given in months, rounded to the nearest period."""
    return round_half_up(term_months * (periods_per_year(frequency) / 12.0))


def per_period(monthly_amount: float, ppy: float) -> float:
    """Convert a monthly amount into its per-period equivalent for `ppy` periods a year."""
    if ppy == 12.0:
        return monthly_amount
    return monthly_amount * 12.0 / ppy


def payoff_date(total: int, ppy: float, start: date) -> date:
    """Calendar date of the final payment counted from `start` on a 365-day year."""
    days = round_half_up((total / ppy) * 365.0)
    return start + timedelta(days=days)
