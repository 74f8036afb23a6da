# tests/unit/test_frequency.py

from datetime import date

import pytest

from loancalc.core.finance.frequency import (
    payoff_date,
    per_period,
    periodic_rate,
    periods_per_year,
    total_periods,
)


def test_periods_per_year_uses_365_day_year():
    assert periods_per_year("monthly") == 12
    assert periods_per_year("biweekly") == pytest.approx(26.0714, abs=1e-4)
    assert periods_per_year("weekly") == pytest.approx(52.1429, abs=1e-4)


def test_unknown_frequency_rejected():
    with pytest.raises(ValueError):
        periods_per_year("daily")  # type: ignore[arg-type]


def test_periodic_rate_monthly():
    assert periodic_rate(6.0, "monthly") == pytest.approx(0.005)
    assert periodic_rate(0.0, "weekly") == 0.0


def test_total_periods_by_cadence():
    assert total_periods(360, "monthly") == 360
    assert total_periods(360, "biweekly") == 782
    assert total_periods(360, "weekly") == 1564
    assert total_periods(12, "monthly") == 12


def test_per_period_conversion():
    assert per_period(100.0, 12.0) == 100.0
    assert per_period(100.0, periods_per_year("biweekly")) == pytest.approx(100.0 * 12 * 14 / 365)


def test_payoff_date_counts_days_on_365_day_year():
    assert payoff_date(12, 12.0, date(2025, 1, 1)) == date(2026, 1, 1)
    assert payoff_date(26, periods_per_year("biweekly"), date(2025, 1, 1)) == date(2025, 12, 31)
