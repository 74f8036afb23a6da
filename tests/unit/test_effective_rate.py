# tests/unit/test_effective_rate.py
import math

import pytest

from loancalc.core.finance import calculate, validate
from loancalc.core.finance.effective_rate import (
    annualize,
    effective_annual_rate,
    solve_periodic_irr,
)
from loancalc.core.finance.frequency import periods_per_year
from loancalc.core.finance.payment import periodic_payment
from tests.utils import make_loan_terms


def test_no_fees_matches_compounded_nominal():
    # 6% nominal monthly → (1.005^12 - 1) ≈ 6.17%
    pmt = periodic_payment(200_000, 0.005, 360)
    assert effective_annual_rate(200_000, pmt, 360, 12.0) == pytest.approx(6.1678, abs=1e-3)


def test_upfront_fees_raise_effective_rate():
    pmt = periodic_payment(200_000, 0.005, 360)
    base = effective_annual_rate(200_000, pmt, 360, 12.0)
    with_fees = effective_annual_rate(200_000 - 4_000, pmt, 360, 12.0)
    assert with_fees > base


def test_solver_recovers_known_periodic_rate():
    pmt = periodic_payment(1_000, 0.01, 12)
    res = solve_periodic_irr(1_000, pmt, 12, guess=0.05 / 12)
    assert res.converged
    assert res.rate == pytest.approx(0.01, abs=1e-7)
    assert res.iterations <= 100


def test_solver_returns_best_effort_when_not_converged():
    pmt = periodic_payment(1_000, 0.01, 12)
    res = solve_periodic_irr(1_000, pmt, 12, guess=0.05 / 12, max_iter=1)
    assert not res.converged
    assert res.iterations == 1
    assert math.isfinite(res.rate)


def test_zero_rate_stream_gives_zero_effective_rate():
    assert effective_annual_rate(12_000, 1_000, 12, 12.0) == pytest.approx(0.0, abs=1e-4)


@pytest.mark.parametrize(
    "net,payment,periods",
    [(0, 1000, 12), (-500, 1000, 12), (10_000, 0, 12), (10_000, 1000, 0)],
)
def test_degenerate_inputs_return_zero(net, payment, periods):
    assert effective_annual_rate(net, payment, periods, 12.0) == 0.0


def test_extreme_stream_does_not_overflow():
    # Tiny net proceeds against a long weekly stream: huge IRR, but finite
    value = effective_annual_rate(1_000, 5_000, 1564, periods_per_year("weekly"))
    assert not math.isnan(value)


def test_annualize():
    assert annualize(0.0, 12.0) == 0.0
    assert annualize(0.01, 12.0) == pytest.approx((1.01**12 - 1) * 100)


def test_annualize_overflow_returns_inf():
    assert annualize(1_150_830.9, 365.0 / 7.0) == math.inf


def test_calculate_survives_rate_too_large_to_annualize():
    # Closing costs eat all but 50 cents of a maximum-size weekly loan
    terms = make_loan_terms(
        home_price=100_000_000,
        down_payment_value=0,
        interest_rate=30.0,
        payment_frequency="weekly",
        closing_costs=100_000_000 - 0.5,
        pmi_enabled=False,
    )
    assert validate(terms).valid
    res = calculate(terms)
    assert res.effective_rate == math.inf
    assert res.schedule[-1].balance == 0.0
