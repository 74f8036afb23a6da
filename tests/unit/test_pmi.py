# tests/unit/test_pmi.py
import pytest

from loancalc.core.finance.amortization import generate_schedule
from loancalc.core.finance.payment import periodic_payment
from loancalc.core.finance.pmi import (
    is_pmi_required,
    monthly_pmi,
    pmi_removal_period,
)


def test_pmi_required_below_twenty_percent():
    assert is_pmi_required(10.0)
    assert is_pmi_required(19.99)
    assert not is_pmi_required(20.0)
    assert not is_pmi_required(35.0)


def test_monthly_pmi_rounds_to_cents():
    assert monthly_pmi(270_000, 0.5) == 112.50
    assert monthly_pmi(123_456, 0.7) == 72.02


def test_monthly_pmi_zero_for_non_positive_inputs():
    assert monthly_pmi(270_000, 0.0) == 0.0
    assert monthly_pmi(0, 0.5) == 0.0


def test_removal_period_matches_schedule_balance():
    pmt = periodic_payment(270_000, 0.005, 360)
    period = pmi_removal_period(300_000, 270_000, pmt, 0.005, 360)
    assert period is not None
    assert 85 <= period <= 95

    sched = generate_schedule(270_000, 0.005, 360, pmt)
    assert sched[period - 1].balance <= 240_000
    assert sched[period - 2].balance > 240_000


def test_removal_period_one_when_first_payment_reaches_target():
    # 79.99% LTV start: the first payment already lands below the threshold
    pmt = periodic_payment(239_990, 0.005, 360)
    assert pmi_removal_period(300_000, 239_990, pmt, 0.005, 360) == 1


def test_removal_none_when_cap_reached_first():
    pmt = periodic_payment(270_000, 0.005, 360)
    assert pmi_removal_period(300_000, 270_000, pmt, 0.005, 360, cap=10) is None


@pytest.mark.parametrize("loan", [285_000, 297_000])
def test_smaller_down_payment_removes_later(loan):
    pmt_10 = periodic_payment(270_000, 0.005, 360)
    base = pmi_removal_period(300_000, 270_000, pmt_10, 0.005, 360)
    pmt = periodic_payment(loan, 0.005, 360)
    later = pmi_removal_period(300_000, loan, pmt, 0.005, 360)
    assert later is not None and base is not None
    assert later > base
