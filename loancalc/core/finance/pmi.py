# loancalc/core/finance/pmi.py

from __future__ import annotations

import logging

from .amortization import iter_periods
from .rounding import round_to_cents

logger = logging.getLogger(__name__)

PMI_LTV_THRESHOLD = 0.80
PMI_DOWN_PAYMENT_PCT = 20.0
PMI_SIMULATION_CAP = 360
DEFAULT_PMI_RATE = 0.5  # % of loan amount per year


def is_pmi_required(down_payment_pct: float) -> bool:
    """PMI applies when less than 20% is put down."""
    return down_payment_pct < PMI_DOWN_PAYMENT_PCT


def monthly_pmi(loan_amount: float, pmi_rate: float) -> float:
    """Monthly PMI premium: loan × annual rate / 12, rounded to cents. Typical rates run 0.3%–1.5%."""
    if pmi_rate <= 0 or loan_amount <= 0:
        return 0.0
    return round_to_cents(loan_amount * (pmi_rate / 100.0) / 12.0)


def pmi_removal_period(
    home_price: float,
    loan_amount: float,
    payment: float,
    rate: float,
    periods: int,
    *,
    cap: int = PMI_SIMULATION_CAP,
) -> int | None:
    """
    First period after which the balance is at or below 80% of the original price.

    The threshold is measured against the home price while the balance decays from
    the loan amount, so this walks the schedule forward rather than solving in
    closed form. Returns None when the threshold is not reached within `cap`
    periods (or within the loan's own term, if shorter).
    """
    target = home_price * PMI_LTV_THRESHOLD
    for step in iter_periods(loan_amount, rate, payment, periods):
        if step.period > cap:
            break
        if step.balance <= target:
            return step.period

    logger.debug("PMI LTV target %.2f not reached within %d periods", target, min(cap, periods))
    return None
