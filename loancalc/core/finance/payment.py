# loancalc/core/finance/payment.py

from __future__ import annotations


def periodic_payment(principal: float, rate: float, periods: int) -> float:
    """
    Fixed principal + interest payment for a fully-amortizing loan.

    Formula (standard annuity):
        PMT = P * [ r * (1 + r)^n ] / [ (1 + r)^n - 1 ]

    Where:
        P = principal (initial loan balance)
        r = periodic rate (fraction), n = number of payments

    Args:
        principal: Starting loan balance.
        rate: Rate per payment period as a fraction (e.g., 0.005 for 6%/12).
        periods: Total number of payments.

    Returns:
        The per-period payment; 0.0 when principal or periods is not positive.

    Notes:
        - r == 0 takes the straight-line branch principal / n rather than the
          limit of the annuity formula.
    """
    if principal <= 0 or periods <= 0:
        return 0.0
    if rate == 0:
        return principal / periods

    growth = (1.0 + rate) ** periods
    return principal * (rate * growth) / (growth - 1.0)


def principal_from_payment(payment: float, rate: float, periods: int) -> float:
    """Reverse amortization: the loan amount a given periodic payment pays off."""
    if payment <= 0 or periods <= 0:
        return 0.0
    if rate == 0:
        return payment * periods
    return payment * (1.0 - (1.0 + rate) ** (-periods)) / rate
