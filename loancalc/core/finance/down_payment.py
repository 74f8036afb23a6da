# loancalc/core/finance/down_payment.py

from __future__ import annotations

from loancalc.schemas.models import DownPayment, DownPaymentType

from .errors import DownPaymentExceedsPriceError, NegativeDownPaymentError


def reconcile_down_payment(price: float, kind: DownPaymentType, value: float) -> DownPayment:
    """
    Normalize a down payment given as a percentage or an amount into both forms.

    Raises:
        NegativeDownPaymentError: value < 0.
        DownPaymentExceedsPriceError: the resulting amount is larger than price.
    """
    if value < 0:
        raise NegativeDownPaymentError(f"Down payment cannot be negative (got {value})")

    if kind == "amount":
        amount = float(value)
        # amount * 100 / price keeps round figures exact (60k of 300k → 20.0, not 19.999…)
        percentage = (amount * 100.0 / price) if price > 0 else 0.0
    elif kind == "percentage":
        percentage = float(value)
        amount = price * percentage / 100.0
    else:
        raise ValueError(f"Unknown down payment type: {kind!r}")

    if amount > price:
        raise DownPaymentExceedsPriceError(f"Down payment {amount:,.2f} exceeds price {price:,.2f}")

    return DownPayment(amount=amount, percentage=percentage)
