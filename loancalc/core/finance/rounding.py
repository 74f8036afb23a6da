# loancalc/core/finance/rounding.py

from __future__ import annotations

import math


def round_half_up(x: float) -> int:
    """Nearest integer, ties away from zero (period counts are never negative)."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def round_to_cents(x: float) -> float:
    """
    Round a currency amount to two decimals, half away from zero.

    Applied before every accumulation step so cent-level drift cannot compound
    across several hundred periods.
    Non-finite values pass through unchanged.
    """
    if not math.isfinite(x):
        return x
    scaled = math.floor(abs(x) * 100.0 + 0.5)
    return math.copysign(scaled, x) / 100.0
