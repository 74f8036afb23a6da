"""
Typed errors for the loan calculation engine.

Exports
-------
- LoanCalcError, DownPaymentError, NegativeDownPaymentError,
  DownPaymentExceedsPriceError, InvalidLoanTermsError
- LOANCALC_ERRORS

Numerical degeneracies (zero principal, zero rate, a solver that does not
converge) are not errors: they resolve to fallback values inside the engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loancalc.schemas.models import ValidationOutcome

# =========================
# Exception types
# =========================


class LoanCalcError(ValueError):
    """Base class for loan calculation input failures."""


class DownPaymentError(LoanCalcError):
    """Down payment cannot be reconciled against the price."""


class NegativeDownPaymentError(DownPaymentError):
    """Down payment value is below zero."""


class DownPaymentExceedsPriceError(DownPaymentError):
    """Down payment amount is larger than the price."""


class InvalidLoanTermsError(LoanCalcError):
    """Terms failed validation; the outcome lists every violated rule."""

    def __init__(self, outcome: ValidationOutcome):
        self.outcome = outcome
        detail = "; ".join(f"{e.field}: {e.message}" for e in outcome.errors)
        super().__init__(f"Invalid loan terms: {detail}" if detail else "Invalid loan terms")


# Selector tuple for grouped exception handling
LOANCALC_ERRORS = (
    NegativeDownPaymentError,
    DownPaymentExceedsPriceError,
    InvalidLoanTermsError,
)


__all__ = [
    "LoanCalcError",
    "DownPaymentError",
    "NegativeDownPaymentError",
    "DownPaymentExceedsPriceError",
    "InvalidLoanTermsError",
    "LOANCALC_ERRORS",
]
