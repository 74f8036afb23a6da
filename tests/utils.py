# tests/utils.py
"""
Single source of truth for test data and factories.
Update values here to cascade across the test suite.
"""

from __future__ import annotations

from typing import Any

from loancalc.schemas.models import LoanInputs, LoanTerms

# -----------------------------
# Global defaults (edit once)
# -----------------------------

DEFAULT_HOME_PRICE = 300_000.0
DEFAULT_RATE = 6.0
DEFAULT_TERM_MONTHS = 360


def make_loan_terms(**overrides: Any) -> LoanTerms:
    """Baseline 30-year mortgage with 10% down (PMI applies) and no extra costs."""
    data: dict[str, Any] = dict(
        home_price=DEFAULT_HOME_PRICE,
        down_payment_type="percentage",
        down_payment_value=10.0,
        interest_rate=DEFAULT_RATE,
        term_months=DEFAULT_TERM_MONTHS,
        payment_frequency="monthly",
        pmi_rate=0.5,
    )
    data.update(overrides)
    return LoanTerms(**data)


def make_loan_inputs(**overrides: Any) -> LoanInputs:
    """Baseline plain loan: 200k at 6% over 30 years, no fees."""
    data: dict[str, Any] = dict(
        loan_amount=200_000.0,
        interest_rate=DEFAULT_RATE,
        term_months=DEFAULT_TERM_MONTHS,
        payment_frequency="monthly",
    )
    data.update(overrides)
    return LoanInputs(**data)


def terms_payload(**overrides: Any) -> dict[str, Any]:
    """Plain-dict version of the baseline terms, as a form or JSON file would supply it."""
    data = make_loan_terms().model_dump()
    data.update(overrides)
    return data
