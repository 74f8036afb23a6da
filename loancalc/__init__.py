"""
loancalc: mortgage and loan amortization engine.

    from loancalc import LoanTerms, validate, calculate

    terms = LoanTerms(home_price=300_000, down_payment_value=10, interest_rate=6.0, term_months=360)
    if validate(terms).valid:
        result = calculate(terms)
"""

from loancalc.core.finance import calculate, calculate_loan, validate, validate_loan
from loancalc.schemas.models import LoanInputs, LoanResult, LoanTerms, ScheduleEntry, ValidationOutcome

__version__ = "0.1.0"

__all__ = [
    "LoanTerms",
    "LoanInputs",
    "LoanResult",
    "ScheduleEntry",
    "ValidationOutcome",
    "validate",
    "validate_loan",
    "calculate",
    "calculate_loan",
]
