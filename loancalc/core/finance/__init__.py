# loancalc/core/finance/__init__.py

from .amortization import generate_schedule, iter_periods, step_period, summarize_by_year
from .down_payment import reconcile_down_payment
from .effective_rate import SolverResult, effective_annual_rate, solve_periodic_irr
from .engine import calculate, calculate_loan, loan_inputs_to_terms
from .errors import (
    LOANCALC_ERRORS,
    DownPaymentExceedsPriceError,
    InvalidLoanTermsError,
    LoanCalcError,
    NegativeDownPaymentError,
)
from .frequency import payoff_date, periodic_rate, periods_per_year, total_periods
from .payment import periodic_payment, principal_from_payment
from .pmi import is_pmi_required, monthly_pmi, pmi_removal_period
from .rates import apr_to_nominal, nominal_to_apr, resolve_nominal_rate
from .rounding import round_to_cents
from .validation import LOAN_LIMITS, MORTGAGE_LIMITS, validate, validate_loan

__all__ = [
    "calculate",
    "calculate_loan",
    "loan_inputs_to_terms",
    "validate",
    "validate_loan",
    "MORTGAGE_LIMITS",
    "LOAN_LIMITS",
    "round_to_cents",
    "periods_per_year",
    "periodic_rate",
    "total_periods",
    "payoff_date",
    "reconcile_down_payment",
    "periodic_payment",
    "principal_from_payment",
    "is_pmi_required",
    "monthly_pmi",
    "pmi_removal_period",
    "step_period",
    "iter_periods",
    "generate_schedule",
    "summarize_by_year",
    "SolverResult",
    "solve_periodic_irr",
    "effective_annual_rate",
    "apr_to_nominal",
    "nominal_to_apr",
    "resolve_nominal_rate",
    "LoanCalcError",
    "NegativeDownPaymentError",
    "DownPaymentExceedsPriceError",
    "InvalidLoanTermsError",
    "LOANCALC_ERRORS",
]
