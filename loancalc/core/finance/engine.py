# loancalc/core/finance/engine.py
from __future__ import annotations

import logging

from loancalc.schemas.models import (
    LoanInputs,
    LoanResult,
    LoanTerms,
    PaymentBreakdown,
    ValidationLimits,
)

from .amortization import generate_schedule
from .down_payment import reconcile_down_payment
from .effective_rate import effective_annual_rate
from .errors import InvalidLoanTermsError
from .frequency import per_period, periodic_rate, periods_per_year, total_periods
from .payment import periodic_payment
from .pmi import DEFAULT_PMI_RATE, is_pmi_required, monthly_pmi, pmi_removal_period
from .rates import resolve_nominal_rate
from .rounding import round_to_cents
from .validation import LOAN_LIMITS, MORTGAGE_LIMITS, validate, validate_loan

logger = logging.getLogger(__name__)


def _run(terms: LoanTerms) -> LoanResult:
    """Compute a result for terms that already passed validation. Never raises on numeric edge cases."""
    # Down payment → loan amount
    dp = reconcile_down_payment(terms.home_price, terms.down_payment_type, terms.down_payment_value)
    loan_amount = round_to_cents(terms.home_price - dp.amount)

    # Cadence
    ppy = periods_per_year(terms.payment_frequency)
    rate = periodic_rate(terms.interest_rate, terms.payment_frequency)
    n = total_periods(terms.term_months, terms.payment_frequency)
    term_years = terms.term_months / 12.0

    payment = periodic_payment(loan_amount, rate, n)

    # PMI
    pmi_required = terms.pmi_enabled and is_pmi_required(dp.percentage)
    pmi_rate = DEFAULT_PMI_RATE if terms.pmi_rate is None else terms.pmi_rate
    pmi_month = monthly_pmi(loan_amount, pmi_rate) if pmi_required else 0.0
    pmi_period = round_to_cents(per_period(pmi_month, ppy))
    removal = pmi_removal_period(terms.home_price, loan_amount, payment, rate, n) if pmi_required else None

    # Recurring costs (monthly figures, then per-period equivalents)
    tax_annual = terms.property_tax_annual or 0.0
    insurance_annual = terms.home_insurance_annual or 0.0
    tax_month = round_to_cents(tax_annual / 12.0)
    insurance_month = round_to_cents(insurance_annual / 12.0)
    hoa_month = terms.hoa_monthly or 0.0
    fee_month = terms.monthly_fee or 0.0

    tax_period = round_to_cents(per_period(tax_month, ppy))
    insurance_period = round_to_cents(per_period(insurance_month, ppy))
    hoa_period = round_to_cents(per_period(hoa_month, ppy))
    fee_period = round_to_cents(per_period(fee_month, ppy))
    escrow_period = tax_period + insurance_period + hoa_period + fee_period

    schedule = generate_schedule(loan_amount, rate, n, payment, pmi_period, removal)

    # Totals from the schedule
    total_interest = round_to_cents(sum(e.interest for e in schedule))
    total_pmi = round_to_cents(sum(e.pmi for e in schedule))
    origination = (terms.origination_fee_pct or 0.0) / 100.0 * loan_amount
    total_closing = round_to_cents((terms.closing_costs or 0.0) + origination + (terms.other_fees or 0.0))

    recurring_month = tax_month + insurance_month + hoa_month + fee_month
    total_payment = round_to_cents(sum(e.payment for e in schedule) + total_pmi + recurring_month * terms.term_months)
    total_cost = round_to_cents(
        terms.home_price
        + total_interest
        + total_pmi
        + total_closing
        + tax_annual * term_years
        + insurance_annual * term_years
        + (hoa_month + fee_month) * terms.term_months
    )

    # PMI is held constant across the stream here, matching a borrower's quoted payment
    effective = effective_annual_rate(
        loan_amount - total_closing,
        payment + pmi_period + escrow_period,
        n,
        ppy,
    )

    first = schedule[0] if schedule else None
    breakdown = PaymentBreakdown(
        principal=first.principal if first else 0.0,
        interest=first.interest if first else 0.0,
        property_tax=tax_period,
        home_insurance=insurance_period,
        pmi=pmi_period,
        hoa=hoa_period,
        monthly_fee=fee_period,
        total=round_to_cents(payment + pmi_period + escrow_period),
    )

    logger.debug(
        "calculate: loan=%.2f rate=%.4f%% n=%d freq=%s payment=%.2f pmi_removal=%s effective=%.4f%%",
        loan_amount,
        terms.interest_rate,
        n,
        terms.payment_frequency,
        payment,
        removal,
        effective,
    )

    return LoanResult(
        home_price=terms.home_price,
        down_payment_amount=round_to_cents(dp.amount),
        down_payment_percentage=round_to_cents(dp.percentage),
        loan_amount=loan_amount,
        periodic_payment=round_to_cents(payment),
        payment_breakdown=breakdown,
        total_payment=total_payment,
        total_interest=total_interest,
        total_principal=loan_amount,
        total_pmi=total_pmi,
        total_closing_costs=total_closing,
        total_cost_of_ownership=total_cost,
        payment_frequency=terms.payment_frequency,
        periods_per_year=ppy,
        total_periods=n,
        loan_term_years=term_years,
        nominal_rate=terms.interest_rate,
        effective_rate=round_to_cents(effective),
        pmi_monthly=pmi_month,
        pmi_required=pmi_required,
        pmi_removal_period=removal,
        schedule=schedule,
    )


def calculate(terms: LoanTerms, limits: ValidationLimits = MORTGAGE_LIMITS) -> LoanResult:
    """
    Run the full mortgage calculation for one set of terms.

    Pipeline: down payment → cadence → P&I payment → PMI policy → schedule →
    effective rate. Deterministic: identical terms give an identical result.

    Raises:
        InvalidLoanTermsError: terms fail validate(); the error carries the outcome.
    """
    outcome = validate(terms, limits)
    if not outcome.valid:
        raise InvalidLoanTermsError(outcome)
    return _run(terms)


def loan_inputs_to_terms(inputs: LoanInputs) -> LoanTerms:
    """Express a plain loan as mortgage terms: zero down, PMI off, insurance as escrow."""
    ppy = periods_per_year(inputs.payment_frequency)
    nominal = resolve_nominal_rate(inputs.rate_input_type, inputs.interest_rate, inputs.apr, ppy)
    insurance = inputs.insurance_monthly
    return LoanTerms(
        home_price=inputs.loan_amount,
        down_payment_type="amount",
        down_payment_value=0.0,
        interest_rate=nominal,
        term_months=inputs.term_months,
        payment_frequency=inputs.payment_frequency,
        home_insurance_annual=insurance * 12.0 if insurance is not None else None,
        monthly_fee=inputs.monthly_fee,
        pmi_enabled=False,
        origination_fee_pct=inputs.origination_fee_pct,
        other_fees=inputs.other_fees,
    )


def calculate_loan(inputs: LoanInputs, limits: ValidationLimits = LOAN_LIMITS) -> LoanResult:
    """
    Plain-loan entry point (personal/auto loans): same engine, no down payment or PMI.

    Raises:
        InvalidLoanTermsError: inputs fail validate_loan().
    """
    outcome = validate_loan(inputs, limits)
    if not outcome.valid:
        raise InvalidLoanTermsError(outcome)
    return _run(loan_inputs_to_terms(inputs))
