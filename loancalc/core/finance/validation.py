# loancalc/core/finance/validation.py
"""
Input checks run before any calculation.

Every rule is evaluated and all violations are returned together so a form can
show each problem at once. Accepts either a model instance or a plain mapping
with some fields missing (a form that is still being filled in).
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from loancalc.schemas.models import FieldError, ValidationLimits, ValidationOutcome

MORTGAGE_LIMITS = ValidationLimits()
LOAN_LIMITS = ValidationLimits(max_interest_rate=100.0, max_term_months=600)

_FREQUENCIES = ("monthly", "biweekly", "weekly")
_RATE_TYPES = ("nominal", "apr", "both", "unknown")

_MISSING = object()


def _as_dict(terms: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(terms, BaseModel):
        return terms.model_dump()
    return dict(terms)


def _number(data: dict[str, Any], key: str, errors: list[FieldError], field: str | None = None) -> Any:
    """
    Fetch a numeric field. Returns None when absent, _MISSING when present but not
    a finite number (an error is recorded for it).
    """
    raw = data.get(key)
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, int | float) or not math.isfinite(raw):
        errors.append(FieldError(field=field or key, message="Must be a number"))
        return _MISSING
    return float(raw)


def _check_non_negative(data: dict[str, Any], key: str, field: str, label: str, errors: list[FieldError]) -> None:
    value = _number(data, key, errors, field)
    if value is None or value is _MISSING:
        return
    if value < 0:
        errors.append(FieldError(field=field, message=f"{label} cannot be negative"))


def _check_rate(data: dict[str, Any], key: str, limits: ValidationLimits, errors: list[FieldError]) -> None:
    rate = _number(data, key, errors)
    if rate is _MISSING:
        return
    if rate is None or rate < 0:
        errors.append(FieldError(field=key, message="Interest rate cannot be negative"))
    elif rate > limits.max_interest_rate:
        errors.append(FieldError(field=key, message=f"Interest rate exceeds {limits.max_interest_rate:g}%"))


def _check_term(data: dict[str, Any], limits: ValidationLimits, errors: list[FieldError]) -> None:
    term = _number(data, "term_months", errors)
    if term is _MISSING:
        return
    if term is None or term <= 0:
        errors.append(FieldError(field="term_months", message="Loan term must be greater than zero"))
    elif term > limits.max_term_months:
        years = limits.max_term_months / 12
        errors.append(FieldError(field="term_months", message=f"Loan term exceeds maximum ({years:g} years)"))


def _check_frequency(data: dict[str, Any], errors: list[FieldError]) -> None:
    freq = data.get("payment_frequency")
    if freq is not None and freq not in _FREQUENCIES:
        errors.append(FieldError(field="payment_frequency", message=f"Payment frequency must be one of {', '.join(_FREQUENCIES)}"))


def _check_one_time_fees(data: dict[str, Any], limits: ValidationLimits, errors: list[FieldError]) -> None:
    fee = _number(data, "origination_fee_pct", errors)
    if fee is not None and fee is not _MISSING and (fee < 0 or fee > limits.max_origination_fee_pct):
        errors.append(
            FieldError(
                field="origination_fee_pct",
                message=f"Origination fee must be between 0% and {limits.max_origination_fee_pct:g}%",
            )
        )
    _check_non_negative(data, "closing_costs", "closing_costs", "Closing costs", errors)
    _check_non_negative(data, "other_fees", "other_fees", "Other fees", errors)
    _check_non_negative(data, "monthly_fee", "monthly_fee", "Monthly fee", errors)


def validate(terms: BaseModel | Mapping[str, Any], limits: ValidationLimits = MORTGAGE_LIMITS) -> ValidationOutcome:
    """
    Validate (possibly partial) mortgage terms.

    Rules:
      - home_price > 0 and <= limits.max_principal
      - down payment consistent with its type (percentage in [0, 100]; amount in [0, price])
      - interest_rate in [0, limits.max_interest_rate]
      - term_months in (0, limits.max_term_months]
      - pmi_rate in [0, limits.max_pmi_rate] when provided
      - recurring costs and flat fees >= 0 when provided; origination fee in [0, max]
    """
    data = _as_dict(terms)
    errors: list[FieldError] = []

    # Home price
    price = _number(data, "home_price", errors)
    if price is not _MISSING:
        if price is None or price <= 0:
            errors.append(FieldError(field="home_price", message="Home price must be greater than zero"))
        elif price > limits.max_principal:
            errors.append(FieldError(field="home_price", message=f"Home price exceeds maximum ({limits.max_principal:,.0f})"))

    # Down payment
    dp_type = data.get("down_payment_type")
    dp_value = _number(data, "down_payment_value", errors, "down_payment")
    if dp_type == "percentage":
        if dp_value is None or (dp_value is not _MISSING and dp_value < 0):
            errors.append(FieldError(field="down_payment", message="Down payment cannot be negative"))
        elif dp_value is not _MISSING and dp_value > 100:
            errors.append(FieldError(field="down_payment", message="Down payment cannot exceed 100%"))
    elif dp_type == "amount":
        if dp_value is None or (dp_value is not _MISSING and dp_value < 0):
            errors.append(FieldError(field="down_payment", message="Down payment cannot be negative"))
        elif dp_value is not _MISSING and isinstance(price, float) and price > 0 and dp_value > price:
            errors.append(FieldError(field="down_payment", message="Down payment cannot exceed home price"))
    elif dp_type is not None:
        errors.append(FieldError(field="down_payment", message='Down payment type must be "percentage" or "amount"'))

    _check_rate(data, "interest_rate", limits, errors)
    _check_term(data, limits, errors)
    _check_frequency(data, errors)

    _check_non_negative(data, "property_tax_annual", "property_tax", "Property tax", errors)
    _check_non_negative(data, "home_insurance_annual", "home_insurance", "Insurance", errors)
    _check_non_negative(data, "hoa_monthly", "hoa_fees", "HOA fees", errors)

    pmi_rate = _number(data, "pmi_rate", errors)
    if pmi_rate is not None and pmi_rate is not _MISSING and (pmi_rate < 0 or pmi_rate > limits.max_pmi_rate):
        errors.append(FieldError(field="pmi_rate", message=f"PMI rate must be between 0% and {limits.max_pmi_rate:g}%"))

    _check_one_time_fees(data, limits, errors)

    return ValidationOutcome(valid=not errors, errors=errors)


def validate_loan(inputs: BaseModel | Mapping[str, Any], limits: ValidationLimits = LOAN_LIMITS) -> ValidationOutcome:
    """Validate (possibly partial) plain-loan inputs."""
    data = _as_dict(inputs)
    errors: list[FieldError] = []

    amount = _number(data, "loan_amount", errors)
    if amount is not _MISSING:
        if amount is None or amount <= 0:
            errors.append(FieldError(field="loan_amount", message="Loan amount must be greater than zero"))
        elif amount > limits.max_principal:
            errors.append(FieldError(field="loan_amount", message=f"Loan amount exceeds maximum ({limits.max_principal:,.0f})"))

    rate_type = data.get("rate_input_type") or "nominal"
    if rate_type not in _RATE_TYPES:
        errors.append(FieldError(field="rate_input_type", message=f"Rate type must be one of {', '.join(_RATE_TYPES)}"))
    elif rate_type == "apr":
        _check_rate(data, "apr", limits, errors)
    elif rate_type != "unknown":
        _check_rate(data, "interest_rate", limits, errors)

    _check_term(data, limits, errors)
    _check_frequency(data, errors)
    _check_non_negative(data, "insurance_monthly", "insurance_monthly", "Insurance cost", errors)
    _check_one_time_fees(data, limits, errors)

    return ValidationOutcome(valid=not errors, errors=errors)
