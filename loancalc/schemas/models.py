# loancalc/schemas/models.py

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PaymentFrequency = Literal["monthly", "biweekly", "weekly"]
DownPaymentType = Literal["percentage", "amount"]
RateInputType = Literal["nominal", "apr", "both", "unknown"]

# =========================
# Core inputs
# =========================


class LoanTerms(BaseModel):
    """
    Mortgage/loan parameters as entered by the user. All money amounts share one currency.

    Range checks live in the validation layer so partial or out-of-range input can be
    reported field by field; this model only fixes shapes and types.
    """

    model_config = ConfigDict(frozen=True)

    home_price: float = Field(..., description="Purchase price of the property (or the loan amount for plain loans).")
    down_payment_type: DownPaymentType = Field(
        "percentage", description='How down_payment_value is expressed: "percentage" of price or absolute "amount".'
    )
    down_payment_value: float = Field(0.0, description="Down payment, as a percent (e.g., 20 = 20%) or a currency amount.")
    interest_rate: float = Field(..., description="Nominal annual interest rate in percent (e.g., 6.5 = 6.5%).")
    term_months: int = Field(..., description="Loan term in months (typically 180, 240, 360).")
    payment_frequency: PaymentFrequency = Field("monthly", description="Payment cadence.")

    # Recurring costs
    property_tax_annual: float | None = Field(None, description="Annual property tax.")
    home_insurance_annual: float | None = Field(None, description="Annual home insurance premium.")
    hoa_monthly: float | None = Field(None, description="Monthly HOA/condo fees.")
    monthly_fee: float | None = Field(None, description="Fixed monthly account/servicing fee.")

    # PMI
    pmi_rate: float | None = Field(
        None, description="Annual PMI rate as percent of the loan amount. Defaults to 0.5 when PMI applies."
    )
    pmi_enabled: bool = Field(True, description="Charge PMI automatically when the down payment is below 20%.")

    # One-time fees
    origination_fee_pct: float | None = Field(None, description="Origination fee as percent of the loan amount.")
    closing_costs: float | None = Field(None, description="Flat one-time closing costs.")
    other_fees: float | None = Field(None, description="Any other one-time fees.")


class LoanInputs(BaseModel):
    """
    Plain (non-mortgage) loan parameters. No property, no down payment, no PMI.
    The engine converts these into LoanTerms with a zero down payment.
    """

    model_config = ConfigDict(frozen=True)

    loan_amount: float = Field(..., description="Amount borrowed.")
    interest_rate: float = Field(0.0, description="Nominal annual rate (TAN) in percent.")
    apr: float = Field(0.0, description="Effective annual rate (TAE) in percent, used when rate_input_type='apr'.")
    rate_input_type: RateInputType = Field("nominal", description="Which rate the borrower knows.")
    term_months: int = Field(..., description="Loan term in months.")
    payment_frequency: PaymentFrequency = Field("monthly", description="Payment cadence.")
    origination_fee_pct: float | None = Field(None, description="Origination fee as percent of the loan amount.")
    monthly_fee: float | None = Field(None, description="Fixed monthly account fee.")
    insurance_monthly: float | None = Field(None, description="Monthly loan insurance premium.")
    other_fees: float | None = Field(None, description="One-time additional fees.")


class ValidationLimits(BaseModel):
    """Upper bounds applied by the validation layer."""

    model_config = ConfigDict(frozen=True)

    max_principal: float = 100_000_000.0
    max_interest_rate: float = 30.0
    max_term_months: int = 360
    max_pmi_rate: float = 5.0
    max_origination_fee_pct: float = 20.0


# =========================
# Validation
# =========================


class FieldError(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    message: str


class ValidationOutcome(BaseModel):
    """All violated rules for one input bundle (never short-circuited)."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: list[FieldError] = Field(default_factory=list)

    def messages_for(self, field: str) -> list[str]:
        return [e.message for e in self.errors if e.field == field]


# =========================
# Computed outputs
# =========================


class DownPayment(BaseModel):
    """Down payment with both representations populated."""

    model_config = ConfigDict(frozen=True)

    amount: float
    percentage: float


class ScheduleEntry(BaseModel):
    """One payment period of the amortization schedule."""

    model_config = ConfigDict(frozen=True)

    period: int = Field(..., ge=1, description="1-based payment number.")
    payment: float = Field(..., description="Principal + interest paid this period.")
    principal: float
    interest: float
    balance: float = Field(..., description="Remaining balance after this payment.")
    cumulative_principal: float
    cumulative_interest: float
    pmi: float = Field(0.0, description="PMI charged this period (0 once removed).")


class YearSummary(BaseModel):
    """Schedule entries aggregated by loan year."""

    model_config = ConfigDict(frozen=True)

    year: int
    payment: float
    principal: float
    interest: float
    pmi: float
    ending_balance: float


class PaymentBreakdown(BaseModel):
    """
    First payment period split into its components. Recurring costs are per-period
    equivalents, so for the monthly cadence this is the monthly payment.
    """

    model_config = ConfigDict(frozen=True)

    principal: float
    interest: float
    property_tax: float
    home_insurance: float
    pmi: float
    hoa: float
    monthly_fee: float
    total: float


class LoanResult(BaseModel):
    """Immutable snapshot of one calculation."""

    model_config = ConfigDict(frozen=True)

    # Amounts
    home_price: float
    down_payment_amount: float
    down_payment_percentage: float
    loan_amount: float
    periodic_payment: float = Field(..., description="Fixed principal + interest payment per period.")
    payment_breakdown: PaymentBreakdown

    # Totals
    total_payment: float
    total_interest: float
    total_principal: float
    total_pmi: float
    total_closing_costs: float
    total_cost_of_ownership: float

    # Cadence
    payment_frequency: PaymentFrequency
    periods_per_year: float
    total_periods: int
    loan_term_years: float

    # Rates
    nominal_rate: float
    effective_rate: float

    # PMI
    pmi_monthly: float
    pmi_required: bool
    pmi_removal_period: int | None = None

    schedule: list[ScheduleEntry] = Field(default_factory=list)

    @property
    def total_periodic_payment(self) -> float:
        return self.payment_breakdown.total
