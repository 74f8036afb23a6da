# loancalc/core/finance/amortization.py

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from loancalc.schemas.models import ScheduleEntry, YearSummary

from .rounding import round_to_cents

_FINAL_BALANCE_EPS = 0.01  # balance left below one cent is paid off in full


@dataclass(frozen=True)
class PeriodStep:
    period: int
    interest: float
    principal: float
    balance: float


def step_period(balance: float, rate: float, payment: float, *, final: bool) -> tuple[float, float, float]:
    """
    One transition of the schedule state machine.

    Returns (interest, principal, new_balance), all rounded to cents. On the final
    period, or once less than a cent would remain, the whole balance is taken as
    principal so the principal column sums to the loan amount.
    """
    interest = round_to_cents(balance * rate)
    principal = round_to_cents(payment - interest)

    if final or balance - principal < _FINAL_BALANCE_EPS:
        return interest, round_to_cents(balance), 0.0
    return interest, principal, round_to_cents(balance - principal)


def iter_periods(loan_amount: float, rate: float, payment: float, periods: int) -> Iterator[PeriodStep]:
    """
    Walk the loan forward one payment at a time, stopping at zero balance.

    Every forward-stepping pass (the schedule, the PMI removal search) goes through
    here so they agree to the cent; callers that only need a prefix stop consuming.
    """
    balance = round_to_cents(loan_amount)
    for period in range(1, periods + 1):
        interest, principal, balance = step_period(balance, rate, payment, final=period == periods)
        yield PeriodStep(period, interest, principal, balance)
        if balance <= 0:
            return


def generate_schedule(
    loan_amount: float,
    rate: float,
    periods: int,
    payment: float,
    pmi_per_period: float = 0.0,
    pmi_removal_period: int | None = None,
) -> list[ScheduleEntry]:
    """
    Full period-by-period amortization schedule.

    Args:
        loan_amount: Original balance.
        rate: Periodic rate (fraction).
        periods: Total number of payments.
        payment: Fixed P&I payment (unrounded; each split is rounded per period).
        pmi_per_period: PMI charged each period while it applies.
        pmi_removal_period: First period with no PMI (None = PMI for the whole term).

    Returns:
        Ordered ScheduleEntry list ending at a zero balance; empty for a zero loan.
    """
    if loan_amount <= 0 or periods <= 0:
        return []

    schedule: list[ScheduleEntry] = []
    cum_principal = 0.0
    cum_interest = 0.0

    for step in iter_periods(loan_amount, rate, payment, periods):
        cum_principal = round_to_cents(cum_principal + step.principal)
        cum_interest = round_to_cents(cum_interest + step.interest)

        removed = pmi_removal_period is not None and step.period >= pmi_removal_period
        schedule.append(
            ScheduleEntry(
                period=step.period,
                payment=round_to_cents(step.interest + step.principal),
                principal=step.principal,
                interest=step.interest,
                balance=step.balance,
                cumulative_principal=cum_principal,
                cumulative_interest=cum_interest,
                pmi=0.0 if removed else pmi_per_period,
            )
        )

    return schedule


def summarize_by_year(schedule: list[ScheduleEntry], ppy: float) -> list[YearSummary]:
    """
    Aggregate a schedule into loan years.

    Period p belongs to year floor((p - 1) / ppy) + 1, which also handles the
    non-integer weekly/biweekly cadences.
    """
    if not schedule:
        return []
    if ppy <= 0:
        raise ValueError("periods per year must be > 0")

    out: list[YearSummary] = []
    year = 1
    payment = principal = interest = pmi = 0.0
    ending = schedule[0].balance

    for entry in schedule:
        entry_year = int((entry.period - 1) // ppy) + 1
        if entry_year != year:
            out.append(YearSummary(year=year, payment=payment, principal=principal, interest=interest, pmi=pmi, ending_balance=ending))
            year = entry_year
            payment = principal = interest = pmi = 0.0
        payment = round_to_cents(payment + entry.payment)
        principal = round_to_cents(principal + entry.principal)
        interest = round_to_cents(interest + entry.interest)
        pmi = round_to_cents(pmi + entry.pmi)
        ending = entry.balance

    out.append(YearSummary(year=year, payment=payment, principal=principal, interest=interest, pmi=pmi, ending_balance=ending))
    return out
