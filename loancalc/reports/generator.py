# loancalc/reports/generator.py
from __future__ import annotations

from datetime import date

from loancalc.core.finance.amortization import summarize_by_year
from loancalc.core.finance.frequency import payoff_date
from loancalc.schemas.models import LoanResult, ScheduleEntry

_FREQUENCY_LABELS = {"monthly": "Monthly", "biweekly": "Biweekly", "weekly": "Weekly"}


def _fmt_currency(x: float) -> str:
    """
    Format a float as USD-style currency with thousands separators.

    Example:
        123456.789 -> $123,456.79
        -2000 -> -$2,000.00
    """
    sign = "-" if x < 0 else ""
    return f"{sign}${abs(x):,.2f}"


def _fmt_pct(x: float) -> str:
    """Format a percentage value (already in percent units) with two decimals: 6.5 -> 6.50%."""
    return f"{x:.2f}%"


def _section(title: str) -> str:
    """Render a level-2 heading for Markdown sections."""
    return f"\n## {title}\n"


# -----------------------
# Header & summary sections
# -----------------------


def _render_header(result: LoanResult, title: str | None) -> str:
    heading = title or f"Amortization Report – {_fmt_currency(result.loan_amount)} loan"
    freq = _FREQUENCY_LABELS.get(result.payment_frequency, result.payment_frequency)
    lines = [
        f"# {heading}",
        "",
        f"**Term:** {result.loan_term_years:g} years · **Payments:** {result.total_periods} ({freq.lower()})",
    ]
    return "\n".join(lines) + "\n"


def _render_loan_summary(result: LoanResult) -> str:
    lines = [
        _section("Loan Summary"),
        f"- **Price:** {_fmt_currency(result.home_price)}",
        f"- **Down Payment:** {_fmt_currency(result.down_payment_amount)} ({_fmt_pct(result.down_payment_percentage)})",
        f"- **Loan Amount:** {_fmt_currency(result.loan_amount)}",
        f"- **Nominal Rate:** {_fmt_pct(result.nominal_rate)}",
        f"- **Effective Rate (incl. fees, PMI, escrow):** {_fmt_pct(result.effective_rate)}",
    ]
    return "\n".join(lines) + "\n"


def _render_breakdown(result: LoanResult) -> str:
    """Render the first payment split into its components as a two-column table."""
    b = result.payment_breakdown
    freq = _FREQUENCY_LABELS.get(result.payment_frequency, result.payment_frequency)
    rows = [
        ("Principal", b.principal),
        ("Interest", b.interest),
        ("Property Tax", b.property_tax),
        ("Home Insurance", b.home_insurance),
        ("PMI", b.pmi),
        ("HOA", b.hoa),
        ("Account Fee", b.monthly_fee),
    ]
    lines = [
        _section(f"{freq} Payment Breakdown"),
        "| Component | Amount |",
        "|---|---:|",
    ]
    for label, amount in rows:
        if label in ("Principal", "Interest") or amount:
            lines.append(f"| {label} | {_fmt_currency(amount)} |")
    lines.append(f"| **Total** | **{_fmt_currency(b.total)}** |")
    return "\n".join(lines) + "\n"


def _render_totals(result: LoanResult, start_date: date | None) -> str:
    lines = [
        _section("Totals"),
        f"- **Total Interest:** {_fmt_currency(result.total_interest)}",
        f"- **Total PMI:** {_fmt_currency(result.total_pmi)}",
        f"- **Total Closing Costs:** {_fmt_currency(result.total_closing_costs)}",
        f"- **Total of Payments:** {_fmt_currency(result.total_payment)}",
        f"- **Total Cost of Ownership:** {_fmt_currency(result.total_cost_of_ownership)}",
    ]
    if start_date is not None and result.schedule:
        last = payoff_date(len(result.schedule), result.periods_per_year, start_date)
        lines.append(f"- **Payoff Date:** {last.strftime('%b %d, %Y')}")
    return "\n".join(lines) + "\n"


def _render_pmi(result: LoanResult) -> str:
    if not result.pmi_required:
        return ""
    lines = [
        _section("Private Mortgage Insurance"),
        f"- **Monthly PMI:** {_fmt_currency(result.pmi_monthly)}",
    ]
    if result.pmi_removal_period is not None:
        lines.append(f"- **Removed from payment:** {result.pmi_removal_period} (balance at or below 80% of price)")
    else:
        lines.append("- **Removed from payment:** not within the simulated horizon")
    return "\n".join(lines) + "\n"


def _render_methodology() -> str:
    lines = [
        _section("Methodology"),
        "Fixed payment per period (standard annuity), with $r$ the periodic rate and $n$ the number of payments:",
        "",
        "$$PMT = P \\times \\frac{r(1 + r)^n}{(1 + r)^n - 1}$$",
        "",
        "Each period, interest and principal are rounded to the cent; the final payment absorbs any residual "
        "so the balance ends at exactly zero. The effective rate is the annualized IRR of the full payment "
        "(P&I, PMI, escrow) against the loan amount net of upfront fees:",
        "",
        "$$EffectiveRate = (1 + IRR_{period})^{periods\\_per\\_year} - 1$$",
    ]
    return "\n".join(lines) + "\n"


# -----------------------
# Schedule tables
# -----------------------


def _render_schedule_yearly(result: LoanResult) -> str:
    """
    Render a compact Markdown table of the schedule by loan year.

    Columns:
      Year | Payments | Principal | Interest | PMI | Ending Balance
    """
    years = summarize_by_year(result.schedule, result.periods_per_year)
    if not years:
        return ""
    lines = [
        _section("Amortization Schedule (by Year)"),
        "| Year | Payments | Principal | Interest | PMI | Ending Balance |",
        "|---:|---:|---:|---:|---:|---:|",
    ]
    for y in years:
        lines.append(
            f"| {y.year} | {_fmt_currency(y.payment)} | {_fmt_currency(y.principal)} | "
            f"{_fmt_currency(y.interest)} | {_fmt_currency(y.pmi)} | {_fmt_currency(y.ending_balance)} |"
        )
    return "\n".join(lines) + "\n"


def _render_schedule_full(schedule: list[ScheduleEntry]) -> str:
    if not schedule:
        return ""
    lines = [
        _section("Amortization Schedule"),
        "| # | Payment | Principal | Interest | PMI | Balance |",
        "|---:|---:|---:|---:|---:|---:|",
    ]
    for e in schedule:
        lines.append(
            f"| {e.period} | {_fmt_currency(e.payment)} | {_fmt_currency(e.principal)} | "
            f"{_fmt_currency(e.interest)} | {_fmt_currency(e.pmi)} | {_fmt_currency(e.balance)} |"
        )
    return "\n".join(lines) + "\n"


# -----------------------
# Orchestration
# -----------------------


def generate_report(
    result: LoanResult,
    *,
    schedule: str = "yearly",
    start_date: date | None = None,
    title_override: str | None = None,
) -> str:
    """
    Generate a Markdown report for one calculation.

    Sections:
      - Header: loan amount, term, number of payments
      - Loan Summary: price, down payment, loan amount, nominal and effective rates
      - Payment Breakdown: first payment split into components
      - Totals: interest, PMI, closing costs, payments, cost of ownership, payoff date
      - Private Mortgage Insurance (if required)
      - Methodology
      - Amortization Schedule: by year ("yearly"), every period ("full"), or omitted ("none")
    """
    if schedule == "full":
        table = _render_schedule_full(result.schedule)
    elif schedule == "yearly":
        table = _render_schedule_yearly(result)
    elif schedule == "none":
        table = ""
    else:
        raise ValueError(f"Unknown schedule view: {schedule!r}")

    parts = [
        _render_header(result, title_override),
        _render_loan_summary(result),
        _render_breakdown(result),
        _render_totals(result, start_date),
        _render_pmi(result),
        _render_methodology(),
        table,
    ]
    return "\n".join(part for part in parts if part).strip() + "\n"


def write_report(
    path: str,
    result: LoanResult,
    *,
    schedule: str = "yearly",
    start_date: date | None = None,
) -> None:
    """Convenience helper to write the generated report to disk."""
    md = generate_report(result, schedule=schedule, start_date=start_date)
    with open(path, "w", encoding="utf-8") as f:
        f.write(md)
