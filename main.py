# main.py
"""
Entry Point — loancalc

Purpose
-------
Run one mortgage or loan calculation end-to-end and emit a Markdown report:
  1) Load terms (sample defaults or --config JSON).
  2) Validate them; print every problem and exit 1 if any.
  3) Calculate the schedule, totals and effective rate.
  4) Write the Markdown report.

Usage
-----
    python main.py
    python main.py --config data/sample/loan.json --out report.md --schedule full \
                   --start-date 2025-01-01
"""

from __future__ import annotations

import argparse
import sys
from datetime import date

from loancalc.core.debug_log import configure_logging
from loancalc.core.finance import LOANCALC_ERRORS, InvalidLoanTermsError, calculate, calculate_loan
from loancalc.inputs.inputs import AppInputs, InputsLoader, RunOptions
from loancalc.reports.generator import write_report
from loancalc.schemas.models import LoanResult, LoanTerms, ValidationOutcome


def build_sample_terms() -> LoanTerms:
    """Return baseline mortgage terms for demo purposes (10% down, so PMI applies)."""
    return LoanTerms(
        home_price=300_000.0,
        down_payment_type="percentage",
        down_payment_value=10.0,
        interest_rate=6.0,
        term_months=360,
        payment_frequency="monthly",
        property_tax_annual=3_600.0,
        home_insurance_annual=1_200.0,
        hoa_monthly=0.0,
        pmi_rate=0.5,
        closing_costs=6_000.0,
        origination_fee_pct=1.0,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for configurable runs."""
    p = argparse.ArgumentParser(description="Mortgage / loan amortization calculator")
    p.add_argument("--config", type=str, default=None, help="Path to JSON config (LoanTerms or AppInputs).")
    p.add_argument("--out", type=str, default=None, help="Output Markdown path (overrides config).")
    p.add_argument(
        "--schedule",
        type=str,
        default=None,
        choices=["yearly", "full", "none"],
        help="Schedule detail in the report (overrides config).",
    )
    p.add_argument(
        "--start-date",
        type=date.fromisoformat,
        default=None,
        help="First payment date, YYYY-MM-DD (overrides config).",
    )
    return p.parse_args(argv)


def _print_errors(outcome: ValidationOutcome) -> None:
    print("Invalid inputs:", file=sys.stderr)
    for err in outcome.errors:
        print(f"  - {err.field}: {err.message}", file=sys.stderr)


def run(cfg: AppInputs) -> LoanResult | None:
    """Validate and calculate; returns None (after printing errors) when inputs are invalid."""
    try:
        if cfg.loan is not None:
            return calculate_loan(cfg.loan)
        assert cfg.terms is not None
        return calculate(cfg.terms)
    except InvalidLoanTermsError as e:
        _print_errors(e.outcome)
    except LOANCALC_ERRORS as e:
        print(f"Calculation failed: {e}", file=sys.stderr)
    return None


def main(argv: list[str] | None = None) -> int:
    """Run one calculation and write amortization_report.md (or the chosen output)."""
    configure_logging()
    args = parse_args(argv)
    loader = InputsLoader()

    if args.config:
        cfg = loader.load(args.config)
    else:
        cfg = AppInputs(terms=build_sample_terms(), run=RunOptions())
    cfg = loader.with_overrides(cfg, out=args.out, schedule=args.schedule, start_date=args.start_date)

    result = run(cfg)
    if result is None:
        return 1

    write_report(cfg.run.out, result, schedule=cfg.run.schedule, start_date=cfg.run.start_date)

    print(f"Report written to {cfg.run.out}")
    print(f"Payment (P&I): {result.periodic_payment:,.2f} · Total per period: {result.payment_breakdown.total:,.2f}")
    print(f"Effective rate: {result.effective_rate:.2f}%")
    return 0


if __name__ == "__main__":
    sys.exit(main())
