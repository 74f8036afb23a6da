from __future__ import annotations

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITER = 100
DEFAULT_TOL = 1e-7
INITIAL_ANNUAL_GUESS = 0.05


@dataclass(frozen=True)
class SolverResult:
    rate: float  # periodic rate (fraction)
    iterations: int
    converged: bool


def _npv_and_derivative(rate: float, net_proceeds: float, payment: float, periods: int) -> tuple[float, float]:
    """
    NPV of (-net_proceeds at t=0, +payment at t=1..n) and d(NPV)/d(rate).

    Discount factors are built by repeated multiplication, so an extreme rate
    degrades to inf/0 instead of raising OverflowError.
    """
    v = 1.0 / (1.0 + rate)
    disc = 1.0
    npv = -net_proceeds
    dnpv = 0.0
    for t in range(1, periods + 1):
        disc *= v  # (1+r)^-t
        npv += payment * disc
        dnpv -= t * payment * disc * v  # -t * payment / (1+r)^(t+1)
    return npv, dnpv


def solve_periodic_irr(
    net_proceeds: float,
    payment: float,
    periods: int,
    *,
    guess: float,
    max_iter: int = DEFAULT_MAX_ITER,
    tol: float = DEFAULT_TOL,
) -> SolverResult:
    """
    Newton-Raphson on NPV(rate) = 0 for a level payment stream.

    Returns the last iterate when the step never drops below `tol`; the result is
    an estimate either way.
    """
    r = guess
    for i in range(max_iter):
        f, df = _npv_and_derivative(r, net_proceeds, payment, periods)
        if df == 0.0 or df != df:  # flat or NaN derivative
            logger.warning("IRR solver stopped at iteration %d: degenerate derivative", i)
            return SolverResult(r, i, False)
        new_r = r - f / df
        if new_r <= -1.0:
            logger.warning("IRR solver stepped outside (-1, inf) at iteration %d; keeping %.10f", i, r)
            return SolverResult(r, i + 1, False)
        if abs(new_r - r) < tol:
            return SolverResult(new_r, i + 1, True)
        r = new_r

    logger.warning("IRR solver did not converge in %d iterations; best effort %.10f", max_iter, r)
    return SolverResult(r, max_iter, False)


def annualize(periodic: float, ppy: float) -> float:
    """
    Compound a periodic rate over a year, as a percentage.

    A periodic rate too large to compound in floating point annualizes to inf.
    """
    try:
        return ((1.0 + periodic) ** ppy - 1.0) * 100.0
    except OverflowError:
        logger.warning("Annualizing periodic rate %.6g over %.4g periods overflowed", periodic, ppy)
        return math.inf


def effective_annual_rate(
    net_proceeds: float,
    total_periodic_payment: float,
    periods: int,
    ppy: float,
    *,
    max_iter: int = DEFAULT_MAX_ITER,
    tol: float = DEFAULT_TOL,
) -> float:
    """
    Effective annual rate (percent) of borrowing `net_proceeds` and repaying
    `total_periodic_payment` for `periods` periods.

    Args:
        net_proceeds: Loan amount less upfront fees (what the borrower actually gets).
        total_periodic_payment: P&I plus PMI and escrow, per period.
        periods: Number of payments.
        ppy: Payment periods per year.

    Returns:
        Annualized IRR in percent, or 0.0 for degenerate input
        (net_proceeds <= 0, total_periodic_payment <= 0, periods <= 0); no
        iteration is attempted in that case. A rate too large to compound
        comes back as inf.
    """
    if net_proceeds <= 0 or total_periodic_payment <= 0 or periods <= 0:
        return 0.0

    res = solve_periodic_irr(
        net_proceeds,
        total_periodic_payment,
        periods,
        guess=INITIAL_ANNUAL_GUESS / ppy,
        max_iter=max_iter,
        tol=tol,
    )
    return annualize(res.rate, ppy)
