# tests/unit/test_rounding.py

import math

from loancalc.core.finance.rounding import round_half_up, round_to_cents


def test_round_to_cents_half_away_from_zero():
    assert round_to_cents(1.005 + 1e-9) == 1.01
    assert round_to_cents(2.675000001) == 2.68
    assert round_to_cents(-2.345000001) == -2.35
    assert round_to_cents(199.101) == 199.10


def test_round_to_cents_ties_do_not_use_bankers_rounding():
    # Python's round() gives 0.12 here; cent rounding must go up
    assert round_to_cents(0.125) == 0.13
    assert round_to_cents(-0.125) == -0.13


def test_round_half_up_integers():
    assert round_half_up(1564.2857) == 1564
    assert round_half_up(2.5) == 3
    assert round_half_up(781.5) == 782


def test_round_to_cents_passes_non_finite_through():
    assert round_to_cents(math.inf) == math.inf
    assert math.isnan(round_to_cents(math.nan))
