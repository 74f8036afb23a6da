# tests/conftest.py
from __future__ import annotations

import pytest

from loancalc.core.finance import calculate
from tests.utils import make_loan_inputs, make_loan_terms


# -------- Isolate env-driven configuration --------
@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("LOANCALC_OUT", "LOANCALC_SCHEDULE", "LOANCALC_START_DATE", "LOANCALC_DEBUG", "LOANCALC_LOG_PATH"):
        monkeypatch.delenv(key, raising=False)
    yield


# -------- Loan fixtures --------
@pytest.fixture
def loan_terms():
    """Factory for baseline mortgage terms (10% down, 6%, 30y monthly)."""

    def _factory(**overrides):
        return make_loan_terms(**overrides)

    return _factory


@pytest.fixture
def loan_inputs():
    """Factory for baseline plain-loan inputs."""

    def _factory(**overrides):
        return make_loan_inputs(**overrides)

    return _factory


@pytest.fixture
def baseline_result():
    """Factory to run the engine on baseline terms with optional overrides."""

    def _factory(**overrides):
        return calculate(make_loan_terms(**overrides))

    return _factory


# -------- Pytest markers --------
def pytest_configure(config):
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")
