# tests/unit/test_loan_calculator.py
import pytest

from loancalc.core.finance import InvalidLoanTermsError, calculate_loan, loan_inputs_to_terms


def test_zero_rate_loan(loan_inputs):
    res = calculate_loan(loan_inputs(loan_amount=12_000, interest_rate=0.0, term_months=12))
    assert len(res.schedule) == 12
    assert {e.payment for e in res.schedule} == {1000.0}
    assert res.total_interest == 0.0
    assert res.total_payment == 12_000.0
    assert res.effective_rate == 0.0


def test_plain_loan_has_no_down_payment_or_pmi(loan_inputs):
    res = calculate_loan(loan_inputs())
    assert res.down_payment_amount == 0.0
    assert res.loan_amount == 200_000
    assert res.periodic_payment == 1199.10
    assert not res.pmi_required
    assert res.total_pmi == 0.0


def test_apr_input_is_converted_to_nominal(loan_inputs):
    res = calculate_loan(loan_inputs(rate_input_type="apr", interest_rate=0.0, apr=6.17))
    assert res.nominal_rate == 6.00


def test_unknown_rate_uses_estimate(loan_inputs):
    res = calculate_loan(loan_inputs(rate_input_type="unknown", interest_rate=0.0))
    assert res.nominal_rate == 7.0


def test_insurance_and_account_fee_in_breakdown(loan_inputs):
    res = calculate_loan(loan_inputs(insurance_monthly=20.0, monthly_fee=5.0))
    assert res.payment_breakdown.home_insurance == 20.0
    assert res.payment_breakdown.monthly_fee == 5.0
    assert res.payment_breakdown.total == pytest.approx(1199.10 + 25.0, abs=0.01)


def test_origination_fee_raises_effective_rate(loan_inputs):
    plain = calculate_loan(loan_inputs())
    with_fee = calculate_loan(loan_inputs(origination_fee_pct=2.0, other_fees=300))
    assert with_fee.total_closing_costs == 4_300.0
    assert with_fee.effective_rate > plain.effective_rate


def test_inputs_map_to_terms(loan_inputs):
    terms = loan_inputs_to_terms(loan_inputs(insurance_monthly=15.0))
    assert terms.home_price == 200_000
    assert terms.down_payment_value == 0.0
    assert terms.home_insurance_annual == 180.0
    assert terms.pmi_enabled is False


def test_invalid_loan_raises(loan_inputs):
    with pytest.raises(InvalidLoanTermsError) as exc:
        calculate_loan(loan_inputs(loan_amount=-10))
    assert exc.value.outcome.messages_for("loan_amount")
