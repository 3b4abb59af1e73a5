from __future__ import annotations

from math import isclose

import pytest
from pydantic import ValidationError

from fincalc.core.amortization import (
    amortize,
    calculate_emi,
    calculate_loan,
    calculate_mortgage,
    level_payment,
)
from fincalc.schemas import EMIRequest, LoanRequest, MortgageRequest


def mortgage(**overrides) -> MortgageRequest:
    params = dict(
        home_price=400000,
        down_payment=80000,
        term_years=30,
        interest_rate=6.5,
        property_tax=4800,
        home_insurance=1200,
        hoa=0,
    )
    params.update(overrides)
    return MortgageRequest(**params)


def test_emi_scenario():
    result = calculate_emi(EMIRequest(principal=100000, annual_rate=10, tenure_months=12))

    assert isclose(result.monthly_payment, 8791.59, abs_tol=0.01)
    assert isclose(result.total_interest, 5499.08, abs_tol=0.05)
    assert len(result.schedule) == 12
    assert isclose(result.schedule[-1].balance, 0.0, abs_tol=0.01)


@pytest.mark.parametrize(
    "principal, rate, periods",
    [(100000, 10, 12), (250000, 6.5, 360), (5000, 29.9, 7), (1, 0.1, 1)],
)
def test_principal_is_conserved(principal, rate, periods):
    result = calculate_emi(EMIRequest(principal=principal, annual_rate=rate, tenure_months=periods))

    assert isclose(sum(row.principal for row in result.schedule), principal, abs_tol=0.01)
    assert isclose(result.schedule[-1].balance, 0.0, abs_tol=0.01)
    for row in result.schedule:
        assert isclose(row.principal + row.interest, row.payment, abs_tol=0.01)


def test_periods_are_contiguous_and_balance_never_increases():
    result = calculate_loan(LoanRequest(principal=200000, annual_rate=6.5, term_years=15))

    assert [row.period for row in result.schedule] == list(range(1, 181))
    balances = [row.balance for row in result.schedule]
    assert all(later <= earlier for earlier, later in zip(balances, balances[1:]))


def test_interest_falls_and_principal_rises():
    schedule = calculate_loan(LoanRequest(principal=200000, annual_rate=6.5, term_years=15)).schedule

    for earlier, later in zip(schedule, schedule[1:]):
        assert later.interest <= earlier.interest
        assert later.principal >= earlier.principal


def test_level_payment_is_constant():
    result = calculate_loan(LoanRequest(principal=200000, annual_rate=6.5, term_years=15))

    for row in result.schedule:
        assert isclose(row.payment, result.schedule[0].payment, abs_tol=0.01)
    assert result.total_payment > 200000
    assert result.total_interest > 0


def test_zero_rate_divides_linearly():
    result = calculate_emi(EMIRequest(principal=120000, annual_rate=0, tenure_months=12))

    assert result.monthly_payment == 120000 / 12
    assert result.total_interest == 0
    assert all(row.interest == 0 for row in result.schedule)
    assert result.schedule[-1].balance == 0


def test_zero_principal_still_yields_full_schedule():
    result = calculate_loan(LoanRequest(principal=0, annual_rate=5, term_years=1))

    assert len(result.schedule) == 12
    assert result.monthly_payment == 0
    assert result.total_interest == 0


def test_rate_too_small_to_register_behaves_like_zero_rate():
    result = calculate_emi(EMIRequest(principal=1200, annual_rate=1e-14, tenure_months=12))

    assert isclose(result.monthly_payment, 100, abs_tol=0.01)
    assert isclose(sum(row.principal for row in result.schedule), 1200, abs_tol=0.01)
    assert result.schedule[-1].balance == 0


def test_level_payment_rejects_zero_periods():
    with pytest.raises(ValueError):
        level_payment(1000, 0.01, 0)


def test_zero_duration_is_rejected_by_schema():
    with pytest.raises(ValidationError):
        EMIRequest(principal=1000, annual_rate=5, tenure_months=0)


def test_amortize_without_level_stops_when_paid():
    run = amortize(1000, 0.01, 300, 600, level=False)

    assert run.periods == 4
    assert run.final_balance == 0
    assert not run.reached_cap
    # last payment covers only what is left
    assert run.entries[-1].payment < 300


def test_mortgage_basic_payment():
    result = calculate_mortgage(mortgage())

    assert result.loan_amount == 320000
    assert 2000 < result.principal_and_interest < 2100
    assert len(result.schedule) == 360
    assert isclose(result.schedule[-1].balance, 0.0, abs_tol=0.01)
    assert isclose(
        result.schedule[0].principal + result.schedule[0].interest,
        result.principal_and_interest,
        abs_tol=0.01,
    )


def test_mortgage_monthly_total_includes_escrow():
    result = calculate_mortgage(mortgage(hoa=100))

    expected = result.principal_and_interest + 4800 / 12 + 1200 / 12 + 100
    assert isclose(result.total_monthly_payment, expected, abs_tol=0.02)
    assert result.cost_breakdown.principal == 320000
    assert isclose(result.cost_breakdown.property_tax, 4800 * 30, abs_tol=0.5)
    assert isclose(result.cost_breakdown.insurance, 1200 * 30, abs_tol=0.5)
    assert isclose(result.cost_breakdown.hoa, 100 * 360, abs_tol=0.5)


def test_no_mortgage_insurance_at_twenty_percent_down():
    result = calculate_mortgage(mortgage(down_payment=80000))

    assert result.down_payment_percent == 20
    assert result.requires_mortgage_insurance is False
    assert all(row.mortgage_insurance == 0 for row in result.schedule)
    assert result.cost_breakdown.mortgage_insurance == 0


def test_mortgage_insurance_drops_off_at_eighty_percent_ltv():
    result = calculate_mortgage(mortgage(down_payment=60000))

    assert result.down_payment_percent == 15
    assert result.requires_mortgage_insurance is True
    assert isclose(result.mortgage_insurance_monthly, 340000 * 0.0075 / 12, abs_tol=0.01)

    charged = [row for row in result.schedule if row.mortgage_insurance > 0]
    assert charged, "mortgage insurance should apply while LTV is above 80%"
    assert result.mortgage_insurance_months == len(charged)

    for row in result.schedule:
        if row.balance / 400000 <= 0.80:
            assert row.mortgage_insurance == 0
        else:
            assert row.mortgage_insurance > 0

    # once dropped it never returns
    first_free = next(row.period for row in result.schedule if row.mortgage_insurance == 0)
    assert all(row.mortgage_insurance == 0 for row in result.schedule[first_free - 1:])


def test_mortgage_total_interest_matches_payments():
    result = calculate_mortgage(mortgage())

    expected = result.principal_and_interest * 360 - result.loan_amount
    assert abs(result.total_interest - expected) < 2


def test_zero_rate_mortgage():
    result = calculate_mortgage(mortgage(interest_rate=0, property_tax=0, home_insurance=0))

    assert isclose(result.principal_and_interest, 320000 / 360, abs_tol=0.01)
    assert result.total_interest == 0


def test_shorter_mortgage_pays_less_interest():
    thirty = calculate_mortgage(mortgage(interest_rate=5.5))
    fifteen = calculate_mortgage(mortgage(interest_rate=5.5, term_years=15))

    assert len(fifteen.schedule) == 180
    assert fifteen.total_interest < thirty.total_interest


def test_down_payment_above_price_is_rejected():
    with pytest.raises(ValidationError):
        mortgage(down_payment=500000)


def test_results_are_immutable():
    result = calculate_emi(EMIRequest(principal=1000, annual_rate=5, tenure_months=3))

    with pytest.raises(ValidationError):
        result.monthly_payment = 0
