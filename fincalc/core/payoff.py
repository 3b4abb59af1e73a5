"""Minimum-only vs. minimum-plus-extra payoff comparison."""

from __future__ import annotations

import logging

from fincalc.core.amortization import amortize, monthly_rate
from fincalc.core.rounding import round_money
from fincalc.schemas.payoff import LoanPayoffRequest, LoanPayoffResult

logger = logging.getLogger(__name__)

# 50 years; bounds balances the payment never retires
MAX_PAYOFF_MONTHS = 600


def calculate_loan_payoff(request: LoanPayoffRequest) -> LoanPayoffResult:
    """
    Simulate the same balance under two payment policies and report the gap.

    Both runs stop when the balance is cleared or at MAX_PAYOFF_MONTHS; a run
    that stops at the cap is flagged rather than treated as an error.
    """
    rate = monthly_rate(request.annual_rate)

    accelerated = amortize(
        request.current_balance,
        rate,
        request.minimum_payment + request.extra_payment,
        MAX_PAYOFF_MONTHS,
        level=False,
    )
    baseline = amortize(
        request.current_balance,
        rate,
        request.minimum_payment,
        MAX_PAYOFF_MONTHS,
        level=False,
    )
    if baseline.reached_cap:
        logger.debug("minimum payment does not retire the balance within %d months", MAX_PAYOFF_MONTHS)

    return LoanPayoffResult(
        months_to_payoff=accelerated.periods,
        total_payment=round_money(accelerated.total_payment),
        total_interest=round_money(accelerated.total_interest),
        reached_cap=accelerated.reached_cap,
        baseline_months=baseline.periods,
        baseline_total_interest=round_money(baseline.total_interest),
        baseline_reached_cap=baseline.reached_cap,
        time_saved=baseline.periods - accelerated.periods,
        interest_saved=round_money(baseline.total_interest - accelerated.total_interest),
        breakdown=accelerated.entries,
    )
