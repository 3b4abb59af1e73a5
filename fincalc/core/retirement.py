"""Two-phase retirement simulation: accumulation, then decumulation."""

from __future__ import annotations

import logging
from typing import List

from fincalc.core.rounding import round_money
from fincalc.schemas.retirement import (
    RetirementRequest,
    RetirementResult,
    RetirementYearRow,
    WithdrawalYearRow,
)

logger = logging.getLogger(__name__)

# decumulation horizon; a corpus still positive here "does not deplete"
MAX_DECUMULATION_MONTHS = 40 * 12


def calculate_retirement(request: RetirementRequest) -> RetirementResult:
    """
    Project the corpus at retirement and how long it funds the target income.

    Accumulation, per month: corpus = corpus * (1 + r) + contribution.
    Current savings count as the first contribution.

    Decumulation, per month: balance = balance * (1 + r) - withdrawal, where
    the withdrawal starts at the inflation-adjusted target income and keeps
    growing with monthly inflation. ``r`` is ``retirement_return`` when given,
    otherwise the same expected return as during accumulation. The loop ends
    when the balance reaches zero or after MAX_DECUMULATION_MONTHS.
    """
    years_to_retirement = max(0, request.retirement_age - request.current_age)
    months_to_retirement = years_to_retirement * 12
    rate = request.expected_return / 100 / 12
    inflation = request.inflation_rate / 100 / 12

    # ---------- Accumulation ----------
    corpus = float(request.current_savings)
    contributed = float(request.current_savings)
    yearly: List[RetirementYearRow] = []
    for year in range(1, years_to_retirement + 1):
        for _ in range(12):
            corpus = corpus * (1 + rate) + request.monthly_contribution
            contributed += request.monthly_contribution
        yearly.append(
            RetirementYearRow(
                year=year,
                age=request.current_age + year,
                invested=round_money(contributed),
                value=round_money(corpus),
                gains=round_money(corpus - contributed),
            )
        )

    income_at_retirement = request.desired_monthly_income * (1 + inflation) ** months_to_retirement

    # ---------- Decumulation ----------
    retirement_rate = rate if request.retirement_return is None else request.retirement_return / 100 / 12
    balance = corpus
    months = 0
    withdrawn_this_year = 0.0
    withdrawals: List[WithdrawalYearRow] = []
    while balance > 0 and months < MAX_DECUMULATION_MONTHS:
        withdrawal = income_at_retirement * (1 + inflation) ** months
        balance = balance * (1 + retirement_rate) - withdrawal
        withdrawn_this_year += withdrawal
        months += 1

        if months % 12 == 0 or balance <= 0:
            year = (months - 1) // 12 + 1
            withdrawals.append(
                WithdrawalYearRow(
                    year=year,
                    age=request.retirement_age + year,
                    withdrawn=round_money(withdrawn_this_year),
                    balance=round_money(max(0.0, balance)),
                )
            )
            withdrawn_this_year = 0.0

    depleted = balance <= 0
    if not depleted:
        logger.debug("corpus outlasted the %d month horizon", MAX_DECUMULATION_MONTHS)

    return RetirementResult(
        retirement_corpus=round_money(corpus),
        total_contributions=round_money(contributed),
        investment_gains=round_money(corpus - contributed),
        years_to_retirement=years_to_retirement,
        monthly_income_at_retirement=round_money(income_at_retirement),
        months_in_retirement=months,
        corpus_lasts_until_age=request.retirement_age + months // 12,
        corpus_depleted=depleted,
        yearly_breakdown=yearly,
        withdrawal_breakdown=withdrawals,
    )
