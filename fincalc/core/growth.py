"""Compounding projections: lump sums, fixed deposits and monthly investment plans.

Breakdown rows are recomputed from the closed-form formula at each boundary
rather than carried forward from the previous row, so every row is independently
reproducible and rounding never accumulates.
"""

from __future__ import annotations

import math
from typing import List

from fincalc.core.rates import effective_annual_rate
from fincalc.core.rounding import round_money, round_rate
from fincalc.schemas.growth import (
    CompoundInterestRequest,
    CompoundInterestResult,
    CompoundYearRow,
    DepositPeriodRow,
    FixedDepositRequest,
    FixedDepositResult,
    InvestmentYearRow,
    SIPRequest,
    SIPResult,
)


def compound_amount(principal: float, annual_rate: float, periods_per_year: int, years: float) -> float:
    """P(1 + r/n)^(n*t) with ``annual_rate`` as a fraction."""
    return principal * (1 + annual_rate / periods_per_year) ** (periods_per_year * years)


def annuity_due_value(contribution: float, rate: float, periods: int) -> float:
    """Future value of ``periods`` contributions made at the start of each period."""
    if rate == 0:
        return contribution * periods
    return contribution * math.expm1(periods * math.log1p(rate)) / rate * (1 + rate)


def simple_interest_maturity(principal: float, annual_rate: float, months: int) -> float:
    """P + P*r*t with no compounding; ``annual_rate`` in percent."""
    interest = principal * (annual_rate / 100) * (months / 12)
    return round_money(principal + interest)


def calculate_compound_interest(request: CompoundInterestRequest) -> CompoundInterestResult:
    n = request.compounding_frequency.periods_per_year
    r = request.annual_rate / 100

    final_amount = compound_amount(request.principal, r, n, request.years)

    rows: List[CompoundYearRow] = []
    for year in range(1, request.years + 1):
        amount = compound_amount(request.principal, r, n, year)
        rows.append(
            CompoundYearRow(
                year=year,
                amount=round_money(amount),
                interest=round_money(amount - request.principal),
            )
        )

    return CompoundInterestResult(
        final_amount=round_money(final_amount),
        total_interest=round_money(final_amount - request.principal),
        yearly_breakdown=rows,
    )


def calculate_fixed_deposit(request: FixedDepositRequest) -> FixedDepositResult:
    """
    Fixed deposit maturity over a tenure in months.

    The breakdown has one row per compounding period; a tenure that ends
    part-way through a period gets a final row at the next full period.
    """
    n = request.compounding_frequency.periods_per_year
    r = request.annual_rate / 100
    years = request.tenure_months / 12

    maturity = compound_amount(request.principal, r, n, years)

    rows: List[DepositPeriodRow] = []
    # round before ceil so 12 months of monthly compounding is 12 rows, not 13
    total_periods = math.ceil(round(n * years, 9))
    for period in range(1, total_periods + 1):
        amount = compound_amount(request.principal, r, n, period / n)
        rows.append(
            DepositPeriodRow(
                period=period,
                interest=round_money(amount - request.principal),
                total_amount=round_money(amount),
            )
        )

    return FixedDepositResult(
        maturity_amount=round_money(maturity),
        interest_earned=round_money(maturity - request.principal),
        effective_rate=round_rate(effective_annual_rate(r, n) * 100),
        simple_maturity_amount=simple_interest_maturity(
            request.principal, request.annual_rate, request.tenure_months
        ),
        breakdown=rows,
    )


def calculate_sip(request: SIPRequest) -> SIPResult:
    rate = request.annual_return_rate / 100 / 12
    months = request.investment_years * 12

    maturity = annuity_due_value(request.monthly_investment, rate, months)
    invested_total = request.monthly_investment * months

    rows: List[InvestmentYearRow] = []
    for year in range(1, request.investment_years + 1):
        elapsed = year * 12
        invested = request.monthly_investment * elapsed
        value = annuity_due_value(request.monthly_investment, rate, elapsed)
        rows.append(
            InvestmentYearRow(
                year=year,
                invested=round_money(invested),
                value=round_money(value),
                returns=round_money(value - invested),
            )
        )

    return SIPResult(
        total_invested=round_money(invested_total),
        total_returns=round_money(maturity - invested_total),
        maturity_value=round_money(maturity),
        yearly_breakdown=rows,
    )
