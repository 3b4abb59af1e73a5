"""Level-payment amortization: loans, EMIs and mortgages.

Every schedule in the package (including the payoff comparator) is produced by
``amortize`` so that rounding and edge-case behaviour stay identical.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List

from fincalc.core.rounding import round_money, round_to
from fincalc.schemas.amortization import (
    AmortizationResult,
    EMIRequest,
    LoanRequest,
    MortgageCostBreakdown,
    MortgagePeriodEntry,
    MortgageRequest,
    MortgageResult,
    PeriodEntry,
)

logger = logging.getLogger(__name__)

# mortgage insurance applies while balance / home price is above this
LTV_THRESHOLD = 0.80
# and is required at origination below this down-payment fraction
MIN_DOWN_PAYMENT_FRACTION = 0.20


@dataclass
class AmortizationRun:
    entries: List[PeriodEntry] = field(default_factory=list)
    total_payment: float = 0.0
    total_interest: float = 0.0
    final_balance: float = 0.0
    reached_cap: bool = False

    @property
    def periods(self) -> int:
        return len(self.entries)


def monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100 / 12


def level_payment(principal: float, rate: float, periods: int) -> float:
    """Annuity payment that retires ``principal`` in ``periods`` at periodic ``rate``."""
    if periods <= 0:
        raise ValueError("periods must be at least 1")
    if rate == 0:
        return principal / periods
    # expm1/log1p keep (1 + r)^n - 1 nonzero for rates too small to move 1 + r
    growth_less_one = math.expm1(periods * math.log1p(rate))
    return principal * rate * (1 + growth_less_one) / growth_less_one


def amortize(
    principal: float,
    rate: float,
    payment: float,
    max_periods: int,
    *,
    level: bool = True,
) -> AmortizationRun:
    """Step a balance month by month under a fixed payment.

    level=True: run exactly ``max_periods``; the final period takes whatever
    balance remains so the schedule closes at zero.
    level=False: stop as soon as the balance is cleared. Hitting
    ``max_periods`` first sets ``reached_cap``; a payment that does not cover
    interest grows the balance until then.
    """
    run = AmortizationRun()
    balance = float(principal)

    for period in range(1, max_periods + 1):
        if not level and balance <= 0:
            break

        interest = balance * rate
        principal_part = min(payment - interest, balance)
        if level and period == max_periods:
            principal_part = balance
        balance -= principal_part
        paid = interest + principal_part

        run.total_payment += paid
        run.total_interest += interest
        run.entries.append(
            PeriodEntry(
                period=period,
                payment=paid,
                principal=principal_part,
                interest=interest,
                balance=max(0.0, balance),
            )
        )

    run.final_balance = max(0.0, balance)
    run.reached_cap = not level and balance > 0
    if run.reached_cap:
        logger.debug("amortization stopped at cap of %d periods, balance %.2f", max_periods, balance)
    return run


def _level_result(principal: float, annual_rate: float, periods: int) -> AmortizationResult:
    rate = monthly_rate(annual_rate)
    payment = level_payment(principal, rate, periods)
    run = amortize(principal, rate, payment, periods)

    total_payment = payment * periods
    return AmortizationResult(
        monthly_payment=round_money(payment),
        total_payment=round_money(total_payment),
        total_interest=round_money(total_payment - principal),
        schedule=run.entries,
    )


def calculate_loan(request: LoanRequest) -> AmortizationResult:
    """Amortize a loan quoted in years of monthly payments."""
    return _level_result(request.principal, request.annual_rate, request.term_years * 12)


def calculate_emi(request: EMIRequest) -> AmortizationResult:
    """Amortize a loan quoted as a number of monthly instalments."""
    return _level_result(request.principal, request.annual_rate, request.tenure_months)


def calculate_mortgage(request: MortgageRequest) -> MortgageResult:
    """
    Mortgage schedule with escrow items and mortgage insurance.

    Monthly outflow = P&I + property_tax/12 + insurance/12 + HOA + MI, where MI
    is charged on the original loan amount while the loan-to-value ratio of
    the period's ending balance is above 80%.
    """
    loan_amount = request.home_price - request.down_payment
    down_fraction = request.down_payment / request.home_price
    requires_mi = down_fraction < MIN_DOWN_PAYMENT_FRACTION

    periods = request.term_years * 12
    rate = monthly_rate(request.interest_rate)
    pi_payment = level_payment(loan_amount, rate, periods)
    run = amortize(loan_amount, rate, pi_payment, periods)

    monthly_tax = request.property_tax / 12
    monthly_insurance = request.home_insurance / 12
    mi_monthly = loan_amount * request.mortgage_insurance_rate / 100 / 12 if requires_mi else 0.0

    schedule: List[MortgagePeriodEntry] = []
    total_mi = 0.0
    mi_months = 0
    for entry in run.entries:
        ltv = entry.balance / request.home_price
        mi = mi_monthly if ltv > LTV_THRESHOLD else 0.0
        if mi:
            total_mi += mi
            mi_months += 1
        schedule.append(
            MortgagePeriodEntry(
                **entry.model_dump(),
                property_tax=monthly_tax,
                insurance=monthly_insurance,
                hoa=request.hoa,
                mortgage_insurance=mi,
                total_payment=entry.payment + monthly_tax + monthly_insurance + request.hoa + mi,
            )
        )

    total_escrow = (monthly_tax + monthly_insurance + request.hoa) * periods
    total_payment = run.total_payment + total_escrow + total_mi

    return MortgageResult(
        loan_amount=round_money(loan_amount),
        principal_and_interest=round_money(pi_payment),
        total_monthly_payment=round_money(
            pi_payment + monthly_tax + monthly_insurance + request.hoa + mi_monthly
        ),
        total_payment=round_money(total_payment),
        total_interest=round_money(run.total_interest),
        down_payment_percent=round_to(down_fraction * 100, 1),
        requires_mortgage_insurance=requires_mi,
        mortgage_insurance_monthly=round_money(mi_monthly),
        mortgage_insurance_months=mi_months,
        cost_breakdown=MortgageCostBreakdown(
            principal=round_money(loan_amount),
            interest=round_money(run.total_interest),
            property_tax=round_money(monthly_tax * periods),
            insurance=round_money(monthly_insurance * periods),
            hoa=round_money(request.hoa * periods),
            mortgage_insurance=round_money(total_mi),
        ),
        schedule=schedule,
    )
