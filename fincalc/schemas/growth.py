"""Data contracts for compound interest, fixed deposit and SIP projections."""

from __future__ import annotations

from typing import List

from pydantic import Field

from fincalc.schemas.common import MAX_AMOUNT, CompoundingFrequency, Record


class CompoundInterestRequest(Record):
    principal: float = Field(..., ge=0, le=MAX_AMOUNT, description="Lump sum invested at year 0.")
    annual_rate: float = Field(..., ge=0, le=100, description="Nominal annual rate in percent.")
    years: int = Field(..., ge=1, le=100)
    compounding_frequency: CompoundingFrequency = CompoundingFrequency.ANNUALLY


class CompoundYearRow(Record):
    year: int = Field(..., ge=1)
    amount: float
    interest: float


class CompoundInterestResult(Record):
    final_amount: float
    total_interest: float
    yearly_breakdown: List[CompoundYearRow]


class FixedDepositRequest(Record):
    principal: float = Field(..., ge=0, le=MAX_AMOUNT)
    annual_rate: float = Field(..., ge=0, le=100)
    tenure_months: int = Field(..., ge=1, le=1200)
    compounding_frequency: CompoundingFrequency = CompoundingFrequency.QUARTERLY


class DepositPeriodRow(Record):
    period: int = Field(..., ge=1)
    interest: float
    total_amount: float


class FixedDepositResult(Record):
    maturity_amount: float
    interest_earned: float
    effective_rate: float = Field(..., description="Effective annual rate in percent.")
    simple_maturity_amount: float = Field(
        ..., description="Maturity value under simple interest, for comparison."
    )
    breakdown: List[DepositPeriodRow]


class SIPRequest(Record):
    """Systematic investment plan: fixed contribution at the start of every month."""

    monthly_investment: float = Field(..., ge=0, le=MAX_AMOUNT)
    annual_return_rate: float = Field(..., ge=0, le=100)
    investment_years: int = Field(..., ge=1, le=100)


class InvestmentYearRow(Record):
    year: int = Field(..., ge=1)
    invested: float
    value: float
    returns: float


class SIPResult(Record):
    total_invested: float
    total_returns: float
    maturity_value: float
    yearly_breakdown: List[InvestmentYearRow]
