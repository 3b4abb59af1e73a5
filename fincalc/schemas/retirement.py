from __future__ import annotations

from typing import List, Optional

from pydantic import Field, model_validator

from fincalc.schemas.common import MAX_AMOUNT, Record


class RetirementRequest(Record):
    current_age: int = Field(..., ge=0, le=120)
    retirement_age: int = Field(..., ge=1, le=120)
    current_savings: float = Field(0.0, ge=0, le=MAX_AMOUNT)
    monthly_contribution: float = Field(0.0, ge=0, le=MAX_AMOUNT)
    expected_return: float = Field(..., ge=0, le=30, description="Annual return in percent.")
    inflation_rate: float = Field(..., ge=0, le=20, description="Annual inflation in percent.")
    desired_monthly_income: float = Field(..., ge=0, le=MAX_AMOUNT, description="In today's currency.")
    retirement_return: Optional[float] = Field(
        None,
        ge=0,
        le=30,
        description="Return earned after retirement; defaults to expected_return.",
    )

    @model_validator(mode="after")
    def ensure_validity(self) -> "RetirementRequest":
        if self.retirement_age <= self.current_age:
            raise ValueError("retirement_age must be greater than current_age")
        return self


class RetirementYearRow(Record):
    year: int = Field(..., ge=1)
    age: int
    invested: float
    value: float
    gains: float


class WithdrawalYearRow(Record):
    year: int = Field(..., ge=1)
    age: int
    withdrawn: float
    balance: float


class RetirementResult(Record):
    retirement_corpus: float
    total_contributions: float
    investment_gains: float
    years_to_retirement: int
    monthly_income_at_retirement: float
    months_in_retirement: int
    corpus_lasts_until_age: int
    # False when decumulation stopped at the horizon cap with money left
    corpus_depleted: bool
    yearly_breakdown: List[RetirementYearRow]
    withdrawal_breakdown: List[WithdrawalYearRow]
