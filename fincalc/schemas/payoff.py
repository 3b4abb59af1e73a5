"""Data contracts for the payoff acceleration comparator."""

from __future__ import annotations

from typing import List

from pydantic import Field

from fincalc.schemas.amortization import PeriodEntry
from fincalc.schemas.common import MAX_AMOUNT, Record


class LoanPayoffRequest(Record):
    current_balance: float = Field(..., ge=0, le=MAX_AMOUNT)
    annual_rate: float = Field(..., ge=0, le=30, description="Nominal annual rate in percent.")
    minimum_payment: float = Field(..., gt=0, le=MAX_AMOUNT)
    extra_payment: float = Field(0.0, ge=0, le=MAX_AMOUNT)


class LoanPayoffResult(Record):
    months_to_payoff: int
    total_payment: float
    total_interest: float
    reached_cap: bool
    baseline_months: int
    baseline_total_interest: float
    baseline_reached_cap: bool
    time_saved: int = Field(..., description="Months saved against minimum payments only.")
    interest_saved: float
    breakdown: List[PeriodEntry]
