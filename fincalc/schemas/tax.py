"""Data contracts for the income tax evaluator."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from fincalc.schemas.common import MAX_AMOUNT, FilingStatus, Record


class TaxRequest(Record):
    annual_income: float = Field(..., ge=0, le=MAX_AMOUNT, description="Gross annual income.")
    filing_status: FilingStatus = FilingStatus.SINGLE
    deductions: float = Field(
        0.0, ge=0, le=MAX_AMOUNT, description="Itemized deductions; the standard deduction applies when larger."
    )
    credits: float = Field(0.0, ge=0, le=MAX_AMOUNT, description="Credits subtracted from federal tax.")
    state_tax_rate: float = Field(5.0, ge=0, le=15, description="Flat state rate in percent.")


class TaxBracketRow(Record):
    rate: float
    lower: float
    upper: Optional[float] = Field(None, description="None for the unbounded top bracket.")
    tax: float


class TaxResult(Record):
    gross_income: float
    adjusted_gross_income: float
    deduction: float
    taxable_income: float
    federal_tax_before_credits: float
    federal_tax: float
    state_tax: float
    social_security_tax: float
    medicare_tax: float
    payroll_tax: float
    total_tax: float
    effective_rate: float = Field(..., description="Total tax over gross income, in percent.")
    marginal_rate: float = Field(..., description="Rate of the last bracket reached, in percent.")
    take_home_pay: float
    monthly_take_home: float
    brackets: List[TaxBracketRow]
