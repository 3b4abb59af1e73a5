"""Data contracts for loan, EMI and mortgage amortization."""

from __future__ import annotations

from typing import List

from pydantic import Field, model_validator

from fincalc.schemas.common import MAX_AMOUNT, Record


class LoanRequest(Record):
    """Level-payment loan quoted with a term in years."""

    principal: float = Field(..., ge=0, le=MAX_AMOUNT, description="Amount borrowed.")
    annual_rate: float = Field(..., ge=0, le=30, description="Nominal annual rate in percent.")
    term_years: int = Field(..., ge=1, le=50, description="Loan term in years.")


class EMIRequest(Record):
    """Equated monthly instalment loan quoted with a tenure in months."""

    principal: float = Field(..., ge=0, le=MAX_AMOUNT)
    annual_rate: float = Field(..., ge=0, le=100)
    tenure_months: int = Field(..., ge=1, le=600)


class MortgageRequest(Record):
    home_price: float = Field(..., gt=0, le=MAX_AMOUNT)
    down_payment: float = Field(..., ge=0, le=MAX_AMOUNT)
    term_years: int = Field(..., ge=1, le=50)
    interest_rate: float = Field(..., ge=0, le=30, description="Nominal annual rate in percent.")
    property_tax: float = Field(0.0, ge=0, le=MAX_AMOUNT, description="Annual property tax.")
    home_insurance: float = Field(0.0, ge=0, le=MAX_AMOUNT, description="Annual homeowner's insurance.")
    hoa: float = Field(0.0, ge=0, le=MAX_AMOUNT, description="Monthly HOA dues.")
    mortgage_insurance_rate: float = Field(
        0.75,
        ge=0,
        le=5,
        description="Annual mortgage insurance rate in percent of the original loan amount.",
    )

    @model_validator(mode="after")
    def ensure_validity(self) -> "MortgageRequest":
        if self.down_payment > self.home_price:
            raise ValueError("down_payment cannot exceed home_price")
        return self


class PeriodEntry(Record):
    """One row of an amortization schedule."""

    period: int = Field(..., ge=1)
    payment: float
    principal: float
    interest: float
    balance: float


class MortgagePeriodEntry(PeriodEntry):
    # inherits period, payment (principal + interest), principal, interest, balance
    property_tax: float
    insurance: float
    hoa: float
    mortgage_insurance: float
    total_payment: float


class AmortizationResult(Record):
    monthly_payment: float
    total_payment: float
    total_interest: float
    schedule: List[PeriodEntry]


class MortgageCostBreakdown(Record):
    principal: float
    interest: float
    property_tax: float
    insurance: float
    hoa: float
    mortgage_insurance: float


class MortgageResult(Record):
    loan_amount: float
    principal_and_interest: float
    total_monthly_payment: float
    total_payment: float
    total_interest: float
    down_payment_percent: float
    requires_mortgage_insurance: bool
    mortgage_insurance_monthly: float
    mortgage_insurance_months: int
    cost_breakdown: MortgageCostBreakdown
    schedule: List[MortgagePeriodEntry]
