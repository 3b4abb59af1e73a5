"""Progressive federal income tax, payroll tax and a flat state tax."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from fincalc.core.rounding import round_money
from fincalc.core.tax_tables import TAX_YEAR_2025, Bracket, TaxTables
from fincalc.schemas.tax import TaxBracketRow, TaxRequest, TaxResult


def progressive_tax(taxable_income: float, brackets: Sequence[Bracket]) -> Tuple[List[TaxBracketRow], float]:
    """
    Walk ordered brackets and tax each slice of income.

    Returns (rows, marginal_rate). Only brackets whose lower bound sits below
    the taxable income produce a row; the marginal rate is the rate of the
    last one (0 when nothing is taxable).
    """
    rows: List[TaxBracketRow] = []
    marginal_rate = 0.0
    for bracket in brackets:
        if taxable_income <= bracket.lower:
            break
        top = taxable_income if bracket.upper is None else min(taxable_income, bracket.upper)
        slice_tax = (top - bracket.lower) * bracket.rate / 100
        marginal_rate = bracket.rate
        rows.append(
            TaxBracketRow(
                rate=bracket.rate,
                lower=bracket.lower,
                upper=bracket.upper,
                tax=round_money(slice_tax),
            )
        )
    return rows, marginal_rate


def calculate_tax(request: TaxRequest, tables: TaxTables = TAX_YEAR_2025) -> TaxResult:
    status = request.filing_status
    gross = request.annual_income

    # itemizing never takes the deduction below the standard amount
    deduction = max(request.deductions, tables.standard_deduction[status])
    taxable = max(0.0, gross - deduction)

    rows, marginal_rate = progressive_tax(taxable, tables.brackets[status])
    federal_before_credits = round_money(sum(row.tax for row in rows))
    federal = round_money(max(0.0, federal_before_credits - request.credits))

    social_security = min(gross, tables.social_security_wage_base) * tables.social_security_rate / 100
    medicare = gross * tables.medicare_rate / 100
    threshold = tables.additional_medicare_threshold[status]
    if gross > threshold:
        medicare += (gross - threshold) * tables.additional_medicare_rate / 100
    payroll = social_security + medicare

    state = gross * request.state_tax_rate / 100

    total = federal + payroll + state
    effective_rate = total / gross * 100 if gross > 0 else 0.0
    take_home = gross - total

    return TaxResult(
        gross_income=round_money(gross),
        adjusted_gross_income=round_money(gross),
        deduction=round_money(deduction),
        taxable_income=round_money(taxable),
        federal_tax_before_credits=federal_before_credits,
        federal_tax=federal,
        state_tax=round_money(state),
        social_security_tax=round_money(social_security),
        medicare_tax=round_money(medicare),
        payroll_tax=round_money(payroll),
        total_tax=round_money(total),
        effective_rate=round_money(effective_rate),
        marginal_rate=marginal_rate,
        take_home_pay=round_money(take_home),
        monthly_take_home=round_money(take_home / 12),
        brackets=rows,
    )
