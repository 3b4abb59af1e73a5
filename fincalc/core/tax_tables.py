"""Federal bracket tables and payroll parameters, one immutable object per tax year.

Tables are passed into ``calculate_tax`` explicitly; ``TAX_YEAR_2025`` is the
default. Rates are percentages, amounts are annual.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field, model_validator

from fincalc.schemas.common import FilingStatus, Record


class Bracket(Record):
    rate: float = Field(..., ge=0, le=100)
    lower: float = Field(..., ge=0)
    upper: Optional[float] = None  # None = unbounded


class TaxTables(Record):
    year: int
    brackets: Dict[FilingStatus, List[Bracket]]
    standard_deduction: Dict[FilingStatus, float]
    social_security_rate: float
    social_security_wage_base: float
    medicare_rate: float
    additional_medicare_rate: float
    additional_medicare_threshold: Dict[FilingStatus, float]

    @model_validator(mode="after")
    def ensure_contiguous(self) -> "TaxTables":
        for status in FilingStatus:
            for mapping in (self.brackets, self.standard_deduction, self.additional_medicare_threshold):
                if status not in mapping:
                    raise ValueError(f"missing entry for filing status {status.value}")

            table = self.brackets[status]
            if not table or table[0].lower != 0:
                raise ValueError(f"{status.value} brackets must start at 0")
            for current, following in zip(table, table[1:]):
                if current.upper is None or current.upper != following.lower:
                    raise ValueError(f"{status.value} brackets must be contiguous")
            if table[-1].upper is not None:
                raise ValueError(f"{status.value} top bracket must be unbounded")
        return self


def _table(*rows) -> List[Bracket]:
    return [Bracket(rate=rate, lower=lower, upper=upper) for rate, lower, upper in rows]


TAX_YEAR_2025 = TaxTables(
    year=2025,
    brackets={
        FilingStatus.SINGLE: _table(
            (10, 0, 11600),
            (12, 11600, 47150),
            (22, 47150, 100525),
            (24, 100525, 191950),
            (32, 191950, 243725),
            (35, 243725, 609350),
            (37, 609350, None),
        ),
        FilingStatus.MARRIED_JOINT: _table(
            (10, 0, 23200),
            (12, 23200, 94300),
            (22, 94300, 201050),
            (24, 201050, 383900),
            (32, 383900, 487450),
            (35, 487450, 731200),
            (37, 731200, None),
        ),
        FilingStatus.MARRIED_SEPARATE: _table(
            (10, 0, 11600),
            (12, 11600, 47150),
            (22, 47150, 100525),
            (24, 100525, 191950),
            (32, 191950, 243725),
            (35, 243725, 365600),
            (37, 365600, None),
        ),
        FilingStatus.HEAD_OF_HOUSEHOLD: _table(
            (10, 0, 16550),
            (12, 16550, 63100),
            (22, 63100, 100500),
            (24, 100500, 191950),
            (32, 191950, 243700),
            (35, 243700, 609350),
            (37, 609350, None),
        ),
    },
    standard_deduction={
        FilingStatus.SINGLE: 14600,
        FilingStatus.MARRIED_JOINT: 29200,
        FilingStatus.MARRIED_SEPARATE: 14600,
        FilingStatus.HEAD_OF_HOUSEHOLD: 21900,
    },
    social_security_rate=6.2,
    social_security_wage_base=168600,
    medicare_rate=1.45,
    additional_medicare_rate=0.9,
    additional_medicare_threshold={
        FilingStatus.SINGLE: 200000,
        FilingStatus.MARRIED_JOINT: 250000,
        FilingStatus.MARRIED_SEPARATE: 125000,
        FilingStatus.HEAD_OF_HOUSEHOLD: 200000,
    },
)
