"""Input and result records exchanged with the calculation engine."""

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
from fincalc.schemas.common import CompoundingFrequency, FilingStatus, Record
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
from fincalc.schemas.payoff import LoanPayoffRequest, LoanPayoffResult
from fincalc.schemas.rates import RateConversionRequest, RateConversionResult
from fincalc.schemas.retirement import (
    RetirementRequest,
    RetirementResult,
    RetirementYearRow,
    WithdrawalYearRow,
)
from fincalc.schemas.tax import TaxBracketRow, TaxRequest, TaxResult

__all__ = [
    "AmortizationResult",
    "CompoundInterestRequest",
    "CompoundInterestResult",
    "CompoundYearRow",
    "CompoundingFrequency",
    "DepositPeriodRow",
    "EMIRequest",
    "FilingStatus",
    "FixedDepositRequest",
    "FixedDepositResult",
    "InvestmentYearRow",
    "LoanPayoffRequest",
    "LoanPayoffResult",
    "LoanRequest",
    "MortgageCostBreakdown",
    "MortgagePeriodEntry",
    "MortgageRequest",
    "MortgageResult",
    "PeriodEntry",
    "RateConversionRequest",
    "RateConversionResult",
    "Record",
    "RetirementRequest",
    "RetirementResult",
    "RetirementYearRow",
    "SIPRequest",
    "SIPResult",
    "TaxBracketRow",
    "TaxRequest",
    "TaxResult",
    "WithdrawalYearRow",
]
