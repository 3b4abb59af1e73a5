"""
Calculation engine: pure, synchronous functions from input records to result records.
No I/O and no state is kept between calls.
"""

from fincalc.core.amortization import (
    amortize,
    calculate_emi,
    calculate_loan,
    calculate_mortgage,
    level_payment,
)
from fincalc.core.growth import (
    calculate_compound_interest,
    calculate_fixed_deposit,
    calculate_sip,
    simple_interest_maturity,
)
from fincalc.core.payoff import MAX_PAYOFF_MONTHS, calculate_loan_payoff
from fincalc.core.rates import apr_to_apy, apy_to_apr, compounding_periods
from fincalc.core.retirement import MAX_DECUMULATION_MONTHS, calculate_retirement
from fincalc.core.tax import calculate_tax, progressive_tax
from fincalc.core.tax_tables import TAX_YEAR_2025, TaxTables

__all__ = [
    "MAX_DECUMULATION_MONTHS",
    "MAX_PAYOFF_MONTHS",
    "TAX_YEAR_2025",
    "TaxTables",
    "amortize",
    "apr_to_apy",
    "apy_to_apr",
    "calculate_compound_interest",
    "calculate_emi",
    "calculate_fixed_deposit",
    "calculate_loan",
    "calculate_loan_payoff",
    "calculate_mortgage",
    "calculate_retirement",
    "calculate_sip",
    "calculate_tax",
    "compounding_periods",
    "level_payment",
    "progressive_tax",
    "simple_interest_maturity",
]
