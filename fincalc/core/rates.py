"""APR <-> APY conversion."""

from __future__ import annotations

from typing import Union

from fincalc.core.rounding import round_rate
from fincalc.schemas.common import CompoundingFrequency
from fincalc.schemas.rates import RateConversionResult

FrequencyLike = Union[CompoundingFrequency, str]


def compounding_periods(frequency: FrequencyLike) -> int:
    """Compounding periods per year for a frequency (or its string label)."""
    return CompoundingFrequency(frequency).periods_per_year


def effective_annual_rate(nominal: float, periods: int) -> float:
    """(1 + nominal/n)^n - 1, with both rates as fractions."""
    return (1 + nominal / periods) ** periods - 1


def nominal_annual_rate(effective: float, periods: int) -> float:
    """n * ((1 + effective)^(1/n) - 1), with both rates as fractions."""
    return periods * ((1 + effective) ** (1 / periods) - 1)


def apr_to_apy(apr: float, frequency: FrequencyLike) -> RateConversionResult:
    n = compounding_periods(frequency)
    apy = effective_annual_rate(apr / 100, n) * 100
    return RateConversionResult(
        rate=round_rate(apy),
        description=(
            f"An APR of {apr:g}% compounded {n} times per year "
            f"equals an APY of {apy:.4f}%"
        ),
    )


def apy_to_apr(apy: float, frequency: FrequencyLike) -> RateConversionResult:
    n = compounding_periods(frequency)
    apr = nominal_annual_rate(apy / 100, n) * 100
    return RateConversionResult(
        rate=round_rate(apr),
        description=(
            f"An APY of {apy:g}% with {n} compounding periods per year "
            f"equals an APR of {apr:.4f}%"
        ),
    )
