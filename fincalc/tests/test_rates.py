from __future__ import annotations

from math import isclose

import pytest

from fincalc.core.rates import (
    apr_to_apy,
    apy_to_apr,
    compounding_periods,
    effective_annual_rate,
    nominal_annual_rate,
)
from fincalc.schemas import CompoundingFrequency

ORDERED = ["annually", "semi-annually", "quarterly", "monthly", "daily"]


@pytest.mark.parametrize(
    "frequency, periods",
    [("daily", 365), ("monthly", 12), ("quarterly", 4), ("semi-annually", 2), ("annually", 1)],
)
def test_compounding_periods(frequency, periods):
    assert compounding_periods(frequency) == periods
    assert CompoundingFrequency(frequency).periods_per_year == periods


def test_monthly_apr_to_apy():
    result = apr_to_apy(12, CompoundingFrequency.MONTHLY)

    assert isclose(result.rate, 12.6825, abs_tol=0.0001)
    assert "12.6825%" in result.description


def test_annual_compounding_is_identity():
    assert apr_to_apy(7.5, "annually").rate == 7.5
    assert apy_to_apr(7.5, "annually").rate == 7.5


@pytest.mark.parametrize("apr", [0.5, 5, 19.99, 100])
def test_apy_increases_with_frequency(apr):
    apys = [apr_to_apy(apr, frequency).rate for frequency in ORDERED]

    assert all(later > earlier for earlier, later in zip(apys, apys[1:]))


@pytest.mark.parametrize("frequency", ORDERED)
@pytest.mark.parametrize("apr", [0, 0.25, 4.5, 36, 99.9])
def test_round_trip(apr, frequency):
    apy = apr_to_apy(apr, frequency).rate
    assert isclose(apy_to_apr(apy, frequency).rate, apr, abs_tol=0.001)

    n = compounding_periods(frequency)
    assert isclose(nominal_annual_rate(effective_annual_rate(apr / 100, n), n), apr / 100, abs_tol=1e-12)


def test_zero_rate_converts_to_zero():
    assert apr_to_apy(0, "daily").rate == 0
    assert apy_to_apr(0, "daily").rate == 0


def test_unknown_frequency_is_rejected():
    with pytest.raises(ValueError):
        compounding_periods("fortnightly")
