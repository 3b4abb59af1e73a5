from __future__ import annotations

from pydantic import Field

from fincalc.schemas.common import CompoundingFrequency, Record


class RateConversionRequest(Record):
    rate: float = Field(..., ge=0, le=100, description="Annual rate in percent.")
    compounding_frequency: CompoundingFrequency = CompoundingFrequency.MONTHLY


class RateConversionResult(Record):
    rate: float
    description: str
