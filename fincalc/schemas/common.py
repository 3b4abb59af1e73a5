"""Shared enumerations and base record for calculator data contracts."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

# upper bound on monetary inputs; keeps every projection finite
MAX_AMOUNT = 1_000_000_000_000.0


class Record(BaseModel):
    """Immutable value record; every input and result derives from this."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class CompoundingFrequency(str, Enum):
    DAILY = "daily"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMI_ANNUALLY = "semi-annually"
    ANNUALLY = "annually"

    @classmethod
    def _missing_(cls, value):
        # compound-interest and fixed-deposit forms use different labels
        aliases = {
            "yearly": cls.ANNUALLY,
            "half-yearly": cls.SEMI_ANNUALLY,
        }
        if isinstance(value, str):
            return aliases.get(value.lower())
        return None

    @property
    def periods_per_year(self) -> int:
        return _PERIODS_PER_YEAR[self]


_PERIODS_PER_YEAR = {
    CompoundingFrequency.DAILY: 365,
    CompoundingFrequency.MONTHLY: 12,
    CompoundingFrequency.QUARTERLY: 4,
    CompoundingFrequency.SEMI_ANNUALLY: 2,
    CompoundingFrequency.ANNUALLY: 1,
}


class FilingStatus(str, Enum):
    SINGLE = "single"
    MARRIED_JOINT = "married-joint"
    MARRIED_SEPARATE = "married-separate"
    HEAD_OF_HOUSEHOLD = "head-of-household"
