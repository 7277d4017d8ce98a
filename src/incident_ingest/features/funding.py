"""Age-derived funding classification."""
from __future__ import annotations

from datetime import date

from ..models import WMO, YOUTH_LAW, FundingSource

ADULT_AGE = 18


def age_at(birth: date, on: date) -> int:
    """Whole years between ``birth`` and ``on``, counting birthdays on the calendar."""
    age = on.year - birth.year
    if (on.month, on.day) < (birth.month, birth.day):
        age -= 1
    return age


def funding_source(age: int, adult_age: int = ADULT_AGE) -> FundingSource:
    return YOUTH_LAW if age < adult_age else WMO


__all__ = ["ADULT_AGE", "age_at", "funding_source"]
