"""Incident category classification."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

from ..models import FLAG_FIELDS, IncidentCategory, RawRecord

# Clinical severity order; the first raised flag decides the category.
CATEGORY_PRECEDENCE: List[Tuple[str, IncidentCategory]] = [
    ("is_suicide", "Suicide"),
    ("is_aggression", "Aggression"),
    ("is_fall", "Fall"),
    ("is_medication", "Medication"),
    ("is_security", "Security"),
    ("is_other", "Other"),
]
UNKNOWN: IncidentCategory = "Unknown"


def is_affirmative(value: Any, token: str = "Yes") -> bool:
    if value is True:
        return True
    if not isinstance(value, str):
        return False
    return value.strip().casefold() == token.strip().casefold()


def flags_from_raw(raw: RawRecord, token: str = "Yes") -> Dict[str, bool]:
    """Read the six report-type yes/no columns into named booleans."""
    return {flag: is_affirmative(raw.get(column), token) for flag, column in FLAG_FIELDS.items()}


def classify_category(flags: Mapping[str, bool]) -> IncidentCategory:
    for flag, category in CATEGORY_PRECEDENCE:
        if flags.get(flag):
            return category
    return UNKNOWN


__all__ = ["CATEGORY_PRECEDENCE", "classify_category", "flags_from_raw", "is_affirmative"]
