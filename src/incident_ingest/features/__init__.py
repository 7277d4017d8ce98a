"""Derived analytical attributes."""
from .category import classify_category, flags_from_raw
from .funding import age_at, funding_source
from .severity import seriousness_score

__all__ = ["age_at", "classify_category", "flags_from_raw", "funding_source", "seriousness_score"]
