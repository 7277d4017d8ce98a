"""Date normalization for spreadsheet exports.

Exports mix three encodings in the same column: pre-formatted text, day-count
serials as used by spreadsheet tools and, for corrupted cells, millisecond
epoch timestamps. Each numeric encoding owns a distinct magnitude range and
every branch re-checks the resulting year, so a value that converts to a
nonsensical date is reported as missing instead of leaking downstream.
"""
from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional

from dateutil import parser as date_parser

MIN_YEAR_EXCLUSIVE = 1900
MAX_YEAR_EXCLUSIVE = 2100

EPOCH_MILLIS_THRESHOLD = 100_000_000_000
SERIAL_UPPER_EXCLUSIVE = 2_958_465

# Serial day 0 is 1899-12-30; serial 25569 is 1970-01-01.
SERIAL_EPOCH = date(1899, 12, 30)
UNIX_EPOCH_SERIAL = 25569
UNIX_EPOCH = date(1970, 1, 1)

# Components missing from a text date are taken from here, so a text without
# a year lands in 1900 and fails the year check.
_TEXT_DEFAULT = datetime(MIN_YEAR_EXCLUSIVE, 1, 1)


def to_calendar_date(value: Any, dayfirst: bool = False) -> Optional[date]:
    """Convert a raw date-like cell into a calendar date.

    Returns ``None`` when the value is absent or matches none of the accepted
    encodings. Never raises.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        return _within_bounds(value.date())
    if isinstance(value, date):
        return _within_bounds(value)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        parsed = _parse_text(text, dayfirst)
        if parsed is not None:
            return parsed
        value = text

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None

    if number > EPOCH_MILLIS_THRESHOLD:
        converted = _from_epoch_millis(number)
        if converted is not None:
            return converted

    if 0 < number < SERIAL_UPPER_EXCLUSIVE:
        return _from_serial(number)

    return None


def to_serial(day: date) -> int:
    """Return the spreadsheet serial day number of ``day``."""
    return (day - SERIAL_EPOCH).days


def _parse_text(text: str, dayfirst: bool) -> Optional[date]:
    try:
        parsed = date_parser.parse(text, default=_TEXT_DEFAULT, dayfirst=dayfirst)
    except (ValueError, OverflowError):
        return None
    return _within_bounds(parsed.date())


def _from_epoch_millis(number: float) -> Optional[date]:
    try:
        moment = datetime.fromtimestamp(number / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
    return _within_bounds(moment.date())


def _from_serial(number: float) -> Optional[date]:
    days_since_unix_epoch = math.floor(number - UNIX_EPOCH_SERIAL)
    try:
        converted = UNIX_EPOCH + timedelta(days=days_since_unix_epoch)
    except OverflowError:
        return None
    return _within_bounds(converted)


def _within_bounds(day: date) -> Optional[date]:
    if MIN_YEAR_EXCLUSIVE < day.year < MAX_YEAR_EXCLUSIVE:
        return day
    return None


__all__ = ["to_calendar_date", "to_serial"]
