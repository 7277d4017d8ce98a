"""Row validity gate for incident reports."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..ingestion.dates import to_calendar_date
from ..models import CHRONOLOGY, INVALID_DATE, RawField, RawRecord, RowDiagnostic


@dataclass(frozen=True, slots=True)
class DateCheck:
    """Outcome of gating one row on its two dates."""

    incident_date: Optional[date] = None
    date_of_birth: Optional[date] = None
    diagnostic: Optional[RowDiagnostic] = None

    @property
    def is_valid(self) -> bool:
        return self.diagnostic is None


class IncidentDateValidator:
    """A row is usable only when both dates parse and the incident is not before birth."""

    DATE_FIELDS = (RawField.INCIDENT_DATE, RawField.DATE_OF_BIRTH)

    def __init__(self, dayfirst: bool = False) -> None:
        self.dayfirst = dayfirst

    def validate(self, index: int, raw: RawRecord) -> DateCheck:
        incident_date = to_calendar_date(raw.get(RawField.INCIDENT_DATE), dayfirst=self.dayfirst)
        date_of_birth = to_calendar_date(raw.get(RawField.DATE_OF_BIRTH), dayfirst=self.dayfirst)

        if incident_date is None or date_of_birth is None:
            problems = [
                _describe_missing(field_name, raw.get(field_name))
                for field_name, parsed in zip(self.DATE_FIELDS, (incident_date, date_of_birth))
                if parsed is None
            ]
            return DateCheck(diagnostic=RowDiagnostic(index, INVALID_DATE, "; ".join(problems)))

        if incident_date < date_of_birth:
            message = (
                f"incident date {incident_date.isoformat()} is before "
                f"date of birth {date_of_birth.isoformat()}"
            )
            return DateCheck(incident_date, date_of_birth, RowDiagnostic(index, CHRONOLOGY, message))

        return DateCheck(incident_date, date_of_birth)


def _describe_missing(field_name: str, value: object) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        return f"'{field_name}' is missing"
    return f"'{field_name}' value {value!r} could not be parsed as a date"


__all__ = ["DateCheck", "IncidentDateValidator"]
