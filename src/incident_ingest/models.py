"""Core data models for incident report ingestion."""
from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any, Dict, List, Literal, Mapping, Optional

RawRecord = Mapping[str, Any]

IncidentCategory = Literal["Fall", "Medication", "Security", "Suicide", "Aggression", "Other", "Unknown"]
FundingSource = Literal["Youth Law", "WMO"]
RejectionReason = Literal["invalid_date", "chronology"]

NOT_AVAILABLE = "N/A"
NO_DESCRIPTION = "No description provided."
NO_CONSEQUENCES = "None"

YOUTH_LAW: FundingSource = "Youth Law"
WMO: FundingSource = "WMO"

INVALID_DATE: RejectionReason = "invalid_date"
CHRONOLOGY: RejectionReason = "chronology"


class RawField:
    """Column names of the incident report export."""

    INCIDENT_DATE = "Date of the incident?"
    TEAM = "Team reporter?"
    CLIENT_NUMBER = "client number"
    DATE_OF_BIRTH = "date of birth"
    NOTIFICATION_ABOUT = "Notification is about:"
    FALL = "Would you like to report a customer fall?"
    MEDICATION = "Would you like to report an incident involving MEDICATION?"
    SECURITY = "Would you like to report a security incident?"
    SUICIDE = "Suicide report / thoughts about suicide?"
    AGGRESSION = (
        "Would you like to report an aggression or inappropriate behavior incident? Verbal or physical?"
    )
    AGGRESSION_TYPE = "Is the aggression or transgressive behavior verbal, physical or both?"
    OTHER = "Would you like to complete an incident reporting - Other -?"
    VICTIM_CONSEQUENCES = "consequence(s) for the victim(s)?"
    SUPPORTER_IMPACT = "What was the impact of the incident on YOU as a SUPPORTER? (0-10)"
    CLIENT_IMPACT = (
        "What do you think was the impact on the CLIENT whose file you are currently working on? (0-10)"
    )
    DESCRIPTION = "Description of the incident."

    @classmethod
    def all(cls) -> List[str]:
        return [value for name, value in vars(cls).items() if name.isupper()]


# Report-type flag attribute -> raw yes/no column.
FLAG_FIELDS: Dict[str, str] = {
    "is_fall": RawField.FALL,
    "is_medication": RawField.MEDICATION,
    "is_security": RawField.SECURITY,
    "is_suicide": RawField.SUICIDE,
    "is_aggression": RawField.AGGRESSION,
    "is_other": RawField.OTHER,
}


@dataclass(frozen=True, slots=True)
class NormalizedIncident:
    """A validated, feature-enriched incident ready for analysis."""

    id: str
    incident_date: date
    client_date_of_birth: date
    client_id: str
    team: str
    product_area: str
    description: str
    is_fall: bool
    is_medication: bool
    is_security: bool
    is_suicide: bool
    is_aggression: bool
    is_other: bool
    aggression_type: str
    victim_consequences: str
    supporter_impact_score: int
    client_impact_score: int
    incident_category: IncidentCategory
    seriousness_score: int
    funding_source: FundingSource
    age_at_incident: int

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["incident_date"] = self.incident_date.isoformat()
        payload["client_date_of_birth"] = self.client_date_of_birth.isoformat()
        return payload


@dataclass(frozen=True, slots=True)
class RowDiagnostic:
    """Why a raw row was left out of the normalized output."""

    row_index: int
    reason: RejectionReason
    message: str

    @property
    def sheet_row(self) -> int:
        """Spreadsheet row number, counting the header as row 1."""
        return self.row_index + 2


@dataclass(slots=True)
class BatchResult:
    records: List[NormalizedIncident] = field(default_factory=list)
    diagnostics: List[RowDiagnostic] = field(default_factory=list)

    @property
    def accepted_count(self) -> int:
        return len(self.records)

    @property
    def rejected_count(self) -> int:
        return len(self.diagnostics)

    @property
    def total_rows(self) -> int:
        return self.accepted_count + self.rejected_count

    def rejections_by_reason(self) -> Dict[str, int]:
        return dict(Counter(diagnostic.reason for diagnostic in self.diagnostics))


def clean_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    trimmed = str(value).strip()
    return trimmed or None


__all__ = [
    "BatchResult",
    "CHRONOLOGY",
    "FLAG_FIELDS",
    "FundingSource",
    "INVALID_DATE",
    "IncidentCategory",
    "NO_CONSEQUENCES",
    "NO_DESCRIPTION",
    "NOT_AVAILABLE",
    "NormalizedIncident",
    "RawField",
    "RawRecord",
    "RejectionReason",
    "RowDiagnostic",
    "WMO",
    "YOUTH_LAW",
    "clean_text",
]
