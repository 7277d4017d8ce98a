"""Turn one raw incident row into a normalized incident."""
from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional, Tuple

from ..config import PipelineSettings
from ..features.category import classify_category, flags_from_raw
from ..features.funding import age_at, funding_source
from ..features.severity import seriousness_score
from ..mapping.translations import LexicalTranslator
from ..models import (
    NO_CONSEQUENCES,
    NO_DESCRIPTION,
    NOT_AVAILABLE,
    NormalizedIncident,
    RawField,
    RawRecord,
    RowDiagnostic,
    clean_text,
)
from ..validation.rules import IncidentDateValidator

IMPACT_MIN = 0
IMPACT_MAX = 10

RowOutcome = Tuple[Optional[NormalizedIncident], Optional[RowDiagnostic]]


class IncidentRowNormalizer:
    """Gates a raw row on its dates, then derives the analytical fields.

    Rows move through date parsing, the chronology check and assembly. Severity
    is scored last because it reads the assembled fields, not the raw row.
    """

    def __init__(
        self,
        settings: PipelineSettings | None = None,
        translator: LexicalTranslator | None = None,
    ) -> None:
        self.settings = settings or PipelineSettings()
        self.translator = translator or self.settings.build_translator()
        self.validator = IncidentDateValidator(dayfirst=self.settings.dayfirst)

    def normalize(self, index: int, raw: RawRecord) -> RowOutcome:
        check = self.validator.validate(index, raw)
        if not check.is_valid:
            return None, check.diagnostic

        incident_date = check.incident_date
        date_of_birth = check.date_of_birth
        age = age_at(date_of_birth, incident_date)
        flags = flags_from_raw(raw, self.settings.affirmative_token)
        client_id = format_client_id(raw.get(RawField.CLIENT_NUMBER))
        supporter_rating = impact_rating(raw.get(RawField.SUPPORTER_IMPACT))
        client_rating = impact_rating(raw.get(RawField.CLIENT_IMPACT))

        fields: Dict[str, Any] = {
            "id": f"{client_id}-{epoch_millis(incident_date)}-{index}",
            "incident_date": incident_date,
            "client_date_of_birth": date_of_birth,
            "client_id": client_id,
            "team": clean_text(raw.get(RawField.TEAM)) or NOT_AVAILABLE,
            "product_area": clean_text(raw.get(RawField.NOTIFICATION_ABOUT)) or NOT_AVAILABLE,
            "description": clean_text(raw.get(RawField.DESCRIPTION)) or NO_DESCRIPTION,
            **flags,
            "aggression_type": self.translator.translate(raw.get(RawField.AGGRESSION_TYPE)),
            "victim_consequences": clean_text(raw.get(RawField.VICTIM_CONSEQUENCES)) or NO_CONSEQUENCES,
            "supporter_impact_score": impact_score(raw.get(RawField.SUPPORTER_IMPACT)),
            "client_impact_score": impact_score(raw.get(RawField.CLIENT_IMPACT)),
            "incident_category": classify_category(flags),
            "funding_source": funding_source(age, self.settings.adult_age),
            "age_at_incident": age,
        }
        scoring_input = {**fields, "supporter_impact_score": supporter_rating, "client_impact_score": client_rating}
        fields["seriousness_score"] = seriousness_score(scoring_input, self.settings.injury_phrase)

        return NormalizedIncident(**fields), None


def epoch_millis(day: date) -> int:
    """Milliseconds since the Unix epoch at UTC midnight of ``day``."""
    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    return int(midnight.timestamp()) * 1000


def format_client_id(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return clean_text(value) or NOT_AVAILABLE


def impact_rating(value: Any) -> float:
    """Read a 0-10 rating cell as a number; blanks and junk count as 0."""
    if value is None or isinstance(value, bool):
        return IMPACT_MIN
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return IMPACT_MIN
    if not math.isfinite(number):
        return IMPACT_MIN
    return max(IMPACT_MIN, min(IMPACT_MAX, number))


def impact_score(value: Any) -> int:
    """The stored whole-number rating.

    Severity is scored on ``impact_rating`` before this rounding, so 7.4 still
    counts as above 7.
    """
    return int(round(impact_rating(value)))


__all__ = ["IncidentRowNormalizer", "epoch_millis", "format_client_id", "impact_rating", "impact_score"]
