"""Seriousness scoring for assembled incidents.

The score is an additive heuristic on a 1-5 scale. Suicide reports always
score 5 and skip the other rules. Impact bonuses need a rating strictly above
``IMPACT_THRESHOLD``.
"""
from __future__ import annotations

from typing import Any, Mapping

MIN_SCORE = 1
MAX_SCORE = 5
SUICIDE_SCORE = 5
IMPACT_THRESHOLD = 7
VISIBLE_INJURY = "visible injury"


def seriousness_score(partial: Mapping[str, Any], injury_phrase: str = VISIBLE_INJURY) -> int:
    if partial.get("is_suicide"):
        return SUICIDE_SCORE

    score = MIN_SCORE
    consequences = partial.get("victim_consequences") or ""
    if injury_phrase.lower() in str(consequences).lower():
        score += 2
    if (partial.get("client_impact_score") or 0) > IMPACT_THRESHOLD:
        score += 2
    if (partial.get("supporter_impact_score") or 0) > IMPACT_THRESHOLD:
        score += 1

    return min(score, MAX_SCORE)


__all__ = ["seriousness_score"]
