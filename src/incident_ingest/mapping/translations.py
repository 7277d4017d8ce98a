"""Translation catalog for free-text answers in incident reports."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from ..models import NOT_AVAILABLE, clean_text


@dataclass(frozen=True)
class LexicalTranslator:
    phrase_map: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "phrase_map", MappingProxyType(dict(self.phrase_map)))

    def translate(self, text: Any) -> str:
        """Return the canonical phrase for ``text``, or ``text`` itself when unknown."""
        cleaned = clean_text(text)
        if cleaned is None:
            return NOT_AVAILABLE
        return self.phrase_map.get(cleaned, cleaned)

    def with_entries(self, extra: Mapping[str, str]) -> "LexicalTranslator":
        merged = dict(self.phrase_map)
        merged.update(extra)
        return LexicalTranslator(phrase_map=merged)


DEFAULT_TRANSLATOR = LexicalTranslator(
    phrase_map={
        "Verbal aggression": "Verbal Aggression",
        "Handen (bijv. slaan, stoten)": "Hands (e.g., hitting, punching)",
        "Geen duidelijke aanleiding": "No apparent provocation",
    }
)

__all__ = ["LexicalTranslator", "DEFAULT_TRANSLATOR"]
