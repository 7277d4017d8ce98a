"""Pipeline settings.

Env:
  - INCIDENT_AFFIRMATIVE_TOKEN (default "Yes")
  - INCIDENT_ADULT_AGE (default 18)
  - INCIDENT_DAYFIRST (default false)
  - INCIDENT_TRANSLATIONS (optional path to a JSON object of extra translations)
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .features.funding import ADULT_AGE
from .features.severity import VISIBLE_INJURY
from .mapping.translations import DEFAULT_TRANSLATOR, LexicalTranslator

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off", ""}


@dataclass(slots=True)
class PipelineSettings:
    affirmative_token: str = "Yes"
    adult_age: int = ADULT_AGE
    dayfirst: bool = False
    injury_phrase: str = VISIBLE_INJURY
    translations_path: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PipelineSettings":
        env = os.environ if environ is None else environ
        settings = cls()
        if env.get("INCIDENT_AFFIRMATIVE_TOKEN"):
            settings.affirmative_token = env["INCIDENT_AFFIRMATIVE_TOKEN"].strip()
        if env.get("INCIDENT_ADULT_AGE"):
            settings.adult_age = _parse_int("INCIDENT_ADULT_AGE", env["INCIDENT_ADULT_AGE"])
        if "INCIDENT_DAYFIRST" in env:
            settings.dayfirst = _parse_bool("INCIDENT_DAYFIRST", env["INCIDENT_DAYFIRST"])
        if env.get("INCIDENT_TRANSLATIONS"):
            settings.translations_path = Path(env["INCIDENT_TRANSLATIONS"])
        return settings

    def build_translator(self) -> LexicalTranslator:
        if self.translations_path is None:
            return DEFAULT_TRANSLATOR
        return DEFAULT_TRANSLATOR.with_entries(load_translations(self.translations_path))


def load_translations(path: str | Path) -> dict[str, str]:
    """Read a JSON object of ``source phrase -> canonical phrase`` entries."""
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Could not read translations from '{path}': {exc}") from exc

    if not isinstance(payload, dict) or not all(
        isinstance(key, str) and isinstance(value, str) for key, value in payload.items()
    ):
        raise ValueError(f"Translations file '{path}' must contain a JSON object of strings")
    return payload


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got '{value}'") from exc


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise ValueError(f"{name} must be a boolean flag, got '{value}'")


__all__ = ["PipelineSettings", "load_translations"]
