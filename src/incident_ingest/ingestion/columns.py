"""Resolve loosely matching spreadsheet headers to canonical raw field names."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from ..models import RawField, RawRecord

_WHITESPACE = re.compile(r"\s+")


def header_key(header: str) -> str:
    return _WHITESPACE.sub(" ", header).strip().casefold()


@dataclass(slots=True)
class ColumnResolver:
    """Renames known header variants to the names in ``RawField``.

    Headers match when they are equal after collapsing whitespace and case, or
    when they are listed in ``alias_map``. Unknown columns pass through.
    """

    alias_map: Dict[str, List[str]] = field(
        default_factory=lambda: {
            RawField.INCIDENT_DATE: ["incident date", "date of incident"],
            RawField.DATE_OF_BIRTH: ["dob", "client date of birth"],
            RawField.CLIENT_NUMBER: ["client id", "client nr"],
            RawField.TEAM: ["team"],
            RawField.DESCRIPTION: ["description"],
        }
    )
    _lookup: Dict[str, str] = field(init=False, repr=False, default_factory=dict)

    def __post_init__(self) -> None:
        for canonical in RawField.all():
            self._lookup[header_key(canonical)] = canonical
        for canonical, aliases in self.alias_map.items():
            for alias in aliases:
                self._lookup.setdefault(header_key(alias), canonical)

    def canonical_name(self, header: str) -> str:
        return self._lookup.get(header_key(header), header)

    def resolve_row(self, row: RawRecord) -> Dict[str, Any]:
        resolved: Dict[str, Any] = {}
        for header, value in row.items():
            name = self.canonical_name(header)
            # An exact canonical column wins over an alias of it.
            if name in resolved and header != name:
                continue
            resolved[name] = value
        return resolved

    def resolve_rows(self, rows: Iterable[RawRecord]) -> List[Dict[str, Any]]:
        return [self.resolve_row(row) for row in rows]


__all__ = ["ColumnResolver", "header_key"]
