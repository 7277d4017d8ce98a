"""Utilities to persist batch reports and normalized records."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List

from ..models import BatchResult, NormalizedIncident, RowDiagnostic


def result_to_dict(result: BatchResult) -> Dict[str, Any]:
    return {
        "total_rows": result.total_rows,
        "accepted_count": result.accepted_count,
        "rejected_count": result.rejected_count,
        "rejections_by_reason": result.rejections_by_reason(),
        "diagnostics": [diagnostic_to_dict(item) for item in result.diagnostics],
    }


def diagnostic_to_dict(diagnostic: RowDiagnostic) -> Dict[str, Any]:
    return {
        "row_index": diagnostic.row_index,
        "sheet_row": diagnostic.sheet_row,
        "reason": diagnostic.reason,
        "message": diagnostic.message,
    }


def records_to_dicts(records: Iterable[NormalizedIncident]) -> List[Dict[str, Any]]:
    return [record.to_dict() for record in records]


def persist_report(result: BatchResult, path: str | Path) -> None:
    _write_json(result_to_dict(result), path)


def persist_records(records: Iterable[NormalizedIncident], path: str | Path) -> None:
    _write_json(records_to_dicts(records), path)


def _write_json(payload: Any, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


__all__ = ["persist_records", "persist_report", "records_to_dicts", "result_to_dict"]
