"""Batch processing of incident report rows."""
from __future__ import annotations

import logging
from typing import Iterable

from ..models import BatchResult, RawRecord
from .row_normalizer import IncidentRowNormalizer


class BatchProcessor:
    """Runs every row through the row normalizer, keeping input order."""

    def __init__(
        self,
        normalizer: IncidentRowNormalizer | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.normalizer = normalizer or IncidentRowNormalizer()
        self.logger = logger or logging.getLogger(self.__class__.__name__)

    def run(self, rows: Iterable[RawRecord]) -> BatchResult:
        result = BatchResult()
        for index, raw in enumerate(rows):
            record, diagnostic = self.normalizer.normalize(index, raw)
            if diagnostic is not None:
                self.logger.warning(
                    "Skipping row %s: %s",
                    diagnostic.sheet_row,
                    diagnostic.message,
                    extra={"row_index": diagnostic.row_index, "reason": diagnostic.reason},
                )
                result.diagnostics.append(diagnostic)
                continue
            result.records.append(record)

        self.logger.info(
            "Batch normalized",
            extra={"accepted": result.accepted_count, "rejected": result.rejected_count},
        )
        return result


def process_rows(rows: Iterable[RawRecord]) -> BatchResult:
    """Normalize ``rows`` with default settings."""
    return BatchProcessor().run(rows)


__all__ = ["BatchProcessor", "process_rows"]
