"""Command-line entry point for incident report batch normalization."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from incident_ingest.config import PipelineSettings
from incident_ingest.ingestion.columns import ColumnResolver
from incident_ingest.ingestion.excel_ingestion import ExcelIngestor
from incident_ingest.observability.logger import configure_logging
from incident_ingest.observability.reporting import persist_records, persist_report
from incident_ingest.orchestration.batch import BatchProcessor
from incident_ingest.orchestration.row_normalizer import IncidentRowNormalizer

EXIT_REJECTED_ROWS = 2


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Incident report batch normalizer")
    parser.add_argument("input_path", help="Path to CSV/Excel file containing incident reports")
    parser.add_argument(
        "--log",
        dest="log_path",
        default=None,
        help="Optional path for JSONL execution logs",
    )
    parser.add_argument(
        "--report-json",
        dest="report_json",
        default=None,
        help="Optional path to store the batch summary and rejected rows as JSON",
    )
    parser.add_argument(
        "--records-json",
        dest="records_json",
        default=None,
        help="Optional path to store the normalized incidents as JSON",
    )
    parser.add_argument(
        "--affirmative-token",
        dest="affirmative_token",
        default=None,
        help="Token that marks a yes/no column as set (default: Yes)",
    )
    parser.add_argument(
        "--adult-age",
        dest="adult_age",
        type=int,
        default=None,
        help="Age at incident from which the WMO funding source applies (default: 18)",
    )
    parser.add_argument(
        "--dayfirst",
        dest="dayfirst",
        action="store_true",
        default=None,
        help="Read ambiguous text dates as day/month/year",
    )
    parser.add_argument(
        "--translations",
        dest="translations_path",
        default=None,
        help="Optional JSON file with extra phrase translations",
    )
    parser.add_argument(
        "--strict",
        dest="strict",
        action="store_true",
        help=f"Exit with status {EXIT_REJECTED_ROWS} when any row was rejected",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> PipelineSettings:
    settings = PipelineSettings.from_env()
    if args.affirmative_token:
        settings.affirmative_token = args.affirmative_token
    if args.adult_age is not None:
        settings.adult_age = args.adult_age
    if args.dayfirst is not None:
        settings.dayfirst = args.dayfirst
    if args.translations_path:
        settings.translations_path = Path(args.translations_path)
    return settings


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_path)
    logger = logging.getLogger("runner")

    input_path = Path(args.input_path)
    logger.info("Loading incident reports", extra={"path": str(input_path)})

    raw_rows = ExcelIngestor().load_rows(input_path)
    rows = ColumnResolver().resolve_rows(raw_rows)

    normalizer = IncidentRowNormalizer(settings=build_settings(args))
    processor = BatchProcessor(normalizer=normalizer, logger=logging.getLogger("batch"))
    result = processor.run(rows)

    logger.info(
        "Processing finished",
        extra={"accepted": result.accepted_count, "rejected": result.rejected_count},
    )

    if result.diagnostics:
        logger.warning("Rejected rows: %s", result.rejections_by_reason())

    if args.report_json:
        persist_report(result, args.report_json)
    if args.records_json:
        persist_records(result.records, args.records_json)

    if args.strict and result.diagnostics:
        return EXIT_REJECTED_ROWS
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
