"""Ingestion utilities."""
from .columns import ColumnResolver
from .dates import to_calendar_date, to_serial
from .excel_ingestion import ExcelIngestor

__all__ = ["ColumnResolver", "ExcelIngestor", "to_calendar_date", "to_serial"]
