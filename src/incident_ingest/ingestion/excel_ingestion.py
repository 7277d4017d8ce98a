"""Excel/CSV ingestion utilities."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Dict, Iterator, List


class ExcelIngestor:
    """Loads raw incident rows from CSV or Excel files.

    Excel cells keep their native types so date serials stay numeric and
    date-formatted cells arrive as ``datetime`` objects.
    """

    SUPPORTED_EXTENSIONS = {".csv", ".xlsx", ".xlsm"}

    def __init__(self, encoding: str = "utf-8-sig") -> None:
        self.encoding = encoding

    def load_rows(self, file_path: str | Path) -> List[Dict[str, Any]]:
        path = Path(file_path)
        if path.suffix.lower() not in self.SUPPORTED_EXTENSIONS:
            raise ValueError(
                f"Unsupported file type '{path.suffix}'. Expected one of {sorted(self.SUPPORTED_EXTENSIONS)}."
            )

        if path.suffix.lower() == ".csv":
            return list(self._read_csv(path))
        return list(self._read_excel(path))

    def _read_csv(self, path: Path) -> Iterator[Dict[str, Any]]:
        with path.open("r", encoding=self.encoding, newline="") as handle:
            reader = csv.DictReader(handle)
            for row in reader:
                record = {
                    k.strip(): _clean_cell(v) for k, v in row.items() if isinstance(k, str) and k.strip()
                }
                if any(value is not None for value in record.values()):
                    yield record

    def _read_excel(self, path: Path) -> Iterator[Dict[str, Any]]:
        try:
            from openpyxl import load_workbook
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise RuntimeError(
                "openpyxl is required to read Excel files. Install it with 'pip install openpyxl'."
            ) from exc

        workbook = load_workbook(filename=path, read_only=True, data_only=True)
        try:
            sheet = workbook.active
            header: List[str] = []
            for row_idx, row in enumerate(sheet.iter_rows(values_only=True), start=1):
                if row_idx == 1:
                    header = [str(cell).strip() if cell is not None else "" for cell in row]
                    continue
                record = {
                    header[idx]: _clean_cell(cell)
                    for idx, cell in enumerate(row)
                    if idx < len(header) and header[idx]
                }
                if any(value is not None for value in record.values()):
                    yield record
        finally:
            workbook.close()


def _clean_cell(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip() or None
    return value


__all__ = ["ExcelIngestor"]
