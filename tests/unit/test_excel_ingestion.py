from __future__ import annotations

from datetime import datetime

import pytest
from openpyxl import Workbook

from incident_ingest.ingestion.excel_ingestion import ExcelIngestor


def test_xlsx_cells_keep_native_types(tmp_path):
    path = tmp_path / "incidents.xlsx"
    workbook = Workbook()
    sheet = workbook.active
    sheet.append(["Date of the incident?", " client number ", "Team reporter?", "date of birth"])
    sheet.append([45000, 17, "  Team East ", datetime(2001, 5, 4)])
    sheet.append([None, None, None, None])
    sheet.append([45001, 18, "", None])
    workbook.save(path)

    rows = ExcelIngestor().load_rows(path)

    assert len(rows) == 2
    assert rows[0]["Date of the incident?"] == 45000
    assert rows[0]["client number"] == 17
    assert rows[0]["Team reporter?"] == "Team East"
    assert rows[0]["date of birth"] == datetime(2001, 5, 4)
    assert rows[1].get("Team reporter?") is None


def test_csv_rows_are_stripped(tmp_path):
    path = tmp_path / "incidents.csv"
    path.write_text(
        "Date of the incident?,client number,Team reporter?\n"
        " 45000 ,12, Team West \n"
        ",,\n"
        "2023-03-16,13,\n",
        encoding="utf-8",
    )

    rows = ExcelIngestor().load_rows(path)

    assert rows == [
        {"Date of the incident?": "45000", "client number": "12", "Team reporter?": "Team West"},
        {"Date of the incident?": "2023-03-16", "client number": "13", "Team reporter?": None},
    ]


def test_unsupported_extension_raises(tmp_path):
    with pytest.raises(ValueError, match="Unsupported file type"):
        ExcelIngestor().load_rows(tmp_path / "incidents.json")
