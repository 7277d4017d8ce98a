from __future__ import annotations

import json
import logging

from incident_ingest.observability.logger import JsonFormatter, configure_logging


def test_json_formatter_includes_structured_fields():
    record = logging.LogRecord("batch", logging.WARNING, __file__, 1, "Skipping row %s", (3,), None)
    record.row_index = 1
    record.reason = "chronology"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["message"] == "Skipping row 3"
    assert payload["logger"] == "batch"
    assert payload["row_index"] == 1
    assert payload["reason"] == "chronology"
    assert "accepted" not in payload


def test_configure_logging_writes_json_lines(tmp_path, restore_root_logging):
    path = tmp_path / "logs" / "run.jsonl"
    configure_logging(path)

    logging.getLogger("runner").info("Loaded", extra={"path": "incidents.xlsx"})
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = path.read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[-1])["path"] == "incidents.xlsx"
