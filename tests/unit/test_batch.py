from __future__ import annotations

import logging

from incident_ingest.orchestration.batch import BatchProcessor, process_rows


def _rows(make_row, drop):
    return [
        make_row(CLIENT_NUMBER=1, FALL="Yes"),
        make_row(CLIENT_NUMBER=2, INCIDENT_DATE=drop),
        make_row(CLIENT_NUMBER=3, AGGRESSION="Yes"),
        make_row(CLIENT_NUMBER=4, INCIDENT_DATE=20000, DATE_OF_BIRTH=25000),
        make_row(CLIENT_NUMBER=1, MEDICATION="Yes"),
    ]


def test_accepted_rows_keep_input_order(make_row, drop):
    result = BatchProcessor().run(_rows(make_row, drop))

    assert [record.client_id for record in result.records] == ["1", "3", "1"]
    assert [record.incident_category for record in result.records] == ["Fall", "Aggression", "Medication"]
    assert result.accepted_count == 3
    assert result.total_rows == 5


def test_rejections_are_collected_not_raised(make_row, drop):
    result = BatchProcessor().run(_rows(make_row, drop))

    assert [(d.row_index, d.reason) for d in result.diagnostics] == [(1, "invalid_date"), (3, "chronology")]
    assert result.rejections_by_reason() == {"invalid_date": 1, "chronology": 1}


def test_same_day_incidents_for_one_client_get_distinct_ids(make_row, drop):
    result = BatchProcessor().run(_rows(make_row, drop))
    ids = [record.id for record in result.records]
    assert len(set(ids)) == len(ids)


def test_reprocessing_is_idempotent(make_row, drop):
    rows = _rows(make_row, drop)
    first = process_rows(rows)
    second = process_rows(rows)

    assert first.records == second.records
    assert first.diagnostics == second.diagnostics


def test_rejected_rows_are_logged(make_row, drop, caplog):
    with caplog.at_level(logging.WARNING, logger="BatchProcessor"):
        BatchProcessor().run(_rows(make_row, drop))

    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert [record.row_index for record in warnings] == [1, 3]
    assert warnings[1].reason == "chronology"
    assert "Skipping row 5" in warnings[1].getMessage()


def test_empty_batch():
    result = process_rows([])
    assert result.records == []
    assert result.diagnostics == []
    assert result.rejections_by_reason() == {}


def test_oversized_impact_cell_does_not_abort_the_batch(make_row):
    result = process_rows([make_row(CLIENT_IMPACT=10**400), make_row(CLIENT_NUMBER=2)])

    assert result.accepted_count == 2
    assert result.records[0].client_impact_score == 0
    assert result.records[0].seriousness_score == 1


def test_oversized_date_cell_is_rejected_not_raised(make_row):
    result = process_rows([make_row(INCIDENT_DATE=10**400), make_row()])

    assert result.accepted_count == 1
    assert [(d.row_index, d.reason) for d in result.diagnostics] == [(0, "invalid_date")]
