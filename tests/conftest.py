"""Shared fixtures for incident ingestion tests."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict

import pytest

from incident_ingest.models import RawField


def build_row(**overrides: Any) -> Dict[str, Any]:
    """A valid raw row; keyword overrides use ``RawField`` attribute names."""
    row: Dict[str, Any] = {
        RawField.INCIDENT_DATE: 45000,
        RawField.TEAM: "Team North",
        RawField.CLIENT_NUMBER: 1234,
        RawField.DATE_OF_BIRTH: 25000,
        RawField.NOTIFICATION_ABOUT: "Ambulant support",
        RawField.FALL: "No",
        RawField.MEDICATION: "No",
        RawField.SECURITY: "No",
        RawField.SUICIDE: "No",
        RawField.AGGRESSION: "No",
        RawField.AGGRESSION_TYPE: None,
        RawField.OTHER: "No",
        RawField.VICTIM_CONSEQUENCES: None,
        RawField.SUPPORTER_IMPACT: 0,
        RawField.CLIENT_IMPACT: 0,
        RawField.DESCRIPTION: "Client slipped in the hallway.",
    }
    for name, value in overrides.items():
        column = getattr(RawField, name)
        if value is _DROP:
            row.pop(column, None)
        else:
            row[column] = value
    return row


_DROP = object()


@pytest.fixture
def make_row() -> Callable[..., Dict[str, Any]]:
    return build_row


@pytest.fixture
def drop() -> object:
    """Sentinel for ``make_row`` that removes a column entirely."""
    return _DROP


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
