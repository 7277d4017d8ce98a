from __future__ import annotations

import itertools

import pytest

from incident_ingest.features.category import CATEGORY_PRECEDENCE, classify_category, flags_from_raw
from incident_ingest.models import FLAG_FIELDS, RawField

ALL_FLAGS = list(FLAG_FIELDS)
CATEGORIES = {"Fall", "Medication", "Security", "Suicide", "Aggression", "Other", "Unknown"}


@pytest.mark.parametrize(
    "raised, expected",
    [
        ({"is_fall"}, "Fall"),
        ({"is_medication"}, "Medication"),
        ({"is_security"}, "Security"),
        ({"is_suicide"}, "Suicide"),
        ({"is_aggression"}, "Aggression"),
        ({"is_other"}, "Other"),
        (set(), "Unknown"),
        (set(ALL_FLAGS), "Suicide"),
        ({"is_aggression", "is_fall"}, "Aggression"),
        ({"is_fall", "is_medication", "is_security", "is_other"}, "Fall"),
        ({"is_medication", "is_security"}, "Medication"),
        ({"is_security", "is_other"}, "Security"),
    ],
)
def test_category_precedence(raised, expected):
    flags = {name: name in raised for name in ALL_FLAGS}
    assert classify_category(flags) == expected


def test_every_flag_combination_yields_one_known_category():
    order = [flag for flag, _ in CATEGORY_PRECEDENCE]
    for bits in itertools.product([False, True], repeat=len(ALL_FLAGS)):
        flags = dict(zip(ALL_FLAGS, bits))
        category = classify_category(flags)
        assert category in CATEGORIES
        raised = [flag for flag in order if flags[flag]]
        if raised:
            assert category == dict(CATEGORY_PRECEDENCE)[raised[0]]
        else:
            assert category == "Unknown"


def test_flags_from_raw_reads_yes_no_tokens(make_row):
    row = make_row(FALL="Yes", MEDICATION=" yes ", SECURITY="No", SUICIDE=None, AGGRESSION=True, OTHER="Ja")
    flags = flags_from_raw(row)
    assert flags == {
        "is_fall": True,
        "is_medication": True,
        "is_security": False,
        "is_suicide": False,
        "is_aggression": True,
        "is_other": False,
    }


def test_flags_from_raw_with_custom_token(make_row):
    row = make_row(OTHER="Ja", FALL="Yes")
    flags = flags_from_raw(row, token="Ja")
    assert flags["is_other"] is True
    assert flags["is_fall"] is False


def test_missing_flag_columns_are_false():
    assert classify_category(flags_from_raw({RawField.TEAM: "x"})) == "Unknown"
