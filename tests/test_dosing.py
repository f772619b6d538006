from datetime import datetime, timedelta, timezone

import pytest

from decayengine.dosing import (
    SEED_SCHEDULE, make_dose, parse_amount, parse_half_life, parse_timestamp, parse_unit, seed_history,
)
from decayengine.errors import InvalidConfiguration, InvalidInput


def test_parse_amount_accepts_positive_numbers():
    assert parse_amount("12.5") == 12.5
    assert parse_amount(" 100 ") == 100.0
    assert parse_amount(3) == 3.0


@pytest.mark.parametrize("text", ["", "abc", "0", "-1", "nan", "inf", "-inf"])
def test_parse_amount_rejects(text):
    with pytest.raises(InvalidInput):
        parse_amount(text)


@pytest.mark.parametrize("text, unit", [
    ("mg", "mg"), ("MG", "mg"), ("g", "g"), ("ug", "ug"), ("μg", "ug"), ("µg", "ug"),
    ("mcg", "ug"), ("IU", "iu"), ("iu", "iu"),
])
def test_parse_unit_aliases(text, unit):
    assert parse_unit(text) == unit


def test_parse_unit_rejects_unknown():
    with pytest.raises(InvalidInput):
        parse_unit("kg")


def test_parse_timestamp_local_form():
    """datetime-local style input is read as local wall-clock time."""
    dt = parse_timestamp("2024-05-01T08:30")
    assert (dt.year, dt.month, dt.day, dt.hour, dt.minute) == (2024, 5, 1, 8, 30)
    assert dt.tzinfo is not None


def test_parse_timestamp_keeps_explicit_offset():
    dt = parse_timestamp("2024-05-01T08:30:00+00:00")
    assert dt == datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)


def test_parse_timestamp_rejects_garbage():
    with pytest.raises(InvalidInput):
        parse_timestamp("yesterday-ish")


def test_parse_half_life():
    assert parse_half_life("200") == 200.0
    for bad in ("0", "-3", "x"):
        with pytest.raises(InvalidConfiguration):
            parse_half_life(bad)


def test_make_dose_validates_and_assigns_ids():
    a = make_dose("100", "mg", "2024-05-01T08:30")
    b = make_dose("100", "mg", "2024-05-01T08:30")
    assert a.amount == 100.0 and a.unit == "mg"
    assert a.dose_id and b.dose_id and a.dose_id != b.dose_id
    assert make_dose(1, "g", "2024-05-01T08:30", dose_id="fixed").dose_id == "fixed"

    with pytest.raises(InvalidInput):
        make_dose("-5", "mg", "2024-05-01T08:30")


def test_seed_history_skips_empty_days():
    now = datetime(2024, 6, 4, 9, 0, tzinfo=timezone.utc)
    doses = seed_history(now)

    assert len(doses) == sum(1 for _, a in SEED_SCHEDULE if a > 0)
    assert all(d.unit == "ug" for d in doses)
    assert doses[0].timestamp == now - timedelta(days=16)
    assert doses[-1].timestamp == now
    assert doses[-1].amount == 125.0
    assert len({d.dose_id for d in doses}) == len(doses)
    assert [d.timestamp for d in doses] == sorted(d.timestamp for d in doses)
