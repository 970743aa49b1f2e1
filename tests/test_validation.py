"""Tests for event form validation and normalization."""

import pytest

from core.validation import (
    normalize_event_draft,
    resolve_event_times,
    time_options,
    validate_event_draft,
)
from event_factory import SEOUL, seoul


@pytest.fixture
def timed_draft():
    return {
        "title": "Inbound delivery",
        "description": "Pallets from supplier",
        "author": "김재고",
        "all_day": False,
        "date": "2024-03-05",
        "start_clock": "09:30",
        "end_clock": "10:15",
    }


@pytest.fixture
def all_day_draft():
    return {
        "title": "Stock transfer",
        "description": "Move stock to warehouse 2",
        "author": "김재고",
        "all_day": True,
        "start_date": "2024-03-05",
        "end_date": "2024-03-07",
    }


def test_time_options():
    options = time_options()

    assert len(options) == 96
    assert options[:3] == ["00:00", "00:15", "00:30"]
    assert options[-1] == "23:45"


def test_timed_draft_times(timed_draft):
    start, end = resolve_event_times(timed_draft, SEOUL)

    assert start == seoul(2024, 3, 5, 9, 30)
    assert end == seoul(2024, 3, 5, 10, 15)


def test_all_day_draft_normalized_to_whole_days(all_day_draft):
    start, end = resolve_event_times(all_day_draft, SEOUL)

    assert start == seoul(2024, 3, 5)
    assert end == seoul(2024, 3, 7, 23, 59, 59, 999000)


def test_all_day_draft_with_explicit_instants_is_normalized():
    draft = {
        "all_day": True,
        "start_time": "2024-03-05T06:00:00+00:00",
        "end_time": "2024-03-06T03:00:00Z",
    }
    start, end = resolve_event_times(draft, SEOUL)

    assert start == seoul(2024, 3, 5)
    assert end == seoul(2024, 3, 6, 23, 59, 59, 999000)


def test_missing_required_fields(timed_draft):
    timed_draft["title"] = ""
    del timed_draft["author"]

    errors = validate_event_draft(timed_draft, SEOUL)

    assert errors == ["Missing required fields: title, author"]


def test_end_before_start(timed_draft):
    timed_draft["end_clock"] = "08:00"

    assert validate_event_draft(timed_draft, SEOUL) == ["End time must be after start time"]


def test_invalid_clock(timed_draft):
    timed_draft["start_clock"] = "9시"

    assert validate_event_draft(timed_draft, SEOUL) == ["Invalid date/time"]


def test_missing_date(all_day_draft):
    del all_day_draft["start_date"]

    assert validate_event_draft(all_day_draft, SEOUL) == ["Invalid date/time"]


def test_normalize_builds_payload_with_defaults(timed_draft):
    payload = normalize_event_draft(timed_draft, SEOUL)

    assert payload == {
        "title": "Inbound delivery",
        "description": "Pallets from supplier",
        "all_day": False,
        "start_time": "2024-03-05T09:30:00.000+09:00",
        "end_time": "2024-03-05T10:15:00.000+09:00",
        "author": "김재고",
        "location": "",
        "notification": False,
        "color": "#1a73e8",
    }


def test_normalize_all_day_payload(all_day_draft):
    all_day_draft["color"] = "#d93025"
    payload = normalize_event_draft(all_day_draft, SEOUL)

    assert payload["all_day"] is True
    assert payload["start_time"] == "2024-03-05T00:00:00.000+09:00"
    assert payload["end_time"] == "2024-03-07T23:59:59.999+09:00"
    assert payload["color"] == "#d93025"


def test_normalize_raises_with_every_message(timed_draft):
    timed_draft["description"] = ""
    timed_draft["end_clock"] = "09:00"

    with pytest.raises(ValueError) as excinfo:
        normalize_event_draft(timed_draft, SEOUL)

    assert str(excinfo.value).split("\n") == [
        "Missing required fields: description",
        "End time must be after start time",
    ]
