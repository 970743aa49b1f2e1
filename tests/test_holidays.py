"""Tests for the holiday source and the accumulated index."""

import asyncio
from datetime import date

import httpx
import pytest

from core.calendar_engine import is_holiday
from models.holidays import HolidayIndex
from services import holidays as holiday_service
from services.holidays import (
    HolidayFetchError,
    ensure_holidays,
    fetch_holidays,
    parse_holiday_items,
)


def _payload(items):
    return {"response": {"header": {"resultCode": "00"}, "body": {"items": items, "totalCount": 0}}}


@pytest.fixture
def holiday_key(monkeypatch):
    monkeypatch.setattr(holiday_service, "HOLIDAY_API_KEY", "test-key")


def test_parse_list_of_items():
    payload = _payload(
        {
            "item": [
                {"dateKind": "01", "dateName": "설날", "isHoliday": "Y", "locdate": 20240210},
                {"dateKind": "01", "dateName": "설날", "isHoliday": "Y", "locdate": 20240211},
                {"dateKind": "02", "dateName": "기념일", "isHoliday": "N", "locdate": 20240214},
            ]
        }
    )

    assert parse_holiday_items(payload) == {"2024-02-10": "설날", "2024-02-11": "설날"}


def test_parse_single_item():
    payload = _payload({"item": {"dateName": "신정", "isHoliday": "Y", "locdate": 20240101}})

    assert parse_holiday_items(payload) == {"2024-01-01": "신정"}


def test_parse_month_without_holidays():
    assert parse_holiday_items(_payload("")) == {}


def test_fetch_sends_padded_month(mock_remote, holiday_key):
    mock_remote.handler = lambda request: httpx.Response(
        200, json=_payload({"item": {"dateName": "삼일절", "isHoliday": "Y", "locdate": 20240301}})
    )

    result = asyncio.run(fetch_holidays(2024, 3))

    assert result == {"2024-03-01": "삼일절"}
    params = mock_remote.requests[0].url.params
    assert params["solYear"] == "2024"
    assert params["solMonth"] == "03"
    assert params["serviceKey"] == "test-key"
    assert params["_type"] == "json"


def test_fetch_decodes_encoded_service_key(mock_remote, monkeypatch):
    monkeypatch.setattr(holiday_service, "HOLIDAY_API_KEY", "abc%2Bdef%3D%3D")
    mock_remote.handler = lambda request: httpx.Response(200, json=_payload(""))

    asyncio.run(fetch_holidays(2024, 3))

    assert mock_remote.requests[0].url.params["serviceKey"] == "abc+def=="


def test_fetch_without_key_raises(mock_remote, monkeypatch):
    monkeypatch.setattr(holiday_service, "HOLIDAY_API_KEY", "")

    with pytest.raises(HolidayFetchError):
        asyncio.run(fetch_holidays(2024, 3))
    assert mock_remote.requests == []


def test_fetch_failure_raises(mock_remote, holiday_key):
    mock_remote.handler = lambda request: httpx.Response(500, text="upstream down")

    with pytest.raises(HolidayFetchError) as excinfo:
        asyncio.run(fetch_holidays(2024, 3))
    assert "2024-03" in str(excinfo.value)


def test_fetch_unexpected_shape_raises(mock_remote, holiday_key):
    mock_remote.handler = lambda request: httpx.Response(200, json={"unexpected": True})

    with pytest.raises(HolidayFetchError):
        asyncio.run(fetch_holidays(2024, 3))


def test_index_without_key_stays_empty(mock_remote, monkeypatch):
    monkeypatch.setattr(holiday_service, "HOLIDAY_API_KEY", "")
    index = HolidayIndex()

    asyncio.run(ensure_holidays(index, 2024, 3))

    assert len(index) == 0
    assert not index.has_month(2024, 3)


def test_index_accumulates_months_and_fetches_once(mock_remote, holiday_key):
    responses = {
        "01": _payload({"item": {"dateName": "신정", "isHoliday": "Y", "locdate": 20240101}}),
        "03": _payload({"item": {"dateName": "삼일절", "isHoliday": "Y", "locdate": 20240301}}),
    }
    mock_remote.handler = lambda request: httpx.Response(
        200, json=responses[request.url.params["solMonth"]]
    )
    index = HolidayIndex()

    async def load():
        await ensure_holidays(index, 2024, 1)
        await ensure_holidays(index, 2024, 3)
        await ensure_holidays(index, 2024, 1)

    asyncio.run(load())

    assert len(mock_remote.requests) == 2
    assert len(index) == 2
    assert is_holiday(date(2024, 1, 1), index.holidays) == "신정"
    assert is_holiday(date(2024, 3, 1), index.holidays) == "삼일절"
    assert is_holiday(date(2024, 1, 2), index.holidays) is None


def test_failed_month_is_retried(mock_remote, holiday_key):
    mock_remote.handler = lambda request: httpx.Response(503)
    index = HolidayIndex()

    asyncio.run(ensure_holidays(index, 2024, 5))
    assert not index.has_month(2024, 5)

    mock_remote.handler = lambda request: httpx.Response(
        200, json=_payload({"item": {"dateName": "어린이날", "isHoliday": "Y", "locdate": 20240505}})
    )
    asyncio.run(ensure_holidays(index, 2024, 5))

    assert index.has_month(2024, 5)
    assert index.holidays == {"2024-05-05": "어린이날"}


def test_merge_never_removes_entries():
    index = HolidayIndex()
    index.merge(2024, 1, {"2024-01-01": "신정"})
    index.merge(2024, 2, {})

    assert index.holidays == {"2024-01-01": "신정"}
    assert index.has_month(2024, 2)
