"""
Public holiday lookup from the data.go.kr special day service.
"""

from urllib.parse import unquote

import httpx

from core.config import HOLIDAY_API_BASE_URL, HOLIDAY_API_KEY
from core.remote_client import get_remote_client
from models.holidays import HolidayIndex

FETCH_ERRORS = (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError)


def _locdate_key(locdate: int | str) -> str:
    """20240101 -> '2024-01-01'."""
    raw = str(locdate)
    return f"{raw[0:4]}-{raw[4:6]}-{raw[6:8]}"


def parse_holiday_items(payload: dict) -> dict[str, str]:
    """
    Extract holidays from a getHoliDeInfo JSON response.

    'items' is an empty string when the month has no special days, and
    'item' is a single object instead of a list when there is exactly one.
    """
    items = payload["response"]["body"]["items"]
    if not items or not items.get("item"):
        return {}

    entries = items["item"]
    if isinstance(entries, dict):
        entries = [entries]

    holidays = {}
    for entry in entries:
        if entry.get("isHoliday") == "Y":
            holidays[_locdate_key(entry["locdate"])] = entry["dateName"]
    return holidays


class HolidayFetchError(Exception):
    """Holidays for a month could not be loaded."""


async def fetch_holidays(year: int, month: int) -> dict[str, str]:
    """
    Fetch holidays for a single month.

    The configured key is sent decoded: data.go.kr issues an "encoding" key
    that is already percent-encoded, and httpx would encode it a second time.

    Raises:
        HolidayFetchError: no API key is configured, or the request or
            response parsing failed
    """
    if not HOLIDAY_API_KEY:
        raise HolidayFetchError("Holiday API key is not configured")

    client = get_remote_client()
    params = {
        "serviceKey": unquote(HOLIDAY_API_KEY),
        "solYear": str(year),
        "solMonth": f"{month:02d}",
        "_type": "json",
    }
    try:
        response = await client.get(HOLIDAY_API_BASE_URL, params=params)
        response.raise_for_status()
        return parse_holiday_items(response.json())
    except FETCH_ERRORS as e:
        raise HolidayFetchError(f"Error fetching holidays for {year}-{month:02d}: {e}") from e


async def ensure_holidays(index: HolidayIndex, year: int, month: int) -> HolidayIndex:
    """
    Fetch a month into the index unless it was fetched before.

    A failed fetch leaves the month unmarked so the next call retries it.
    """
    if index.has_month(year, month):
        return index

    try:
        index.merge(year, month, await fetch_holidays(year, month))
    except HolidayFetchError as e:
        print(f"  {e}")
    return index
