"""Helpers for building events in tests."""

from datetime import datetime
from zoneinfo import ZoneInfo

from models.events import Event

SEOUL = ZoneInfo("Asia/Seoul")


def seoul(*args) -> datetime:
    return datetime(*args, tzinfo=SEOUL)


def make_event(start: datetime, end: datetime, all_day: bool = False, **fields) -> Event:
    """Build an event with sensible defaults for the fields a test ignores."""
    defaults = {
        "id": 1,
        "title": "Shelf audit",
        "description": "Count shelf A-3",
        "author": "김재고",
        "location": "Warehouse 1",
    }
    defaults.update(fields)
    return Event(start_time=start, end_time=end, all_day=all_day, **defaults)


def raw_event(**fields) -> dict:
    """Inventory API JSON record."""
    record = {
        "id": 11,
        "title": "Inbound delivery",
        "description": "Pallets from supplier",
        "author": "김재고",
        "location": "Dock 2",
        "all_day": False,
        "start_time": "2024-03-05T00:30:00.000Z",
        "end_time": "2024-03-05T01:15:00.000Z",
        "color": "#188038",
        "is_completed": False,
        "notification": False,
    }
    record.update(fields)
    return record
