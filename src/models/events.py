"""
Data models for calendar events and grid cells.

Events are frozen dataclasses so layout code can treat a fetched snapshot
as read-only. Layout output stays as plain dicts.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import NamedTuple


class Granularity(str, Enum):
    """Calendar view mode."""

    MONTH = "month"
    WEEK = "week"
    DAY = "day"


@dataclass(frozen=True)
class Event:
    """Calendar event as delivered by the inventory API."""

    id: str | int
    title: str
    start_time: datetime
    end_time: datetime
    all_day: bool = False
    description: str = ""
    author: str = ""
    location: str = ""
    color: str = "#1a73e8"
    is_completed: bool = False
    notification: bool = False


class CalendarDayCell(NamedTuple):
    """One cell of the month grid."""

    date: date
    in_current_period: bool


class SegmentInfo(NamedTuple):
    """Where a day sits inside an event's span."""

    is_multi_day: bool
    is_start_day: bool
    is_end_day: bool


class TimeOffset(NamedTuple):
    """Vertical placement as percentages of the enclosing row."""

    top_percent: float
    height_percent: float
