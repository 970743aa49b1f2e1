"""
Korean display formatting for calendar headers and event details.
"""

from datetime import date

from core.calendar_engine import header_bounds, sunday_weekday
from core.config import VIEW_LABELS, WEEKDAY_LABELS
from models.events import Event, Granularity


def format_month_label(d: date) -> str:
    """Format as '2024년 2월'."""
    return f"{d.year}년 {d.month}월"


def format_day_label(d: date) -> str:
    """Format as '2024년 2월 15일'."""
    return f"{d.year}년 {d.month}월 {d.day}일"


def format_week_label(first: date, last: date) -> str:
    """
    Format a week range, dropping the parts both ends share.

    '2024년 3월 3일 - 9일', '2024년 3월 31일 - 4월 6일',
    '2024년 12월 29일 - 2025년 1월 4일'
    """
    if first.year == last.year and first.month == last.month:
        return f"{format_day_label(first)} - {last.day}일"
    if first.year == last.year:
        return f"{format_day_label(first)} - {last.month}월 {last.day}일"
    return f"{format_day_label(first)} - {format_day_label(last)}"


def format_header_label(reference_date: date, granularity: Granularity | str) -> str:
    granularity = Granularity(granularity)
    first, last = header_bounds(reference_date, granularity)

    if granularity is Granularity.MONTH:
        return format_month_label(first)
    if granularity is Granularity.WEEK:
        return format_week_label(first, last)
    return format_day_label(first)


def format_weekday(d: date) -> str:
    return WEEKDAY_LABELS[sunday_weekday(d)]


def format_view_label(granularity: Granularity | str) -> str:
    return VIEW_LABELS[Granularity(granularity).value]


def format_clock(value) -> str:
    return f"{value.hour:02d}:{value.minute:02d}"


def format_time_range(event: Event) -> str:
    """Format as '09:30 - 10:15'."""
    return f"{format_clock(event.start_time)} - {format_clock(event.end_time)}"


def format_event_period(event: Event) -> str:
    """Dates only for all-day events, dates with 24h times otherwise."""
    if event.all_day:
        return f"{format_day_label(event.start_time)} - {format_day_label(event.end_time)}"
    return (
        f"{format_day_label(event.start_time)} {format_clock(event.start_time)} - "
        f"{format_day_label(event.end_time)} {format_clock(event.end_time)}"
    )
