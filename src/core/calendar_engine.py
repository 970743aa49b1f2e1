"""
Calendar grid, overlap and time-of-day placement math.

Everything here is a pure function of its arguments: no I/O, no caching.
Weeks start on Sunday and weekdays use the 0 = Sunday convention.
"""

import calendar
from collections.abc import Mapping
from datetime import date, datetime, time, timedelta, tzinfo

from core.config import GRID_CELLS, MINUTES_PER_DAY
from models.events import CalendarDayCell, Event, Granularity, SegmentInfo, TimeOffset

END_OF_DAY = time(23, 59, 59, 999000)


# =============================================================================
# DAY HELPERS
# =============================================================================


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def start_of_day(day: date, tz: tzinfo | None = None) -> datetime:
    return datetime.combine(_as_date(day), time.min, tzinfo=tz)


def end_of_day(day: date, tz: tzinfo | None = None) -> datetime:
    return datetime.combine(_as_date(day), END_OF_DAY, tzinfo=tz)


def sunday_weekday(day: date) -> int:
    """Weekday with Sunday = 0 ... Saturday = 6."""
    return (day.weekday() + 1) % 7


def is_weekend(day: date) -> bool:
    return sunday_weekday(day) in (0, 6)


def is_today(day: date, today: date) -> bool:
    return _as_date(day) == _as_date(today)


def is_holiday(day: date, holidays: Mapping[str, str]) -> str | None:
    """Return the holiday name for an exact day, or None."""
    return holidays.get(_as_date(day).strftime("%Y-%m-%d"))


def add_months(day: date, months: int) -> date:
    """Calendar month arithmetic; day-of-month is clamped to the target month."""
    month_index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    _, last_day = calendar.monthrange(year, month)
    return date(year, month, min(day.day, last_day))


# =============================================================================
# PERIODS AND GRIDS
# =============================================================================


def week_start(reference_date: date) -> date:
    day = _as_date(reference_date)
    return day - timedelta(days=sunday_weekday(day))


def compute_period_bounds(
    reference_date: date, granularity: Granularity | str, tz: tzinfo | None = None
) -> tuple[datetime, datetime]:
    """
    Instant range to query the event source with.

    Month bounds are half-open (end is the first of the next month);
    week and day bounds end at 23:59:59.999 of their last day.
    """
    granularity = Granularity(granularity)
    day = _as_date(reference_date)

    if granularity is Granularity.MONTH:
        first = day.replace(day=1)
        return start_of_day(first, tz), start_of_day(add_months(first, 1), tz)
    if granularity is Granularity.WEEK:
        sunday = week_start(day)
        return start_of_day(sunday, tz), end_of_day(sunday + timedelta(days=6), tz)
    return start_of_day(day, tz), end_of_day(day, tz)


def build_month_grid(reference_date: date) -> list[CalendarDayCell]:
    """Six Sunday-first weeks covering the month, padded with adjacent days."""
    first = _as_date(reference_date).replace(day=1)
    _, days_in_month = calendar.monthrange(first.year, first.month)
    leading = sunday_weekday(first)

    cells = [
        CalendarDayCell(first - timedelta(days=leading - i), False) for i in range(leading)
    ]
    cells.extend(
        CalendarDayCell(first + timedelta(days=i), True) for i in range(days_in_month)
    )

    next_first = add_months(first, 1)
    trailing = max(0, GRID_CELLS - len(cells))
    cells.extend(CalendarDayCell(next_first + timedelta(days=i), False) for i in range(trailing))
    return cells


def build_week_days(reference_date: date) -> list[date]:
    sunday = week_start(reference_date)
    return [sunday + timedelta(days=i) for i in range(7)]


def header_bounds(reference_date: date, granularity: Granularity | str) -> tuple[date, date]:
    """First and last displayed day behind the header label."""
    granularity = Granularity(granularity)
    day = _as_date(reference_date)

    if granularity is Granularity.MONTH:
        _, last_day = calendar.monthrange(day.year, day.month)
        return day.replace(day=1), day.replace(day=last_day)
    if granularity is Granularity.WEEK:
        days = build_week_days(day)
        return days[0], days[-1]
    return day, day


def time_slots() -> list[str]:
    return [f"{hour:02d}:00" for hour in range(24)]


# =============================================================================
# NAVIGATION
# =============================================================================


def _shift(reference_date: date, granularity: Granularity | str, step: int) -> date:
    granularity = Granularity(granularity)
    day = _as_date(reference_date)

    if granularity is Granularity.MONTH:
        return add_months(day, step)
    if granularity is Granularity.WEEK:
        return day + timedelta(days=7 * step)
    return day + timedelta(days=step)


def move_next(reference_date: date, granularity: Granularity | str) -> date:
    return _shift(reference_date, granularity, 1)


def move_prev(reference_date: date, granularity: Granularity | str) -> date:
    return _shift(reference_date, granularity, -1)


# =============================================================================
# EVENT MEMBERSHIP AND PLACEMENT
# =============================================================================


def is_event_on_day(event: Event, day: date) -> bool:
    """
    Whether an event occupies a calendar day.

    All-day events compare dates only. Timed events are on a day when
    their interval touches [00:00, 23:59:59.999] of that day.
    """
    day = _as_date(day)
    if event.all_day:
        return event.start_time.date() <= day <= event.end_time.date()

    tz = event.start_time.tzinfo
    return event.start_time <= end_of_day(day, tz) and event.end_time >= start_of_day(day, tz)


def classify_multi_day_segment(event: Event, day: date) -> SegmentInfo:
    day = _as_date(day)
    start_day = event.start_time.date()
    end_day = event.end_time.date()
    return SegmentInfo(
        is_multi_day=end_day > start_day,
        is_start_day=day == start_day,
        is_end_day=day == end_day,
    )


def shows_title(segment: SegmentInfo) -> bool:
    """Label text goes on the first day of a span, or any single-day event."""
    return segment.is_start_day or not segment.is_multi_day


def compute_time_offset(event: Event) -> TimeOffset:
    """
    Position inside a 24h column from the wall-clock minutes of start/end.

    An event crossing midnight gets a negative height; callers clip it.
    """
    start_minutes = event.start_time.hour * 60 + event.start_time.minute
    end_minutes = event.end_time.hour * 60 + event.end_time.minute
    return TimeOffset(
        top_percent=start_minutes / MINUTES_PER_DAY * 100,
        height_percent=(end_minutes - start_minutes) / MINUTES_PER_DAY * 100,
    )


def _slot_range(day: date, hour: int, tz: tzinfo | None) -> tuple[datetime, datetime]:
    slot_start = datetime.combine(_as_date(day), time(hour), tzinfo=tz)
    return slot_start, slot_start + timedelta(hours=1)


def event_overlaps_slot(event: Event, day: date, hour: int) -> bool:
    if event.all_day:
        return False
    slot_start, slot_end = _slot_range(day, hour, event.start_time.tzinfo)
    return event.start_time < slot_end and event.end_time > slot_start


def _clamp01(value: float) -> float:
    return min(1.0, max(0.0, value))


def compute_slot_offset(event: Event, day: date, hour: int) -> TimeOffset:
    """Position of an event inside one hour row, clipped to the row."""
    slot_start, slot_end = _slot_range(day, hour, event.start_time.tzinfo)
    span = (slot_end - slot_start).total_seconds()

    top = _clamp01((event.start_time - slot_start).total_seconds() / span)
    bottom = _clamp01((event.end_time - slot_start).total_seconds() / span)
    return TimeOffset(top_percent=top * 100, height_percent=(bottom - top) * 100)
