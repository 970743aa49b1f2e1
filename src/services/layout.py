"""
Assemble a renderable layout description from engine primitives.

The result is a plain dict that the API returns as JSON and the
print_calendar script writes to the terminal.
"""

from collections.abc import Mapping
from datetime import date, tzinfo

from core.calendar_engine import (
    build_month_grid,
    build_week_days,
    classify_multi_day_segment,
    compute_period_bounds,
    compute_slot_offset,
    compute_time_offset,
    event_overlaps_slot,
    header_bounds,
    is_event_on_day,
    is_holiday,
    is_today,
    is_weekend,
    move_next,
    move_prev,
    shows_title,
    time_slots,
)
from core.config import WEEKDAY_LABELS
from models.events import Event, Granularity
from services.formatting import (
    format_event_period,
    format_header_label,
    format_time_range,
    format_view_label,
    format_weekday,
)


def _event_summary(event: Event) -> dict:
    return {
        "id": event.id,
        "title": event.title,
        "color": event.color,
        "is_completed": event.is_completed,
        "period": format_event_period(event),
    }


def _segment_placement(event: Event, day: date, first_column: bool = False) -> dict:
    segment = classify_multi_day_segment(event, day)
    return {
        **_event_summary(event),
        "is_multi_day": segment.is_multi_day,
        "is_start_day": segment.is_start_day,
        "is_end_day": segment.is_end_day,
        # A span continuing from the previous week is labelled again on Sunday
        "show_title": shows_title(segment) or first_column,
    }


def _day_header(day: date, holidays: Mapping[str, str], today: date) -> dict:
    return {
        "date": day.isoformat(),
        "day": day.day,
        "is_weekend": is_weekend(day),
        "is_today": is_today(day, today),
        "holiday": is_holiday(day, holidays),
    }


def _hour_column(
    day: date,
    events: list[Event],
    holidays: Mapping[str, str],
    today: date,
    first_column: bool,
    start_day_only: bool,
) -> dict:
    """
    One day of the hour grid.

    With start_day_only (week view) a timed event is drawn only in the
    column of the day it starts on, so one crossing midnight is cut off
    at the end of that day.
    """
    if start_day_only:
        timed = [e for e in events if not e.all_day and e.start_time.date() == day]
    else:
        timed = [e for e in events if not e.all_day and is_event_on_day(e, day)]

    timed_events = []
    for event in timed:
        offset = compute_time_offset(event)
        timed_events.append(
            {
                **_event_summary(event),
                "top_percent": offset.top_percent,
                "height_percent": offset.height_percent,
                "time_range": format_time_range(event),
            }
        )

    slots = []
    for hour, label in enumerate(time_slots()):
        slot_events = []
        for event in timed:
            if not event_overlaps_slot(event, day, hour):
                continue
            offset = compute_slot_offset(event, day, hour)
            slot_events.append(
                {
                    **_event_summary(event),
                    "top_percent": offset.top_percent,
                    "height_percent": offset.height_percent,
                    "time_range": format_time_range(event),
                }
            )
        slots.append({"time": label, "events": slot_events})

    return {
        **_day_header(day, holidays, today),
        "weekday_label": format_weekday(day),
        "all_day_events": [
            _segment_placement(e, day, first_column)
            for e in events
            if e.all_day and is_event_on_day(e, day)
        ],
        "timed_events": timed_events,
        "slots": slots,
    }


def build_month_days(
    reference_date: date, events: list[Event], holidays: Mapping[str, str], today: date
) -> list[dict]:
    days = []
    for cell in build_month_grid(reference_date):
        days.append(
            {
                **_day_header(cell.date, holidays, today),
                "in_current_period": cell.in_current_period,
                "events": [
                    _segment_placement(e, cell.date) for e in events if is_event_on_day(e, cell.date)
                ],
            }
        )
    return days


def build_layout(
    reference_date: date,
    granularity: Granularity | str,
    events: list[Event],
    holidays: Mapping[str, str],
    today: date,
    tz: tzinfo | None = None,
) -> dict:
    """
    Full layout for one view.

    Every call recomputes from scratch; nothing is cached between calls.
    """
    granularity = Granularity(granularity)
    range_start, range_end = compute_period_bounds(reference_date, granularity, tz)
    first_day, last_day = header_bounds(reference_date, granularity)

    layout = {
        "view": granularity.value,
        "view_label": format_view_label(granularity),
        "reference_date": reference_date.isoformat(),
        "label": format_header_label(reference_date, granularity),
        "first_day": first_day.isoformat(),
        "last_day": last_day.isoformat(),
        "range_start": range_start.isoformat(),
        "range_end": range_end.isoformat(),
        "previous_date": move_prev(reference_date, granularity).isoformat(),
        "next_date": move_next(reference_date, granularity).isoformat(),
        "weekday_labels": list(WEEKDAY_LABELS),
    }

    if granularity is Granularity.MONTH:
        layout["days"] = build_month_days(reference_date, events, holidays, today)
    elif granularity is Granularity.WEEK:
        layout["days"] = [
            _hour_column(
                day, events, holidays, today, first_column=index == 0, start_day_only=True
            )
            for index, day in enumerate(build_week_days(reference_date))
        ]
    else:
        layout["days"] = [
            _hour_column(
                reference_date, events, holidays, today, first_column=True, start_day_only=False
            )
        ]

    return layout
