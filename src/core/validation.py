"""
Event form validation and normalization.

Drafts arrive as the calendar form submits them: all-day events carry a
start_date/end_date pair, timed events a single date with HH:MM clock values.
An explicit start_time/end_time pair (ISO 8601) takes precedence over both.
"""

from datetime import date, datetime, time, tzinfo

from core.config import DEFAULT_EVENT_COLOR, FORM_TIME_STEP_MINUTES

REQUIRED_FIELDS = ("title", "description", "author")
ALL_DAY_END = time(23, 59, 59, 999000)


def time_options(step_minutes: int = FORM_TIME_STEP_MINUTES) -> list[str]:
    """HH:MM choices for the start/end time dropdowns."""
    return [
        f"{minutes // 60:02d}:{minutes % 60:02d}" for minutes in range(0, 24 * 60, step_minutes)
    ]


def _parse_date(value: str | date | None) -> date:
    if isinstance(value, date):
        return value
    if not value:
        raise ValueError("missing date")
    return datetime.strptime(value, "%Y-%m-%d").date()


def _parse_clock(value: str | None) -> time:
    if not value:
        raise ValueError("missing time")
    return datetime.strptime(value, "%H:%M").time()


def _parse_instant(value: str | datetime, tz: tzinfo) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def resolve_event_times(draft: dict, tz: tzinfo) -> tuple[datetime, datetime]:
    """
    Compute the stored start/end instants for a draft.

    Raises:
        ValueError: if any date or time component cannot be parsed
    """
    if draft.get("start_time") and draft.get("end_time"):
        start = _parse_instant(draft["start_time"], tz)
        end = _parse_instant(draft["end_time"], tz)
        if draft.get("all_day"):
            start = datetime.combine(start.date(), time.min, tzinfo=tz)
            end = datetime.combine(end.date(), ALL_DAY_END, tzinfo=tz)
        return start, end

    if draft.get("all_day"):
        start_date = _parse_date(draft.get("start_date") or draft.get("date"))
        end_date = _parse_date(draft.get("end_date") or start_date)
        return (
            datetime.combine(start_date, time.min, tzinfo=tz),
            datetime.combine(end_date, ALL_DAY_END, tzinfo=tz),
        )

    day = _parse_date(draft.get("date") or draft.get("start_date"))
    return (
        datetime.combine(day, _parse_clock(draft.get("start_clock")), tzinfo=tz),
        datetime.combine(day, _parse_clock(draft.get("end_clock")), tzinfo=tz),
    )


def validate_event_draft(draft: dict, tz: tzinfo) -> list[str]:
    """
    Validate an event draft.

    Checks:
    1. Title, description and author are present
    2. Dates and times parse
    3. End is not before start
    """
    errors = []

    missing = [name for name in REQUIRED_FIELDS if not draft.get(name)]
    if missing:
        errors.append(f"Missing required fields: {', '.join(missing)}")

    try:
        start, end = resolve_event_times(draft, tz)
    except (TypeError, ValueError):
        errors.append("Invalid date/time")
        return errors

    if end < start:
        errors.append("End time must be after start time")

    return errors


def normalize_event_draft(draft: dict, tz: tzinfo) -> dict:
    """
    Turn a validated draft into the inventory API's event payload.

    Raises:
        ValueError: with one message per line when the draft is invalid
    """
    errors = validate_event_draft(draft, tz)
    if errors:
        raise ValueError("\n".join(errors))

    start, end = resolve_event_times(draft, tz)
    return {
        "title": draft["title"],
        "description": draft["description"],
        "all_day": bool(draft.get("all_day")),
        "start_time": start.isoformat(timespec="milliseconds"),
        "end_time": end.isoformat(timespec="milliseconds"),
        "author": draft["author"],
        "location": draft.get("location") or "",
        "notification": bool(draft.get("notification")),
        "color": draft.get("color") or DEFAULT_EVENT_COLOR,
    }
