"""Pydantic response models for API endpoints."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy" or "unhealthy"
    version: str
    request_log_available: bool
    holiday_api_configured: bool
    timestamp: str  # ISO 8601 UTC
    error: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class EventResponse(BaseModel):
    """Event as stored by the inventory API."""

    id: str | int
    title: str
    description: str
    author: str
    location: str
    all_day: bool
    start_time: str
    end_time: str
    color: str
    is_completed: bool
    notification: bool


class EventSummary(BaseModel):
    id: str | int
    title: str
    color: str
    is_completed: bool
    period: str


class SegmentPlacement(EventSummary):
    """An event drawn as a bar inside a day cell."""

    is_multi_day: bool
    is_start_day: bool
    is_end_day: bool
    show_title: bool


class TimedPlacement(EventSummary):
    """An event positioned vertically by time of day (percentages)."""

    top_percent: float
    height_percent: float
    time_range: str


class HourSlot(BaseModel):
    time: str
    events: list[TimedPlacement]


class MonthDay(BaseModel):
    date: str
    day: int
    in_current_period: bool
    is_weekend: bool
    is_today: bool
    holiday: str | None = None
    events: list[SegmentPlacement]


class HourColumn(BaseModel):
    date: str
    day: int
    weekday_label: str
    is_weekend: bool
    is_today: bool
    holiday: str | None = None
    all_day_events: list[SegmentPlacement]
    timed_events: list[TimedPlacement]
    slots: list[HourSlot]


class CalendarLayoutResponse(BaseModel):
    """Computed layout for one month, week or day view."""

    view: str
    view_label: str
    reference_date: str
    label: str
    first_day: str
    last_day: str
    range_start: str
    range_end: str
    previous_date: str
    next_date: str
    weekday_labels: list[str]
    days: list[MonthDay | HourColumn]


class NavigationResponse(BaseModel):
    date: str
    view: str


class FormOptionsResponse(BaseModel):
    """Choices and defaults for the event form."""

    time_options: list[str]  # "HH:MM", 15-minute steps
    default_color: str
    default_author: str
