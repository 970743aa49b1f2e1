"""Pydantic request models for API endpoints."""

from pydantic import BaseModel


class EventDraft(BaseModel):
    """
    Event form submission.

    All-day events use start_date/end_date, timed events use date with
    start_clock/end_clock (HH:MM). start_time/end_time (ISO 8601) override
    both when present.
    """

    title: str = ""
    description: str = ""
    author: str | None = None
    location: str = ""
    all_day: bool = False
    date: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    start_clock: str | None = None
    end_clock: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    notification: bool = False
    color: str | None = None
