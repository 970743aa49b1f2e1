"""API Pydantic models."""

from .requests import EventDraft
from .responses import (
    CalendarLayoutResponse,
    ErrorCodes,
    ErrorResponse,
    EventResponse,
    FormOptionsResponse,
    HealthResponse,
    NavigationResponse,
)

__all__ = [
    "CalendarLayoutResponse",
    "ErrorCodes",
    "ErrorResponse",
    "EventDraft",
    "EventResponse",
    "FormOptionsResponse",
    "HealthResponse",
    "NavigationResponse",
]
