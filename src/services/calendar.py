"""
Event fetching and mutation against the inventory API.
"""

from datetime import datetime

import httpx

from core.config import CALENDAR_TIMEZONE, DEFAULT_EVENT_COLOR
from core.remote_client import get_remote_client
from models.events import Event

EVENTS_PATH = "/api/events"


class RemoteAPIError(Exception):
    """A write against the inventory API failed."""

    def __init__(self, status_code: int | None, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=CALENDAR_TIMEZONE)
    return parsed.astimezone(CALENDAR_TIMEZONE)


def parse_event(raw: dict) -> Event:
    """
    Parse an inventory API event record into our format.

    Raises:
        KeyError: if id, start_time or end_time is missing
        ValueError: if a timestamp is malformed
    """
    return Event(
        id=raw["id"],
        title=raw.get("title") or "",
        description=raw.get("description") or "",
        author=raw.get("author") or "",
        location=raw.get("location") or "",
        all_day=bool(raw.get("all_day")),
        start_time=_parse_timestamp(raw["start_time"]),
        end_time=_parse_timestamp(raw["end_time"]),
        color=raw.get("color") or DEFAULT_EVENT_COLOR,
        is_completed=bool(raw.get("is_completed")),
        notification=bool(raw.get("notification")),
    )


def serialize_event(event: Event) -> dict:
    """Event -> JSON-ready dict using the inventory API's field names."""
    return {
        "id": event.id,
        "title": event.title,
        "description": event.description,
        "author": event.author,
        "location": event.location,
        "all_day": event.all_day,
        "start_time": event.start_time.isoformat(timespec="milliseconds"),
        "end_time": event.end_time.isoformat(timespec="milliseconds"),
        "color": event.color,
        "is_completed": event.is_completed,
        "notification": event.notification,
    }


async def fetch_events(range_start: datetime, range_end: datetime) -> list[Event]:
    """
    Fetch all events overlapping [range_start, range_end).

    Falls back to an empty list when the API is unreachable or answers
    with something other than a list. Malformed records are skipped.
    """
    client = get_remote_client()
    params = {"start": range_start.isoformat(), "end": range_end.isoformat()}

    try:
        response = await client.get(EVENTS_PATH, params=params)
        response.raise_for_status()
        payload = response.json()
    except (httpx.HTTPError, ValueError) as e:
        print(f"  Error fetching events: {e}")
        return []

    if not isinstance(payload, list):
        print(f"  Unexpected events payload: {type(payload).__name__}")
        return []

    events = []
    for raw in payload:
        try:
            events.append(parse_event(raw))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            print(f"  Skipping malformed event {raw!r}: {e}")
    return events


def _error_message(response: httpx.Response, fallback: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return fallback


async def _send(method: str, path: str, fallback: str, payload: dict | None = None) -> httpx.Response:
    client = get_remote_client()
    try:
        response = await client.request(method, path, json=payload)
    except httpx.HTTPError as e:
        raise RemoteAPIError(None, f"{fallback}: {e}") from e

    if response.is_error:
        raise RemoteAPIError(response.status_code, _error_message(response, fallback))
    return response


async def create_event(payload: dict) -> Event:
    """Create an event from a normalized payload (see core.validation)."""
    response = await _send("POST", EVENTS_PATH, "Failed to create event", payload)
    return parse_event(response.json())


async def update_event(event_id: str, payload: dict) -> Event:
    response = await _send("PUT", f"{EVENTS_PATH}/{event_id}", "Failed to update event", payload)
    return parse_event(response.json())


async def delete_event(event_id: str) -> None:
    await _send("DELETE", f"{EVENTS_PATH}/{event_id}", "Failed to delete event")


async def toggle_completion(event_id: str) -> Event:
    response = await _send(
        "PATCH",
        f"{EVENTS_PATH}/{event_id}/toggle-completion",
        "Failed to update event status",
    )
    return parse_event(response.json())
