"""Event create/update/delete endpoints proxied to the inventory API."""

import time
from collections.abc import Awaitable

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from api.dependencies import get_session_author
from api.logging import RequestLog, get_client_ip, log_request
from api.models.requests import EventDraft
from api.models.responses import ErrorCodes, EventResponse, FormOptionsResponse
from core.config import CALENDAR_TIMEZONE, DEFAULT_EVENT_COLOR
from core.validation import normalize_event_draft, time_options
from models.events import Event
from services.calendar import (
    RemoteAPIError,
    create_event,
    delete_event,
    serialize_event,
    toggle_completion,
    update_event,
)

router = APIRouter(prefix="/v1")


def build_payload(draft: EventDraft, author: str) -> dict:
    """
    Validate a form draft and build the inventory API payload.

    Raises:
        HTTPException: 422 with one detail per validation message
    """
    values = draft.model_dump()
    if not values.get("author"):
        values["author"] = author

    try:
        return normalize_event_draft(values, CALENDAR_TIMEZONE)
    except ValueError as e:
        details = [line.strip() for line in str(e).split("\n") if line.strip()]
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error": "Event validation failed",
                "code": ErrorCodes.VALIDATION_ERROR,
                "details": details,
            },
        )


def upstream_exception(error: RemoteAPIError) -> HTTPException:
    """Map an inventory API failure onto our error format."""
    if error.status_code == status.HTTP_404_NOT_FOUND:
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "Event not found", "code": ErrorCodes.NOT_FOUND, "details": []},
        )
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail={
            "error": "Inventory API request failed",
            "code": ErrorCodes.UPSTREAM_ERROR,
            "details": [error.message],
        },
    )


async def _run_logged(request_log: RequestLog, call: Awaitable, success_status: int = 200):
    """Await a service call, recording outcome and timing in the request log."""
    start_time = time.time()
    try:
        result = await call
        request_log.status_code = success_status
        return result

    except RemoteAPIError as e:
        exc = upstream_exception(e)
        request_log.status_code = exc.status_code
        request_log.error_code = exc.detail["code"]
        request_log.error_message = e.message
        request_log.details.append(("upstream_error", e.message))
        raise exc

    except HTTPException as e:
        request_log.status_code = e.status_code
        if isinstance(e.detail, dict):
            request_log.error_code = e.detail.get("code")
            request_log.error_message = e.detail.get("error")
            for detail in e.detail.get("details", []):
                request_log.details.append(("validation_error", detail))
        raise

    except Exception as e:
        request_log.status_code = 500
        request_log.error_code = ErrorCodes.INTERNAL_ERROR
        request_log.error_message = str(e)
        raise

    finally:
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        try:
            log_request(request_log)
        except Exception as e:
            # Don't fail the request if logging fails
            print(f"Request log write failed: {e}")


async def _create(draft: EventDraft, author: str) -> Event:
    return await create_event(build_payload(draft, author))


async def _update(event_id: str, draft: EventDraft, author: str) -> Event:
    return await update_event(event_id, build_payload(draft, author))


@router.get("/events/form-options", response_model=FormOptionsResponse)
async def get_form_options(author: str = Depends(get_session_author)):
    """Time choices and prefilled values for a new event form."""
    return FormOptionsResponse(
        time_options=time_options(),
        default_color=DEFAULT_EVENT_COLOR,
        default_author=author,
    )


@router.post("/events", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event_endpoint(
    request: Request,
    draft: EventDraft,
    author: str = Depends(get_session_author),
):
    """Create an event from a form submission."""
    request_log = RequestLog(endpoint="/v1/events", method="POST", client_ip=get_client_ip(request))
    event = await _run_logged(request_log, _create(draft, author), status.HTTP_201_CREATED)
    return serialize_event(event)


@router.put("/events/{event_id}", response_model=EventResponse)
async def update_event_endpoint(
    request: Request,
    event_id: str,
    draft: EventDraft,
    author: str = Depends(get_session_author),
):
    """Replace an event with an edited form submission."""
    request_log = RequestLog(
        endpoint="/v1/events/{event_id}",
        method="PUT",
        client_ip=get_client_ip(request),
        event_id=event_id,
    )
    event = await _run_logged(request_log, _update(event_id, draft, author))
    return serialize_event(event)


@router.delete("/events/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event_endpoint(request: Request, event_id: str):
    request_log = RequestLog(
        endpoint="/v1/events/{event_id}",
        method="DELETE",
        client_ip=get_client_ip(request),
        event_id=event_id,
    )
    await _run_logged(request_log, delete_event(event_id), status.HTTP_204_NO_CONTENT)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/events/{event_id}/toggle-completion", response_model=EventResponse)
async def toggle_completion_endpoint(request: Request, event_id: str):
    """Flip an event's completed flag."""
    request_log = RequestLog(
        endpoint="/v1/events/{event_id}/toggle-completion",
        method="PATCH",
        client_ip=get_client_ip(request),
        event_id=event_id,
    )
    event = await _run_logged(request_log, toggle_completion(event_id))
    return serialize_event(event)
