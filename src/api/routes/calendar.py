"""Calendar layout and navigation endpoints."""

import time
from datetime import date, datetime
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from api.dependencies import get_holiday_index
from api.logging import RequestLog, get_client_ip, log_request
from api.models.responses import CalendarLayoutResponse, ErrorCodes, NavigationResponse
from core.calendar_engine import compute_period_bounds, move_next, move_prev
from core.config import CALENDAR_TIMEZONE
from models.events import Granularity
from models.holidays import HolidayIndex
from services.calendar import fetch_events
from services.holidays import ensure_holidays
from services.layout import build_layout

router = APIRouter(prefix="/v1")


def today_in_calendar_timezone() -> date:
    return datetime.now(CALENDAR_TIMEZONE).date()


def parse_reference_date(date_str: str | None) -> date:
    """Parse reference date string, defaulting to today."""
    if not date_str:
        return today_in_calendar_timezone()
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Invalid date format",
                "code": ErrorCodes.INVALID_REQUEST,
                "details": ["Expected format: YYYY-MM-DD"],
            },
        )


@router.get("/calendar", response_model=CalendarLayoutResponse)
async def get_calendar_layout(
    request: Request,
    date_str: Annotated[str | None, Query(alias="date", description="YYYY-MM-DD")] = None,
    view: Granularity = Granularity.MONTH,
    holiday_index: HolidayIndex = Depends(get_holiday_index),
):
    """
    Compute the calendar layout for a reference date and view.

    Events are fetched for the view's period bounds; holidays for the
    reference month are added to the process-wide index.
    """
    start_time = time.time()
    request_log = RequestLog(
        endpoint="/v1/calendar",
        method="GET",
        client_ip=get_client_ip(request),
        view=view.value,
    )

    try:
        reference_date = parse_reference_date(date_str)
        range_start, range_end = compute_period_bounds(reference_date, view, CALENDAR_TIMEZONE)
        request_log.range_start = range_start.isoformat()
        request_log.range_end = range_end.isoformat()

        events = await fetch_events(range_start, range_end)
        await ensure_holidays(holiday_index, reference_date.year, reference_date.month)

        layout = build_layout(
            reference_date,
            view,
            events,
            holiday_index.holidays,
            today_in_calendar_timezone(),
            CALENDAR_TIMEZONE,
        )

        request_log.status_code = 200
        request_log.events_returned = len(events)
        return layout

    except HTTPException as e:
        request_log.status_code = e.status_code
        if isinstance(e.detail, dict):
            request_log.error_code = e.detail.get("code")
            request_log.error_message = e.detail.get("error")
        else:
            request_log.error_message = str(e.detail)
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


@router.get("/calendar/navigate", response_model=NavigationResponse)
async def navigate_calendar(
    date_str: Annotated[str | None, Query(alias="date", description="YYYY-MM-DD")] = None,
    view: Granularity = Granularity.MONTH,
    direction: Literal["next", "prev"] = "next",
):
    """Return the reference date one period forward or back."""
    reference_date = parse_reference_date(date_str)
    move = move_next if direction == "next" else move_prev
    return NavigationResponse(date=move(reference_date, view).isoformat(), view=view.value)
