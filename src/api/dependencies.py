"""FastAPI dependencies for shared resources and session context."""

from urllib.parse import unquote

from fastapi import Header, Request

from core.config import DEFAULT_AUTHOR
from models.holidays import HolidayIndex


def get_holiday_index(request: Request) -> HolidayIndex:
    """Process-wide holiday index, created on first use if startup did not."""
    index = getattr(request.app.state, "holiday_index", None)
    if index is None:
        index = HolidayIndex()
        request.app.state.holiday_index = index
    return index


async def get_session_author(
    x_console_user: str | None = Header(None, alias="X-Console-User"),
) -> str:
    """
    Default event author for the signed-in console user.

    The header value is percent-decoded so non-ASCII handler names survive.
    """
    if x_console_user:
        return unquote(x_console_user)
    return DEFAULT_AUTHOR
