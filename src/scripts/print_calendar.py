#!/usr/bin/env python3
"""
Print a calendar view with events and holidays to the terminal.

Fetches events from the inventory API and holidays from data.go.kr for
the requested period, then prints the computed layout.

Usage:
    uv run python src/scripts/print_calendar.py --date 2024-02-15 --view month
"""

import argparse
import asyncio
import sys
from datetime import datetime
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.calendar_engine import compute_period_bounds
from core.config import CALENDAR_TIMEZONE
from core.remote_client import close_remote_client
from models.events import Granularity
from models.holidays import HolidayIndex
from services.calendar import fetch_events
from services.holidays import ensure_holidays
from services.layout import build_layout


# =============================================================================
# TERMINAL RENDERING
# =============================================================================


def render_month(layout: dict) -> list[str]:
    """Month grid as rows of seven fixed-width cells plus an event list."""
    lines = ["  ".join(f"{label:>3}" for label in layout["weekday_labels"])]

    days = layout["days"]
    for row_start in range(0, len(days), 7):
        cells = []
        for day in days[row_start : row_start + 7]:
            marker = "*" if day["holiday"] else ("+" if day["events"] else " ")
            text = f"{day['day']:>2}{marker}" if day["in_current_period"] else "   "
            cells.append(text)
        lines.append("  ".join(cells))

    lines.append("")
    for day in days:
        if not day["in_current_period"]:
            continue
        if day["holiday"]:
            lines.append(f"{day['date']}  [{day['holiday']}]")
        for event in day["events"]:
            if event["show_title"]:
                done = " (done)" if event["is_completed"] else ""
                lines.append(f"{day['date']}  {event['title']}{done}")
    return lines


def render_hours(layout: dict) -> list[str]:
    """Week/day view as one block per day: all-day events then timed events."""
    lines = []
    for day in layout["days"]:
        header = f"{day['date']} ({day['weekday_label']})"
        if day["holiday"]:
            header += f" [{day['holiday']}]"
        lines.append(header)

        for event in day["all_day_events"]:
            title = event["title"] if event["show_title"] else "..."
            lines.append(f"  all day      {title}")
        for event in day["timed_events"]:
            lines.append(f"  {event['time_range']}  {event['title']}")
        lines.append("")
    return lines


# =============================================================================
# MAIN
# =============================================================================


async def main(date_str: str | None, view: Granularity):
    """Main entry point."""
    try:
        if date_str:
            reference_date = datetime.strptime(date_str, "%Y-%m-%d").date()
        else:
            reference_date = datetime.now(CALENDAR_TIMEZONE).date()

        range_start, range_end = compute_period_bounds(reference_date, view, CALENDAR_TIMEZONE)
        print(f"Fetching events for {range_start.isoformat()} to {range_end.isoformat()}")
        events = await fetch_events(range_start, range_end)
        print(f"  Found {len(events)} events")

        holidays = await ensure_holidays(
            HolidayIndex(), reference_date.year, reference_date.month
        )
        print(f"  Found {len(holidays)} holidays\n")

        layout = build_layout(
            reference_date,
            view,
            events,
            holidays.holidays,
            datetime.now(CALENDAR_TIMEZONE).date(),
            CALENDAR_TIMEZONE,
        )

        print(layout["label"])
        print("=" * 40)
        lines = render_month(layout) if view is Granularity.MONTH else render_hours(layout)
        print("\n".join(lines))
    finally:
        await close_remote_client()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Print a calendar view")
    parser.add_argument("--date", help="Reference date (YYYY-MM-DD). Defaults to today.")
    parser.add_argument(
        "--view",
        choices=[g.value for g in Granularity],
        default=Granularity.MONTH.value,
        help="Calendar view (default: month)",
    )
    args = parser.parse_args()

    asyncio.run(main(args.date, Granularity(args.view)))
