"""Tests for request log persistence."""

from api.logging import RequestLog, log_request
from core.database import fetch_recent_requests, get_connection


def test_log_request_writes_row_and_details(request_log_db):
    log = RequestLog(
        endpoint="/v1/events",
        method="POST",
        client_ip="10.0.0.5",
        status_code=422,
        error_code="VALIDATION_ERROR",
        error_message="Event validation failed",
        processing_time_ms=3,
        details=[("validation_error", "Missing required fields: title")],
    )

    log_request(log)

    conn = get_connection()
    try:
        rows = fetch_recent_requests(conn)
        details = conn.execute(
            "SELECT detail_type, message FROM api_request_details WHERE request_id = ?",
            (log.request_id,),
        ).fetchall()
    finally:
        conn.close()

    assert len(rows) == 1
    assert rows[0]["request_id"] == log.request_id
    assert rows[0]["status_code"] == 422
    assert [tuple(d) for d in details] == [("validation_error", "Missing required fields: title")]


def test_recent_requests_newest_first(request_log_db):
    for stamp in ("2024-03-05T00:00:00+00:00", "2024-03-06T00:00:00+00:00"):
        log_request(RequestLog(endpoint="/v1/calendar", method="GET", timestamp=stamp, status_code=200))

    conn = get_connection()
    try:
        rows = fetch_recent_requests(conn, limit=1)
    finally:
        conn.close()

    assert [r["timestamp"] for r in rows] == ["2024-03-06T00:00:00+00:00"]
