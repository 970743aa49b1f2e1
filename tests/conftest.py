"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date
from pathlib import Path
from types import SimpleNamespace

import httpx
import pytest

# Add src and fixture helpers to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent / "fixtures"))

from core import config
from core.database import create_tables, get_connection
from core.remote_client import set_remote_client
from event_factory import make_event, seoul


@pytest.fixture
def all_day_event():
    """Single-day all-day event on 2024-03-05."""
    return make_event(
        seoul(2024, 3, 5), seoul(2024, 3, 5, 23, 59, 59, 999000), all_day=True
    )


@pytest.fixture
def multi_day_event():
    """All-day event spanning 2024-03-05 to 2024-03-07."""
    return make_event(
        seoul(2024, 3, 5),
        seoul(2024, 3, 7, 23, 59, 59, 999000),
        all_day=True,
        id=2,
        title="Stock transfer",
    )


@pytest.fixture
def timed_event():
    """09:30-10:15 on 2024-03-05."""
    return make_event(
        seoul(2024, 3, 5, 9, 30), seoul(2024, 3, 5, 10, 15), id=3, title="Inbound delivery"
    )


@pytest.fixture
def generated_events():
    from generate_events import generate_events

    return generate_events(date(2024, 3, 1), count=40, seed=7)


@pytest.fixture
def mock_remote():
    """
    Install an httpx client whose responses come from a test-set handler.

    Usage: mock_remote.handler = lambda request: httpx.Response(200, json=[])
    """
    remote = SimpleNamespace(handler=lambda request: httpx.Response(404), requests=[])

    def dispatch(request: httpx.Request) -> httpx.Response:
        remote.requests.append(request)
        return remote.handler(request)

    set_remote_client(
        httpx.AsyncClient(
            transport=httpx.MockTransport(dispatch), base_url="http://inventory.test"
        )
    )
    yield remote
    set_remote_client(None)


@pytest.fixture
def request_log_db(tmp_path, monkeypatch):
    """Point the request log at a fresh database with tables created."""
    db_path = tmp_path / "requests.db"
    monkeypatch.setattr(config, "DB_PATH", db_path)
    conn = get_connection()
    create_tables(conn)
    conn.close()
    return db_path
