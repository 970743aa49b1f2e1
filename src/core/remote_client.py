"""
HTTP client setup for the inventory and holiday APIs with lazy initialization.
"""

import httpx

from core.config import INVENTORY_API_URL, REQUEST_TIMEOUT_SECONDS

_remote_client: httpx.AsyncClient | None = None


def get_remote_client() -> httpx.AsyncClient:
    """Get or create the shared inventory API client (lazy initialization)."""
    global _remote_client
    if _remote_client is None:
        _remote_client = httpx.AsyncClient(
            base_url=INVENTORY_API_URL,
            timeout=REQUEST_TIMEOUT_SECONDS,
            headers={"Accept": "application/json"},
        )
    return _remote_client


def set_remote_client(client: httpx.AsyncClient | None) -> None:
    """Replace the shared client (used to inject a transport in tests)."""
    global _remote_client
    _remote_client = client


async def close_remote_client() -> None:
    """Close the shared client if one was created."""
    global _remote_client
    if _remote_client is not None:
        await _remote_client.aclose()
        _remote_client = None
