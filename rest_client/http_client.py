"""HTTP client factory and the process-wide client shared by every RestClient."""

import threading

import httpx

from rest_client.settings import Settings

_client: httpx.Client | None = None
_client_lock = threading.Lock()


def create_http_client(settings: Settings) -> httpx.Client:
    """Build a Client configured from ``settings``."""
    return httpx.Client(
        timeout=settings.request_timeout,
        follow_redirects=settings.follow_redirects,
    )


def get_shared_client() -> httpx.Client:
    """Return the shared client, creating it from the environment on first use."""
    global _client
    with _client_lock:
        if _client is None:
            _client = create_http_client(Settings.load())
        return _client


def close_shared_client() -> None:
    """Close the shared client; the next ``get_shared_client`` call builds a new one."""
    global _client
    with _client_lock:
        if _client is not None:
            _client.close()
            _client = None
