from typing import Callable

import httpx
import pytest

from httpwrap import HTTPClient
from httpwrap.core.config import get_settings

BASE_URL = "https://api.test"


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for name in ("HTTPWRAP_BASE_URL", "HTTPWRAP_LOG_LEVEL", "HTTPWRAP_LOG_REQUEST_HEADERS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_client() -> Callable[..., HTTPClient]:
    """Build an HTTPClient whose network calls are answered by *handler*."""

    def factory(handler, base_url: str = BASE_URL) -> HTTPClient:
        transport = httpx.MockTransport(handler)
        return HTTPClient(base_url, client=httpx.AsyncClient(transport=transport))

    return factory


def make_response(status: int = 200, *, content_type=None, content: bytes = b"", url: str = BASE_URL + "/x") -> httpx.Response:
    headers = {"Content-Type": content_type} if content_type else {}
    return httpx.Response(status, headers=headers, content=content, request=httpx.Request("GET", url))
