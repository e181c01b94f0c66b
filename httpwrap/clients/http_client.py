"""
clients/http_client.py
----------------------

Asynchronous HTTP client wrapper with verb-named methods, automatic
request body encoding and response body decoding by content type.
It uses the ``httpx`` library under the hood; everything about the
transport itself (pooling, TLS, timeouts, redirects) is left to the
``httpx.AsyncClient`` it wraps.

Every call builds the absolute URL by concatenating the base URL and
the endpoint, prepares headers and body, sends the request and
attaches the decoded body to the returned ``httpx.Response`` as its
``data`` attribute. 204 responses are returned as they are. HEAD
requests only log the status. Failures are logged and re-raised
unchanged; there are no retries.

Typical usage::

    async with HTTPClient("https://api.example.com") as client:
        response = await client.post("/items", {"name": "spoon"})
        print(response.status_code, response.data)
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from httpwrap.core.body import handle_body, handle_headers, request_content
from httpwrap.core.config import get_settings
from httpwrap.core.decoding import handle_content_type
from httpwrap.core.headers import get_header, set_header, to_httpx_headers
from httpwrap.core.status import handle_status_code
from httpwrap.logging_config import log_http_request, logger


class HTTPClient:
    """Verb-oriented HTTP client.

    Instances hold no per-request state; the base URL is fixed at
    construction and concurrent calls on one instance are independent.
    When no ``client`` is passed the instance creates and owns an
    ``httpx.AsyncClient`` and closes it in :meth:`aclose`. A client
    passed in by the caller is left open.
    """

    def __init__(self, base_url: Optional[str] = None, *, client: Optional[httpx.AsyncClient] = None) -> None:
        # An explicit base URL wins, even an empty one.
        self._base_url = base_url if base_url is not None else get_settings().base_url
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient()

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        """Close the underlying HTTPX client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HTTPClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # -----------------------------------------------------------------
    # Verb methods
    # -----------------------------------------------------------------
    async def get(self, endpoint: str, headers: Any = None) -> httpx.Response:
        return await self.request("GET", endpoint, None, headers)

    async def post(self, endpoint: str, body: Any = None, headers: Any = None) -> httpx.Response:
        return await self.request("POST", endpoint, body, headers)

    async def put(self, endpoint: str, body: Any = None, headers: Any = None) -> httpx.Response:
        return await self.request("PUT", endpoint, body, headers)

    async def delete(self, endpoint: str, headers: Any = None) -> httpx.Response:
        return await self.request("DELETE", endpoint, None, headers)

    async def patch(self, endpoint: str, body: Any = None, headers: Any = None) -> httpx.Response:
        return await self.request("PATCH", endpoint, body, headers)

    async def head(self, endpoint: str, headers: Any = None) -> httpx.Response:
        """Send a HEAD request and log its status. The body is never read."""
        return await self.head_request("HEAD", endpoint, headers)

    GET = get
    POST = post
    PUT = put
    DELETE = delete
    PATCH = patch
    HEAD = head

    # -----------------------------------------------------------------
    # Helpers, exposed for callers that prepare requests themselves
    # -----------------------------------------------------------------
    @staticmethod
    def get_header(headers: Any, key: str) -> Optional[str]:
        return get_header(headers, key)

    @staticmethod
    def set_header(headers: Any, key: str, value: str) -> None:
        set_header(headers, key, value)

    @staticmethod
    def handle_body(method: str, body: Any) -> Any:
        return handle_body(method, body)

    @staticmethod
    def handle_headers(headers: Any, body: Any) -> Any:
        return handle_headers(headers, body)

    @staticmethod
    async def handle_content_type(response: httpx.Response) -> Any:
        return await handle_content_type(response)

    @staticmethod
    async def handle_status_code(response: httpx.Response) -> None:
        await handle_status_code(response)

    # -----------------------------------------------------------------
    # Dispatch
    # -----------------------------------------------------------------
    def _build_request(self, method: str, url: str, headers: Any, body: Any) -> httpx.Request:
        outgoing = to_httpx_headers(headers)
        extra = request_content(body, outgoing)
        log_http_request(method, url, headers=outgoing, body_type=type(body).__name__ if body is not None else None)
        return self._client.build_request(method, url, headers=outgoing, **extra)

    async def request(self, method: str, endpoint: str, body: Any = None, headers: Any = None) -> httpx.Response:
        """Send a request and decode its body.

        :return: the ``httpx.Response`` with the decoded body in
            ``response.data``, or the bare response for a 204.
        :raises Exception: whatever ``httpx`` or the decoder raised,
            after logging it at ERROR level.
        """
        method = method.upper()
        url = f"{self._base_url}{endpoint}"
        if headers is None:
            headers = {}
        headers = handle_headers(headers, body)
        payload = handle_body(method, body)
        try:
            logger.info(f"Starting {method} request to {url}")
            response = await self._client.send(self._build_request(method, url, headers, payload))
            if response.status_code == 204:
                return response
            response.data = await handle_content_type(response)  # type: ignore[attr-defined]
            return response
        except Exception as exc:
            logger.error(f"Failed {method} request to {url}: {exc}")
            raise

    async def head_request(self, method: str, endpoint: str, headers: Any = None) -> httpx.Response:
        """Send a body-less request, log its status and return it undecoded."""
        method = method.upper()
        url = f"{self._base_url}{endpoint}"
        if headers is None:
            headers = {}
        headers = handle_headers(headers, None)
        try:
            logger.info(f"Starting {method} request to {url}")
            response = await self._client.send(self._build_request(method, url, headers, None))
            await handle_status_code(response)
            return response
        except Exception as exc:
            logger.error(f"Failed {method} request to {url}: {exc}")
            raise
