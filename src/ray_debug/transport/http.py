"""
HTTP transport to the local Ray server. One JSON POST per send.

The response body and status are never interpreted; the status code is
returned only so callers and tests can observe it.
"""

from typing import Any, Optional

import httpx

from ray_debug.errors import TransportError

DEFAULT_URL = "http://localhost:23517/"
DEFAULT_TIMEOUT = 5.0

_HEADERS = {"User-Agent": "ray-debug/0.1.0", "Content-Type": "application/json"}


class HttpClient:
    def __init__(
        self,
        url: str = DEFAULT_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._url = url
        self._client = httpx.Client(headers=_HEADERS, timeout=timeout, transport=transport)

    @property
    def url(self) -> str:
        return self._url

    def post(self, body: dict[str, Any]) -> int:
        try:
            resp = self._client.post(self._url, json=body)
        except httpx.HTTPError as e:
            raise TransportError(f"POST {self._url} failed: {e}", details={"url": self._url}) from e
        return resp.status_code

    def close(self) -> None:
        self._client.close()


class AsyncHttpClient:
    """Async counterpart. A fresh ``httpx.AsyncClient`` per send keeps it loop-agnostic."""

    def __init__(
        self,
        url: str = DEFAULT_URL,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._url = url
        self._timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def post(self, body: dict[str, Any]) -> int:
        try:
            async with httpx.AsyncClient(
                headers=_HEADERS, timeout=self._timeout, transport=self._transport,
            ) as client:
                resp = await client.post(self._url, json=body)
        except httpx.HTTPError as e:
            raise TransportError(f"POST {self._url} failed: {e}", details={"url": self._url}) from e
        return resp.status_code
