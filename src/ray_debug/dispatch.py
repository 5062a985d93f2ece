"""
Dispatcher: serializes a request and sends it to the Ray server, fire-and-forget.

Three modes share one contract: a single send attempt, no return value, no
error ever reaching the caller. Background modes capture a deep copy of the
request at call time because the caller keeps appending to it.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from enum import Enum
from typing import TYPE_CHECKING, Optional

import httpx

from ray_debug.errors import RayError
from ray_debug.models.envelope import RayRequest
from ray_debug.transport.http import DEFAULT_TIMEOUT, DEFAULT_URL, AsyncHttpClient, HttpClient

if TYPE_CHECKING:
    from ray_debug.config import RayConfig

logger = logging.getLogger(__name__)

_shared: dict[tuple, "Dispatcher"] = {}
_shared_lock = threading.Lock()


class DispatchMode(str, Enum):
    BLOCKING = "blocking"
    THREAD = "thread"
    ASYNC = "async"


class Dispatcher:
    def __init__(
        self,
        url: str = DEFAULT_URL,
        mode: DispatchMode = DispatchMode.BLOCKING,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._mode = DispatchMode(mode)
        self._url = url
        self._timeout = timeout
        self._transport = transport
        # Pooled sync client, opened on first blocking or threaded send.
        self._http: Optional[HttpClient] = None
        self._async_http = AsyncHttpClient(url, timeout=timeout, transport=async_transport)
        self._threads: list[threading.Thread] = []
        self._tasks: set[asyncio.Task[None]] = set()
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: RayConfig) -> Dispatcher:
        return cls(config.url, mode=config.mode, timeout=config.timeout)

    @classmethod
    def shared(cls, config: RayConfig) -> Dispatcher:
        """Process-wide dispatcher for this url/mode/timeout, reused by every client."""
        key = (config.url, config.mode, config.timeout)
        with _shared_lock:
            dispatcher = _shared.get(key)
            if dispatcher is None:
                dispatcher = _shared[key] = cls.from_config(config)
        return dispatcher

    @property
    def mode(self) -> DispatchMode:
        return self._mode

    @property
    def url(self) -> str:
        return self._url

    def _sync_client(self) -> HttpClient:
        with self._lock:
            if self._http is None:
                self._http = HttpClient(self._url, timeout=self._timeout, transport=self._transport)
            return self._http

    def dispatch(self, request: RayRequest) -> None:
        """Send the full request once. Never raises."""
        try:
            if self._mode is DispatchMode.BLOCKING:
                self._send(request)
            elif self._mode is DispatchMode.ASYNC:
                self._schedule(request.snapshot())
            else:
                self._spawn(request.snapshot())
        except Exception as e:
            logger.debug("Dropping Ray request %s: %s", request.uuid, e)

    def _send(self, request: RayRequest) -> None:
        try:
            status = self._sync_client().post(request.to_json())
        except RayError as e:
            logger.debug("Ray send failed [%s]: %s", e.code, e)
            return
        logger.debug("Ray request %s sent (%d entries, HTTP %d)", request.uuid, len(request.payloads), status)

    async def _send_async(self, request: RayRequest) -> None:
        try:
            status = await self._async_http.post(request.to_json())
        except RayError as e:
            logger.debug("Ray send failed [%s]: %s", e.code, e)
            return
        except Exception as e:
            logger.debug("Ray send failed: %s", e)
            return
        logger.debug("Ray request %s sent (%d entries, HTTP %d)", request.uuid, len(request.payloads), status)

    def _run_in_thread(self, request: RayRequest) -> None:
        try:
            self._send(request)
        except Exception as e:
            logger.debug("Ray send failed: %s", e)

    def _spawn(self, snapshot: RayRequest) -> None:
        self._sync_client()
        thread = threading.Thread(
            target=self._run_in_thread, args=(snapshot,), name="ray-dispatch", daemon=True,
        )
        with self._lock:
            self._threads = [t for t in self._threads if t.is_alive()]
            self._threads.append(thread)
        thread.start()

    def _schedule(self, snapshot: RayRequest) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop in this thread; fall back to a background thread.
            self._spawn(snapshot)
            return
        task = loop.create_task(self._send_async(snapshot))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def wait(self, timeout: Optional[float] = None) -> None:
        """Join in-flight background threads. Outcomes stay unobserved."""
        with self._lock:
            threads = list(self._threads)
        for thread in threads:
            thread.join(timeout)
        with self._lock:
            self._threads = [t for t in self._threads if t.is_alive()]

    async def drain(self) -> None:
        """Await in-flight async sends."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        with self._lock:
            if self._http is not None:
                self._http.close()
                self._http = None
