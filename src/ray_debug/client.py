"""
The fluent Ray debug client.

Every call appends one entry to the session's request and sends the whole
request, so the n-th call on an instance transmits all n entries so far.
"""

import logging
from collections.abc import Sequence
from typing import Any, Callable, Optional

from ray_debug.config import RayConfig, load_config
from ray_debug.dispatch import Dispatcher
from ray_debug.errors import ConfigError
from ray_debug.models.envelope import Origin, RayRequest
from ray_debug.models.payloads import (
    ClearAllPayload,
    ColorPayload,
    ConfettiPayload,
    LogPayload,
    Payload,
    TextPayload,
)
from ray_debug.render import render

logger = logging.getLogger(__name__)


class Ray:
    def __init__(self, config: Optional[RayConfig] = None, dispatcher: Optional[Dispatcher] = None):
        self._config = config or _default_config()
        self._dispatcher = dispatcher or Dispatcher.shared(self._config)
        self._request = RayRequest()

    @property
    def uuid(self) -> str:
        return self._request.uuid

    @property
    def request(self) -> RayRequest:
        return self._request

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    def log(self, values: Sequence[str]) -> "Ray":
        return self._push("log", LogPayload(values=list(values)))

    def text(self, content: str) -> "Ray":
        return self._push("custom", TextPayload(content=content))

    def color(self, color: str) -> "Ray":
        return self._push("color", ColorPayload(color=color))

    def confetti(self) -> "Ray":
        return self._push("confetti", ConfettiPayload())

    def clear_all(self) -> "Ray":
        return self._push("clear_all", ClearAllPayload())

    def _push(self, tag: str, content: Payload) -> "Ray":
        self._request.append(tag, Origin(), content)
        if self._config.enabled:
            self._dispatcher.dispatch(self._request)
        return self


_reported_config_errors: set[str] = set()


def _default_config() -> RayConfig:
    # A bad RAY_* value must not break the instrumented application.
    try:
        return load_config()
    except ConfigError as e:
        if str(e) not in _reported_config_errors:
            _reported_config_errors.add(str(e))
            logger.warning("Ignoring invalid Ray configuration, using defaults: %s", e)
        return RayConfig()


def ray(*values: Any, renderer: Callable[[Any], str] = render, **kwargs: Any) -> Ray:
    """Convenience: ``ray("x", obj)`` logs the rendered values; ``ray()`` just opens a session."""
    client = Ray(**kwargs)
    if values:
        client.log([renderer(v) for v in values])
    return client
