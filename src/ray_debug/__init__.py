"""
ray-debug — send debug events to a local Ray server.

Fire-and-forget HTTP client: describe values, text, colors or UI signals and
they show up in the inspection app listening on localhost:23517.
"""

from ray_debug.client import Ray, ray
from ray_debug.config import RayConfig, load_config
from ray_debug.dispatch import Dispatcher, DispatchMode
from ray_debug.errors import RayError, TransportError, SerializationError, ConfigError
from ray_debug.models.envelope import Origin, PayloadEntry, RayRequest
from ray_debug.models.payloads import (
    ClearAllPayload,
    ColorPayload,
    ConfettiPayload,
    LogPayload,
    Payload,
    TextPayload,
)
from ray_debug.render import Renderable, render

__version__ = "0.1.0"
__all__ = [
    "Ray",
    "ray",
    "RayConfig",
    "load_config",
    "Dispatcher",
    "DispatchMode",
    "RayError",
    "TransportError",
    "SerializationError",
    "ConfigError",
    "Origin",
    "PayloadEntry",
    "RayRequest",
    "Payload",
    "LogPayload",
    "TextPayload",
    "ColorPayload",
    "ConfettiPayload",
    "ClearAllPayload",
    "Renderable",
    "render",
]
