"""
Ray error types for transport, serialization and configuration failures.
"""

from typing import Any, Optional


class RayError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class TransportError(RayError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("transport_error", message, details)


class SerializationError(RayError):
    def __init__(self, message: str):
        super().__init__("serialization_error", message)


class ConfigError(RayError):
    def __init__(self, message: str, code: str = "config_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)
