"""Basic unit tests for the ray-debug package."""

from ray_debug import (
    Ray,
    ray,
    RayError,
    TransportError,
    SerializationError,
    ConfigError,
    DispatchMode,
    __version__,
)


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert Ray is not None
    assert callable(ray)


def test_error_hierarchy():
    assert issubclass(TransportError, RayError)
    assert issubclass(SerializationError, RayError)
    assert issubclass(ConfigError, RayError)


def test_error_attributes():
    err = RayError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    transport = TransportError("refused", details={"url": "http://localhost:23517/"})
    assert transport.code == "transport_error"
    assert transport.details == {"url": "http://localhost:23517/"}

    assert SerializationError("bad").code == "serialization_error"
    assert ConfigError("bad port").code == "config_error"


def test_dispatch_mode_values():
    assert DispatchMode("blocking") is DispatchMode.BLOCKING
    assert DispatchMode.THREAD == "thread"
    assert DispatchMode.ASYNC == "async"
