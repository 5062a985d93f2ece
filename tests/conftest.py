import json

import httpx
import pytest

from ray_debug.config import RayConfig
from ray_debug.dispatch import Dispatcher, DispatchMode


class Recorder:
    """Collects every request body the mock Ray server receives."""

    def __init__(self, status_code: int = 200):
        self.bodies: list[dict] = []
        self.urls: list[str] = []
        self.status_code = status_code

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.urls.append(str(request.url))
        self.bodies.append(json.loads(request.content))
        return httpx.Response(self.status_code, text="ok")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setattr("ray_debug.config.CONFIG_FILE", tmp_path / "config.json")
    monkeypatch.setattr("ray_debug.dispatch._shared", {})
    monkeypatch.setattr("ray_debug.client._reported_config_errors", set())
    for name in ("RAY_HOST", "RAY_PORT", "RAY_DISPATCH_MODE", "RAY_TIMEOUT", "RAY_ENABLED"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path / "config.json"


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def config() -> RayConfig:
    return RayConfig()


@pytest.fixture
def dispatcher(recorder, config) -> Dispatcher:
    d = Dispatcher(config.url, mode=DispatchMode.BLOCKING, transport=httpx.MockTransport(recorder))
    yield d
    d.close()
