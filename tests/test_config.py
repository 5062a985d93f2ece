import json

import pytest

from ray_debug.config import RayConfig, load_config, save_config
from ray_debug.dispatch import DispatchMode
from ray_debug.errors import ConfigError


def test_defaults():
    cfg = load_config()
    assert cfg.host == "localhost"
    assert cfg.port == 23517
    assert cfg.mode is DispatchMode.BLOCKING
    assert cfg.enabled is True
    assert cfg.url == "http://localhost:23517/"


def test_file_values(isolated_config):
    isolated_config.write_text(json.dumps({"port": 9000, "mode": "thread"}))
    cfg = load_config()
    assert cfg.port == 9000
    assert cfg.mode is DispatchMode.THREAD


def test_env_overrides_file(isolated_config, monkeypatch):
    isolated_config.write_text(json.dumps({"port": 9000}))
    monkeypatch.setenv("RAY_PORT", "9100")
    monkeypatch.setenv("RAY_ENABLED", "false")
    monkeypatch.setenv("RAY_DISPATCH_MODE", "async")
    cfg = load_config()
    assert cfg.port == 9100
    assert cfg.enabled is False
    assert cfg.mode is DispatchMode.ASYNC


def test_overrides_win_and_none_is_ignored():
    cfg = load_config(environ={"RAY_HOST": "ray.local"}, host="127.0.0.1", port=None)
    assert cfg.host == "127.0.0.1"
    assert cfg.port == 23517


def test_malformed_file_is_ignored(isolated_config):
    isolated_config.write_text("{not json")
    assert load_config().port == 23517
    isolated_config.write_text("[1, 2]")
    assert load_config().port == 23517


def test_invalid_values_raise_config_error():
    with pytest.raises(ConfigError) as exc_info:
        load_config(environ={"RAY_PORT": "not-a-port"})
    assert exc_info.value.code == "config_error"
    with pytest.raises(ConfigError):
        load_config(environ={"RAY_DISPATCH_MODE": "carrier-pigeon"})


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "config.json"
    save_config(RayConfig(host="10.0.0.2", mode=DispatchMode.THREAD), path)
    cfg = load_config(path=path, environ={})
    assert cfg.host == "10.0.0.2"
    assert cfg.mode is DispatchMode.THREAD
