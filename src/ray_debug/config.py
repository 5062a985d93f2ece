"""
Client configuration: defaults, then ``~/.ray/config.json``, then ``RAY_*`` environment.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from ray_debug.dispatch import DispatchMode
from ray_debug.errors import ConfigError
from ray_debug.transport.http import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

CONFIG_FILE = Path.home() / ".ray" / "config.json"

ENV_VARS = {
    "host": "RAY_HOST",
    "port": "RAY_PORT",
    "mode": "RAY_DISPATCH_MODE",
    "timeout": "RAY_TIMEOUT",
    "enabled": "RAY_ENABLED",
}


class RayConfig(BaseModel):
    host: str = "localhost"
    port: int = 23517
    mode: DispatchMode = DispatchMode.BLOCKING
    timeout: Optional[float] = DEFAULT_TIMEOUT
    enabled: bool = True

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}/"


def _read_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError:
        return {}
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: expected a JSON object", path)
        return {}
    return data


def _read_env(environ: Optional[dict[str, str]] = None) -> dict[str, Any]:
    env = os.environ if environ is None else environ
    return {field: env[name] for field, name in ENV_VARS.items() if env.get(name)}


def load_config(
    path: Optional[Path] = None,
    environ: Optional[dict[str, str]] = None,
    **overrides: Any,
) -> RayConfig:
    """Build a RayConfig. Keyword overrides win over env, env over file."""
    merged: dict[str, Any] = {}
    merged.update(_read_file(path or CONFIG_FILE))
    merged.update(_read_env(environ))
    merged.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return RayConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid Ray configuration: {e}", details={"errors": e.errors()}) from e


def save_config(config: RayConfig, path: Optional[Path] = None) -> Path:
    target = path or CONFIG_FILE
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(config.model_dump_json(indent=2))
    return target
