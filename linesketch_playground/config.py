"""Editor settings loaded from an optional JSON file and the environment."""
from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Dict, Mapping, Optional

from linesketch_playground.segment import CAPTURE_RADIUS, PROXIMITY_TOLERANCE

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "linesketch_config.json"
ENV_OVERRIDES = {
    "proximity": "LINESKETCH_PROXIMITY",
    "capture_radius": "LINESKETCH_CAPTURE_RADIUS",
}
LOG_LEVEL_ENV = "LINESKETCH_LOG_LEVEL"


@dataclass(frozen=True)
class EditorConfig:
    """Hit-test thresholds, in surface units."""

    proximity: float = PROXIMITY_TOLERANCE
    capture_radius: float = CAPTURE_RADIUS

    def __post_init__(self) -> None:
        for name in ("proximity", "capture_radius"):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be a positive finite number, got {value!r}")

    def asdict(self) -> Dict[str, float]:
        return asdict(self)


def default_config_path() -> Path:
    return Path(__file__).with_name(CONFIG_FILENAME)


def _apply(config: EditorConfig, key: str, raw: object, source: str) -> EditorConfig:
    try:
        return replace(config, **{key: float(raw)})
    except (TypeError, ValueError) as exc:
        logger.warning("Ignoring %s from %s: %s", key, source, exc)
        return config


def load_config(path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> EditorConfig:
    """Build an :class:`EditorConfig` from defaults, a JSON file and env vars.

    A missing file is not an error. A file that cannot be read or parsed, and
    individual values that are not positive finite numbers, are logged and
    skipped.
    """
    config = EditorConfig()
    config_path = default_config_path() if path is None else Path(path)
    if config_path.exists():
        try:
            with config_path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read %s: %s", config_path, exc)
            data = {}
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object", config_path)
            data = {}
        for key in ENV_OVERRIDES:
            if key in data:
                config = _apply(config, key, data[key], str(config_path))

    environ = os.environ if env is None else env
    for key, var in ENV_OVERRIDES.items():
        raw = environ.get(var)
        if raw is not None and raw.strip():
            config = _apply(config, key, raw, var)

    logger.debug("Editor config: %s", config.asdict())
    return config


def log_level_from_env(env: Optional[Mapping[str, str]] = None, default: int = logging.INFO) -> int:
    environ = os.environ if env is None else env
    name = environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


__all__ = [
    "EditorConfig",
    "CONFIG_FILENAME",
    "default_config_path",
    "load_config",
    "log_level_from_env",
]
