from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from candlelight.paths import default_config_path
from candlelight.system.backlight import DEFAULT_SYSFS_DIR

logger = logging.getLogger(__name__)

MIN_BRIGHTNESS = 1
MAX_BRIGHTNESS = 7500
PREVIEW_SECONDS = 3.0


class ConfigError(ValueError):
    pass


def _section(cfg: dict[str, Any], key: str) -> dict[str, Any]:
    section = cfg.get(key)
    if section is None:
        section = cfg[key] = {}
    if not isinstance(section, dict):
        raise ConfigError(f"{key} must be a mapping")
    return section


def _require_int(section: dict[str, Any], name: str) -> int:
    if name not in section:
        raise ConfigError(f"Missing required config key: backlight.{name}")
    value = section[name]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"backlight.{name} must be an integer: {value!r}")
    return value


def defaults() -> dict[str, Any]:
    return {
        "backlight": {
            "sysfs_dir": str(DEFAULT_SYSFS_DIR),
            "min_brightness": MIN_BRIGHTNESS,
            "max_brightness": MAX_BRIGHTNESS,
        },
        "preview": {"seconds": PREVIEW_SECONDS},
    }


def load(path: str | Path | None = None) -> dict[str, Any]:
    """Load, normalize and validate a config file.

    Without an explicit path the per-user file is used when it exists,
    otherwise the built-in defaults are returned.
    """

    if path is None:
        p = default_config_path()
        if not p.is_file():
            return defaults()
    else:
        p = Path(path)

    logger.debug("loading config from %s", p)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config {p}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Top-level config must be a mapping")
    normalize(data)
    validate(data)
    return data


def normalize(cfg: dict[str, Any]) -> None:
    backlight = _section(cfg, "backlight")
    sysfs_dir = backlight.get("sysfs_dir")
    if sysfs_dir is None or not str(sysfs_dir).strip():
        backlight["sysfs_dir"] = str(DEFAULT_SYSFS_DIR)
    else:
        backlight["sysfs_dir"] = str(sysfs_dir).strip()
    backlight.setdefault("min_brightness", MIN_BRIGHTNESS)
    backlight.setdefault("max_brightness", MAX_BRIGHTNESS)

    preview = _section(cfg, "preview")
    preview.setdefault("seconds", PREVIEW_SECONDS)


def validate(cfg: dict[str, Any]) -> None:
    backlight = _section(cfg, "backlight")
    lo = _require_int(backlight, "min_brightness")
    hi = _require_int(backlight, "max_brightness")
    if lo < 1:
        raise ConfigError("backlight.min_brightness must be >= 1")
    if hi < lo:
        raise ConfigError("backlight.max_brightness must be >= backlight.min_brightness")

    preview = _section(cfg, "preview")
    seconds = preview.get("seconds")
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise ConfigError(f"preview.seconds must be a number: {seconds!r}")
    if seconds < 0:
        raise ConfigError("preview.seconds must be >= 0")
