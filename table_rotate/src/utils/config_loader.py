"""Loads YAML/JSON configuration files and global rotation settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .logger import PACKAGE_LOGGER, get_logger, set_file_handler


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError(f"Unsupported config format: {path_p.suffix}")


def load_rotate_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the packaged rotation configuration."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "rotate_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


ROTATE_CONFIG: Dict[str, Any] = load_rotate_config()
VERIFY_ROTATION: bool = bool(ROTATE_CONFIG.get("verify_rotation", False))
DEFAULT_DIRECTION: str = str(ROTATE_CONFIG.get("default_direction", "left"))
LOG_FILE: Optional[str] = ROTATE_CONFIG.get("log_file")
LOG_LEVEL: str = str(ROTATE_CONFIG.get("log_level", "INFO")).upper()

# Module loggers under the package propagate here.
package_logger = get_logger(PACKAGE_LOGGER, file_path=LOG_FILE, level=LOG_LEVEL)


def set_verify_rotation(value: bool) -> None:
    """Enable or disable checking in-place rotations against the index formulas."""
    global VERIFY_ROTATION
    VERIFY_ROTATION = value
    ROTATE_CONFIG["verify_rotation"] = value


def set_default_direction(value: str) -> None:
    """Override the direction used when none is given on the command line."""
    global DEFAULT_DIRECTION
    DEFAULT_DIRECTION = value
    ROTATE_CONFIG["default_direction"] = value


def set_log_file(value: Optional[str]) -> None:
    """Override the file that rotation logs are mirrored to."""
    global LOG_FILE
    LOG_FILE = value
    ROTATE_CONFIG["log_file"] = value
    set_file_handler(package_logger, value)


def set_log_level(value: str) -> None:
    """Override the level of the package logger, e.g. ``"DEBUG"``."""
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    ROTATE_CONFIG["log_level"] = LOG_LEVEL
    package_logger.setLevel(LOG_LEVEL)


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "verify_rotation": VERIFY_ROTATION,
        "default_direction": DEFAULT_DIRECTION,
        "log_file": LOG_FILE,
        "log_level": LOG_LEVEL,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
