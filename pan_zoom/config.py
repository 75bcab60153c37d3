"""Configuration helpers for pan/zoom settings persistence."""
from __future__ import annotations

from configparser import ConfigParser, Error
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
import sys
from typing import Optional

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "pan_zoom.ini"
_ZOOM_SECTION = "zoom"
_DIAGNOSTICS_SECTION = "diagnostics"
_LOGGING_SECTION = "logging"
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

ZOOM_SPEED_FACTOR = 0.05


@dataclass(frozen=True)
class ZoomSettings:
    # percent of zoom per unit of wheel delta
    speed_factor: float = ZOOM_SPEED_FACTOR
    verify_invariants: bool = False
    log_level: str = "INFO"


def _config_dir(main_script_path: Optional[Path]) -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).parent
    if main_script_path is not None:
        return main_script_path.resolve().parent
    main_module = sys.modules.get("__main__")
    if main_module and getattr(main_module, "__file__", None):
        return Path(main_module.__file__).resolve().parent
    return Path.cwd()


def config_path(main_script_path: Optional[Path]) -> Path:
    return _config_dir(main_script_path) / CONFIG_FILENAME


def _read_parser(ini_path: Path) -> Optional[ConfigParser]:
    parser = ConfigParser()
    try:
        with ini_path.open("r", encoding="utf-8") as handle:
            parser.read_file(handle)
    except (OSError, Error):
        logger.warning("Could not read settings from %s", ini_path, exc_info=True)
        return None
    return parser


def _parse_bool(value: str) -> Optional[bool]:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return None


def load_settings(main_script_path: Optional[Path]) -> ZoomSettings:
    defaults = ZoomSettings()
    ini_path = config_path(main_script_path)
    if not ini_path.exists():
        return defaults
    parser = _read_parser(ini_path)
    if parser is None:
        return defaults

    speed_factor = defaults.speed_factor
    raw_speed = parser.get(_ZOOM_SECTION, "speed_factor", fallback=None)
    if raw_speed is not None:
        try:
            parsed_speed = float(raw_speed)
        except ValueError:
            parsed_speed = None
        if parsed_speed is None or not (math.isfinite(parsed_speed) and parsed_speed > 0.0):
            logger.warning("Ignoring invalid zoom speed factor %r", raw_speed)
        else:
            speed_factor = parsed_speed

    verify_invariants = defaults.verify_invariants
    raw_verify = parser.get(_DIAGNOSTICS_SECTION, "verify_invariants", fallback=None)
    if raw_verify is not None:
        parsed = _parse_bool(raw_verify)
        if parsed is None:
            logger.warning("Ignoring invalid verify_invariants value %r", raw_verify)
        else:
            verify_invariants = parsed

    log_level = parser.get(_LOGGING_SECTION, "level", fallback=defaults.log_level).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning("Ignoring unknown log level %r", log_level)
        log_level = defaults.log_level

    return ZoomSettings(
        speed_factor=speed_factor,
        verify_invariants=verify_invariants,
        log_level=log_level,
    )


def save_settings(settings: ZoomSettings, main_script_path: Optional[Path]) -> None:
    config = ConfigParser()
    ini_path = config_path(main_script_path)
    if ini_path.exists():
        existing = _read_parser(ini_path)
        if existing is None:
            return
        config = existing
    config[_ZOOM_SECTION] = {"speed_factor": repr(settings.speed_factor)}
    config[_DIAGNOSTICS_SECTION] = {
        "verify_invariants": "true" if settings.verify_invariants else "false"
    }
    config[_LOGGING_SECTION] = {"level": settings.log_level}
    try:
        with ini_path.open("w", encoding="utf-8") as handle:
            config.write(handle)
            handle.flush()
            os.fsync(handle.fileno())
    except OSError:
        logger.warning("Could not write settings to %s", ini_path, exc_info=True)
