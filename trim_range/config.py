"""Configuration helpers for range selector settings persistence."""
from __future__ import annotations

from configparser import ConfigParser, Error
from dataclasses import dataclass
import logging
import os
from pathlib import Path
import sys
from typing import Optional

from trim_range.model.range_model import LONG_RANGE_THRESHOLD

CONFIG_FILENAME = "trim_range.ini"
_RANGE_SECTION = "range"
_HANDLES_SECTION = "handles"
_INTERACTION_SECTION = "interaction"

logger = logging.getLogger(__name__)


@dataclass
class RangeSeekBarConfig:
    bounds_min: float = 0.0
    bounds_max: float = 60_000.0
    minimum_span: float = 5_000.0
    handle_width: float = 12.5
    padding_left: float = 0.0
    padding_right: float = 0.0
    notify_while_dragging: bool = False
    touch_slop: float = 8.0
    hit_tolerance_scale: float = 2.0
    snap_tolerance_scale: float = 0.5
    edge_snap_fraction: float = 2.0 / 3.0
    long_range_threshold: float = float(LONG_RANGE_THRESHOLD)


_SECTION_KEYS = {
    _RANGE_SECTION: ("bounds_min", "bounds_max", "minimum_span", "long_range_threshold"),
    _HANDLES_SECTION: (
        "handle_width",
        "padding_left",
        "padding_right",
        "hit_tolerance_scale",
        "snap_tolerance_scale",
        "edge_snap_fraction",
    ),
    _INTERACTION_SECTION: ("notify_while_dragging", "touch_slop"),
}
_BOOL_KEYS = {"notify_while_dragging"}


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


def _read_parser(ini_path: Path) -> ConfigParser | None:
    parser = ConfigParser()
    try:
        with ini_path.open("r", encoding="utf-8") as handle:
            parser.read_file(handle)
    except (OSError, Error):
        logger.warning("Could not read range settings from %s", ini_path)
        return None
    return parser


def load_config(main_script_path: Optional[Path]) -> RangeSeekBarConfig:
    config = RangeSeekBarConfig()
    ini_path = config_path(main_script_path)
    if not ini_path.exists():
        return config
    parser = _read_parser(ini_path)
    if parser is None:
        return config
    for section, keys in _SECTION_KEYS.items():
        if not parser.has_section(section):
            continue
        for key in keys:
            if not parser.has_option(section, key):
                continue
            try:
                if key in _BOOL_KEYS:
                    value = parser.getboolean(section, key)
                else:
                    value = parser.getfloat(section, key)
            except ValueError:
                logger.warning(
                    "Ignoring malformed setting [%s] %s=%r",
                    section,
                    key,
                    parser.get(section, key, fallback=""),
                )
                continue
            setattr(config, key, value)
    logger.info("Loaded range settings from %s", ini_path)
    return config


def save_config(config: RangeSeekBarConfig, main_script_path: Optional[Path]) -> None:
    parser = ConfigParser()
    ini_path = config_path(main_script_path)
    if ini_path.exists():
        existing = _read_parser(ini_path)
        if existing is None:
            return
        parser = existing
    for section, keys in _SECTION_KEYS.items():
        parser[section] = {key: str(getattr(config, key)) for key in keys}
    try:
        with ini_path.open("w", encoding="utf-8") as handle:
            parser.write(handle)
            handle.flush()
            os.fsync(handle.fileno())
    except OSError:
        logger.warning("Could not write range settings to %s", ini_path)
        return
    logger.info("Saved range settings to %s", ini_path)
