"""Path and environment helpers.

Environment variable overrides:
  DATA_ROOT          base directory holding data/ (default: repo root)
  WLT_STATIONS_JSON  station metadata file
  WLT_READINGS_JSON  water-level readings file
  WLT_DATE_FORMAT    strftime format for historical chart labels
  WLT_LOG_LEVEL      logging level name for the app
"""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_DATE_FORMAT = "%m/%d/%Y"
DEFAULT_LOG_LEVEL = "INFO"


def project_root() -> Path:
    # Assume this file is at <root>/wlt/paths.py
    return Path(__file__).resolve().parent.parent


def data_root() -> Path:
    return Path(os.environ.get("DATA_ROOT", str(project_root())))


def stations_path() -> Path:
    override = os.environ.get("WLT_STATIONS_JSON")
    if override:
        return Path(override)
    return data_root() / "data" / "stations.json"


def readings_path() -> Path:
    override = os.environ.get("WLT_READINGS_JSON")
    if override:
        return Path(override)
    return data_root() / "data" / "waterlevels.json"


def date_format() -> str:
    return os.environ.get("WLT_DATE_FORMAT") or DEFAULT_DATE_FORMAT


def log_level() -> str:
    return (os.environ.get("WLT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


__all__ = [
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_LOG_LEVEL",
    "project_root",
    "data_root",
    "stations_path",
    "readings_path",
    "date_format",
    "log_level",
]
