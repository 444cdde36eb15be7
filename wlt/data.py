from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import pandas as pd

log = logging.getLogger(__name__)

STATION_COLUMNS = ["id", "name", "district", "state"]
READING_COLUMNS = ["station_id", "timestamp", "water_level_m"]


def _empty(columns: list[str]) -> pd.DataFrame:
    return pd.DataFrame({c: pd.Series(dtype=object) for c in columns})


def _read_json_records(path: str | Path) -> pd.DataFrame:
    """Read a JSON array of objects; missing or unreadable files give an empty frame."""
    p = Path(path)
    if not p.exists():
        log.warning("Data file not found: %s", p)
        return pd.DataFrame()
    try:
        df = pd.read_json(p, orient="records", dtype=False, convert_dates=False)
    except (OSError, ValueError, TypeError) as exc:
        log.warning("Skipping unreadable JSON %s: %s", p, exc)
        return pd.DataFrame()
    return df


def _normalize_id(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, float):
        if pd.isna(value):
            return None
        if value.is_integer():
            value = int(value)
    text = str(value).strip()
    return text or None


def load_stations(path: str | Path) -> pd.DataFrame:
    """Load station metadata as DataFrame[id, name, district, state].

    Ids are normalised to strings; rows without an id are dropped and duplicate
    ids keep their first occurrence.
    """
    df = _read_json_records(path)
    if df.empty:
        return _empty(STATION_COLUMNS)
    if "id" not in df.columns:
        log.warning("Stations file %s has no 'id' column", path)
        return _empty(STATION_COLUMNS)
    out = df.reindex(columns=STATION_COLUMNS).copy()
    out["id"] = out["id"].map(_normalize_id)
    out = out.dropna(subset=["id"])
    for c in ("name", "district", "state"):
        out[c] = out[c].map(lambda v: "" if v is None or (isinstance(v, float) and pd.isna(v)) else str(v))
    out = out.drop_duplicates(subset="id", keep="first").reset_index(drop=True)
    log.info("Loaded %d stations from %s", len(out), path)
    return out


def load_readings(path: str | Path) -> pd.DataFrame:
    """Load water-level readings as DataFrame[station_id, timestamp, water_level_m].

    Timestamps are parsed to UTC datetimes and levels to floats; rows where
    either cannot be parsed are dropped.
    """
    df = _read_json_records(path)
    if df.empty:
        return _empty(READING_COLUMNS)
    missing = [c for c in READING_COLUMNS if c not in df.columns]
    if missing:
        log.warning("Readings file %s missing columns: %s", path, missing)
        return _empty(READING_COLUMNS)
    out = df[READING_COLUMNS].copy()
    out["station_id"] = out["station_id"].map(_normalize_id)
    try:
        out["timestamp"] = pd.to_datetime(out["timestamp"], errors="coerce", utc=True, format="mixed")
    except (TypeError, ValueError) as exc:
        log.warning("Unparseable timestamps in %s: %s", path, exc)
        return _empty(READING_COLUMNS)
    out["water_level_m"] = pd.to_numeric(out["water_level_m"], errors="coerce").astype(float)
    before_n = len(out)
    out = out.dropna(subset=READING_COLUMNS).reset_index(drop=True)
    dropped = before_n - len(out)
    if dropped:
        log.info("Dropped %d malformed readings from %s", dropped, path)
    log.info("Loaded %d readings from %s", len(out), path)
    return out


def station_label(station: Mapping[str, Any]) -> str:
    """Select-box label: ``name (district, state)``."""
    return f"{station.get('name', '')} ({station.get('district', '')}, {station.get('state', '')})"


__all__ = [
    "STATION_COLUMNS",
    "READING_COLUMNS",
    "load_stations",
    "load_readings",
    "station_label",
]
