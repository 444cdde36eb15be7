from __future__ import annotations
import logging
from pathlib import Path
from .state import LoadedData
from wlt.data import load_stations, load_readings

log = logging.getLogger(__name__)


def load_all(stations_path: str | Path, readings_path: str | Path) -> LoadedData:
    stations_df = load_stations(stations_path)
    readings_df = load_readings(readings_path)
    if not stations_df.empty and not readings_df.empty:
        unknown = set(readings_df["station_id"]) - set(stations_df["id"])
        if unknown:
            log.info("Readings reference %d station ids without metadata", len(unknown))
    return LoadedData(stations_df=stations_df, readings_df=readings_df)

__all__ = ["load_all"]
