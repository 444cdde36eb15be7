"""
Pytest configuration and shared fixtures.
"""

import json

import pandas as pd
import pytest


STATIONS = [
    {"id": "A", "name": "Alpha Weir", "district": "North", "state": "Kerala"},
    {"id": "B", "name": "Bravo Lock", "district": "South", "state": "Goa"},
]

# Station A: 10, 20, 30 at t1 < t2 < t3, deliberately out of order on disk.
READINGS = [
    {"station_id": "A", "timestamp": "2024-03-01T00:00:00Z", "water_level_m": 30},
    {"station_id": "A", "timestamp": "2024-01-01T00:00:00Z", "water_level_m": 10},
    {"station_id": "A", "timestamp": "2024-02-01T00:00:00Z", "water_level_m": 20},
]


@pytest.fixture
def write_json(tmp_path):
    """Write a payload to tmp_path/<name> and return the path."""
    def _write(name, payload):
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def stations_file(write_json):
    return write_json("stations.json", STATIONS)


@pytest.fixture
def readings_file(write_json):
    return write_json("waterlevels.json", READINGS)


@pytest.fixture
def readings_df():
    df = pd.DataFrame(READINGS)
    df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True)
    df["water_level_m"] = df["water_level_m"].astype(float)
    return df
