from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import pandas as pd

__all__ = [
    "LoadedData",
    "Selection",
]

@dataclass
class LoadedData:
    stations_df: pd.DataFrame
    readings_df: pd.DataFrame

@dataclass
class Selection:
    station_id: Optional[str] = None
