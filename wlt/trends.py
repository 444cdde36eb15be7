from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Tuple, Union

import numpy as np
import pandas as pd

from .paths import DEFAULT_DATE_FORMAT

log = logging.getLogger(__name__)

PREDICTION_HORIZON = 5


class Observation(NamedTuple):
    x: int
    y: float


class Prediction(NamedTuple):
    x: int
    y: float


class FitResult(NamedTuple):
    slope: float
    intercept: float


def linear_fit(observations: Iterable[Union[Observation, Tuple[float, float]]]) -> FitResult:
    """Ordinary least squares line through (x, y) pairs via the normal equations.

    A zero denominator (n <= 1, or all x equal) is replaced by 1, so the slope
    is then the raw numerator. No observations give slope 0, intercept 0.
    """
    pts = np.asarray([(float(x), float(y)) for x, y in observations], dtype=float)
    n = len(pts)
    if n == 0:
        return FitResult(0.0, 0.0)
    x = pts[:, 0]
    y = pts[:, 1]
    sum_x = float(x.sum())
    sum_y = float(y.sum())
    sum_xy = float((x * y).sum())
    sum_xx = float((x * x).sum())
    denom = n * sum_xx - sum_x * sum_x
    if denom == 0:
        denom = 1.0
    slope = (n * sum_xy - sum_x * sum_y) / denom
    intercept = (sum_y - slope * sum_x) / n
    return FitResult(float(slope), float(intercept))


def predict(fit: FitResult, start_index: int, count: int) -> List[Prediction]:
    """Evaluate the fitted line at start_index, start_index+1, ... (count points)."""
    slope, intercept = fit
    return [Prediction(x, slope * x + intercept) for x in range(start_index, start_index + max(count, 0))]


def build_observations(readings: pd.DataFrame, station_id: str) -> pd.DataFrame:
    """Readings of one station, oldest first, with contiguous 0-based index ``x`` and value ``y``.

    Returns DataFrame with columns: timestamp, x, y.
    """
    cols = ["timestamp", "x", "y"]
    if readings is None or readings.empty or not {"station_id", "timestamp", "water_level_m"}.issubset(readings.columns):
        return pd.DataFrame(columns=cols)
    d = readings[readings["station_id"] == str(station_id)]
    if d.empty:
        return pd.DataFrame(columns=cols)
    d = d.sort_values("timestamp", kind="stable").reset_index(drop=True)
    return pd.DataFrame({
        "timestamp": d["timestamp"],
        "x": np.arange(len(d), dtype=int),
        "y": d["water_level_m"].astype(float),
    })


class TrendStatus(str, Enum):
    NO_STATION = "no_station"
    NO_DATA = "no_data"
    HAS_DATA = "has_data"


@dataclass
class TrendView:
    status: TrendStatus
    station_id: Optional[str] = None
    labels: List[str] = field(default_factory=list)
    historical: List[Optional[float]] = field(default_factory=list)  # None on future slots
    predicted: List[Optional[float]] = field(default_factory=list)  # None on historical slots
    fit: FitResult = FitResult(0.0, 0.0)
    observations: List[Observation] = field(default_factory=list)
    predictions: List[Prediction] = field(default_factory=list)

    @property
    def has_data(self) -> bool:
        return self.status is TrendStatus.HAS_DATA


def build_trend_view(
    readings: pd.DataFrame,
    station_id: Optional[str],
    *,
    horizon: int = PREDICTION_HORIZON,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> TrendView:
    """Derive chart state for the selected station.

    - No selection -> NO_STATION; selection without readings -> NO_DATA.
    - Otherwise fits the observed series and extends it by ``horizon`` points,
      laying both series on one label axis (dates, then "Next 1".."Next N").
    """
    if not station_id:
        return TrendView(status=TrendStatus.NO_STATION)
    obs_df = build_observations(readings, station_id)
    if obs_df.empty:
        log.debug("No readings for station %s", station_id)
        return TrendView(status=TrendStatus.NO_DATA, station_id=station_id)

    observations = [Observation(int(x), float(y)) for x, y in zip(obs_df["x"], obs_df["y"])]
    fit = linear_fit(observations)
    n = len(observations)
    predictions = predict(fit, n, horizon)

    labels = [pd.Timestamp(ts).strftime(date_format) for ts in obs_df["timestamp"]]
    labels += [f"Next {i + 1}" for i in range(len(predictions))]
    historical: List[Optional[float]] = [o.y for o in observations] + [None] * len(predictions)
    predicted: List[Optional[float]] = [None] * n + [p.y for p in predictions]

    log.debug("Station %s: n=%d slope=%.4f intercept=%.4f", station_id, n, fit.slope, fit.intercept)
    return TrendView(
        status=TrendStatus.HAS_DATA,
        station_id=station_id,
        labels=labels,
        historical=historical,
        predicted=predicted,
        fit=fit,
        observations=observations,
        predictions=predictions,
    )


__all__ = [
    "PREDICTION_HORIZON",
    "Observation",
    "Prediction",
    "FitResult",
    "linear_fit",
    "predict",
    "build_observations",
    "TrendStatus",
    "TrendView",
    "build_trend_view",
]
