"""Water Level Trend (wlt) dashboard package.

Modules:
  data: loading station metadata and water-level readings (static JSON)
  trends: least-squares trend fit, extrapolation and chart series assembly
  plots: interactive Plotly figures
  paths: data locations and environment overrides
  i18n: UI string tables
"""

from . import data, trends, plots, paths, i18n  # noqa: F401

__all__ = [
    "data",
    "trends",
    "plots",
    "paths",
    "i18n",
]
