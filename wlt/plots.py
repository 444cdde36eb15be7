from __future__ import annotations

import plotly.graph_objects as go
from typing import Callable, Optional

from .trends import TrendView

HISTORICAL_COLOR = "#0077cc"
PREDICTED_COLOR = "#ff4757"


def trend_figure(view: TrendView, tr: Optional[Callable[[str], str]] = None) -> go.Figure:
    tr = tr or (lambda k, **_: k)
    fig = go.Figure()
    if not view.has_data:
        return fig
    # x is the slot position; labels may repeat when readings share a date
    slots = list(range(len(view.labels)))
    fig.add_trace(go.Scatter(x=slots, y=view.historical, name=tr("historical_name"),
                             mode="lines+markers", connectgaps=False,
                             line=dict(color=HISTORICAL_COLOR, width=2, shape="spline", smoothing=0.2),
                             marker=dict(size=6)))
    fig.add_trace(go.Scatter(x=slots, y=view.predicted, name=tr("predicted_name"),
                             mode="lines+markers", connectgaps=False,
                             line=dict(color=PREDICTED_COLOR, width=2, dash="dash", shape="spline", smoothing=0.2),
                             marker=dict(size=6)))
    fig.update_layout(title=tr("trend_chart_title"), xaxis_title=tr("date_axis"), yaxis_title=tr("level_axis"),
                      template="plotly_white",
                      xaxis=dict(tickmode="array", tickvals=slots, ticktext=view.labels))
    return fig


__all__ = ["trend_figure", "HISTORICAL_COLOR", "PREDICTED_COLOR"]
