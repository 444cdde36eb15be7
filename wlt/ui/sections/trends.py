from __future__ import annotations
import streamlit as st
from wlt.trends import build_trend_view, TrendStatus
from wlt.plots import trend_figure
from wlt.i18n import Translator, DEFAULT_LANG
from wlt.ui.state import LoadedData, Selection

__all__ = ["render_trend_analysis"]


def render_trend_analysis(ld: LoadedData, selection: Selection, *, date_format: str, lang: str = DEFAULT_LANG):
    tr = Translator(lang)
    view = build_trend_view(ld.readings_df, selection.station_id, date_format=date_format)
    if view.status is TrendStatus.NO_STATION:
        st.info(tr("no_station"))
        return view
    if view.status is TrendStatus.NO_DATA:
        st.info(tr("no_data"))
        return view

    st.plotly_chart(trend_figure(view, tr), config={"displaylogo": False})
    st.caption(tr("legend_note"))
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric(tr("fit_slope"), f"{view.fit.slope:.4f}")
    with col2:
        st.metric(tr("fit_intercept"), f"{view.fit.intercept:.3f}")
    with col3:
        st.metric(tr("fit_readings"), len(view.observations))
    with col4:
        st.metric(tr("next_level"), f"{view.predictions[0].y:.3f}" if view.predictions else "n/a")
    return view
