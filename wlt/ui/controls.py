from __future__ import annotations
import pandas as pd
import streamlit as st
from .state import Selection
from wlt.data import station_label
from wlt.i18n import Translator, DEFAULT_LANG

__all__ = ["build_station_selector"]


def build_station_selector(stations_df: pd.DataFrame, lang: str = DEFAULT_LANG) -> Selection:
    tr = Translator(lang)
    options: list[str | None] = [None]
    labels: dict[str, str] = {}
    if stations_df is not None and not stations_df.empty:
        for _, row in stations_df.iterrows():
            options.append(row["id"])
            labels[row["id"]] = station_label(row)
    station_id = st.selectbox(
        tr("select_station"),
        options,
        index=0,
        format_func=lambda sid: tr("select_placeholder") if sid is None else labels.get(sid, sid),
        key="station_select",
    )
    return Selection(station_id=station_id)
