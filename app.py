"""Streamlit orchestrator app.

Responsibilities are delegated to modules under `wlt.ui`:

  wlt.ui.data.load_all                       -> loading station metadata & readings
  wlt.ui.controls.build_station_selector     -> station select box
  wlt.ui.sections.trends.render_trend_analysis -> trend fit, projection & chart

Data locations come from `wlt.paths` (DATA_ROOT, WLT_STATIONS_JSON,
WLT_READINGS_JSON environment overrides).

Run: streamlit run app.py
"""
from __future__ import annotations

import logging

import streamlit as st

from wlt import paths
from wlt.i18n import Translator, TRANSLATIONS, DEFAULT_LANG
from wlt.ui.data import load_all
from wlt.ui.controls import build_station_selector
from wlt.ui.sections.trends import render_trend_analysis
from wlt.ui.state import LoadedData

logging.basicConfig(level=getattr(logging, paths.log_level(), logging.INFO))


@st.cache_data(show_spinner=False)
def _cached_load(stations_path: str, readings_path: str) -> LoadedData:
    return load_all(stations_path, readings_path)


st.set_page_config(page_title="Water Level Trends", layout="wide")

# --- Language handling via st.query_params (?lang=en|ru) ---
qp = st.query_params
initial_lang = qp.get("lang", DEFAULT_LANG)
if initial_lang not in TRANSLATIONS:
    initial_lang = DEFAULT_LANG

lang_codes = list(TRANSLATIONS)
lang_display = [TRANSLATIONS[code][f"lang_{code}"] for code in lang_codes]
display_to_code = dict(zip(lang_display, lang_codes))
selected_display = st.sidebar.selectbox(
    TRANSLATIONS[initial_lang]["language_label"], lang_display, index=lang_codes.index(initial_lang)
)
lang = display_to_code[selected_display]
if qp.get("lang", initial_lang) != lang:
    qp["lang"] = lang
tr = Translator(lang)

st.title(tr("app_title"))
st.caption(tr("tagline"))

with st.spinner(tr("loading_data")):
    ld = _cached_load(str(paths.stations_path()), str(paths.readings_path()))

if ld.stations_df.empty:
    st.warning(tr("no_stations_loaded"))

selection = build_station_selector(ld.stations_df, lang=lang)
render_trend_analysis(ld, selection, date_format=paths.date_format(), lang=lang)

st.caption(tr("footer_caption"))
