"""
Smoke tests for the Streamlit widget states.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def app(monkeypatch, stations_file, readings_file):
    monkeypatch.setenv("WLT_STATIONS_JSON", str(stations_file))
    monkeypatch.setenv("WLT_READINGS_JSON", str(readings_file))
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    return at


def _info_texts(at):
    return [el.value for el in at.info]


def test_prompts_for_station(app):
    assert not app.exception
    assert "Select a station to view trend analysis." in _info_texts(app)


def test_station_without_readings(app):
    app.selectbox(key="station_select").select("B").run()
    assert not app.exception
    assert "No water level data available for this station." in _info_texts(app)


def test_station_with_readings(app):
    app.selectbox(key="station_select").select("A").run()
    assert not app.exception
    assert _info_texts(app) == []
    assert "3" in [m.value for m in app.metric]
