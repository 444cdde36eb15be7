"""
Tests for the trend chart and UI string tables.
"""

from wlt.i18n import Translator
from wlt.plots import HISTORICAL_COLOR, PREDICTED_COLOR, trend_figure
from wlt.trends import build_trend_view


def test_trend_figure_has_two_series(readings_df):
    fig = trend_figure(build_trend_view(readings_df, "A"), Translator("en"))
    assert [t.name for t in fig.data] == ["Historical Water Level", "Predicted Trend"]
    hist, pred = fig.data
    assert hist.line.color == HISTORICAL_COLOR
    assert pred.line.color == PREDICTED_COLOR
    assert pred.line.dash == "dash"
    assert list(hist.x) == list(pred.x)
    assert list(hist.y)[3:] == [None] * 5
    assert list(pred.y)[:3] == [None] * 3


def test_trend_figure_empty_without_data(readings_df):
    assert len(trend_figure(build_trend_view(readings_df, "B")).data) == 0


def test_translator_fallbacks():
    assert Translator("ru")("app_title") != Translator("en")("app_title")
    assert Translator("xx").lang == "en"
    assert Translator("en")("unknown_key") == "unknown_key"
