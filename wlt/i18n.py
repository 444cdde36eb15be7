"""UI string tables.

Usage:
    tr = Translator("ru")
    tr("app_title")
    tr("no_data")

Unknown keys fall back to English, then to the key itself.
"""

from __future__ import annotations

DEFAULT_LANG = "en"

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "lang_en": "English",
        "lang_ru": "Русский",
        "language_label": "Language",
        "app_title": "Water Level Trend Analysis",
        "tagline": "Observed station levels with a simple least-squares projection",
        "loading_data": "Loading station data...",
        "select_station": "Select Station:",
        "select_placeholder": "-- Select --",
        "no_station": "Select a station to view trend analysis.",
        "no_data": "No water level data available for this station.",
        "no_stations_loaded": "No stations available. Check the station data file.",
        "historical_name": "Historical Water Level",
        "predicted_name": "Predicted Trend",
        "trend_chart_title": "Water level: observed and projected",
        "date_axis": "Date",
        "level_axis": "Water level (m)",
        "legend_note": "**Blue**: Observed levels · **Red**: Simple prediction",
        "fit_slope": "Slope (m per reading)",
        "fit_intercept": "Intercept (m)",
        "fit_readings": "Readings",
        "next_level": "Next reading (projected, m)",
        "footer_caption": "Projection is an ordinary least-squares line over reading order, not a hydrological forecast.",
    },
    "ru": {
        "lang_en": "English",
        "lang_ru": "Русский",
        "language_label": "Язык",
        "app_title": "Анализ тренда уровня воды",
        "tagline": "Наблюдаемые уровни по станции и простой прогноз методом наименьших квадратов",
        "loading_data": "Загрузка данных станций...",
        "select_station": "Выберите станцию:",
        "select_placeholder": "-- Выбрать --",
        "no_station": "Выберите станцию для анализа тренда.",
        "no_data": "Нет данных об уровне воды для этой станции.",
        "no_stations_loaded": "Станции не найдены. Проверьте файл данных станций.",
        "historical_name": "Наблюдаемый уровень",
        "predicted_name": "Прогноз тренда",
        "trend_chart_title": "Уровень воды: наблюдения и прогноз",
        "date_axis": "Дата",
        "level_axis": "Уровень воды (м)",
        "legend_note": "**Синий**: наблюдения · **Красный**: простой прогноз",
        "fit_slope": "Наклон (м на замер)",
        "fit_intercept": "Свободный член (м)",
        "fit_readings": "Замеров",
        "next_level": "Следующий замер (прогноз, м)",
        "footer_caption": "Прогноз построен линейной регрессией по порядку замеров, это не гидрологическая модель.",
    },
}


class Translator:
    def __init__(self, lang: str = DEFAULT_LANG):
        self.lang = lang if lang in TRANSLATIONS else DEFAULT_LANG

    def __call__(self, key: str, **kwargs) -> str:
        text = TRANSLATIONS[self.lang].get(key) or TRANSLATIONS[DEFAULT_LANG].get(key) or key
        if kwargs:
            try:
                return text.format(**kwargs)
            except (KeyError, IndexError):
                return text
        return text


__all__ = ["DEFAULT_LANG", "TRANSLATIONS", "Translator"]
