"""Open-Meteo weather data source.

Fetches today's daily forecast from Open-Meteo (free, no API key).

Public API:
  - forecast: fetch_forecast_text (raw HTTP body), parse_forecast (-> TodayForecast)
  - client: API URL, requested daily variables
"""

from forecast_svg.datasources.weather.client import DAILY_VARS, OPEN_METEO_BASE_URL
from forecast_svg.datasources.weather.forecast import fetch_forecast_text, parse_forecast

__all__ = [
    "DAILY_VARS",
    "OPEN_METEO_BASE_URL",
    "fetch_forecast_text",
    "parse_forecast",
]
