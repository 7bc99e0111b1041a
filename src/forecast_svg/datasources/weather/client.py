"""Open-Meteo API client constants.

API docs: https://open-meteo.com/en/docs
"""

OPEN_METEO_BASE_URL = "https://api.open-meteo.com"
FORECAST_PATH = "v1/forecast"

# Daily variables we request from Open-Meteo
DAILY_VARS = [
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
]


def forecast_url(base_url: str = OPEN_METEO_BASE_URL) -> str:
    """Join the base URL and forecast path, tolerating a trailing slash."""
    return f"{base_url.rstrip('/')}/{FORECAST_PATH}"
