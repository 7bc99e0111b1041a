"""Today's forecast from the Open-Meteo Forecast API.

Fetching and parsing are separate steps so the flow can report which one
failed: ``fetch_forecast_text`` returns the raw body, ``parse_forecast``
turns it into a ``TodayForecast``.
"""

from __future__ import annotations

import json
from typing import Any

import requests
from pydantic import ValidationError

from forecast_svg.datasources.weather.client import DAILY_VARS, OPEN_METEO_BASE_URL, forecast_url
from forecast_svg.errors import (
    ForecastHTTPStatusError,
    ForecastNoResponseError,
    ForecastParseError,
    ForecastRequestError,
    ForecastStructureError,
)
from forecast_svg.renderers.weather_utils import round_half_up
from forecast_svg.schemas import ForecastResponse, TodayForecast
from forecast_svg.services.http import session as default_session


def forecast_params(lat: float, lon: float) -> dict[str, str | float]:
    """Query parameters for a daily forecast with automatic timezone."""
    return {
        "latitude": lat,
        "longitude": lon,
        "daily": ",".join(DAILY_VARS),
        "timezone": "auto",
    }


def fetch_forecast_text(
    lat: float,
    lon: float,
    *,
    base_url: str = OPEN_METEO_BASE_URL,
    session: requests.Session | None = None,
) -> str:
    """
    Fetch the daily forecast and return the raw response body.

    Args:
        lat: Latitude.
        lon: Longitude.
        base_url: API root without the ``/v1/forecast`` path.
        session: HTTP session (defaults to the shared one).

    Raises:
        ForecastHTTPStatusError: Server answered with a non-2xx status.
        ForecastNoResponseError: Connection failed or timed out.
        ForecastRequestError: Any other request failure.
    """
    s = session or default_session
    try:
        resp = s.get(forecast_url(base_url), params=forecast_params(lat, lon))
        resp.raise_for_status()
    except requests.HTTPError as e:
        response = e.response
        status = response.status_code if response is not None else 0
        body = response.text if response is not None else ""
        raise ForecastHTTPStatusError(status, body) from e
    except (requests.ConnectionError, requests.Timeout) as e:
        raise ForecastNoResponseError(f"No response received from server: {e}") from e
    except requests.RequestException as e:
        raise ForecastRequestError(f"General error: {e}") from e
    return resp.text


def _reject_constant(name: str) -> Any:
    """``json.loads`` hook: NaN and Infinity are not JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_forecast(body: str) -> TodayForecast:
    """
    Parse a forecast response body and pull out today's values.

    Today's max temperature is rounded to the nearest whole degree.

    Raises:
        ForecastParseError: Body is not valid JSON.
        ForecastStructureError: ``daily.weather_code`` is missing, not a
            list, or empty, or the daily arrays are inconsistent.
    """
    try:
        payload: Any = json.loads(body, parse_constant=_reject_constant)
    except ValueError as e:
        raise ForecastParseError(str(e), body) from e

    # Checked before model validation so these cases always read as a
    # structure problem, never as an index error.
    daily = payload.get("daily") if isinstance(payload, dict) else None
    codes = daily.get("weather_code") if isinstance(daily, dict) else None
    if not isinstance(codes, list) or not codes:
        raise ForecastStructureError("daily.weather_code is missing or empty", payload)

    try:
        forecast = ForecastResponse.model_validate(payload)
    except ValidationError as e:
        raise ForecastStructureError(str(e), payload) from e

    max_temp = forecast.daily.temperature_2m_max[0]
    return TodayForecast(
        weather_code=forecast.daily.weather_code[0],
        max_temp_c=round_half_up(max_temp),
        max_temp_c_raw=max_temp,
    )
