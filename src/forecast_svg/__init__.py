"""Forecast SVG - render today's Open-Meteo forecast into an SVG badge.

Architecture::

    config.py      Settings (pydantic-settings, FORECAST_SVG_* env vars)
    reference/     Static lookup tables (WMO code -> emoji, weekday -> bubble width)
    datasources/   Open-Meteo forecast fetch + parse
    analysis/      Forecast + clock -> RenderContext (derived display values)
    renderers/     Pure placeholder substitution and unit/date helpers
    flows/         Prefect orchestration (fetch -> parse -> derive -> render)
    services/      Shared utilities (HTTP session)

Data flow: datasources -> analysis -> renderers -> chat.svg

One run is strictly sequential and stops at the first failing stage.
Nothing is cached between runs.
"""

__version__ = "0.1.0"

from forecast_svg.config import Settings, get_settings
from forecast_svg.schemas import RenderContext, Result, TodayForecast

__all__ = ["RenderContext", "Result", "Settings", "TodayForecast", "__version__", "get_settings"]
