"""Combine today's forecast with the local clock into template values.

Note: "today" here is the local system date, while the forecast's index 0
is today in the timezone Open-Meteo resolves for the coordinates
(``timezone=auto``). Near midnight, or when the host runs in a different
timezone than the location, the weekday label can be a day off from the
forecast it is shown with.
"""

from __future__ import annotations

from datetime import datetime

from forecast_svg.config import Settings
from forecast_svg.renderers.date_utils import bubble_width, format_distance, weekday_name
from forecast_svg.renderers.weather_utils import celsius_to_fahrenheit, wmo_code_to_emoji
from forecast_svg.schemas import RenderContext, TodayForecast


def build_render_context(
    today: TodayForecast,
    settings: Settings,
    now: datetime | None = None,
) -> RenderContext:
    """
    Derive every template value for one run.

    Args:
        today: Weather code and rounded max temperature for today.
        settings: Lookup tables, defaults and the ``{psTime}`` anchor date.
        now: Current local time (defaults to the system clock).
    """
    now = now or datetime.now()
    day = weekday_name(now.date())

    return RenderContext(
        deg_f=celsius_to_fahrenheit(today.max_temp_c_raw),
        deg_c=today.max_temp_c,
        weather_emoji=wmo_code_to_emoji(
            today.weather_code, settings.weather_emojis, settings.unknown_emoji
        ),
        ps_time=format_distance(settings.ps_anchor, now),
        today_day=day,
        day_bubble_width=bubble_width(
            day, settings.day_bubble_widths, settings.default_bubble_width
        ),
    )
