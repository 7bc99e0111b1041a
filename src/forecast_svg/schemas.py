"""
Domain models for forecast-svg.

Pydantic models for the Open-Meteo response and the values derived from it.
These define the canonical schema - the parser normalizes API responses to these.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from forecast_svg.renderers import PLACEHOLDERS

# =============================================================================
# Run bookkeeping
# =============================================================================


class RunStage(StrEnum):
    """Pipeline stage reached by a render run.

    ``DONE`` and ``FAILED`` are terminal.
    """

    START = "start"
    FETCHING = "fetching"
    PARSING = "parsing"
    DERIVING = "deriving"
    RENDERING = "rendering"
    DONE = "done"
    FAILED = "failed"


class Result(BaseModel):
    """Generic result wrapper for operations."""

    success: bool
    message: str
    stage: RunStage = RunStage.DONE
    data: dict[str, Any] | None = None
    error: str | None = None


# =============================================================================
# Forecast
# =============================================================================


# Degrees Celsius, bounded well past recorded extremes so conversions stay finite.
Temperature = Annotated[float, Field(ge=-150, le=150)]


class DailyForecast(BaseModel):
    """Parallel per-day arrays from the ``daily`` block. Index 0 is today."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    weather_code: list[int] = Field(..., min_length=1)
    temperature_2m_max: list[Temperature] = Field(..., min_length=1)
    temperature_2m_min: list[Temperature] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _check_lengths(self) -> DailyForecast:
        n = len(self.weather_code)
        if len(self.temperature_2m_max) != n or len(self.temperature_2m_min) != n:
            msg = (
                "daily arrays differ in length: "
                f"weather_code={n}, temperature_2m_max={len(self.temperature_2m_max)}, "
                f"temperature_2m_min={len(self.temperature_2m_min)}"
            )
            raise ValueError(msg)
        return self


class ForecastResponse(BaseModel):
    """Open-Meteo ``/v1/forecast`` response (only the fields we use)."""

    model_config = ConfigDict(extra="ignore")

    daily: DailyForecast


class TodayForecast(BaseModel):
    """Today's values pulled out of the forecast.

    ``max_temp_c`` is the whole-degree display value; conversions start from
    ``max_temp_c_raw`` so the Fahrenheit value is not rounded twice.
    """

    weather_code: int
    max_temp_c: int
    max_temp_c_raw: float


# =============================================================================
# Rendering
# =============================================================================


class RenderContext(BaseModel):
    """Derived scalars substituted into the SVG template."""

    model_config = ConfigDict(frozen=True)

    deg_f: int
    deg_c: int
    weather_emoji: str
    ps_time: str
    today_day: str
    day_bubble_width: int

    def placeholders(self) -> dict[str, str]:
        """Map each template token to its rendered string."""
        values = (
            self.deg_f,
            self.deg_c,
            self.weather_emoji,
            self.ps_time,
            self.today_day,
            self.day_bubble_width,
        )
        return {token: str(value) for token, value in zip(PLACEHOLDERS, values, strict=True)}
