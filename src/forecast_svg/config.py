"""
Application settings.

All values have working defaults so a bare ``forecast-svg render`` needs no
configuration. Any field can be overridden with a ``FORECAST_SVG_``-prefixed
environment variable or a ``.env`` file, e.g.::

    FORECAST_SVG_LAT=45.5 FORECAST_SVG_LON=-122.6 forecast-svg render

Dict fields accept JSON::

    FORECAST_SVG_DAY_BUBBLE_WIDTHS='{"Monday": 240}'
"""

from __future__ import annotations

from datetime import date
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from forecast_svg.reference import (
    DAY_BUBBLE_WIDTHS,
    DEFAULT_BUBBLE_WIDTH,
    PS_ANCHOR_DATE,
    UNKNOWN_EMOJI,
    WMO_EMOJI,
)


class Settings(BaseSettings):
    """Immutable run configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FORECAST_SVG_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    app_name: str = "forecast-svg"
    app_env: str = "development"
    debug: bool = False

    # Location (Nairobi)
    lat: float = Field(default=-1.213066726789292, ge=-90, le=90)
    lon: float = Field(default=36.75178648764836, ge=-180, le=180)

    # Open-Meteo base URL, without trailing slash
    base_url: str = "https://api.open-meteo.com"
    http_timeout: float = Field(default=30, gt=0)

    template_path: Path = Path("template.svg")
    output_path: Path = Path("chat.svg")

    ps_anchor: date = PS_ANCHOR_DATE
    weather_emojis: dict[int, str] = Field(default_factory=lambda: dict(WMO_EMOJI))
    unknown_emoji: str = UNKNOWN_EMOJI
    day_bubble_widths: dict[str, int] = Field(default_factory=lambda: dict(DAY_BUBBLE_WIDTHS))
    default_bubble_width: int = DEFAULT_BUBBLE_WIDTH


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once from the environment."""
    return Settings()
