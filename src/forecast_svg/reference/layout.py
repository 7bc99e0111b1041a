"""SVG layout constants."""

from __future__ import annotations

from datetime import date

# Speech bubble width (px) sized to fit each weekday name in the template font.
DAY_BUBBLE_WIDTHS: dict[str, int] = {
    "Monday": 235,
    "Tuesday": 235,
    "Wednesday": 260,
    "Thursday": 245,
    "Friday": 220,
    "Saturday": 245,
    "Sunday": 230,
}

DEFAULT_BUBBLE_WIDTH: int = 235

# {psTime} is rendered as the distance from this date to now.
PS_ANCHOR_DATE: date = date(2020, 12, 14)
