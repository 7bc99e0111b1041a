"""Shared date-formatting helpers for renderers."""

from __future__ import annotations

from datetime import date, datetime, time

from dateutil.relativedelta import relativedelta

from forecast_svg.reference import DAY_BUBBLE_WIDTHS, DEFAULT_BUBBLE_WIDTH

_MINUTES_IN_DAY = 1440
_MINUTES_IN_ALMOST_TWO_DAYS = 2520
_MINUTES_IN_MONTH = 43200
_MINUTES_IN_TWO_MONTHS = 86400


# Fixed English names; calendar.day_name and %A follow the process locale.
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def weekday_name(day: date) -> str:
    """Long English weekday name, e.g. ``Monday``."""
    return _WEEKDAYS[day.weekday()]


def bubble_width(
    day: str,
    table: dict[str, int] | None = None,
    default: int = DEFAULT_BUBBLE_WIDTH,
) -> int:
    """Speech bubble width for a weekday name, ``default`` if not listed."""
    return (DAY_BUBBLE_WIDTHS if table is None else table).get(day, default)


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}" if n == 1 else f"{n} {unit}s"


def format_distance(start: date | datetime, end: date | datetime) -> str:
    """Approximate human-readable distance between two points in time.

    Order does not matter. Returns e.g. ``less than a minute``, ``5 days``,
    ``about 1 month``, ``over 5 years`` or ``almost 6 years``.
    """
    # Plain dates mean midnight in the other argument's timezone
    if not isinstance(end, datetime):
        tz = start.tzinfo if isinstance(start, datetime) else None
        end = datetime.combine(end, time.min, tzinfo=tz)
    if not isinstance(start, datetime):
        start = datetime.combine(start, time.min, tzinfo=end.tzinfo)
    if start > end:
        start, end = end, start

    seconds = (end - start).total_seconds()
    minutes = round(seconds / 60)

    if minutes < 1:
        return "less than a minute"
    if minutes < 45:
        return _plural(minutes, "minute")
    if minutes < 90:
        return "about 1 hour"
    if minutes < _MINUTES_IN_DAY:
        return f"about {_plural(round(minutes / 60), 'hour')}"
    if minutes < _MINUTES_IN_ALMOST_TWO_DAYS:
        return "1 day"
    if minutes < _MINUTES_IN_MONTH:
        return _plural(round(minutes / _MINUTES_IN_DAY), "day")
    if minutes < _MINUTES_IN_TWO_MONTHS:
        return f"about {_plural(round(minutes / _MINUTES_IN_MONTH), 'month')}"

    delta = relativedelta(end, start)
    months = delta.years * 12 + delta.months
    if months < 12:
        return _plural(max(months, 2), "month")

    years, rem = divmod(months, 12)
    if rem < 3:
        return f"about {_plural(years, 'year')}"
    if rem < 9:
        return f"over {_plural(years, 'year')}"
    return f"almost {_plural(years + 1, 'year')}"
