"""Tests for weekday, bubble width and distance helpers."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

import pytest

from forecast_svg.reference import DAY_BUBBLE_WIDTHS, DEFAULT_BUBBLE_WIDTH
from forecast_svg.renderers.date_utils import bubble_width, format_distance, weekday_name


class TestWeekdayName:
    """Test long weekday names."""

    @pytest.mark.parametrize(
        ("day", "expected"),
        [
            (date(2026, 2, 2), "Monday"),
            (date(2026, 2, 3), "Tuesday"),
            (date(2026, 2, 4), "Wednesday"),
            (date(2026, 2, 5), "Thursday"),
            (date(2026, 2, 6), "Friday"),
            (date(2026, 2, 7), "Saturday"),
            (date(2026, 2, 8), "Sunday"),
        ],
    )
    def test_names(self, day: date, expected: str) -> None:
        assert weekday_name(day) == expected

    def test_accepts_datetime(self) -> None:
        assert weekday_name(datetime(2026, 2, 4, 23, 59)) == "Wednesday"


class TestBubbleWidth:
    """Test per-weekday bubble widths."""

    @pytest.mark.parametrize(
        ("day", "expected"),
        [
            ("Monday", 235),
            ("Tuesday", 235),
            ("Wednesday", 260),
            ("Thursday", 245),
            ("Friday", 220),
            ("Saturday", 245),
            ("Sunday", 230),
        ],
    )
    def test_configured_widths(self, day: str, expected: int) -> None:
        assert bubble_width(day) == expected

    @pytest.mark.parametrize("day", ["Caturday", "", "monday", "Lundi"])
    def test_unknown_day_default(self, day: str) -> None:
        assert bubble_width(day) == DEFAULT_BUBBLE_WIDTH == 235

    def test_missing_from_custom_table(self) -> None:
        table = {k: v for k, v in DAY_BUBBLE_WIDTHS.items() if k != "Friday"}
        assert bubble_width("Friday", table) == 235

    def test_custom_default(self) -> None:
        assert bubble_width("Friday", {}, default=300) == 300


class TestFormatDistance:
    """Test human-readable distance labels."""

    base = datetime(2026, 1, 1, 12, 0)

    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(seconds=20), "less than a minute"),
            (timedelta(minutes=1), "1 minute"),
            (timedelta(minutes=30), "30 minutes"),
            (timedelta(minutes=60), "about 1 hour"),
            (timedelta(hours=5), "about 5 hours"),
            (timedelta(hours=30), "1 day"),
            (timedelta(days=5), "5 days"),
            (timedelta(days=40), "about 1 month"),
            (timedelta(days=100), "3 months"),
        ],
    )
    def test_short_ranges(self, delta: timedelta, expected: str) -> None:
        assert format_distance(self.base, self.base + delta) == expected

    def test_about_years(self) -> None:
        assert format_distance(date(2020, 12, 14), date(2022, 1, 20)) == "about 1 year"

    def test_over_years(self) -> None:
        assert format_distance(date(2020, 12, 14), date(2026, 5, 20)) == "over 5 years"

    def test_almost_years(self) -> None:
        assert format_distance(date(2020, 12, 14), date(2026, 10, 17)) == "almost 6 years"

    def test_order_does_not_matter(self) -> None:
        a, b = date(2020, 12, 14), date(2026, 10, 17)
        assert format_distance(a, b) == format_distance(b, a)

    def test_date_against_aware_datetime(self) -> None:
        now = datetime(2026, 10, 17, 9, 30, tzinfo=UTC)
        assert format_distance(date(2020, 12, 14), now) == "almost 6 years"
