"""Weather utility functions for renderers.

Unit conversion and WMO code lookup.
"""

from __future__ import annotations

import logging
import math

from forecast_svg.errors import UnitConversionError
from forecast_svg.reference import UNKNOWN_EMOJI, WMO_EMOJI

logger = logging.getLogger(__name__)

# Each scale as (offset to kelvin, degrees per kelvin)
_TEMPERATURE_SCALES: dict[str, tuple[float, float]] = {
    "C": (273.15, 1.0),
    "F": (459.67, 9 / 5),
    "K": (0.0, 1.0),
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity (2.5 -> 3, -2.5 -> -2).

    Raises:
        UnitConversionError: ``value`` is NaN or infinite.
    """
    if not math.isfinite(value):
        raise UnitConversionError(f"Cannot round non-finite temperature: {value}")
    return math.floor(value + 0.5)


def convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
    """
    Convert a temperature between Celsius, Fahrenheit and Kelvin.

    Units are ``"C"``, ``"F"`` or ``"K"`` (case-insensitive).

    Raises:
        UnitConversionError: Unknown unit or non-finite value.
    """
    try:
        src_offset, src_scale = _TEMPERATURE_SCALES[from_unit.upper()]
        dst_offset, dst_scale = _TEMPERATURE_SCALES[to_unit.upper()]
    except KeyError as e:
        raise UnitConversionError(f"Unknown temperature unit: {e.args[0]}") from e
    if not math.isfinite(value):
        raise UnitConversionError(f"Cannot convert non-finite temperature: {value}")

    kelvin = (value + src_offset) / src_scale
    return kelvin * dst_scale - dst_offset


def c_to_f(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def celsius_to_fahrenheit(deg_c: float) -> int:
    """Whole-degree Fahrenheit for a Celsius value.

    Goes through ``convert_temperature``; if that fails the plain formula is
    used instead.

    Raises:
        UnitConversionError: The Fahrenheit value is not finite (input
            beyond roughly 1e308).
    """
    try:
        deg_f = convert_temperature(deg_c, "C", "F")
    except UnitConversionError as e:
        logger.warning("Error converting temperature: %s", e)
        deg_f = c_to_f(deg_c)
    return round_half_up(deg_f)


def wmo_code_to_emoji(
    code: int,
    table: dict[int, str] | None = None,
    default: str = UNKNOWN_EMOJI,
) -> str:
    """Convert a WMO weather code to an emoji glyph."""
    return (WMO_EMOJI if table is None else table).get(code, default)
