"""WMO Weather Interpretation Codes -> emoji glyphs.

Codes and descriptions: https://open-meteo.com/en/docs
"""

from __future__ import annotations

WMO_EMOJI: dict[int, str] = {
    0: "\u2600\ufe0f",  # Clear sky
    1: "\u2600\ufe0f",  # Mainly clear
    2: "\U0001f324",  # Partly cloudy
    3: "\u2601\ufe0f",  # Overcast
    45: "\U0001f32b",  # Fog
    48: "\U0001f32b",  # Depositing rime fog
    51: "\U0001f326",  # Light drizzle
    53: "\U0001f326",  # Moderate drizzle
    55: "\U0001f326",  # Dense drizzle
    56: "\U0001f327",  # Light freezing drizzle
    57: "\U0001f327",  # Dense freezing drizzle
    61: "\U0001f326",  # Slight rain
    63: "\U0001f327",  # Moderate rain
    65: "\U0001f327",  # Heavy rain
    66: "\U0001f327",  # Light freezing rain
    67: "\U0001f327",  # Heavy freezing rain
    71: "\U0001f328",  # Slight snow fall
    73: "\u2744\ufe0f",  # Moderate snow fall
    75: "\u2744\ufe0f",  # Heavy snow fall
    77: "\u2744\ufe0f",  # Snow grains
    80: "\U0001f326",  # Slight rain showers
    81: "\U0001f327",  # Moderate rain showers
    82: "\U0001f327",  # Violent rain showers
    85: "\U0001f328",  # Slight snow showers
    86: "\U0001f328",  # Heavy snow showers
    95: "\u26c8",  # Thunderstorm
    96: "\u26c8",  # Thunderstorm with slight hail
    99: "\u26c8",  # Thunderstorm with heavy hail
}

# Shown for any code not in the table
UNKNOWN_EMOJI: str = "\u2753"
