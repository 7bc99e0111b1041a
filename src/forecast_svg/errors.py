"""
Exception hierarchy for a render run.

Every stage raises a subclass of ``ForecastSvgError``; the render flow is the
single place that catches them, logs the context and marks the run failed.
``UnitConversionError`` is the only one recovered where it is raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class ForecastSvgError(Exception):
    """Base class for all run errors."""


# =============================================================================
# Fetch
# =============================================================================


class ForecastFetchError(ForecastSvgError):
    """The forecast request did not produce a usable response."""


class ForecastHTTPStatusError(ForecastFetchError):
    """Server responded with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"HTTP Status: {status_code}")
        self.status_code = status_code
        self.body = body


class ForecastNoResponseError(ForecastFetchError):
    """Request was sent but no response was received (connection error, timeout)."""


class ForecastRequestError(ForecastFetchError):
    """Request failed locally before a response could be received."""


# =============================================================================
# Parse
# =============================================================================


class ForecastDataError(ForecastSvgError):
    """Response body is not a usable forecast."""


class ForecastParseError(ForecastDataError):
    """Response body is not valid JSON."""

    def __init__(self, message: str, body: str) -> None:
        super().__init__(f"Error parsing JSON response: {message}")
        self.body = body


class ForecastStructureError(ForecastDataError):
    """JSON parsed, but ``daily`` is missing, empty or inconsistent."""

    def __init__(self, reason: str, payload: Any) -> None:
        super().__init__(f"Unexpected API response structure or no data available: {reason}")
        self.reason = reason
        self.payload = payload


# =============================================================================
# Derive
# =============================================================================


class UnitConversionError(ForecastSvgError, ValueError):
    """Unit conversion helper could not convert the value."""


# =============================================================================
# Render
# =============================================================================


class TemplateError(ForecastSvgError):
    """Template input or rendered output could not be handled."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class TemplateReadError(TemplateError):
    """Template file is missing, unreadable, or not valid UTF-8 text."""


class OutputWriteError(TemplateError):
    """Rendered SVG could not be written."""
