"""
Prefect flow that renders today's forecast into the SVG template.

Stages run strictly in order, each consuming the previous result:

    fetching -> parsing -> deriving -> rendering -> done

The first failing stage logs its error and ends the run as ``failed``;
nothing after it runs and the output file is left as it was.

Run locally:
    python -m forecast_svg.flows.render
"""

from __future__ import annotations

from datetime import datetime
from logging import Logger, LoggerAdapter
from pathlib import Path
from typing import Any

from prefect import flow, get_run_logger, task
from prefect.cache_policies import NO_CACHE

from forecast_svg.analysis.today import build_render_context
from forecast_svg.config import Settings, get_settings
from forecast_svg.datasources.weather.forecast import fetch_forecast_text, parse_forecast
from forecast_svg.errors import (
    ForecastHTTPStatusError,
    ForecastParseError,
    ForecastStructureError,
    ForecastSvgError,
)
from forecast_svg.renderers import read_template, render_svg, write_output
from forecast_svg.schemas import RenderContext, Result, RunStage, TodayForecast
from forecast_svg.services.http import create_session

# =============================================================================
# Tasks
# =============================================================================


@task(name="fetch-forecast", retries=0, cache_policy=NO_CACHE)
def fetch_forecast(settings: Settings) -> str:
    """Fetch the raw Open-Meteo forecast body."""
    session = create_session(timeout=settings.http_timeout)
    try:
        return fetch_forecast_text(
            settings.lat, settings.lon, base_url=settings.base_url, session=session
        )
    finally:
        session.close()


@task(name="parse-forecast", cache_policy=NO_CACHE)
def parse_forecast_body(body: str) -> TodayForecast:
    """Parse the forecast body into today's code and max temperature."""
    return parse_forecast(body)


@task(name="derive-values", cache_policy=NO_CACHE)
def derive_values(
    today: TodayForecast, settings: Settings, now: datetime | None = None
) -> RenderContext:
    """Compute all template values."""
    return build_render_context(today, settings, now)


@task(name="read-template", cache_policy=NO_CACHE)
def load_template(path: Path) -> str:
    """Read the SVG template."""
    return read_template(path)


@task(name="write-svg", cache_policy=NO_CACHE)
def write_svg(path: Path, svg: str) -> Path:
    """Write the rendered SVG."""
    return write_output(path, svg)


# =============================================================================
# Flow
# =============================================================================


def _log_failure(
    logger: Logger | LoggerAdapter[Any], stage: RunStage, err: ForecastSvgError
) -> None:
    """Log a terminal error with enough context to diagnose it."""
    if isinstance(err, ForecastHTTPStatusError):
        logger.error("Error fetching or processing weather data: %s", err)
        logger.error("Response Body: %s", err.body)
    elif isinstance(err, ForecastParseError):
        logger.error("%s", err)
        logger.error("Response body: %s", err.body)
    elif isinstance(err, ForecastStructureError):
        logger.error("%s", err.args[0])
        logger.error("Response: %s", err.payload)
    else:
        logger.error("Run failed while %s: %s", stage, err)


@flow(name="render-forecast-svg", log_prints=True)
def render_forecast(settings: Settings | None = None, now: datetime | None = None) -> Result:
    """
    Fetch today's forecast and render it into the SVG template.

    Args:
        settings: Run configuration (defaults to ``get_settings()``).
        now: Local time used for the weekday and ``{psTime}`` (defaults to now).

    Returns:
        ``Result`` with ``stage`` ``done`` on success or ``failed`` otherwise.
        On failure ``data["failed_stage"]`` names the stage that failed.
    """
    settings = settings or get_settings()
    logger = get_run_logger()
    stage = RunStage.START

    try:
        stage = RunStage.FETCHING
        print(f"Fetching forecast for ({settings.lat}, {settings.lon})...")
        body = fetch_forecast(settings)

        stage = RunStage.PARSING
        today = parse_forecast_body(body)

        stage = RunStage.DERIVING
        context = derive_values(today, settings, now)
        print(
            f"Today: {context.today_day}, {context.deg_c}°C / {context.deg_f}°F "
            f"{context.weather_emoji}"
        )

        stage = RunStage.RENDERING
        template = load_template(settings.template_path)
        output_path = write_svg(settings.output_path, render_svg(template, context.placeholders()))
    except ForecastSvgError as e:
        _log_failure(logger, stage, e)
        return Result(
            success=False,
            message=f"Run failed while {stage}",
            stage=RunStage.FAILED,
            data={"failed_stage": str(stage)},
            error=str(e),
        )

    logger.info("SVG generated successfully: %s", output_path)
    return Result(
        success=True,
        message=f"SVG generated successfully: {output_path}",
        stage=RunStage.DONE,
        data={"output": str(output_path), **context.model_dump()},
    )


if __name__ == "__main__":
    result = render_forecast()
    print(f"Flow complete: {result}")
