"""Derivation of display values.

Modules:
  - today: TodayForecast + settings + clock -> RenderContext

Rules:
  - Import datasource *models* only (never call fetch functions here).
  - No I/O, no HTTP, no Prefect decorators.
"""

from forecast_svg.analysis.today import build_render_context

__all__ = ["build_render_context"]
