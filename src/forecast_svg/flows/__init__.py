"""
Prefect flows for the render pipeline.

Flows:
- render: fetch today's forecast, derive display values, write chat.svg

Usage (local):
    python -m forecast_svg.flows.render

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m forecast_svg.flows.render

Scheduling (cron, GitHub Actions, a Prefect deployment) is external; a run
assumes no other run is writing the same output file.
"""
