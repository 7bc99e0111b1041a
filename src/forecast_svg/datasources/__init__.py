"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    └── {feature}.py      # Fetch and parse functions

Only ``weather/`` (Open-Meteo) exists today. Fetch functions raise
``forecast_svg.errors.ForecastFetchError`` subclasses; parse functions raise
``ForecastDataError`` subclasses. Neither logs; the flow does.
"""
