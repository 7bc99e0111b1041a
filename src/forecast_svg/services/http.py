"""
Shared HTTP client.

Provides a pre-configured ``requests.Session`` with a User-Agent header and a
default timeout. A render run makes exactly one request and never retries, so
the mounted adapter carries a zero-retry strategy.

Usage::

    from forecast_svg.services.http import session

    resp = session.get("https://api.example.com/v1/data")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from forecast_svg import __version__

#: No retries: a failed request fails the run.
DEFAULT_RETRY = Retry(
    total=0,
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"forecast-svg/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session; import and use directly.
session: requests.Session = create_session()
