"""Single-shot HTTP fetcher.

Failures never escape as exceptions: a non-200 status or a transport fault is
logged and reported through :class:`FetchResult.outcome`.
"""

from __future__ import annotations

import logging

import httpx

from appfunctions.config import settings
from appfunctions.scraper.models import FetchResult, Outcome

logger = logging.getLogger(__name__)


def _client_kwargs() -> dict:
    kwargs: dict = {"follow_redirects": True}
    if settings.request_timeout is not None:
        kwargs["timeout"] = settings.request_timeout
    return kwargs


def fetch_html(url: str) -> FetchResult:
    """GET *url* once and return its body when the status is exactly 200."""
    try:
        with httpx.Client(**_client_kwargs()) as client:
            response = client.get(url)
    # Host names that fail IDNA encoding raise UnicodeError / IDNAError (ValueError).
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
        logger.warning("An error occurred while fetching %s: %s", url, exc)
        return FetchResult(url=url, outcome=Outcome.TRANSPORT_ERROR, error=str(exc))

    if response.status_code != 200:
        logger.warning("Failed to load page %s. Status: %d", url, response.status_code)
        return FetchResult(
            url=url,
            outcome=Outcome.HTTP_ERROR,
            status_code=response.status_code,
            error=f"HTTP {response.status_code}",
        )

    return FetchResult(
        url=url,
        outcome=Outcome.OK,
        html=response.text,
        status_code=response.status_code,
    )
