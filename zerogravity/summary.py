"""
Encyclopedic summary lookups for the chat panel.

Fetches the lead paragraph of a Wikipedia article through the REST summary
endpoint:

    GET https://en.wikipedia.org/api/rest_v1/page/summary/<topic>

The client is best-effort: every failure (HTTP error, timeout, bad JSON,
missing "extract") is turned into the fallback sentence, so callers never
have to handle an exception. It performs blocking network I/O and must be
called from a background thread.
"""

from typing import Optional
from urllib.parse import quote

import requests

from .config import AppConfig
from .content import SUMMARY_FALLBACK
from .logger import logger, Timer


def _fallback(cause: Optional[str] = None) -> str:
    if cause:
        return f"{SUMMARY_FALLBACK} ({cause})"
    return SUMMARY_FALLBACK


class WikiSummaryClient:
    """Thin wrapper around the summary endpoint."""

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig()

    def summary_url(self, topic: str) -> str:
        endpoint = self.config.summary_endpoint
        if not endpoint.endswith("/"):
            endpoint += "/"
        return endpoint + quote(topic, safe="")

    def fetch_summary(self, topic: str) -> str:
        """Return the article extract for `topic`, or the fallback sentence."""
        topic = (topic or "").strip()
        if not topic:
            return _fallback()

        url = self.summary_url(topic)
        logger.api_call("page/summary", topic=topic)
        try:
            with Timer() as timer:
                response = requests.get(
                    url,
                    headers={
                        "User-Agent": self.config.user_agent,
                        "Accept": "application/json",
                    },
                    timeout=self.config.request_timeout,
                )
            logger.api_response("page/summary", duration_ms=timer.duration_ms)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.api_error(f"Summary request failed for {topic!r}: {e}")
            return _fallback(str(e))
        except ValueError as e:
            # json.JSONDecodeError (and requests' own decode error) are ValueErrors
            logger.api_error(f"Summary response for {topic!r} is not JSON: {e}")
            return _fallback(str(e))

        extract = data.get("extract") if isinstance(data, dict) else None
        if not isinstance(extract, str) or not extract.strip():
            logger.warning(f"No extract in summary for {topic!r}")
            return _fallback()

        logger.success(f"Summary for {topic!r}: {len(extract)} chars")
        return extract
