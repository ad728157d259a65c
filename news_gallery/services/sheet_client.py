"""
Sheet client for downloading the gallery's CSV export.

This module provides the SheetClient class, which fetches the published
spreadsheet as raw CSV text. It knows nothing about the CSV layout.
"""

import logging

import requests

from news_gallery.errors import SourceUnavailableError

logger = logging.getLogger(__name__)


class SheetClient:
    """Fetches CSV text over HTTP."""

    def __init__(self, timeout: float = 10, user_agent: str = "NewsGalleryBot/1.0"):
        self.timeout = timeout
        self.user_agent = user_agent

    def fetch_csv(self, url: str) -> str:
        """Downloads the CSV export, raising SourceUnavailableError on failure."""
        try:
            resp = requests.get(
                url, timeout=self.timeout, headers={"User-Agent": self.user_agent}
            )
            resp.raise_for_status()
        except requests.HTTPError as http_err:
            status = (
                http_err.response.status_code
                if http_err.response is not None
                else None
            )
            logger.error("HTTP error fetching %s: %s", url, http_err)
            raise SourceUnavailableError(
                url, f"HTTP error! status: {status}", status_code=status
            ) from http_err
        except requests.RequestException as req_err:
            logger.error("Network error fetching %s: %s", url, req_err)
            raise SourceUnavailableError(url, str(req_err)) from req_err

        logger.info("Fetched %d bytes from %s", len(resp.content), url)
        return resp.text
