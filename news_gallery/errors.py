"""
Exceptions raised by the News Gallery application.
"""

from typing import Optional


class SourceUnavailableError(Exception):
    """Raised when the CSV source could not be downloaded."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(reason)
