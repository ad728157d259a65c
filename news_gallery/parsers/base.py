"""
Base classes and interfaces for record parsers.

This module defines the contract that all record parsers must follow.
"""

from typing import Protocol, List
from news_gallery.models import Article


class RecordParser(Protocol):
    """
    Protocol for record parsers.

    Classes implementing this protocol turn raw text obtained from a data
    source into an ordered list of Article objects. Malformed input is
    dropped, never raised.
    """

    def parse(self, raw_text: str) -> List[Article]:
        """Parses raw text into articles."""
