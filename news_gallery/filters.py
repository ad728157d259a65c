"""
Tag filtering for the gallery.

This module provides the TagFilterEngine class, which owns the category and
topic selections and decides which articles are visible. Within a dimension
any selected tag may match; across dimensions both must match. An empty
selection applies no filter for its dimension.
"""

import logging
from typing import Iterable, List, Set

from news_gallery.models import Article

logger = logging.getLogger(__name__)

ALL_TAG = "all"
CATEGORY = "category"
TOPIC = "topic"


class TagFilterEngine:
    """Holds the two selection sets and applies them to article collections."""

    def __init__(self):
        self.category_selection: Set[str] = set()
        self.topic_selection: Set[str] = set()

    def _selection(self, dimension: str) -> Set[str]:
        if dimension == CATEGORY:
            return self.category_selection
        if dimension == TOPIC:
            return self.topic_selection
        raise ValueError(f"Unknown filter dimension: {dimension!r}")

    def _toggle(self, dimension: str, tag: str) -> None:
        selection = self._selection(dimension)
        if tag == ALL_TAG:
            selection.clear()
            logger.debug("Cleared %s selection.", dimension)
        elif tag in selection:
            selection.remove(tag)
            logger.debug("Removed %s tag %r: %s", dimension, tag, sorted(selection))
        else:
            selection.add(tag)
            logger.debug("Added %s tag %r: %s", dimension, tag, sorted(selection))

    def toggle_category(self, tag: str) -> None:
        """Toggles a category tag; "all" clears the category selection."""
        self._toggle(CATEGORY, tag)

    def toggle_topic(self, tag: str) -> None:
        """Toggles a topic tag; "all" clears the topic selection."""
        self._toggle(TOPIC, tag)

    def is_active(self, tag: str, dimension: str) -> bool:
        """Whether a filter control for `tag` should be shown as selected."""
        selection = self._selection(dimension)
        if tag == ALL_TAG:
            return not selection
        return tag in selection

    def matches(self, article: Article) -> bool:
        matches_category = (
            not self.category_selection
            or article.category_tag in self.category_selection
        )
        matches_topic = not self.topic_selection or not self.topic_selection.isdisjoint(
            article.topic_tags
        )
        return matches_category and matches_topic

    def visibility(self, articles: Iterable[Article]) -> List[bool]:
        """Returns one visibility flag per article, in order."""
        return [self.matches(article) for article in articles]

    def visible_set(self, articles: Iterable[Article]) -> List[Article]:
        """Returns the articles matching the current selection, in order."""
        visible = [article for article in articles if self.matches(article)]
        logger.debug(
            "Filter categories=%s topics=%s -> %d visible.",
            sorted(self.category_selection),
            sorted(self.topic_selection),
            len(visible),
        )
        return visible

    @staticmethod
    def unique_categories(articles: Iterable[Article]) -> List[str]:
        return sorted({a.category_tag for a in articles if a.category_tag})

    @staticmethod
    def unique_topics(articles: Iterable[Article]) -> List[str]:
        return sorted({tag for a in articles for tag in a.topic_tags if tag})
