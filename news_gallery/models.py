"""
Data models for the News Gallery application.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, List, Tuple


@dataclass(frozen=True)
class Article:
    """A single gallery entry built from one CSV row."""

    image_link: str
    title: str
    article_link: str
    category_tag: str = ""  # empty means no category
    topic_tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class GalleryView:
    """Snapshot of the gallery handed to a presentation layer."""

    articles: List[Article]
    visible: List[bool]
    categories: List[str]
    topics: List[str]
    selected_categories: FrozenSet[str] = field(default_factory=frozenset)
    selected_topics: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def visible_articles(self) -> List[Article]:
        return [a for a, shown in zip(self.articles, self.visible) if shown]

    @property
    def has_results(self) -> bool:
        return any(self.visible)
