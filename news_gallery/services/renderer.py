"""
HTML rendering for the news gallery.

This module provides the GalleryRenderer class which handles:
- Rendering article cards with their category and topic pills
- Rendering the "All" and per-tag filter buttons for each dimension
- Rendering the full page, including the empty, no-results and error states
"""

import html
import logging
from typing import List

from news_gallery.filters import ALL_TAG, CATEGORY, TOPIC, TagFilterEngine
from news_gallery.models import Article, GalleryView

logger = logging.getLogger(__name__)

CATEGORY_TITLE = "Filter by Category"
TOPIC_TITLE = "Filter by Topics"


class GalleryRenderer:
    """Renders gallery views as HTML."""

    _CLASSES = {
        "card": "bg-white rounded-lg shadow-lg overflow-hidden news-article-card",
        "image": "w-full h-48 object-cover",
        "body": "p-6",
        "title": "text-xl font-semibold text-gray-900 mb-3",
        "link": "inline-block text-blue-600 hover:text-blue-800 font-medium",
        "pills": "mt-3 flex flex-wrap gap-1",
        "pill": "bg-gray-100 text-gray-700 text-xs font-semibold px-2.5 py-0.5 rounded-full",
        "button": "filter-button",
        "filter_title": "filter-box-title",
        "muted": "text-gray-500",
        "failed": "text-red-500",
        "message": "col-span-full text-center text-gray-600 text-lg p-8",
    }

    def __init__(self, placeholder_image: str):
        self.placeholder_image = placeholder_image

    def _pill(self, tag: str) -> str:
        return f'<span class="{self._CLASSES["pill"]}">{html.escape(tag)}</span>'

    def render_card(self, article: Article, visible: bool = True) -> str:
        """Renders a single article card."""
        card_class = self._CLASSES["card"] + ("" if visible else " hidden")
        image = html.escape(article.image_link or self.placeholder_image)
        title = html.escape(article.title)
        pills = "".join(
            self._pill(tag)
            for tag in (article.category_tag, *article.topic_tags)
            if tag
        )
        return f"""
        <div class="{card_class}" data-tag-category="{html.escape(article.category_tag)}">
            <img src="{image}" alt="{title}" class="{self._CLASSES['image']}">
            <div class="{self._CLASSES['body']}">
                <h2 class="{self._CLASSES['title']}">{title}</h2>
                <a href="{html.escape(article.article_link)}" rel="noopener noreferrer"
                   class="{self._CLASSES['link']}">Read more &rarr;</a>
                <div class="{self._CLASSES['pills']}">{pills}</div>
            </div>
        </div>
        """

    def _button(self, label: str, tag: str, active: bool) -> str:
        button_class = self._CLASSES["button"] + (" active" if active else "")
        return (
            f'<button class="{button_class}" data-tag="{html.escape(tag)}">'
            f"{html.escape(label)}</button>"
        )

    def render_filter_group(
        self, title: str, dimension: str, tags: List[str], engine: TagFilterEngine
    ) -> str:
        """Renders the "All" button and one button per tag for a dimension."""
        buttons = [self._button("All", ALL_TAG, engine.is_active(ALL_TAG, dimension))]
        buttons.extend(
            self._button(tag, tag, engine.is_active(tag, dimension))
            for tag in tags
            if tag
        )
        return (
            f'<div class="filter-group" data-dimension="{dimension}">'
            f'<p class="{self._CLASSES["filter_title"]}">{title}</p>'
            + "".join(buttons)
            + "</div>"
        )

    def _empty_group(self, title: str, text: str, css: str) -> str:
        return (
            f'<div class="filter-group"><p class="{self._CLASSES["filter_title"]}">'
            f'{title}</p><p class="{self._CLASSES[css]}">{text}</p></div>'
        )

    def _page(self, filters: str, content: str) -> str:
        return f"""
        <html>
        <body>
            <div id="filters">{filters}</div>
            <div id="news-container">{content}</div>
        </body>
        </html>
        """

    def render_page(self, view: GalleryView, engine: TagFilterEngine) -> str:
        """Renders the whole gallery page for a view."""
        if not view.articles:
            logger.info("No articles to render.")
            filters = self._empty_group(
                CATEGORY_TITLE, "No categories available.", "muted"
            ) + self._empty_group(TOPIC_TITLE, "No topics available.", "muted")
            content = (
                f'<p class="{self._CLASSES["message"]}">'
                "No news articles found or the sheet is empty.</p>"
            )
            return self._page(filters, content)

        filters = self.render_filter_group(
            CATEGORY_TITLE, CATEGORY, view.categories, engine
        ) + self.render_filter_group(TOPIC_TITLE, TOPIC, view.topics, engine)
        content = "".join(
            self.render_card(article, shown)
            for article, shown in zip(view.articles, view.visible)
        )
        if not view.has_results:
            content += (
                f'<p id="no-results-message" class="{self._CLASSES["message"]}">'
                "No articles match the selected filters.</p>"
            )
        return self._page(filters, content)

    def render_error(self, message: str) -> str:
        """Renders the page shown when the source could not be loaded."""
        filters = self._empty_group(
            CATEGORY_TITLE, "Could not load categories.", "failed"
        ) + self._empty_group(TOPIC_TITLE, "Could not load topics.", "failed")
        content = (
            f'<p id="error-message" class="{self._CLASSES["failed"]}">'
            f"Failed to load news articles: {html.escape(message)}. Please ensure the "
            "sheet is published to the web as CSV and publicly accessible.</p>"
        )
        return self._page(filters, content)
