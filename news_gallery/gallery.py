"""
News Gallery
Loads the article spreadsheet as CSV, parses it into articles, and exposes
tag filtering over the loaded collection. main() renders the page to stdout.
"""

import logging
import sys
from typing import List, Optional

from news_gallery import config
from news_gallery.errors import SourceUnavailableError
from news_gallery.filters import TagFilterEngine
from news_gallery.models import Article, GalleryView
from news_gallery.parsers.base import RecordParser
from news_gallery.parsers.csv_records import CsvRecordParser
from news_gallery.services.renderer import GalleryRenderer
from news_gallery.services.sheet_client import SheetClient

logger = logging.getLogger(__name__)


class NewsGallery:
    """Ties the sheet client, record parser and filter engine together."""

    def __init__(
        self,
        url: str,
        client: Optional[SheetClient] = None,
        parser: Optional[RecordParser] = None,
        engine: Optional[TagFilterEngine] = None,
    ):
        self.url = url
        self.client = client or SheetClient(config.FETCH_TIMEOUT, config.USER_AGENT)
        self.parser = parser or CsvRecordParser()
        self.engine = engine or TagFilterEngine()
        self.articles: List[Article] = []

    def load(self) -> GalleryView:
        """Fetches and parses the sheet, replacing any loaded articles."""
        logger.info("Loading articles from %s", self.url)
        raw_text = self.client.fetch_csv(self.url)
        return self.load_text(raw_text)

    def load_text(self, raw_text: str) -> GalleryView:
        """Parses already-fetched CSV text, replacing any loaded articles."""
        self.articles = self.parser.parse(raw_text)
        if not self.articles:
            logger.info("No news articles found or the sheet is empty.")
        return self.view()

    def toggle_category(self, tag: str) -> GalleryView:
        self.engine.toggle_category(tag)
        return self.view()

    def toggle_topic(self, tag: str) -> GalleryView:
        self.engine.toggle_topic(tag)
        return self.view()

    def view(self) -> GalleryView:
        """Builds a fresh snapshot of the current articles and selection."""
        return GalleryView(
            articles=list(self.articles),
            visible=self.engine.visibility(self.articles),
            categories=self.engine.unique_categories(self.articles),
            topics=self.engine.unique_topics(self.articles),
            selected_categories=frozenset(self.engine.category_selection),
            selected_topics=frozenset(self.engine.topic_selection),
        )


def main():
    """Main execution entry point."""
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    renderer = GalleryRenderer(config.PLACEHOLDER_IMAGE)
    gallery = NewsGallery(config.SHEET_CSV_URL)
    try:
        view = gallery.load()
    except SourceUnavailableError as e:
        logger.error("Error fetching news data: %s", e)
        print(renderer.render_error(str(e)))
        sys.exit(1)

    logger.info(
        "Loaded %d articles, %d categories, %d topics.",
        len(view.articles),
        len(view.categories),
        len(view.topics),
    )
    print(renderer.render_page(view, gallery.engine))


if __name__ == "__main__":
    main()
