"""
CSV record parser implementation.

This module provides the CsvRecordParser class for turning a spreadsheet CSV
export into Article records.
"""

import re
import logging
from typing import List, Optional

from news_gallery.models import Article
from news_gallery.parsers.base import RecordParser

logger = logging.getLogger(__name__)

# A field starts at the beginning of the line or after a comma. Quoted fields
# may contain commas and "" escapes; unquoted fields run to the next comma.
_FIELD_PATTERN = re.compile(r'(?:^|,)(?:"([^"]*(?:""[^"]*)*)"|([^,]*))')

MIN_FIELDS = 5
IMAGE_INDEX, TITLE_INDEX, LINK_INDEX, CATEGORY_INDEX, TOPIC_INDEX = range(5)


def tokenize_line(line: str) -> List[str]:
    """Splits one CSV line into trimmed, unescaped field values."""
    values = []
    for match in _FIELD_PATTERN.finditer(line):
        quoted, bare = match.group(1), match.group(2)
        value = quoted if quoted is not None else bare
        values.append((value or "").replace('""', '"').strip())
    return values


def is_header_record(article: Article) -> bool:
    """Returns True when the record looks like the sheet's column header row."""
    return (
        "image" in article.image_link.lower()
        and "title" in article.title.lower()
        and "link" in article.article_link.lower()
        and "tag" in article.category_tag.lower()
        and any("tag" in tag.lower() for tag in article.topic_tags)
    )


class CsvRecordParser(RecordParser):
    """Parses the gallery spreadsheet's CSV export."""

    def _to_article(self, values: List[str]) -> Optional[Article]:
        """Maps tokenized fields onto an Article, or None if too short."""
        if len(values) < MIN_FIELDS:
            return None

        topic = values[TOPIC_INDEX].strip()
        return Article(
            image_link=values[IMAGE_INDEX],
            title=values[TITLE_INDEX],
            article_link=values[LINK_INDEX],
            category_tag=values[CATEGORY_INDEX].strip(),
            topic_tags=(topic,) if topic else (),
        )

    def parse(self, raw_text: str) -> List[Article]:
        """Parses CSV text into articles, dropping short rows and the header."""
        lines = [line for line in raw_text.split("\n") if line.strip()]

        articles = []
        for line_no, line in enumerate(lines, start=1):
            values = tokenize_line(line)
            article = self._to_article(values)
            if article is None:
                logger.debug(
                    "Skipping line %d: %d field(s), need %d.",
                    line_no,
                    len(values),
                    MIN_FIELDS,
                )
                continue
            articles.append(article)

        if articles and is_header_record(articles[0]):
            logger.debug("Header row removed: %s", articles[0])
            articles = articles[1:]

        logger.info("Parsed %d article(s) from %d line(s).", len(articles), len(lines))
        return articles
