"""Unit tests for parsers."""

import unittest

from news_gallery.models import Article
from news_gallery.parsers.csv_records import (
    CsvRecordParser,
    is_header_record,
    tokenize_line,
)


class TestTokenizeLine(unittest.TestCase):
    def test_single_field(self):
        self.assertEqual(tokenize_line("only"), ["only"])

    def test_trailing_empty_field(self):
        self.assertEqual(tokenize_line("a,b,"), ["a", "b", ""])

    def test_empty_fields_between_commas(self):
        self.assertEqual(tokenize_line("a,,b"), ["a", "", "b"])

    def test_leading_empty_field(self):
        self.assertEqual(tokenize_line(",a"), ["", "a"])

    def test_quoted_comma_preserved(self):
        self.assertEqual(
            tokenize_line('"img.png","A, B","link"'), ["img.png", "A, B", "link"]
        )

    def test_doubled_quotes_collapsed(self):
        self.assertEqual(tokenize_line('"say ""hi""",x'), ['say "hi"', "x"])
        # Also applies outside quoted fields
        self.assertEqual(tokenize_line('a""b,c'), ['a"b', "c"])

    def test_values_trimmed(self):
        self.assertEqual(tokenize_line("  a , b  ,c "), ["a", "b", "c"])


class TestCsvRecordParser(unittest.TestCase):
    def setUp(self):
        self.parser = CsvRecordParser()

    def test_parse_full_row(self):
        articles = self.parser.parse('"img.png","A, B","link","Cat","Topic"')
        self.assertEqual(
            articles,
            [
                Article(
                    image_link="img.png",
                    title="A, B",
                    article_link="link",
                    category_tag="Cat",
                    topic_tags=("Topic",),
                )
            ],
        )

    def test_short_row_dropped(self):
        self.assertEqual(self.parser.parse('"img.png","Title"'), [])

    def test_short_rows_do_not_affect_others(self):
        text = "a,b\nimg.png,Title,http://x,Cat,Top\nc,d,e,f"
        articles = self.parser.parse(text)
        self.assertEqual(len(articles), 1)
        self.assertEqual(articles[0].title, "Title")

    def test_blank_lines_ignored(self):
        text = "\n   \nimg.png,One,http://1,Cat,Top\n\n\t\nimg.png,Two,http://2,Cat,Top\n"
        titles = [a.title for a in self.parser.parse(text)]
        self.assertEqual(titles, ["One", "Two"])

    def test_empty_input(self):
        self.assertEqual(self.parser.parse(""), [])
        self.assertEqual(self.parser.parse("  \n \n"), [])

    def test_empty_topic_gives_no_tags(self):
        articles = self.parser.parse("img.png,Title,http://x,Cat,   ")
        self.assertEqual(articles[0].topic_tags, ())
        articles = self.parser.parse("img.png,Title,http://x,,")
        self.assertEqual(articles[0].category_tag, "")
        self.assertEqual(articles[0].topic_tags, ())

    def test_extra_fields_ignored(self):
        articles = self.parser.parse("img.png,Title,http://x,Cat,Top,Extra,More")
        self.assertEqual(articles[0].topic_tags, ("Top",))

    def test_empty_image_link_kept(self):
        articles = self.parser.parse(",Title,http://x,Cat,Top")
        self.assertEqual(articles[0].image_link, "")
        self.assertEqual(articles[0].title, "Title")

    def test_crlf_line_endings(self):
        articles = self.parser.parse("img.png,Title,http://x,Cat,Top\r\n")
        self.assertEqual(articles[0].topic_tags, ("Top",))

    def test_header_row_removed(self):
        text = "Image,Title,Link,Tag,Tag\nimg.png,Real Title,http://x,Cat,Top"
        articles = self.parser.parse(text)
        self.assertEqual(len(articles), 1)
        self.assertEqual(articles[0].title, "Real Title")

    def test_header_detection_is_case_insensitive(self):
        text = "IMAGE LINK,TITLE,ARTICLE LINK,TAG D,TAG E\nimg.png,T,http://x,Cat,Top"
        self.assertEqual(len(self.parser.parse(text)), 1)

    def test_header_needs_every_column(self):
        # Topic column does not mention "tag"
        text = "Image,Title,Link,Tag,Topic\nimg.png,Real Title,http://x,Cat,Top"
        self.assertEqual(len(self.parser.parse(text)), 2)

    def test_only_first_record_checked(self):
        text = "img.png,Real Title,http://x,Cat,Top\nImage,Title,Link,Tag,Tag"
        self.assertEqual(len(self.parser.parse(text)), 2)

    def test_header_after_dropped_short_row(self):
        text = "junk\nImage,Title,Link,Tag,Tag\nimg.png,Real Title,http://x,Cat,Top"
        articles = self.parser.parse(text)
        self.assertEqual([a.title for a in articles], ["Real Title"])

    def test_lookalike_article_is_dropped(self):
        # Known ambiguity of the header heuristic
        text = "image.png,Title of it,http://link,Tagged,Tag cloud"
        self.assertEqual(self.parser.parse(text), [])


class TestIsHeaderRecord(unittest.TestCase):
    def test_no_topic_tags(self):
        article = Article("Image", "Title", "Link", "Tag", ())
        self.assertFalse(is_header_record(article))

    def test_any_topic_tag_matches(self):
        article = Article("Image", "Title", "Link", "Tag", ("x", "Tags"))
        self.assertTrue(is_header_record(article))


if __name__ == "__main__":
    unittest.main()
