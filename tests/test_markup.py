"""Tests for the lenient document model."""

import unittest
from unittest.mock import patch

from analyzers.base import AnalysisError
from analyzers.markup import MarkupDocument, collapse_whitespace
from pages import page


class TestMarkupDocument(unittest.TestCase):
    def test_absent_and_empty_attributes_are_distinct(self):
        doc = MarkupDocument.parse(page('<img src="a.jpg" alt="">'))
        img = doc.first("img")

        self.assertEqual(doc.attribute(img, "alt"), "")
        self.assertIsNone(doc.attribute(img, "title"))

    def test_multi_valued_attributes_stay_raw(self):
        doc = MarkupDocument.parse(
            page(head='<link rel="shortcut icon" href="/f.ico">')
        )
        link = doc.first("link", {"rel": "shortcut icon"})

        self.assertIsNotNone(link)
        self.assertEqual(doc.attribute(link, "rel"), "shortcut icon")

    def test_tag_and_attribute_names_are_case_insensitive(self):
        doc = MarkupDocument.parse('<HTML LANG="de"><BODY><IMG SRC="x.png"></BODY></HTML>')

        self.assertEqual(doc.attribute(doc.root, "lang"), "de")
        self.assertEqual(doc.attribute(doc.first("img"), "src"), "x.png")

    def test_closest_finds_enclosing_element(self):
        doc = MarkupDocument.parse(page("<label>Name <span><input id='n'></span></label>"))
        field = doc.first("input")

        self.assertEqual(doc.closest(field, "label").name, "label")
        self.assertIsNone(doc.closest(field, "form"))

    def test_visible_text_skips_script_style_and_comments(self):
        doc = MarkupDocument.parse(
            page(
                "<p>Hello   <b>world</b></p>"
                "<script>var hidden = 1;</script>"
                "<style>p { color: red; }</style>"
                "<!-- a comment -->"
                "<p>\n\tagain </p>"
            )
        )

        self.assertEqual(doc.visible_text(), "Hello world again")

    def test_visible_text_ignores_head(self):
        doc = MarkupDocument.parse(page("<p>Body</p>", head="<title>Head title</title>"))

        self.assertEqual(doc.visible_text(), "Body")

    def test_visible_text_of_empty_document(self):
        self.assertEqual(MarkupDocument.parse("").visible_text(), "")

    def test_malformed_markup_is_repaired(self):
        doc = MarkupDocument.parse("<div><p>Unclosed <b>bold <a href=foo>link")

        self.assertEqual(doc.attribute(doc.first("a"), "href"), "foo")
        self.assertEqual(doc.visible_text(), "Unclosed bold link")

    def test_inline_fragments_join_into_one_word(self):
        doc = MarkupDocument.parse(page("<p>Hello <b>wor</b>ld!</p>"))

        self.assertEqual(doc.visible_text(), "Hello world!")

    def test_lone_surrogate_is_replaced(self):
        html = "<html><body><h1>a\ud800b</h1></body></html>"
        doc = MarkupDocument.parse(html)

        self.assertEqual(doc.text_of(doc.first("h1")), "a\ufffdb")
        self.assertEqual(doc.raw, html)

    def test_doctype_node_detected(self):
        self.assertTrue(MarkupDocument.parse("<!DOCTYPE html><p>x</p>").has_doctype_node())
        self.assertFalse(MarkupDocument.parse("<p>x</p>").has_doctype_node())

    def test_parser_failure_raises_analysis_error(self):
        with patch("analyzers.markup.BeautifulSoup", side_effect=ValueError("boom")):
            with self.assertRaises(AnalysisError) as cm:
                MarkupDocument.parse("<p>x</p>")

        self.assertIn("boom", str(cm.exception))
        self.assertIsInstance(cm.exception.__cause__, ValueError)


class TestCollapseWhitespace(unittest.TestCase):
    def test_collapses_and_trims(self):
        self.assertEqual(collapse_whitespace("  a \n\t b  "), "a b")

    def test_empty(self):
        self.assertEqual(collapse_whitespace("   "), "")


if __name__ == "__main__":
    unittest.main()
