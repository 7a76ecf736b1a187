"""Queryable document model over leniently parsed HTML.

Wraps BeautifulSoup (lxml backend) behind a small typed interface so the
extractor never relies on the truthiness of attribute values: an absent
attribute is ``None``, a present but empty one is ``""``.

Visible text is a heuristic. Strings below ``<body>`` are kept unless they sit
inside ``<script>`` or ``<style>``; no CSS or layout is evaluated, so text
hidden by stylesheets still counts.
"""

import logging
import re

from bs4 import BeautifulSoup, Doctype, NavigableString, Tag
from bs4.element import PreformattedString

from analyzers.base import AnalysisError

logger = logging.getLogger(__name__)

HIDDEN_TEXT_TAGS = ["script", "style"]

_WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


class MarkupDocument:
    """A parsed HTML document with typed, read-only query helpers."""

    PARSER = "lxml"

    def __init__(self, soup: BeautifulSoup, raw: str):
        self._soup = soup
        self.raw = raw

    @classmethod
    def parse(cls, html: str) -> "MarkupDocument":
        """
        Parse raw markup leniently.

        Malformed markup is repaired by the parser (unclosed tags, stray
        quotes). Only a failure of the parser itself is an error.

        Raises:
            AnalysisError: If no tree could be built
        """
        # Lone surrogates cannot reach lxml; parse a copy with U+FFFD in their place
        markup = html.encode("utf-16", "surrogatepass").decode("utf-16", "replace")

        try:
            soup = BeautifulSoup(markup, cls.PARSER, multi_valued_attributes=None)
        except Exception as e:
            logger.exception(f"Markup parser failed on {len(html)} chars: {e}")
            raise AnalysisError(f"Could not parse markup: {e}") from e

        return cls(soup, html)

    # ------------------------------------------------------------------
    # Element queries
    # ------------------------------------------------------------------

    @property
    def root(self) -> Tag | None:
        """The ``<html>`` element, if the parser produced one."""
        return self._soup.find("html")

    @property
    def body(self) -> Tag | None:
        return self._soup.find("body")

    def first(self, name: str | list[str], attrs: dict | None = None) -> Tag | None:
        """Return the first element in document order matching name and attrs."""
        return self._soup.find(name, attrs=attrs or {})

    def all(self, name: str | list[str], attrs: dict | None = None) -> list[Tag]:
        """Return every element matching name and attrs, in document order."""
        return list(self._soup.find_all(name, attrs=attrs or {}))

    def exists(self, name: str) -> bool:
        return self.first(name) is not None

    def first_attribute(
        self, name: str, attrs: dict, attribute: str
    ) -> str | None:
        """Read ``attribute`` from the first element matching name and attrs."""
        element = self.first(name, attrs)
        if element is None:
            return None
        return self.attribute(element, attribute)

    @staticmethod
    def attribute(element: Tag, name: str) -> str | None:
        """Return the raw attribute value, or None when the attribute is absent."""
        return element.get(name)

    @staticmethod
    def closest(element: Tag, name: str) -> Tag | None:
        """Return the nearest enclosing element with the given tag name."""
        return element.find_parent(name)

    @staticmethod
    def text_of(element: Tag) -> str:
        """Raw concatenated text of an element, untrimmed."""
        return element.get_text()

    # ------------------------------------------------------------------
    # Document-level projections
    # ------------------------------------------------------------------

    def has_doctype_node(self) -> bool:
        return any(isinstance(node, Doctype) for node in self._soup.contents)

    def visible_text(self) -> str:
        """
        Text a reader would roughly see in the page body.

        Script and style contents, comments and declarations are excluded;
        whitespace is collapsed and the result trimmed.
        """
        body = self.body
        if body is None:
            return ""

        parts = []
        for node in body.descendants:
            if not isinstance(node, NavigableString):
                continue
            if isinstance(node, PreformattedString):
                # Comments, CDATA, doctype and processing instructions
                continue
            if node.find_parent(HIDDEN_TEXT_TAGS) is not None:
                continue
            parts.append(str(node))

        # Fragments join as in textContent: "<b>wor</b>ld" is one word
        return collapse_whitespace("".join(parts))
