"""Markup metrics extraction engine."""

import logging

from analyzers.base import AnalysisError, BaseAnalyzer
from analyzers.markup import MarkupDocument, collapse_whitespace
from analyzers.models import Metrics

logger = logging.getLogger(__name__)


class MetricsExtractor(BaseAnalyzer):
    """
    Extracts on-page quality signals from raw HTML.

    Signals:
    - Content size and text-to-HTML ratio
    - Title, meta description, heading counts
    - Image alt text and explicit dimensions (CLS)
    - Link profile, anchor text quality, tabnabbing exposure
    - Form input labelling
    - Technical head tags, doctype, deprecated elements
    - Open Graph / Twitter Card tags
    - Semantic landmarks

    Absent elements or attributes never fail extraction; they produce
    None / 0 / False for the affected signal.
    """

    GENERIC_ANCHORS = frozenset(
        {
            "click here",
            "read more",
            "learn more",
            "more",
            "here",
            "link",
            "go",
            "view",
            "website",
            "this page",
        }
    )

    DEPRECATED_TAGS = ["font", "center", "marquee", "blink", "big", "strike", "tt"]

    NON_LABELLED_INPUT_TYPES = frozenset({"hidden", "submit", "button"})

    LABEL_ATTRIBUTES = ("aria-label", "aria-labelledby", "title")

    MISSING_SRC = "unknown-src"

    @property
    def name(self) -> str:
        return "markup"

    def analyze(self, html: str) -> Metrics:
        """
        Extract metrics from the given markup.

        Args:
            html: Raw HTML document text (may be empty or malformed)

        Returns:
            A complete Metrics record

        Raises:
            TypeError: If html is not a string
            AnalysisError: If the document could not be analyzed
        """
        if not isinstance(html, str):
            raise TypeError(
                f"Markup must be str, got {type(html).__name__}"
            )

        doc = MarkupDocument.parse(html)

        try:
            metrics = Metrics(
                **self._extract_content(doc),
                **self._extract_essentials(doc),
                **self._extract_images(doc),
                **self._extract_links(doc),
                **self._extract_technical(doc),
                **self._extract_forms(doc),
                **self._extract_social(doc),
                **self._extract_semantics(doc),
            )
        except Exception as e:
            logger.exception(f"Metrics extraction failed: {e}")
            raise AnalysisError(f"Metrics extraction failed: {e}") from e

        logger.debug(
            f"Extracted metrics: {metrics.html_size_bytes} chars, "
            f"{metrics.word_count} words, {metrics.images_total} images, "
            f"{metrics.links_total} links"
        )
        return metrics

    def _extract_content(self, doc: MarkupDocument) -> dict:
        """Measure document size, visible text size and word count."""
        html_size = len(doc.raw)
        text = doc.visible_text()
        text_size = len(text)

        ratio = 0.0
        if html_size > 0:
            ratio = min(100.0, text_size / html_size * 100)

        return {
            "html_size_bytes": html_size,
            "text_size_bytes": text_size,
            "text_to_html_ratio": ratio,
            # Empty text counts as zero words, not one
            "word_count": len(text.split()),
        }

    def _extract_essentials(self, doc: MarkupDocument) -> dict:
        """Read title, meta description and heading counts."""
        title_tag = doc.first("title")
        title = collapse_whitespace(doc.text_of(title_tag)) if title_tag else ""
        title = title or None

        description = doc.first_attribute(
            "meta", {"name": "description"}, "content"
        )

        h1s = doc.all("h1")

        return {
            "title": title,
            "title_length": len(title) if title is not None else 0,
            "meta_description": description,
            "meta_description_length": (
                len(description) if description is not None else 0
            ),
            "h1_count": len(h1s),
            "h1_content": doc.text_of(h1s[0]) if h1s else None,
            "h2_count": len(doc.all("h2")),
            "h3_count": len(doc.all("h3")),
        }

    def _extract_images(self, doc: MarkupDocument) -> dict:
        """Check image alt text and explicit dimensions."""
        images = doc.all("img")
        missing_alt = []
        missing_dimensions = []

        for img in images:
            src = doc.attribute(img, "src") or self.MISSING_SRC

            alt = doc.attribute(img, "alt")
            if alt is None or alt.strip() == "":
                missing_alt.append(src)

            style = _parse_inline_style(doc.attribute(img, "style"))
            has_width = doc.attribute(img, "width") is not None or "width" in style
            has_height = (
                doc.attribute(img, "height") is not None or "height" in style
            )
            if not (has_width and has_height):
                missing_dimensions.append(src)

        return {
            "images_total": len(images),
            "images_without_alt": len(missing_alt),
            "missing_alt_images": tuple(missing_alt),
            "images_without_dimensions": len(missing_dimensions),
            "missing_dimension_images": tuple(missing_dimensions),
        }

    def _extract_links(self, doc: MarkupDocument) -> dict:
        """Classify links and check anchor text and tabnabbing exposure."""
        links = doc.all("a")

        internal = 0
        external = 0
        empty_text = 0
        generic = []
        unsafe = []

        for link in links:
            href = doc.attribute(link, "href")
            text = doc.text_of(link).strip().lower()
            target = doc.attribute(link, "target")
            rel = (doc.attribute(link, "rel") or "").lower()

            if href:
                if href.startswith("http") or href.startswith("//"):
                    external += 1
                    if (
                        target == "_blank"
                        and "noopener" not in rel
                        and "noreferrer" not in rel
                    ):
                        unsafe.append(href)
                else:
                    internal += 1

            if not text:
                if link.find("img") is None:
                    empty_text += 1
            elif text in self.GENERIC_ANCHORS:
                generic.append(f"{text} -> {href}" if href else text)

        return {
            "links_total": len(links),
            "internal_links": internal,
            "external_links": external,
            "links_with_generic_text": len(generic),
            "generic_text_links": tuple(generic),
            "links_with_empty_text": empty_text,
            "unsafe_cross_origin_links": len(unsafe),
            "unsafe_links": tuple(unsafe),
        }

    def _extract_technical(self, doc: MarkupDocument) -> dict:
        """Read head tags, language, doctype and deprecated elements."""
        root = doc.root
        has_doctype = doc.has_doctype_node() or doc.raw.strip().lower().startswith(
            "<!doctype html>"
        )

        return {
            "canonical": doc.first_attribute(
                "link", {"rel": _rel_is("canonical")}, "href"
            ),
            "viewport": doc.first_attribute("meta", {"name": "viewport"}, "content"),
            "robots": doc.first_attribute("meta", {"name": "robots"}, "content"),
            "charset": doc.first_attribute("meta", {"charset": True}, "charset"),
            "lang": doc.attribute(root, "lang") if root is not None else None,
            "favicon": doc.first_attribute(
                "link", {"rel": _rel_is("icon", "shortcut icon")}, "href"
            ),
            "has_doctype": has_doctype,
            "deprecated_tags": len(doc.all(self.DEPRECATED_TAGS)),
        }

    def _extract_forms(self, doc: MarkupDocument) -> dict:
        """Count user-facing inputs and those without an accessible label."""
        inputs = [
            field
            for field in doc.all("input")
            if (doc.attribute(field, "type") or "").lower()
            not in self.NON_LABELLED_INPUT_TYPES
        ]

        unlabelled = sum(
            1 for field in inputs if not self._has_label(doc, field)
        )

        return {
            "inputs_total": len(inputs),
            "inputs_without_labels": unlabelled,
        }

    def _has_label(self, doc: MarkupDocument, field) -> bool:
        if any(
            doc.attribute(field, attr) is not None for attr in self.LABEL_ATTRIBUTES
        ):
            return True

        field_id = doc.attribute(field, "id")
        if field_id and doc.first("label", {"for": field_id}) is not None:
            return True

        return doc.closest(field, "label") is not None

    def _extract_social(self, doc: MarkupDocument) -> dict:
        """Read Open Graph and Twitter Card tags."""
        return {
            "og_title": doc.first_attribute(
                "meta", {"property": "og:title"}, "content"
            ),
            "og_image": doc.first_attribute(
                "meta", {"property": "og:image"}, "content"
            ),
            "twitter_card": doc.first_attribute(
                "meta", {"name": "twitter:card"}, "content"
            ),
        }

    def _extract_semantics(self, doc: MarkupDocument) -> dict:
        """Check for semantic landmark elements."""
        return {
            "has_nav": doc.exists("nav"),
            "has_footer": doc.exists("footer"),
            "has_main": doc.exists("main"),
            "has_article": doc.exists("article"),
            "has_section": doc.exists("section"),
        }


def _rel_is(*values: str):
    """Attribute filter matching a rel value case-insensitively."""
    wanted = {value.lower() for value in values}
    return lambda rel: rel is not None and rel.lower() in wanted


def _parse_inline_style(style: str | None) -> dict[str, str]:
    """Parse a style attribute into {property: value}, skipping empty values."""
    declarations = {}
    if not style:
        return declarations

    for declaration in style.split(";"):
        prop, sep, value = declaration.partition(":")
        prop = prop.strip().lower()
        value = value.strip()
        if sep and prop and value:
            declarations[prop] = value

    return declarations


# Convenience function
def analyze_markup(html: str) -> Metrics:
    """Extract metrics from the given markup."""
    extractor = MetricsExtractor()
    return extractor.analyze(html)
