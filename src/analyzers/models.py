"""Immutable signal record produced by the metrics extractor."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Metrics:
    """
    All signals extracted from one analyzed document.

    Every ``*_images`` / ``*_links`` tuple has the same length as its paired
    count field.
    """

    # Content
    html_size_bytes: int
    text_size_bytes: int
    text_to_html_ratio: float  # 0-100, 0 for empty input
    word_count: int

    # Essentials
    title: str | None
    title_length: int
    meta_description: str | None
    meta_description_length: int
    h1_count: int
    h1_content: str | None  # Verbatim text of the first H1
    h2_count: int
    h3_count: int

    # Images
    images_total: int
    images_without_alt: int
    missing_alt_images: tuple[str, ...]
    images_without_dimensions: int  # CLS risk
    missing_dimension_images: tuple[str, ...]

    # Links
    links_total: int
    internal_links: int
    external_links: int
    links_with_generic_text: int
    generic_text_links: tuple[str, ...]
    links_with_empty_text: int
    unsafe_cross_origin_links: int  # target=_blank without noopener/noreferrer
    unsafe_links: tuple[str, ...]

    # Technical
    canonical: str | None
    viewport: str | None
    robots: str | None
    charset: str | None
    lang: str | None
    favicon: str | None
    has_doctype: bool
    deprecated_tags: int

    # Forms / accessibility
    inputs_total: int
    inputs_without_labels: int

    # Social
    og_title: str | None
    og_image: str | None
    twitter_card: str | None

    # Semantic structure
    has_nav: bool
    has_footer: bool
    has_main: bool
    has_article: bool
    has_section: bool
