"""Insight rules definition."""

from dataclasses import asdict, dataclass
from typing import Callable

from analyzers.models import Metrics
from recommendations.models import Category, Finding, Severity


@dataclass(frozen=True)
class Rule:
    """A single insight rule."""

    id: str
    category: Category
    severity: Severity
    title: str
    advice: str  # str.format template over Metrics field names
    condition: Callable[[Metrics], bool]

    def to_finding(self, metrics: Metrics) -> Finding:
        return Finding(
            rule_id=self.id,
            category=self.category,
            severity=self.severity,
            title=self.title,
            advice=self.advice.format(**asdict(metrics)),
        )


# =============================================================================
# Content & Structure Rules
# =============================================================================

CONTENT_RULES = (
    Rule(
        id="missing-h1",
        category=Category.CONTENT,
        severity=Severity.HIGH,
        title="Missing H1 Heading",
        advice="The H1 tag is the most important heading. Add exactly one <h1> containing your main target keyword.",
        condition=lambda m: m.h1_count == 0,
    ),
    Rule(
        id="multiple-h1",
        category=Category.CONTENT,
        severity=Severity.MEDIUM,
        title="Multiple H1 Tags",
        advice="Search engines prefer a single H1 per page to understand the primary topic. Convert secondary H1s to H2s.",
        condition=lambda m: m.h1_count > 1,
    ),
    Rule(
        id="thin-content",
        category=Category.CONTENT,
        severity=Severity.MEDIUM,
        title="Thin Content",
        advice="Page only has {word_count} words. Aim for at least 300-500 words to provide enough context for search engines.",
        condition=lambda m: m.word_count < 300,
    ),
)

# =============================================================================
# Technical & Security Rules
# =============================================================================

TECHNICAL_RULES = (
    Rule(
        id="tabnabbing",
        category=Category.TECHNICAL,
        severity=Severity.HIGH,
        title="Security Vulnerability (Tabnabbing)",
        advice='Found {unsafe_cross_origin_links} external links using target="_blank" without rel="noopener". This exposes your site to performance and security issues.',
        condition=lambda m: m.unsafe_cross_origin_links > 0,
    ),
    Rule(
        id="missing-viewport",
        category=Category.TECHNICAL,
        severity=Severity.HIGH,
        title="Not Mobile Friendly",
        advice='Missing <meta name="viewport"> tag. This page will not scale correctly on mobile devices, hurting rankings.',
        condition=lambda m: m.viewport is None,
    ),
    Rule(
        id="cls-risk",
        category=Category.TECHNICAL,
        severity=Severity.MEDIUM,
        title="High CLS Risk",
        advice="{images_without_dimensions} images are missing width/height attributes. This causes layout shifts while loading (Core Web Vitals failure).",
        condition=lambda m: m.images_without_dimensions > 0,
    ),
)

# =============================================================================
# Accessibility Rules
# =============================================================================

ACCESSIBILITY_RULES = (
    Rule(
        id="unlabeled-inputs",
        category=Category.ACCESSIBILITY,
        severity=Severity.HIGH,
        title="Inaccessible Forms",
        advice='{inputs_without_labels} input fields are missing labels. Use <label for="id">, aria-label, or title attributes to ensure screen readers work.',
        condition=lambda m: m.inputs_without_labels > 0,
    ),
    Rule(
        id="missing-alt",
        category=Category.ACCESSIBILITY,
        severity=Severity.MEDIUM,
        title="Missing Alt Text",
        advice="{images_without_alt} images lack description. Add alt text to help visually impaired users and rank in Google Images.",
        condition=lambda m: m.images_without_alt > 0,
    ),
)

# =============================================================================
# Linking Strategy Rules
# =============================================================================

LINKING_RULES = (
    Rule(
        id="generic-anchors",
        category=Category.LINKING,
        severity=Severity.MEDIUM,
        title="Poor Anchor Text",
        advice='Avoid generic links like "click here" or "read more". Use descriptive text that tells Google what the linked page is about.',
        condition=lambda m: m.links_with_generic_text > 0,
    ),
    Rule(
        id="no-internal-links",
        category=Category.LINKING,
        severity=Severity.MEDIUM,
        title="No Internal Links",
        advice="You are linking out to other sites but not to your own. Add internal links to keep users engaged and distribute page authority.",
        condition=lambda m: m.internal_links == 0 and m.links_total > 0,
    ),
)

# =============================================================================
# Social Signal Rules
# =============================================================================

SOCIAL_RULES = (
    Rule(
        id="missing-social-cards",
        category=Category.KEYWORDS,
        severity=Severity.LOW,
        title="Missing Social Cards",
        advice="Add OpenGraph (og:image, og:title) tags. Without them, shared links on Facebook/LinkedIn will look broken or empty.",
        condition=lambda m: m.og_image is None or m.og_title is None,
    ),
)

# =============================================================================
# All Rules Combined (evaluation order)
# =============================================================================

ALL_RULES = (
    CONTENT_RULES + TECHNICAL_RULES + ACCESSIBILITY_RULES + LINKING_RULES + SOCIAL_RULES
)
