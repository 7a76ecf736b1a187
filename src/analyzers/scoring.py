"""Health score calculation from extracted metrics."""

import math
from dataclasses import dataclass
from typing import Callable

from analyzers.models import Metrics


@dataclass(frozen=True)
class Penalty:
    """One row of the deduction table."""

    id: str
    band: str  # essentials, technical, content, links, images
    points: float
    condition: Callable[[Metrics], bool]
    # Fraction of points applied; None means the full amount
    proportion: Callable[[Metrics], float] | None = None

    def deduction(self, metrics: Metrics) -> float:
        if not self.condition(metrics):
            return 0.0
        if self.proportion is None:
            return float(self.points)
        return self.points * self.proportion(metrics)


@dataclass(frozen=True)
class Deduction:
    """A penalty that applied to a specific document."""

    id: str
    band: str
    points: float


# Nominal band budgets. Not enforced: a band may exceed its budget.
BAND_BUDGETS = {
    "essentials": 35,
    "technical": 20,
    "content": 15,
    "links": 15,
    "images": 15,
}

PENALTIES = (
    # Essentials
    Penalty("h1-not-single", "essentials", 10, lambda m: m.h1_count != 1),
    Penalty("missing-title", "essentials", 10, lambda m: m.title is None),
    Penalty(
        "missing-meta-description",
        "essentials",
        8,
        lambda m: m.meta_description is None,
    ),
    Penalty("missing-viewport", "essentials", 7, lambda m: m.viewport is None),
    # Technical & security
    Penalty("missing-lang", "technical", 3, lambda m: m.lang is None),
    Penalty("missing-canonical", "technical", 3, lambda m: m.canonical is None),
    Penalty("deprecated-tags", "technical", 3, lambda m: m.deprecated_tags > 0),
    Penalty(
        "unsafe-links", "technical", 5, lambda m: m.unsafe_cross_origin_links > 0
    ),
    Penalty(
        "unlabeled-inputs", "technical", 6, lambda m: m.inputs_without_labels > 0
    ),
    # Content quality (lengths of a missing title/description are 0)
    Penalty(
        "title-length",
        "content",
        3,
        lambda m: m.title_length > 70 or m.title_length < 10,
    ),
    Penalty(
        "meta-description-length",
        "content",
        2,
        lambda m: m.meta_description_length < 50 or m.meta_description_length > 300,
    ),
    Penalty("low-text-ratio", "content", 5, lambda m: m.text_to_html_ratio < 10),
    Penalty("low-word-count", "content", 5, lambda m: m.word_count < 200),
    # Links
    Penalty("generic-anchors", "links", 5, lambda m: m.links_with_generic_text > 0),
    Penalty("empty-anchors", "links", 5, lambda m: m.links_with_empty_text > 0),
    Penalty(
        "no-internal-links",
        "links",
        5,
        lambda m: m.internal_links == 0 and m.links_total > 0,
    ),
    # Images & Core Web Vitals
    Penalty(
        "images-missing-alt",
        "images",
        7,
        lambda m: m.images_total > 0,
        proportion=lambda m: m.images_without_alt / m.images_total,
    ),
    Penalty(
        "images-missing-dimensions",
        "images",
        8,
        lambda m: m.images_total > 0,
        proportion=lambda m: m.images_without_dimensions / m.images_total,
    ),
)


def score_breakdown(metrics: Metrics) -> list[Deduction]:
    """Return every penalty that applies to the metrics, in table order."""
    deductions = []

    for penalty in PENALTIES:
        points = penalty.deduction(metrics)
        if points > 0:
            deductions.append(Deduction(penalty.id, penalty.band, points))

    return deductions


def calculate_score(metrics: Metrics) -> int:
    """
    Calculate the 0-100 health score.

    Starts at 100 and subtracts every applicable penalty. Penalties compound
    and are not capped per band. Halves round up.
    """
    total = sum(d.points for d in score_breakdown(metrics))
    return max(0, math.floor(100 - total + 0.5))


def score_grade(score: int) -> str:
    """Bucket a score into good (80+), fair (50+) or poor."""
    if score >= 80:
        return "good"
    if score >= 50:
        return "fair"
    return "poor"
