"""OptiFlow recommendations package."""

from recommendations.engine import (
    InsightEngine,
    generate_insights,
    generate_insights_async,
)
from recommendations.models import Category, Finding, Severity
from recommendations.rules import ALL_RULES, Rule

__all__ = [
    "InsightEngine",
    "generate_insights",
    "generate_insights_async",
    "Category",
    "Finding",
    "Severity",
    "ALL_RULES",
    "Rule",
]
