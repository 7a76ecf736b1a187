"""Insight engine that evaluates rules against extracted metrics."""

import asyncio
import logging

from analyzers.models import Metrics
from config import settings
from recommendations.models import Finding
from recommendations.rules import ALL_RULES, Rule

logger = logging.getLogger(__name__)


class InsightEngine:
    """
    Generates findings by evaluating rules against a Metrics record.

    The engine:
    1. Walks the rule table top to bottom
    2. Emits at most one Finding per triggered rule
    3. Preserves table order (findings are not re-sorted by severity)

    It holds no per-document state, so one instance may serve any number
    of concurrent callers.
    """

    def __init__(self, rules: tuple[Rule, ...] = ALL_RULES):
        self.rules = rules

    def generate(self, metrics: Metrics, html: str | None = None) -> list[Finding]:
        """
        Generate findings for a document.

        Args:
            metrics: Extracted metrics for the document
            html: Raw markup; accepted for future rules, currently unused

        Returns:
            Findings in rule-table order; empty for a clean page
        """
        triggered = self._evaluate_rules(metrics)
        logger.debug(f"Triggered {len(triggered)} of {len(self.rules)} rules")

        return [rule.to_finding(metrics) for rule in triggered]

    def _evaluate_rules(self, metrics: Metrics) -> list[Rule]:
        """Return the rules whose condition holds, in table order."""
        triggered = []

        for rule in self.rules:
            if rule.condition(metrics):
                triggered.append(rule)
                logger.debug(f"Rule triggered: {rule.id}")

        return triggered


def generate_insights(metrics: Metrics, html: str | None = None) -> list[Finding]:
    """Convenience function to generate findings for a document."""
    engine = InsightEngine()
    return engine.generate(metrics, html)


async def generate_insights_async(
    metrics: Metrics,
    html: str | None = None,
    delay: float | None = None,
) -> list[Finding]:
    """
    Generate findings after an artificial pause.

    The pause only paces interactive callers; it does no work. Cancelling
    the awaiting task abandons the call without producing findings.

    Args:
        metrics: Extracted metrics for the document
        html: Raw markup, passed through to the engine
        delay: Pause in seconds; defaults to settings.insight_delay_ms

    Returns:
        Findings in rule-table order
    """
    if delay is None:
        delay = settings.insight_delay_ms / 1000

    if delay > 0:
        await asyncio.sleep(delay)

    return generate_insights(metrics, html)
