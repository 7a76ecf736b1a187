"""Report assembly: markup in, metrics + score + findings out."""

import asyncio
import logging
from dataclasses import dataclass

from fastapi.concurrency import run_in_threadpool

from analyzers.extractor import analyze_markup
from analyzers.models import Metrics
from analyzers.scoring import Deduction, calculate_score, score_breakdown, score_grade
from recommendations.engine import generate_insights, generate_insights_async
from recommendations.models import Finding

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuditReport:
    """Complete, immutable result of auditing one document."""

    metrics: Metrics
    score: int
    grade: str
    findings: tuple[Finding, ...]
    deductions: tuple[Deduction, ...]


def _assemble(metrics: Metrics, findings: list[Finding]) -> AuditReport:
    score = calculate_score(metrics)
    report = AuditReport(
        metrics=metrics,
        score=score,
        grade=score_grade(score),
        findings=tuple(findings),
        deductions=tuple(score_breakdown(metrics)),
    )
    logger.info(
        f"Audited {metrics.html_size_bytes} chars: score {score}, "
        f"{len(findings)} findings"
    )
    return report


def build_report(html: str) -> AuditReport:
    """
    Audit markup synchronously.

    Raises:
        TypeError: If html is not a string
        AnalysisError: If the markup could not be analyzed
    """
    metrics = analyze_markup(html)
    return _assemble(metrics, generate_insights(metrics, html))


async def build_report_async(html: str, delay: float | None = None) -> AuditReport:
    """
    Audit markup, pausing before the insight step.

    Identical to build_report apart from the pause. Parsing and extraction
    run in the worker threadpool so the event loop keeps serving other
    requests. Cancellation during the pause propagates as
    asyncio.CancelledError.
    """
    metrics = await run_in_threadpool(analyze_markup, html)
    findings = await generate_insights_async(metrics, html, delay=delay)
    return _assemble(metrics, findings)


class SupersedingAuditor:
    """
    Runs audits so that only the most recent request can complete.

    Submitting a new document cancels any audit still in flight, so a slow
    earlier report can never replace a newer one. Callers that want every
    request to complete should use build_report_async directly.
    """

    def __init__(self, delay: float | None = None):
        self.delay = delay
        self._pending: asyncio.Task | None = None

    async def submit(self, html: str) -> AuditReport:
        """
        Audit markup, cancelling the previous in-flight audit.

        Raises:
            asyncio.CancelledError: If a later submit superseded this one
        """
        if self._pending is not None and not self._pending.done():
            logger.debug("Cancelling superseded audit")
            self._pending.cancel()

        task = asyncio.ensure_future(build_report_async(html, delay=self.delay))
        self._pending = task
        try:
            return await task
        finally:
            if self._pending is task:
                self._pending = None
