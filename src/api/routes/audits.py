"""Audit API endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status

from analyzers.base import AnalysisError
from api.schemas import AuditCreateRequest, AuditReportResponse
from config import settings
from reports.assembler import build_report_async

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/audits", tags=["Audits"])


@router.post(
    "",
    response_model=AuditReportResponse,
    summary="Audit a document",
    description="Analyze raw HTML and return metrics, a 0-100 score and prioritized findings.",
)
async def create_audit(request: AuditCreateRequest) -> AuditReportResponse:
    """
    Audit the submitted markup.

    Each call is independent; nothing is stored. A parser failure is
    reported as 422 and is not retried.
    """
    if len(request.html) > settings.max_markup_chars:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Markup exceeds {settings.max_markup_chars} characters",
        )

    try:
        report = await build_report_async(
            request.html, delay=settings.insight_delay_ms / 1000
        )
    except AnalysisError as e:
        logger.error(f"Audit failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Analysis failed: {e}",
        )

    return AuditReportResponse.model_validate(report)
