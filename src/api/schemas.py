"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, ConfigDict, Field

from analyzers.models import Metrics
from recommendations.models import Category, Severity


# =============================================================================
# Request Schemas (what clients send to us)
# =============================================================================


class AuditCreateRequest(BaseModel):
    """Request body for auditing a document."""

    html: str = Field(
        ...,
        description="Raw HTML source of the page to audit",
        examples=["<!DOCTYPE html><html lang=\"en\"><head><title>Home</title></head></html>"],
    )


# =============================================================================
# Response Schemas (what we send back to clients)
# =============================================================================


class FindingResponse(BaseModel):
    """Response schema for a single finding."""

    model_config = ConfigDict(from_attributes=True)

    rule_id: str
    category: Category
    severity: Severity
    title: str
    advice: str


class DeductionResponse(BaseModel):
    """Response schema for one applied score penalty."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    band: str
    points: float


class AuditReportResponse(BaseModel):
    """Response schema for a complete audit report."""

    model_config = ConfigDict(from_attributes=True)

    metrics: Metrics
    score: int = Field(..., ge=0, le=100)
    grade: str
    findings: list[FindingResponse]
    deductions: list[DeductionResponse]


# =============================================================================
# Health Check
# =============================================================================


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = "healthy"
    service: str = "optiflow"
    version: str = "1.2.0"
