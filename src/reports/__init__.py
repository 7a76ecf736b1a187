"""OptiFlow reports package."""

from reports.assembler import (
    AuditReport,
    SupersedingAuditor,
    build_report,
    build_report_async,
)

__all__ = [
    "AuditReport",
    "SupersedingAuditor",
    "build_report",
    "build_report_async",
]
