"""OptiFlow analyzers package."""

from analyzers.base import AnalysisError, BaseAnalyzer
from analyzers.extractor import MetricsExtractor, analyze_markup
from analyzers.markup import MarkupDocument
from analyzers.models import Metrics
from analyzers.scoring import (
    PENALTIES,
    Deduction,
    Penalty,
    calculate_score,
    score_breakdown,
    score_grade,
)

__all__ = [
    "AnalysisError",
    "BaseAnalyzer",
    "MetricsExtractor",
    "analyze_markup",
    "MarkupDocument",
    "Metrics",
    "PENALTIES",
    "Deduction",
    "Penalty",
    "calculate_score",
    "score_breakdown",
    "score_grade",
]
