"""Base analyzer interface."""

from abc import ABC, abstractmethod
from typing import Any


class AnalysisError(Exception):
    """Raised when markup cannot be turned into a complete analysis."""


class BaseAnalyzer(ABC):
    """Abstract base class for all analyzers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return analyzer name."""
        pass

    @abstractmethod
    def analyze(self, html: str) -> Any:
        """
        Run analysis on the given markup.

        Args:
            html: Raw HTML document text

        Returns:
            The analyzer's immutable result record

        Raises:
            TypeError: If html is not a string
            AnalysisError: If the markup could not be analyzed at all
        """
        pass
