"""Finding value objects produced by the insight engine."""

import enum
from dataclasses import dataclass


class Severity(str, enum.Enum):
    """Severity levels for findings."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Category(str, enum.Enum):
    """Categories for findings."""

    CONTENT = "content"
    TECHNICAL = "technical"
    KEYWORDS = "keywords"
    ACCESSIBILITY = "accessibility"
    LINKING = "linking"


@dataclass(frozen=True)
class Finding:
    """One advisory item triggered by a rule."""

    rule_id: str
    category: Category
    severity: Severity
    title: str
    advice: str
