"""
Evaluation result data models.

Contains dataclasses for representing the result of checking a student's
records against the graduation requirements.
"""

from dataclasses import dataclass
from enum import Enum


class WarningKind(Enum):
    INSUFFICIENT_CREDITS = "insufficient_credits"
    MISSING_REQUIRED = "missing_required"
    PREREQUISITE_NOT_MET = "prerequisite_not_met"


class Severity(Enum):
    """
    How serious a warning is.

    ERROR: blocks graduation
    WARNING: a shortfall in an optional category, does not block graduation
    INFO: advisory only
    """
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class CreditWarning:
    kind: WarningKind
    message: str
    severity: Severity
    related_course_ids: tuple = ()


@dataclass(frozen=True)
class CategoryBreakdown:
    """
    Credit totals for one requirement leaf.

    Example for Humanities with 2 credits required:
        category: "Humanities"
        completed: 2
        planned: 2
        required: 2
        remaining: 0
    """
    category: str
    completed: int
    planned: int
    required: int
    remaining: int


@dataclass(frozen=True)
class CreditSummary:
    """
    Complete result of one evaluation.

    Built fresh on every call to RequirementEngine.evaluate and never
    edited afterwards. missing_required holds the Course objects counted
    by the aggregate missing_required warning.
    """
    total_completed: int
    total_planned: int
    total_required: int
    category_breakdown: tuple
    warnings: tuple
    can_graduate: bool
    missing_required: tuple = ()

    @property
    def errors(self) -> list:
        return [w for w in self.warnings if w.severity is Severity.ERROR]

    def breakdown_for(self, category: str):
        """Return the breakdown row for a leaf, or None if the spec has none."""
        for row in self.category_breakdown:
            if row.category == category:
                return row
        return None
