"""
Evaluation and advisory engines.

This package contains the business logic of the credit checker. Nothing
here performs I/O.
"""

from .requirement import RequirementEngine, evaluate, normalize_category
from .prerequisite import PrerequisiteChecker
from .recommendation import CourseRecommendationEngine
from .department import department_totals

__all__ = [
    "RequirementEngine",
    "evaluate",
    "normalize_category",
    "PrerequisiteChecker",
    "CourseRecommendationEngine",
    "department_totals",
]
