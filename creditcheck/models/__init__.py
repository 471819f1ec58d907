"""
Data models for the credit checker.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .course import Course, CourseStatus, LanguageTrack, StudentCourseRecord, Term
from .requirement import (
    CategoryRequirement,
    RequirementLeaf,
    RequirementSpec,
    SubcategoryRequirement,
)
from .summary import (
    CategoryBreakdown,
    CreditSummary,
    CreditWarning,
    Severity,
    WarningKind,
)
from .recommendation import CategoryRecommendation, DepartmentTotal, PrerequisiteStatus

__all__ = [
    # Catalog and records
    "Course",
    "CourseStatus",
    "LanguageTrack",
    "StudentCourseRecord",
    "Term",
    # Requirements
    "CategoryRequirement",
    "RequirementLeaf",
    "RequirementSpec",
    "SubcategoryRequirement",
    # Evaluation results
    "CategoryBreakdown",
    "CreditSummary",
    "CreditWarning",
    "Severity",
    "WarningKind",
    # Advice
    "CategoryRecommendation",
    "DepartmentTotal",
    "PrerequisiteStatus",
]
