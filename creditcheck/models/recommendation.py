"""
Advisory data models.

Contains dataclasses for the optional advice produced alongside a
CreditSummary: course suggestions for short categories, prerequisite
status, and per-department credit totals.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CategoryRecommendation:
    """
    Courses the student could add to close a category shortfall.

    courses holds catalog Course objects the student has no record for,
    in catalog order.
    """
    category: str
    remaining: int
    courses: tuple = ()


@dataclass(frozen=True)
class PrerequisiteStatus:
    """
    Prerequisite state of one course on the student's record.

    A prerequisite is met only once it is completed. Planned or in-progress
    prerequisites are reported separately so the student can tell "on the
    way" from "never started".
    """
    course_id: str
    prereqs_met: bool
    prereqs_in_progress: tuple = ()
    prereqs_missing: tuple = ()


@dataclass
class DepartmentTotal:
    completed: int = 0
    planned: int = 0
    course_ids: list = field(default_factory=list)
