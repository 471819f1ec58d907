"""
Per-department credit totals.

Departments are informational: they play no part in graduation
requirements, but students like to see where their credits came from.
"""

from ..config import OTHER_DEPARTMENT
from ..models import CourseStatus, DepartmentTotal, LanguageTrack
from .requirement import coerce_track, index_catalog, is_excluded


def department_totals(catalog, records, language_track=LanguageTrack.A) -> dict:
    """
    Sum completed and planned credits per department.

    Follows the same counting rules as RequirementEngine.evaluate: dangling
    records are skipped, the other language track is excluded, in-progress
    records count for nothing and duplicates count twice. Courses without a
    department are grouped under OTHER_DEPARTMENT.

    Returns:
        Dict of department -> DepartmentTotal in order of first appearance.
    """
    courses = index_catalog(catalog)
    track = coerce_track(language_track)
    totals = {}

    for record in records:
        course = courses.get(record.course_id)
        if course is None or is_excluded(course, track):
            continue
        if not record.counts_toward_credits:
            continue

        department = course.department or OTHER_DEPARTMENT
        total = totals.setdefault(department, DepartmentTotal())
        if record.status is CourseStatus.COMPLETED:
            total.completed += course.credits
        else:
            total.planned += course.credits
        if course.id not in total.course_ids:
            total.course_ids.append(course.id)

    return totals
