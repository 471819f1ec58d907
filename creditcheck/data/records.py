"""
Record collection helpers.

The student's record collection is the only mutable state in the system.
These helpers never modify a collection in place: each returns a new list,
and the caller re-evaluates against it.
"""

from dataclasses import replace

from ..models import CourseStatus, StudentCourseRecord


def update_record(records: list, update: StudentCourseRecord) -> list:
    """
    Add a record, or replace the first record for the same course.

    The replacement keeps the original position so a rendered list does
    not jump around when a status changes.
    """
    records = list(records)
    for i, existing in enumerate(records):
        if existing.course_id == update.course_id:
            return records[:i] + [update] + records[i + 1:]
    return records + [update]


def remove_record(records: list, course_id: str) -> list:
    """Drop every record for course_id."""
    return [r for r in records if r.course_id != course_id]


def bulk_update_status(records: list, course_ids, status: CourseStatus) -> list:
    """Set the status of every record whose course is in course_ids."""
    targets = set(course_ids)
    return [
        replace(r, status=status) if r.course_id in targets else r
        for r in records
    ]
