"""
Prerequisite advisories.

Prerequisites are checked, never enforced: a course whose prerequisites
are not completed still counts toward the credit totals. This module only
reports the gaps so the student can reorder their plan.
"""

import logging

from ..models import (
    CourseStatus,
    CreditWarning,
    LanguageTrack,
    PrerequisiteStatus,
    Severity,
    WarningKind,
)
from .requirement import coerce_track, index_catalog, is_excluded

logger = logging.getLogger(__name__)


class PrerequisiteChecker:
    """
    Checks the prerequisites of every completed or planned course.

    STATUS RULES:
    -------------
    - met:         the prerequisite has a completed record
    - in progress: the prerequisite is planned or in progress
    - missing:     the student has no record for it at all
    """

    def statuses(self, catalog, records, language_track=LanguageTrack.A) -> list:
        """
        Prerequisite status for each course on the record that has any.

        Returns:
            List of PrerequisiteStatus, one per course id, in record order.
        """
        courses = index_catalog(catalog)
        records = list(records)
        track = coerce_track(language_track)

        completed_ids = {r.course_id for r in records if r.status is CourseStatus.COMPLETED}
        pending_ids = {r.course_id for r in records
                       if r.status in (CourseStatus.PLANNED, CourseStatus.IN_PROGRESS)}

        results = []
        seen = set()
        for record in records:
            if not record.counts_toward_credits or record.course_id in seen:
                continue
            course = courses.get(record.course_id)
            if course is None or not course.prerequisite or is_excluded(course, track):
                continue
            seen.add(course.id)

            in_progress = []
            missing = []
            for prereq in course.prerequisite:
                if prereq in completed_ids:
                    continue
                elif prereq in pending_ids:
                    in_progress.append(prereq)
                else:
                    missing.append(prereq)

            results.append(PrerequisiteStatus(
                course_id=course.id,
                prereqs_met=not in_progress and not missing,
                prereqs_in_progress=tuple(in_progress),
                prereqs_missing=tuple(missing),
            ))
        return results

    def check(self, catalog, records, language_track=LanguageTrack.A) -> list:
        """
        Advisory warnings for courses whose prerequisites are not completed.

        Every warning has INFO severity so it can never block graduation.
        """
        warnings = []
        for status in self.statuses(catalog, records, language_track):
            if status.prereqs_met:
                continue
            unmet = status.prereqs_in_progress + status.prereqs_missing
            logger.debug("Unmet prerequisites for %s: %s", status.course_id, unmet)
            warnings.append(CreditWarning(
                kind=WarningKind.PREREQUISITE_NOT_MET,
                message=f"{status.course_id} expects {', '.join(unmet)} to be completed first",
                severity=Severity.INFO,
                related_course_ids=(status.course_id,) + unmet,
            ))
        return warnings
