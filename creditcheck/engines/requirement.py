"""
Graduation Requirement Engine.

This module checks a student's course records against the graduation
requirements and produces a CreditSummary.
"""

import logging
from collections.abc import Mapping

from ..config import CATEGORY_ALIASES
from ..models import (
    CategoryBreakdown,
    CourseStatus,
    CreditSummary,
    CreditWarning,
    LanguageTrack,
    RequirementSpec,
    Severity,
    WarningKind,
)

logger = logging.getLogger(__name__)


def normalize_category(raw_category: str) -> str:
    """
    Map a raw catalog category label to its canonical label.

    Unknown labels come back unchanged. Their credits still count toward
    the grand total but never match a requirement leaf.

        >>> normalize_category("人文科学系(Humanities)")
        'Humanities'
        >>> normalize_category("Underwater Basketry")
        'Underwater Basketry'
    """
    if not isinstance(raw_category, str):
        return raw_category
    key = raw_category.strip()
    return CATEGORY_ALIASES.get(key, key)


def index_catalog(catalog) -> dict:
    """
    Build an id -> Course lookup from a catalog.

    Accepts a mapping keyed by id or any iterable of Course objects.
    Raises TypeError for anything else.
    """
    if isinstance(catalog, Mapping):
        return dict(catalog)
    if isinstance(catalog, (str, bytes)):
        raise TypeError("catalog must be a collection of Course objects, not a string")
    return {course.id: course for course in catalog}


def coerce_track(language_track) -> LanguageTrack:
    """Accept a LanguageTrack or the web client's native-speaker flag."""
    if isinstance(language_track, LanguageTrack):
        return language_track
    if isinstance(language_track, bool):
        return LanguageTrack.from_flag(language_track)
    return LanguageTrack(language_track)


def is_excluded(course, track: LanguageTrack) -> bool:
    """True if the course belongs to the language track the student is not on."""
    return normalize_category(course.category) == track.excluded_category


class RequirementEngine:
    """
    Evaluates course records against a RequirementSpec.

    The engine is stateless. evaluate() borrows its inputs, never mutates
    them, and returns a fresh CreditSummary, so it can be called on every
    change to the record collection.

    LANGUAGE TRACKS:
    ----------------
    Students follow exactly one language track. Courses from the other
    track are dropped before anything is counted: they add nothing to the
    totals, their requirement leaf is left out of the breakdown, and a
    mandatory course on that track is never reported missing.

    DUPLICATE RECORDS:
    ------------------
    Records are processed independently. Two completed records for the
    same course count its credits twice. Keeping the collection unique is
    the job of whoever owns it.
    """

    def evaluate(self, catalog, records, spec: RequirementSpec,
                 language_track=LanguageTrack.A) -> CreditSummary:
        """
        Compute the credit summary for a student.

        Args:
            catalog: Iterable of Course, or mapping of id -> Course
            records: Iterable of StudentCourseRecord
            spec: Graduation requirements
            language_track: LanguageTrack, or True for track A / False for B

        Returns:
            CreditSummary with warnings ordered as: total shortfall,
            category shortfalls in spec order, missing required courses.
        """
        if not isinstance(spec, RequirementSpec):
            raise TypeError(f"spec must be a RequirementSpec, got {type(spec).__name__}")

        courses = index_catalog(catalog)
        records = list(records)
        track = coerce_track(language_track)

        total_completed, total_planned, by_category = self._tally(courses, records, track)

        warnings = []
        if total_completed < spec.total_credits:
            shortfall = spec.total_credits - total_completed
            warnings.append(CreditWarning(
                kind=WarningKind.INSUFFICIENT_CREDITS,
                message=(f"Graduation requires {spec.total_credits} credits: "
                         f"{shortfall} more credits needed"),
                severity=Severity.ERROR,
            ))

        breakdown = []
        for leaf in spec.leaves():
            canonical = normalize_category(leaf.name)
            if canonical == track.excluded_category:
                logger.debug("Skipping requirement %s for language track %s", leaf.name, track.value)
                continue

            completed, planned = by_category.get(canonical, (0, 0))
            remaining = max(0, leaf.required - completed)
            breakdown.append(CategoryBreakdown(
                category=leaf.name,
                completed=completed,
                planned=planned,
                required=leaf.required,
                remaining=remaining,
            ))

            if remaining > 0:
                warnings.append(CreditWarning(
                    kind=WarningKind.INSUFFICIENT_CREDITS,
                    message=f"{leaf.name} is short by {remaining} credits",
                    severity=Severity.ERROR if leaf.is_mandatory else Severity.WARNING,
                ))

        missing = self.missing_required_courses(courses, records, track)
        if missing:
            warnings.append(CreditWarning(
                kind=WarningKind.MISSING_REQUIRED,
                message=f"{len(missing)} required courses are not completed or planned",
                severity=Severity.ERROR,
                related_course_ids=tuple(c.id for c in missing),
            ))

        has_errors = any(w.severity is Severity.ERROR for w in warnings)
        can_graduate = not has_errors and total_completed >= spec.total_credits

        return CreditSummary(
            total_completed=total_completed,
            total_planned=total_planned,
            total_required=spec.total_credits,
            category_breakdown=tuple(breakdown),
            warnings=tuple(warnings),
            can_graduate=can_graduate,
            missing_required=tuple(missing),
        )

    def missing_required_courses(self, catalog, records, language_track=LanguageTrack.A) -> list:
        """
        List mandatory catalog courses with no completed or planned record.

        Courses on the other language track are never reported. The result
        follows catalog order.
        """
        courses = index_catalog(catalog)
        track = coerce_track(language_track)
        taken = {r.course_id for r in records if r.counts_toward_credits}
        return [
            course for course in courses.values()
            if course.is_required
            and not is_excluded(course, track)
            and course.id not in taken
        ]

    def _tally(self, courses: dict, records, track: LanguageTrack) -> tuple:
        """
        Sum completed and planned credits in one pass over the records.

        Returns (total_completed, total_planned, {canonical: (completed, planned)}).
        Unknown categories get a bucket too; no leaf will ever look it up.
        """
        total_completed = 0
        total_planned = 0
        buckets = {}

        for record in records:
            course = courses.get(record.course_id)
            if course is None:
                logger.debug("Skipping record for unknown course %s", record.course_id)
                continue

            category = normalize_category(course.category)
            if category == track.excluded_category:
                logger.debug("Skipping %s: not on language track %s", course.id, track.value)
                continue

            completed, planned = buckets.get(category, (0, 0))
            if record.status is CourseStatus.COMPLETED:
                total_completed += course.credits
                completed += course.credits
            elif record.status is CourseStatus.PLANNED:
                total_planned += course.credits
                planned += course.credits
            buckets[category] = (completed, planned)

        return total_completed, total_planned, buckets


_default_engine = RequirementEngine()


def evaluate(catalog, records, spec: RequirementSpec, language_track=LanguageTrack.A) -> CreditSummary:
    """Module-level shortcut for RequirementEngine().evaluate()."""
    return _default_engine.evaluate(catalog, records, spec, language_track)
