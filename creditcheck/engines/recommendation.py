"""
Course Recommendation Engine.

This module suggests catalog courses for the categories where a student
is still short of credits.
"""

from ..config import RECOMMENDATIONS_PER_CATEGORY
from ..models import CategoryRecommendation, CreditSummary, LanguageTrack
from .requirement import coerce_track, index_catalog, is_excluded, normalize_category


class CourseRecommendationEngine:
    """
    Suggests courses to close category shortfalls.

    For each breakdown row with remaining credits, lists up to
    per_category catalog courses in that category which the student has
    not touched yet (no record of any status). Suggestions follow catalog
    order, so a catalog sorted by year suggests earlier courses first.
    """

    def __init__(self, per_category: int = RECOMMENDATIONS_PER_CATEGORY):
        self.per_category = per_category

    def recommend(self, catalog, records, summary: CreditSummary,
                  language_track=LanguageTrack.A) -> list:
        """
        Build recommendations from an evaluated summary.

        Args:
            catalog: Iterable of Course, or mapping of id -> Course
            records: The records the summary was computed from
            summary: Result of RequirementEngine.evaluate
            language_track: Same track the summary was computed with

        Returns:
            List of CategoryRecommendation, in breakdown order. Categories
            with nothing left to suggest are still listed, with no courses.
        """
        courses = index_catalog(catalog)
        track = coerce_track(language_track)
        touched = {r.course_id for r in records}

        recommendations = []
        for row in summary.category_breakdown:
            if row.remaining <= 0:
                continue
            canonical = normalize_category(row.category)
            options = [
                course for course in courses.values()
                if normalize_category(course.category) == canonical
                and course.id not in touched
                and not is_excluded(course, track)
            ]
            recommendations.append(CategoryRecommendation(
                category=row.category,
                remaining=row.remaining,
                courses=tuple(options[:self.per_category]),
            ))
        return recommendations
