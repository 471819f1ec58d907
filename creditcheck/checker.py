"""
Credit Checker - Main Orchestrator.

This module contains the CreditChecker class that connects the
engine layer to the presentation layer.
"""

from .config import DEFAULT_CATALOG_PATH, DEFAULT_REQUIREMENTS_PATH
from .data import DataLoader
from .engines import (
    CourseRecommendationEngine,
    PrerequisiteChecker,
    RequirementEngine,
    department_totals,
)
from .engines.requirement import coerce_track
from .models import LanguageTrack
from .ui import TerminalDisplay


class CreditChecker:
    """
    Main interface for the credit checker.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Loads the catalog and requirement spec once, through DataLoader
    2. Hands each records snapshot to the engines (pure data in, data out)
    3. Passes the results to the display

    The engines never see a file path and never print. To serve results
    over an API instead, call check() and serialize what it returns.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        checker = CreditChecker()
        records = checker.loader.load_records("my_courses.json")
        result = checker.check(records, LanguageTrack.B)
        result["summary"].can_graduate
    """

    def __init__(self, catalog_path=DEFAULT_CATALOG_PATH,
                 requirements_path=DEFAULT_REQUIREMENTS_PATH, display=None):
        self.loader = DataLoader(catalog_path, requirements_path)
        self.requirement_engine = RequirementEngine()
        self.prerequisite_checker = PrerequisiteChecker()
        self.recommendation_engine = CourseRecommendationEngine()
        self.display = display or TerminalDisplay()

    def check(self, records, language_track=LanguageTrack.A) -> dict:
        """
        Evaluate a records snapshot without displaying anything.

        Returns:
            {
                "summary": CreditSummary,
                "prerequisites": [CreditWarning, ...],
                "recommendations": [CategoryRecommendation, ...],
                "departments": {department: DepartmentTotal},
            }
        """
        records = list(records)
        track = coerce_track(language_track)
        catalog = self.loader.catalog
        spec = self.loader.requirement_spec

        summary = self.requirement_engine.evaluate(catalog, records, spec, track)
        return {
            "summary": summary,
            "prerequisites": self.prerequisite_checker.check(catalog, records, track),
            "recommendations": self.recommendation_engine.recommend(catalog, records, summary, track),
            "departments": department_totals(catalog, records, track),
        }

    def run(self, records_path, language_track=LanguageTrack.A) -> dict:
        """
        Load a records file, evaluate it, and display everything.

        Args:
            records_path: Path to the student's saved selection
            language_track: LanguageTrack, or True/False for the native flag

        Returns:
            Same dict as check()
        """
        records = self.loader.load_records(records_path)
        result = self.check(records, language_track)
        summary = result["summary"]

        self.display.print_summary(summary)
        self.display.print_warnings(list(summary.warnings) + result["prerequisites"])
        self.display.print_missing_required(summary.missing_required)
        self.display.print_recommendations(result["recommendations"])
        self.display.print_department_totals(result["departments"])
        return result
