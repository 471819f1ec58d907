from conftest import done, in_progress, mk_course, planned
from creditcheck.data import bulk_update_status, remove_record, update_record
from creditcheck.engines import (
    CourseRecommendationEngine,
    PrerequisiteChecker,
    department_totals,
    evaluate,
)
from creditcheck.config import OTHER_DEPARTMENT
from creditcheck.models import CourseStatus, LanguageTrack, Severity, WarningKind


# ---------------------------------------------------------------------------
# Prerequisites
# ---------------------------------------------------------------------------

def test_prerequisite_completed_is_met(catalog):
    statuses = PrerequisiteChecker().statuses(catalog, [done("MATH1"), planned("MATH2")])
    assert len(statuses) == 1
    assert statuses[0].course_id == "MATH2"
    assert statuses[0].prereqs_met is True


def test_prerequisite_planned_is_in_progress(catalog):
    checker = PrerequisiteChecker()
    status = checker.statuses(catalog, [planned("MATH1"), planned("MATH2")])[0]
    assert status.prereqs_met is False
    assert status.prereqs_in_progress == ("MATH1",)
    assert status.prereqs_missing == ()


def test_prerequisite_missing_yields_info_warning(catalog):
    warnings = PrerequisiteChecker().check(catalog, [done("MATH2")])
    assert len(warnings) == 1
    warning = warnings[0]
    assert warning.kind is WarningKind.PREREQUISITE_NOT_MET
    assert warning.severity is Severity.INFO
    assert warning.related_course_ids == ("MATH2", "MATH1")


def test_prerequisites_never_block_graduation(catalog, spec):
    records = [done(i) for i in ("HUM1", "SOC1", "LA1", "CAR1", "MATH2")] + [in_progress("MATH1")]
    records.append(done("HUM2"))
    summary = evaluate(catalog, records, spec)
    assert PrerequisiteChecker().check(catalog, records)
    assert all(w.kind is not WarningKind.PREREQUISITE_NOT_MET for w in summary.warnings)


def test_prerequisite_skips_dangling_and_in_progress_courses(catalog):
    records = [in_progress("MATH2"), done("GHOST")]
    assert PrerequisiteChecker().statuses(catalog, records) == []


def test_prerequisite_reported_once_for_duplicates(catalog):
    records = [done("MATH2"), done("MATH2")]
    assert len(PrerequisiteChecker().check(catalog, records)) == 1


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------

def test_recommends_untouched_courses_for_short_categories(catalog, spec):
    records = [done("HUM1"), planned("MATH1")]
    summary = evaluate(catalog, records, spec)
    recs = CourseRecommendationEngine().recommend(catalog, records, summary)

    by_category = {r.category: r for r in recs}
    assert "Humanities" not in by_category
    assert [c.id for c in by_category["Mathematical Information"].courses] == ["MATH2"]
    assert [c.id for c in by_category["Social Science"].courses] == ["SOC1"]
    assert by_category["Mathematical Information"].remaining == 4


def test_recommendations_respect_limit():
    catalog = [mk_course(f"H{i}", 1, "Humanities") for i in range(5)]
    from creditcheck.models import CategoryRequirement, RequirementSpec
    spec = RequirementSpec(total_credits=0,
                           categories=(CategoryRequirement("Humanities", min_credits=4),))
    summary = evaluate(catalog, [], spec)
    recs = CourseRecommendationEngine(per_category=2).recommend(catalog, [], summary)
    assert [c.id for c in recs[0].courses] == ["H0", "H1"]


def test_recommendations_follow_language_track(catalog, spec):
    summary = evaluate(catalog, [], spec, LanguageTrack.B)
    recs = CourseRecommendationEngine().recommend(catalog, [], summary, LanguageTrack.B)
    categories = [r.category for r in recs]
    assert "Language-B" in categories
    assert "Language-A" not in categories


# ---------------------------------------------------------------------------
# Department totals
# ---------------------------------------------------------------------------

def test_department_totals(catalog):
    records = [done("MATH1"), planned("MATH2"), done("HUM1"), in_progress("SOC1"), done("GONE")]
    totals = department_totals(catalog, records)

    assert list(totals) == ["Informatics", OTHER_DEPARTMENT]
    assert (totals["Informatics"].completed, totals["Informatics"].planned) == (2, 2)
    assert totals["Informatics"].course_ids == ["MATH1", "MATH2"]
    assert totals[OTHER_DEPARTMENT].completed == 2


def test_department_totals_exclude_other_track(catalog):
    totals = department_totals(catalog, [done("LB1")], LanguageTrack.A)
    assert totals == {}


# ---------------------------------------------------------------------------
# Record helpers
# ---------------------------------------------------------------------------

def test_update_record_replaces_in_place():
    records = [done("A"), planned("B"), done("C")]
    updated = update_record(records, done("B"))

    assert [r.course_id for r in updated] == ["A", "B", "C"]
    assert updated[1].status is CourseStatus.COMPLETED
    assert records[1].status is CourseStatus.PLANNED


def test_update_record_appends_new():
    updated = update_record((done("A"),), planned("Z"))
    assert [r.course_id for r in updated] == ["A", "Z"]


def test_remove_record_drops_all_copies():
    records = [done("A"), done("B"), planned("A")]
    assert [r.course_id for r in remove_record(records, "A")] == ["B"]
    assert len(records) == 3


def test_bulk_update_status():
    records = [planned("A"), planned("B"), planned("C")]
    updated = bulk_update_status(records, ["A", "C"], CourseStatus.COMPLETED)
    assert [r.status for r in updated] == [
        CourseStatus.COMPLETED, CourseStatus.PLANNED, CourseStatus.COMPLETED,
    ]
