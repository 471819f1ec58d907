import pytest

from creditcheck.checker import CreditChecker
from creditcheck.cli import main
from creditcheck.config import DEFAULT_RECORDS_PATH
from creditcheck.models import LanguageTrack


@pytest.fixture
def small_files(write_json):
    catalog = write_json("courses.json", {"courses": [
        {"id": "C1", "name": "Philosophy", "credits": 2, "category": "人文科学系(Humanities)",
         "isRequired": True, "term": "前期"},
        {"id": "C2", "name": "Japanese I", "credits": 1, "category": "語学系B", "term": "後期",
         "isRequired": True},
    ]})
    requirements = write_json("requirements.json", {"graduationRequirement": {
        "totalCredits": 2,
        "categories": [{"category": "Humanities", "requiredCredits": 2, "isRequired": True}],
    }})
    return catalog, requirements


def _args(catalog, requirements, records, *extra):
    return ["--catalog", str(catalog), "--requirements", str(requirements),
            "--records", str(records), *extra]


def test_exit_zero_when_student_can_graduate(small_files, write_json, capsys):
    records = write_json("records.json", [{"courseId": "C1", "status": "completed"}])
    assert main(_args(*small_files, records)) == 0

    out = capsys.readouterr().out
    assert "GRADUATION CREDIT CHECK" in out
    assert "ELIGIBLE" in out


def test_track_b_reports_missing_language_course(small_files, write_json, capsys):
    records = write_json("records.json", [{"courseId": "C1", "status": "completed"}])
    assert main(_args(*small_files, records, "--track", "B")) == 1
    assert "C2" in capsys.readouterr().out


def test_exit_two_on_invalid_records(small_files, write_json):
    records = write_json("records.json", [{"courseId": "C1", "status": "maybe"}])
    assert main(_args(*small_files, records)) == 2


def test_exit_two_on_missing_file(small_files, tmp_path):
    assert main(_args(*small_files, tmp_path / "absent.json")) == 2


def test_checker_with_bundled_sample_data():
    checker = CreditChecker()
    records = checker.loader.load_records(DEFAULT_RECORDS_PATH)
    result = checker.check(records, LanguageTrack.A)

    summary = result["summary"]
    assert summary.total_completed == 7
    assert summary.total_planned == 3
    assert summary.can_graduate is False
    assert result["recommendations"]
    assert "Informatics" in result["departments"]
