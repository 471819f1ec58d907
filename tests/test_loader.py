import pytest

from creditcheck.config import DEFAULT_TOTAL_CREDITS
from creditcheck.data import DataLoader
from creditcheck.errors import DataValidationError
from creditcheck.models import CourseStatus, Term


COURSE = {
    "id": "GE101",
    "name": "哲学入門",
    "nameEn": "Introduction to Philosophy",
    "credits": 2,
    "category": "人文科学系(Humanities)",
    "year": 1,
    "term": "前期",
    "instructor": "佐藤 一郎",
    "isRequired": True,
    "prerequisite": ["GE100"],
}


def test_catalog_is_canonicalized_at_load():
    course = DataLoader.parse_catalog({"courses": [COURSE]})[0]

    assert course.category == "Humanities"
    assert course.term is Term.FIRST_HALF
    assert course.is_required is True
    assert course.name_en == "Introduction to Philosophy"
    assert course.prerequisite == ("GE100",)


def test_catalog_accepts_bare_list_and_snake_case():
    raw = dict(COURSE)
    raw["is_required"] = raw.pop("isRequired")
    course = DataLoader.parse_catalog([raw])[0]
    assert course.is_required is True


@pytest.mark.parametrize("field, value", [
    ("credits", 0),
    ("credits", 2.5),
    ("term", "someday"),
    ("id", ""),
])
def test_catalog_rejects_bad_fields(field, value):
    raw = dict(COURSE, **{field: value})
    with pytest.raises(DataValidationError):
        DataLoader.parse_catalog({"courses": [raw]})


def test_catalog_rejects_duplicate_ids():
    with pytest.raises(DataValidationError, match="duplicate course ids: GE101"):
        DataLoader.parse_catalog({"courses": [COURSE, COURSE]})


def test_catalog_must_be_a_collection():
    with pytest.raises(DataValidationError):
        DataLoader.parse_catalog("courses.json")


def test_requirements_nested_under_graduation_requirement():
    spec = DataLoader.parse_requirements({
        "graduationRequirement": {
            "totalCredits": 124,
            "categories": [
                {"category": "教養科目", "isRequired": True, "subcategories": [
                    {"name": "人文科学系", "minCredits": 2, "requiredCredits": 4},
                    {"name": "健康とスポーツ系", "minCredits": 1, "isRequired": False},
                ]},
                {"category": "総合系", "minCredits": 4},
            ],
        }
    })

    assert spec.total_credits == 124
    leaves = spec.leaves()
    assert [(l.name, l.required, l.is_mandatory) for l in leaves] == [
        ("Humanities", 4, False),
        ("Health and Sports", 1, False),
        ("Comprehensive", 4, False),
    ]
    assert leaves[0].parent == "教養科目"


def test_requirements_default_total():
    spec = DataLoader.parse_requirements({"categories": []})
    assert spec.total_credits == DEFAULT_TOTAL_CREDITS


def test_requirements_ignore_parent_credits():
    spec = DataLoader.parse_requirements({
        "totalCredits": 10,
        "categories": [{"category": "X", "minCredits": 20, "requiredCredits": 24,
                        "subcategories": [{"name": "Humanities", "minCredits": 2}]}],
    })

    category = spec.categories[0]
    assert category.min_credits == 0
    assert category.required_credits is None
    assert [(l.name, l.required) for l in spec.leaves()] == [("Humanities", 2)]


def test_subcategory_mandatory_only_when_flagged():
    spec = DataLoader.parse_requirements({
        "totalCredits": 0,
        "categories": [{"category": "Liberal Arts", "isRequired": True, "subcategories": [
            {"name": "Humanities", "minCredits": 2},
            {"name": "Career Design", "minCredits": 2, "isRequired": True},
        ]}],
    })

    assert [l.is_mandatory for l in spec.leaves()] == [False, True]


def test_records_file_with_envelope():
    records = DataLoader.parse_records({
        "version": "1.0.0",
        "lastUpdated": "2026-04-01T00:00:00Z",
        "courses": [
            {"courseId": "A", "status": "completed", "grade": "A"},
            {"courseId": "B", "status": "in_progress"},
            {"courseId": "A", "status": "履修予定"},
        ],
    })
    assert [(r.course_id, r.status) for r in records] == [
        ("A", CourseStatus.COMPLETED),
        ("B", CourseStatus.IN_PROGRESS),
        ("A", CourseStatus.PLANNED),
    ]
    assert records[0].grade == "A"


def test_records_reject_unknown_status():
    with pytest.raises(DataValidationError, match="unknown status"):
        DataLoader.parse_records([{"courseId": "A", "status": "dropped"}])


def test_loader_reads_and_caches_files(write_json):
    catalog_path = write_json("courses.json", {"courses": [COURSE]})
    req_path = write_json("requirements.json", {"totalCredits": 2, "categories": []})
    loader = DataLoader(catalog_path, req_path)

    first = loader.catalog
    catalog_path.write_text("not json any more", encoding="utf-8")
    assert loader.catalog is first
    assert loader.requirement_spec.total_credits == 2


def test_loader_missing_file(tmp_path):
    loader = DataLoader(tmp_path / "nope.json", tmp_path / "nope2.json")
    with pytest.raises(FileNotFoundError):
        loader.catalog


def test_loader_invalid_json(tmp_path):
    path = tmp_path / "records.json"
    path.write_text("{broken", encoding="utf-8")
    with pytest.raises(DataValidationError) as excinfo:
        DataLoader().load_records(path)
    assert excinfo.value.source == str(path)


def test_bundled_sample_data_loads():
    loader = DataLoader()
    assert loader.catalog
    assert loader.requirement_spec.total_credits == 124
