import json

import pytest

from creditcheck.models import (
    CategoryRequirement,
    Course,
    CourseStatus,
    RequirementSpec,
    StudentCourseRecord,
    SubcategoryRequirement,
)


def mk_course(id, credits=2, category="Humanities", is_required=False, **kwargs):
    return Course(id=id, name=kwargs.pop("name", id), credits=credits,
                  category=category, is_required=is_required, **kwargs)


def done(course_id):
    return StudentCourseRecord(course_id, CourseStatus.COMPLETED)


def planned(course_id):
    return StudentCourseRecord(course_id, CourseStatus.PLANNED)


def in_progress(course_id):
    return StudentCourseRecord(course_id, CourseStatus.IN_PROGRESS)


@pytest.fixture
def catalog():
    return [
        mk_course("HUM1", 2, "人文科学系(Humanities)"),
        mk_course("HUM2", 2, "Humanities"),
        mk_course("SOC1", 2, "Social Science(社会科学系)"),
        mk_course("LA1", 1, "語学系A(Language A)", is_required=True),
        mk_course("LB1", 1, "語学系B", is_required=True),
        mk_course("CAR1", 2, "キャリア・デザイン系", is_required=True),
        mk_course("MATH1", 2, "数理情報系(Mathematical Information)", department="Informatics"),
        mk_course("MATH2", 2, "Mathematical Information", department="Informatics",
                  prerequisite=("MATH1",)),
        mk_course("ODD1", 3, "Underwater Basketry"),
    ]


@pytest.fixture
def spec():
    return RequirementSpec(
        total_credits=10,
        categories=(
            CategoryRequirement(
                category="Liberal Arts",
                is_required=True,
                subcategories=(
                    SubcategoryRequirement("Humanities", min_credits=2, required_credits=2),
                    SubcategoryRequirement("Social Science", min_credits=2),
                    SubcategoryRequirement("Language-A", min_credits=1),
                    SubcategoryRequirement("Language-B", min_credits=1),
                    SubcategoryRequirement("Career Design", min_credits=2),
                ),
            ),
            CategoryRequirement(category="Mathematical Information", min_credits=4),
        ),
    )


@pytest.fixture
def write_json(tmp_path):
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path
    return _write
