"""
File schemas for the load boundary.

Catalog, requirement and records files are validated here with pydantic
before anything reaches the engine. The engine assumes validated input
and never re-checks shapes.

JSON files use the web client's camelCase keys ("isRequired",
"requiredCredits", "courseId"); snake_case is accepted too. Category
labels and terms are canonicalized during validation, so the rest of the
system only ever sees one naming scheme.
"""

import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..config import DEFAULT_TOTAL_CREDITS, STATUS_ALIASES, TERM_ALIASES
from ..engines.requirement import normalize_category
from ..models import (
    CategoryRequirement,
    Course,
    CourseStatus,
    RequirementSpec,
    StudentCourseRecord,
    SubcategoryRequirement,
    Term,
)

logger = logging.getLogger(__name__)


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# =============================================================================
# CATALOG
# =============================================================================

class CourseSchema(_Schema):
    id: str = Field(..., min_length=1)
    name: str
    name_en: Optional[str] = Field(None, alias="nameEn")
    credits: int = Field(..., gt=0)
    category: str
    sub_category: Optional[str] = Field(None, alias="subCategory")
    year: int = Field(0, ge=0, description="Intended year, 0 = any year")
    term: str = "first-half"
    instructor: str = ""
    is_required: bool = Field(False, alias="isRequired")
    campus: Optional[str] = None
    notes: Optional[str] = None
    description: Optional[str] = None
    department: Optional[str] = None
    prerequisite: List[str] = Field(default_factory=list)

    @field_validator("category")
    @classmethod
    def canonical_category(cls, value: str) -> str:
        return normalize_category(value)

    @field_validator("term")
    @classmethod
    def canonical_term(cls, value: str) -> str:
        term = TERM_ALIASES.get(value.strip().lower())
        if term is None:
            raise ValueError(f"unknown term {value!r}")
        return term

    def to_course(self) -> Course:
        return Course(
            id=self.id,
            name=self.name,
            credits=self.credits,
            category=self.category,
            year=self.year,
            term=Term(self.term),
            is_required=self.is_required,
            instructor=self.instructor,
            department=self.department,
            prerequisite=tuple(self.prerequisite),
            name_en=self.name_en,
            sub_category=self.sub_category,
            campus=self.campus,
            notes=self.notes,
            description=self.description,
        )


class CatalogFile(_Schema):
    courses: List[CourseSchema]

    @model_validator(mode="before")
    @classmethod
    def wrap_bare_list(cls, data):
        if isinstance(data, list):
            return {"courses": data}
        return data

    @model_validator(mode="after")
    def unique_ids(self):
        seen = set()
        duplicates = []
        for course in self.courses:
            if course.id in seen:
                duplicates.append(course.id)
            seen.add(course.id)
        if duplicates:
            raise ValueError(f"duplicate course ids: {', '.join(sorted(set(duplicates)))}")
        return self

    def to_catalog(self) -> list:
        return [c.to_course() for c in self.courses]


# =============================================================================
# REQUIREMENTS
# =============================================================================

class SubcategorySchema(_Schema):
    name: str
    min_credits: int = Field(0, ge=0, alias="minCredits")
    required_credits: Optional[int] = Field(None, ge=0, alias="requiredCredits")
    is_required: bool = Field(False, alias="isRequired")

    @field_validator("name")
    @classmethod
    def canonical_name(cls, value: str) -> str:
        return normalize_category(value)


class CategorySchema(_Schema):
    category: str
    min_credits: Optional[int] = Field(None, ge=0, alias="minCredits")
    required_credits: Optional[int] = Field(None, ge=0, alias="requiredCredits")
    is_required: bool = Field(False, alias="isRequired")
    subcategories: List[SubcategorySchema] = Field(default_factory=list)

    @field_validator("category")
    @classmethod
    def canonical_name(cls, value: str) -> str:
        return normalize_category(value)

    def to_requirement(self) -> CategoryRequirement:
        """A parent's own credits are an aggregate hint and are dropped."""
        min_credits, required_credits = self.min_credits, self.required_credits
        if self.subcategories and (min_credits is not None or required_credits is not None):
            logger.debug(
                "Ignoring own credits (min=%s, required=%s) of parent category %s",
                min_credits, required_credits, self.category,
            )
            min_credits, required_credits = None, None
        return CategoryRequirement(
            category=self.category,
            min_credits=min_credits or 0,
            required_credits=required_credits,
            is_required=self.is_required,
            subcategories=tuple(
                SubcategoryRequirement(
                    name=sub.name,
                    min_credits=sub.min_credits,
                    required_credits=sub.required_credits,
                    is_required=sub.is_required,
                )
                for sub in self.subcategories
            ),
        )


class RequirementFile(_Schema):
    total_credits: int = Field(DEFAULT_TOTAL_CREDITS, ge=0, alias="totalCredits")
    categories: List[CategorySchema]

    @model_validator(mode="before")
    @classmethod
    def unwrap(cls, data):
        # The web client nests the spec under "graduationRequirement"
        if isinstance(data, dict) and "graduationRequirement" in data:
            return data["graduationRequirement"]
        return data

    def to_spec(self) -> RequirementSpec:
        return RequirementSpec(
            total_credits=self.total_credits,
            categories=tuple(c.to_requirement() for c in self.categories),
        )


# =============================================================================
# STUDENT RECORDS
# =============================================================================

class RecordSchema(_Schema):
    course_id: str = Field(..., min_length=1, alias="courseId")
    status: str
    grade: Optional[str] = None
    completed_year: Optional[int] = Field(None, alias="completedYear")
    completed_term: Optional[str] = Field(None, alias="completedTerm")
    notes: Optional[str] = None

    @field_validator("status")
    @classmethod
    def canonical_status(cls, value: str) -> str:
        status = STATUS_ALIASES.get(value.strip().lower())
        if status is None:
            raise ValueError(f"unknown status {value!r}")
        return status

    def to_record(self) -> StudentCourseRecord:
        return StudentCourseRecord(
            course_id=self.course_id,
            status=CourseStatus(self.status),
            grade=self.grade,
            completed_year=self.completed_year,
            completed_term=self.completed_term,
            notes=self.notes,
        )


class RecordsFile(_Schema):
    """
    A saved selection, as exported by the web client:

        {"version": "1.0.0", "lastUpdated": "...", "courses": [...]}

    A bare list of records is accepted too.
    """
    courses: List[RecordSchema]
    version: Optional[str] = None
    last_updated: Optional[str] = Field(None, alias="lastUpdated")

    @model_validator(mode="before")
    @classmethod
    def wrap_bare_list(cls, data):
        if isinstance(data, list):
            return {"courses": data}
        return data

    def to_records(self) -> list:
        return [r.to_record() for r in self.courses]
