"""
Course data models.

Contains the catalog Course dataclass, the StudentCourseRecord that tracks
what a student has done with a course, and the enums they use.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import TRACK_CATEGORIES


class CourseStatus(Enum):
    """
    Possible states for a course on a student's record.

    COMPLETED: Student has earned the credits
    PLANNED: Student intends to take the course
    IN_PROGRESS: Student is enrolled right now (informational only)
    """
    COMPLETED = "completed"
    PLANNED = "planned"
    IN_PROGRESS = "in-progress"


class Term(Enum):
    """When in the academic year a course is offered."""
    FIRST_HALF = "first-half"
    SECOND_HALF = "second-half"
    FULL_YEAR = "full-year"
    INTENSIVE = "intensive"


class LanguageTrack(Enum):
    """
    The language track a student follows.

    A: native Japanese speakers, who take Language-A courses
    B: everyone else, who take Language-B courses
    """
    A = "A"
    B = "B"

    @classmethod
    def from_flag(cls, is_native: bool) -> "LanguageTrack":
        """Map the web client's "native speaker" checkbox to a track."""
        return cls.A if is_native else cls.B

    @property
    def category(self) -> str:
        """Canonical category of this track's language courses."""
        return TRACK_CATEGORIES[self.value]

    @property
    def excluded_category(self) -> str:
        """Canonical category of the other track's language courses."""
        other = "B" if self is LanguageTrack.A else "A"
        return TRACK_CATEGORIES[other]


@dataclass(frozen=True)
class Course:
    """
    A single entry in the course catalog.

    Catalog entries are reference data: loaded once, never modified.
    Only id, credits, category, is_required and prerequisite feed the
    requirement logic; the rest is for display.

    Attributes:
        id: Course code, unique within the catalog
        name: Course title
        credits: Credits awarded on completion (positive)
        category: Category label, raw or canonical
        year: Intended academic year (0 = any year)
        term: Term the course is offered in
        is_required: True if every student must take it to graduate
        department: Owning department, informational only
        prerequisite: Ids of courses that should be completed first
    """
    id: str
    name: str
    credits: int
    category: str
    year: int = 0
    term: Term = Term.FIRST_HALF
    is_required: bool = False
    instructor: str = ""
    department: Optional[str] = None
    prerequisite: tuple = ()
    name_en: Optional[str] = None
    sub_category: Optional[str] = None
    campus: Optional[str] = None
    notes: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class StudentCourseRecord:
    """
    One course the student has touched.

    course_id may refer to a course that is no longer in the catalog.
    Such records are skipped during evaluation, not rejected.
    A plain status string ("completed") is converted to CourseStatus;
    an unknown one raises ValueError.
    """
    course_id: str
    status: CourseStatus
    grade: Optional[str] = None
    completed_year: Optional[int] = None
    completed_term: Optional[str] = None
    notes: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.status, CourseStatus):
            object.__setattr__(self, "status", CourseStatus(self.status))

    @property
    def counts_toward_credits(self) -> bool:
        return self.status in (CourseStatus.COMPLETED, CourseStatus.PLANNED)
