r"""
Graduation Credit Checker Package
=================================

Tracks a student's completed and planned courses against the credit
requirements for graduation.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                           ENGINE LAYER                                  │
│        (Pure logic - returns data structures, NO I/O or printing)       │
│                                                                         │
│  ┌─────────────────────┐  ┌──────────────────────┐  ┌────────────────┐  │
│  │  RequirementEngine  │  │ PrerequisiteChecker  │  │ Recommendation │  │
│  │ (credit summary)    │  │ (advisory only)      │  │ Engine         │  │
│  └─────────────────────┘  └──────────────────────┘  └────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
          ▲                                               │
          │ Validated dataclasses                         │ Returns dataclasses
          │                                               ▼
┌──────────────────────────┐            ┌─────────────────────────────────┐
│       DataLoader         │            │        TerminalDisplay          │
│ (JSON + pydantic schemas)│            │ (the only place that prints)    │
└──────────────────────────┘            └─────────────────────────────────┘
                         \                    /
                          ▼                  ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                          CreditChecker                                  │
│            (Orchestrator - connects data, engines and display)          │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

creditcheck/
├── __init__.py          # This file - main exports
├── config.py            # Paths, category/term/status lookup tables
├── errors.py            # Load-boundary exceptions
├── checker.py           # CreditChecker orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── course.py        # Course, StudentCourseRecord, CourseStatus, LanguageTrack
│   ├── requirement.py   # RequirementSpec and its nodes
│   ├── summary.py       # CreditSummary, CategoryBreakdown, CreditWarning
│   └── recommendation.py # Advisory results
│
├── data/                # Loading, validation, record helpers
│   ├── loader.py        # DataLoader
│   ├── schemas.py       # pydantic file schemas
│   └── records.py       # update_record, remove_record, bulk_update_status
│
├── engines/             # Business logic
│   ├── requirement.py   # RequirementEngine, normalize_category
│   ├── prerequisite.py  # PrerequisiteChecker
│   ├── recommendation.py # CourseRecommendationEngine
│   └── department.py    # department_totals
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

Engine only (no files involved):

    from creditcheck import evaluate, LanguageTrack

    summary = evaluate(catalog, records, spec, LanguageTrack.A)
    if not summary.can_graduate:
        for warning in summary.warnings:
            print(warning.severity.value, warning.message)

With the bundled loader and display:

    from creditcheck import CreditChecker

    CreditChecker().run("data/example_records.json", LanguageTrack.B)

Running from command line:

    python -m creditcheck --records my_courses.json --track B

"""

# Version
__version__ = "1.0.0"

# Main exports
from .checker import CreditChecker
from .cli import main

# Model exports
from .models import (
    CategoryBreakdown,
    CategoryRecommendation,
    CategoryRequirement,
    Course,
    CourseStatus,
    CreditSummary,
    CreditWarning,
    DepartmentTotal,
    LanguageTrack,
    PrerequisiteStatus,
    RequirementLeaf,
    RequirementSpec,
    Severity,
    StudentCourseRecord,
    SubcategoryRequirement,
    Term,
    WarningKind,
)

# Engine exports
from .engines import (
    CourseRecommendationEngine,
    PrerequisiteChecker,
    RequirementEngine,
    department_totals,
    evaluate,
    normalize_category,
)

# Data exports
from .data import DataLoader, bulk_update_status, remove_record, update_record

# Errors
from .errors import CreditCheckError, DataValidationError

# UI exports
from .ui import TerminalDisplay

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "CreditChecker",
    "main",
    # Models
    "CategoryBreakdown",
    "CategoryRecommendation",
    "CategoryRequirement",
    "Course",
    "CourseStatus",
    "CreditSummary",
    "CreditWarning",
    "DepartmentTotal",
    "LanguageTrack",
    "PrerequisiteStatus",
    "RequirementLeaf",
    "RequirementSpec",
    "Severity",
    "StudentCourseRecord",
    "SubcategoryRequirement",
    "Term",
    "WarningKind",
    # Engines
    "CourseRecommendationEngine",
    "PrerequisiteChecker",
    "RequirementEngine",
    "department_totals",
    "evaluate",
    "normalize_category",
    # Data
    "DataLoader",
    "bulk_update_status",
    "remove_record",
    "update_record",
    # Errors
    "CreditCheckError",
    "DataValidationError",
    # UI
    "TerminalDisplay",
]
