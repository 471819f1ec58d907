"""
Configuration constants for the credit checker.

This module contains all configuration values and lookup tables used
throughout the checker. Centralizing these makes it easy to adjust
behavior when the curriculum or the catalog format changes.
"""

from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
DEFAULT_CATALOG_PATH = DATA_DIR / "courses.json"
DEFAULT_REQUIREMENTS_PATH = DATA_DIR / "requirements.json"
DEFAULT_RECORDS_PATH = DATA_DIR / "example_records.json"


# =============================================================================
# CATEGORY CANONICALIZATION
# =============================================================================
# The catalog labels categories in several forms: bare Japanese
# ("人文科学系"), Japanese with an English gloss ("人文科学系(Humanities)"),
# or the reverse ("Humanities(人文科学系)"). Requirement files always use
# the canonical English label on the right-hand side.

HUMANITIES = "Humanities"
SOCIAL_SCIENCE = "Social Science"
NATURAL_SCIENCE = "Natural Science"
LANGUAGE_A = "Language-A"
LANGUAGE_B = "Language-B"
HEALTH_SPORTS = "Health and Sports"
CAREER_DESIGN = "Career Design"
INFO_MEDIA = "Information and Media"
MATH_INFO = "Mathematical Information"
SOCIAL_INFO = "Social Information"
MEDIA_EXPRESSION = "Media Expression"
GENERAL = "Comprehensive"
TEACHER_TRAINING = "Teacher Training"

CANONICAL_CATEGORIES = (
    HUMANITIES,
    SOCIAL_SCIENCE,
    NATURAL_SCIENCE,
    LANGUAGE_A,
    LANGUAGE_B,
    HEALTH_SPORTS,
    CAREER_DESIGN,
    INFO_MEDIA,
    MATH_INFO,
    SOCIAL_INFO,
    MEDIA_EXPRESSION,
    GENERAL,
    TEACHER_TRAINING,
)

# Japanese label and English gloss for each canonical category
_CATEGORY_LABELS = {
    HUMANITIES: ("人文科学系", "Humanities"),
    SOCIAL_SCIENCE: ("社会科学系", "Social Science"),
    NATURAL_SCIENCE: ("自然科学系", "Natural Science"),
    LANGUAGE_A: ("語学系A", "Language A"),
    LANGUAGE_B: ("語学系B", "Language B"),
    HEALTH_SPORTS: ("健康とスポーツ系", "Health and Sports"),
    CAREER_DESIGN: ("キャリア・デザイン系", "Career Design"),
    INFO_MEDIA: ("情報・メディア系", "Information and Media"),
    MATH_INFO: ("数理情報系", "Mathematical Information"),
    SOCIAL_INFO: ("社会情報系", "Social Information"),
    MEDIA_EXPRESSION: ("メディア表現系", "Media Expression"),
    GENERAL: ("総合系", "Comprehensive"),
    TEACHER_TRAINING: ("教職課程", "Teacher Training"),
}


def _build_category_aliases() -> dict:
    aliases = {}
    for canonical, (japanese, english) in _CATEGORY_LABELS.items():
        aliases[japanese] = canonical
        aliases[english] = canonical
        aliases[f"{japanese}({english})"] = canonical
        aliases[f"{english}({japanese})"] = canonical
    return aliases


# Raw catalog label -> canonical label. Built once at import time.
CATEGORY_ALIASES = _build_category_aliases()


# =============================================================================
# LANGUAGE TRACKS
# =============================================================================
# Students follow exactly one language track. Track A is for native
# Japanese speakers, track B for everyone else.

TRACK_CATEGORIES = {
    "A": LANGUAGE_A,
    "B": LANGUAGE_B,
}


# =============================================================================
# TERMS AND STATUSES
# =============================================================================

TERM_ALIASES = {
    "前期": "first-half",
    "後期": "second-half",
    "通年": "full-year",
    "集中": "intensive",
    "first-half": "first-half",
    "second-half": "second-half",
    "full-year": "full-year",
    "intensive": "intensive",
    "spring": "first-half",
    "fall": "second-half",
}

STATUS_ALIASES = {
    "completed": "completed",
    "planned": "planned",
    "in-progress": "in-progress",
    "in_progress": "in-progress",
    "履修済み": "completed",
    "履修予定": "planned",
    "履修中": "in-progress",
}


# =============================================================================
# DEFAULTS
# =============================================================================

# Credits needed to graduate when a requirement file does not say otherwise
DEFAULT_TOTAL_CREDITS = 124

# Maximum suggestions per short category
RECOMMENDATIONS_PER_CATEGORY = 3

# Department bucket for courses that do not name one
OTHER_DEPARTMENT = "Other"

# Version tag written by the selection exporter of the web client
RECORDS_FORMAT_VERSION = "1.0.0"
