"""
Data loading and caching.

This module handles loading the catalog, requirement and records files,
validating them at the boundary so the engine only ever sees clean data.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..config import DEFAULT_CATALOG_PATH, DEFAULT_REQUIREMENTS_PATH
from ..errors import DataValidationError
from ..models import RequirementSpec
from .schemas import CatalogFile, RecordsFile, RequirementFile

logger = logging.getLogger(__name__)


class DataLoader:
    """
    Loads and caches the reference data.

    WHY CACHING: The catalog and the requirement spec are read-only for the
    whole session. Loading them once means re-evaluating after every record
    change costs no file I/O.

    WHY LAZY LOADING: Properties only load files when first accessed.
    A caller that only needs the catalog never reads the requirement file.

    DATA SOURCES:
    - courses.json: The course catalog, {"courses": [...]}
    - requirements.json: Graduation requirements, {"graduationRequirement": {...}}
    - Records files are per student and are never cached.

    Usage:
        loader = DataLoader()
        catalog = loader.catalog
        spec = loader.requirement_spec
        records = loader.load_records("my_courses.json")
    """

    def __init__(self, catalog_path=DEFAULT_CATALOG_PATH,
                 requirements_path=DEFAULT_REQUIREMENTS_PATH):
        self.catalog_path = Path(catalog_path)
        self.requirements_path = Path(requirements_path)
        # Private cache variables - None means "not loaded yet"
        self._catalog = None
        self._requirement_spec = None

    @property
    def catalog(self) -> list:
        """The course catalog as a list of Course, in file order."""
        if self._catalog is None:
            data = _read_json(self.catalog_path)
            self._catalog = self.parse_catalog(data, source=self.catalog_path)
            logger.info("Loaded %d courses from %s", len(self._catalog), self.catalog_path)
        return self._catalog

    @property
    def requirement_spec(self) -> RequirementSpec:
        if self._requirement_spec is None:
            data = _read_json(self.requirements_path)
            self._requirement_spec = self.parse_requirements(data, source=self.requirements_path)
            logger.info("Loaded requirements from %s", self.requirements_path)
        return self._requirement_spec

    def load_records(self, path) -> list:
        """
        Load a student's records file.

        Args:
            path: Path to a saved selection (see RecordsFile)

        Returns:
            List of StudentCourseRecord, in file order, duplicates kept
        """
        path = Path(path)
        records = self.parse_records(_read_json(path), source=path)
        logger.info("Loaded %d records from %s", len(records), path)
        return records

    @staticmethod
    def parse_catalog(data, source="<catalog>") -> list:
        return _validate(CatalogFile, data, source).to_catalog()

    @staticmethod
    def parse_requirements(data, source="<requirements>") -> RequirementSpec:
        return _validate(RequirementFile, data, source).to_spec()

    @staticmethod
    def parse_records(data, source="<records>") -> list:
        return _validate(RecordsFile, data, source).to_records()


def _read_json(path: Path):
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as exc:
            raise DataValidationError(path, [{"loc": (), "msg": str(exc)}]) from exc


def _validate(schema, data, source):
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise DataValidationError(source, exc.errors()) from exc
