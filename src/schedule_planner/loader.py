"""Loading of course catalogs and constraint profiles.

Supported catalog formats:
- JSON: a list of courses, or {"courses": [...]}, each with nested sections
- CSV / Excel: one row per section with columns
  code, name, credits, section, slots (optional: instructors, rooms)
"""

import json
import logging
from pathlib import Path
from typing import Any

import pandas as pd

from .exceptions import (
    CatalogFileNotFoundError,
    InvalidDataError,
    MissingColumnError,
    UnsupportedFormatError,
)
from .models import ConstraintProfile, CourseOffering, Section
from .utils import split_cell, split_names

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["code", "name", "credits", "section", "slots"]
SUPPORTED_FORMATS = [".json", ".csv", ".xlsx"]


def _read_json(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidDataError(f"not valid JSON ({e.msg})", source=path.name, row=e.lineno) from e


def load_catalog(path: Path | str) -> list[CourseOffering]:
    """Load a course catalog.

    Args:
        path: Path to a .json, .csv or .xlsx catalog

    Returns:
        List of CourseOffering in file order

    Raises:
        CatalogFileNotFoundError: If the file does not exist
        UnsupportedFormatError: If the extension is not supported
        MissingColumnError: If a tabular catalog lacks required columns
        InvalidDataError: If the content cannot be interpreted
    """
    path = Path(path)
    if not path.exists():
        raise CatalogFileNotFoundError(str(path))

    suffix = path.suffix.lower()
    if suffix == ".json":
        catalog = catalog_from_records(_read_json(path), source=path.name)
    elif suffix == ".csv":
        catalog = catalog_from_dataframe(pd.read_csv(path, dtype=str), source=path.name)
    elif suffix == ".xlsx":
        catalog = catalog_from_dataframe(
            pd.read_excel(path, dtype=str, engine="openpyxl"), source=path.name
        )
    else:
        raise UnsupportedFormatError(suffix, SUPPORTED_FORMATS)

    logger.info(
        f"Loaded {len(catalog)} courses with "
        f"{sum(len(c.sections) for c in catalog)} sections from {path.name}"
    )
    return catalog


def catalog_from_records(data: Any, source: str | None = None) -> list[CourseOffering]:
    """Build a catalog from JSON-like data."""
    if isinstance(data, dict):
        data = data.get("courses", data.get("availableByDiscipline"))
    if not isinstance(data, list):
        raise InvalidDataError("expected a list of courses or {'courses': [...]}", source=source)

    catalog = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise InvalidDataError("course entry must be an object", source=source, row=index)
        catalog.append(CourseOffering.from_dict(entry))
    return catalog


def catalog_from_dataframe(df: pd.DataFrame, source: str | None = None) -> list[CourseOffering]:
    """Build a catalog from a one-row-per-section table.

    Rows are grouped by course code in first-seen order. Name and credits
    come from the first row of each course.
    """
    df = df.rename(columns=lambda c: str(c).strip().lower())
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise MissingColumnError(missing, source=source)

    courses: dict[str, CourseOffering] = {}
    for row_number, row in enumerate(df.itertuples(index=False), start=2):
        record = row._asdict()
        code = str(record["code"]).strip() if pd.notna(record["code"]) else ""
        if not code:
            logger.warning(f"Skipping row {row_number} of {source}: no course code")
            continue

        course = courses.get(code)
        if course is None:
            credits = pd.to_numeric(record["credits"], errors="coerce")
            course = CourseOffering(
                code=code,
                name=str(record["name"]).strip() if pd.notna(record["name"]) else "",
                credits=float(credits) if pd.notna(credits) else None,
            )
            courses[code] = course

        section_id = record["section"]
        if pd.isna(section_id) or not str(section_id).strip():
            logger.warning(f"Skipping row {row_number} of {source}: no section for {code}")
            continue

        course.sections.append(
            Section(
                section_id=str(section_id).strip(),
                time_slots=split_cell(record["slots"]),
                instructors=split_names(record.get("instructors")),
                rooms=split_cell(record.get("rooms")),
            )
        )

    return list(courses.values())


def load_constraints(path: Path | str) -> ConstraintProfile:
    """Load a constraint profile from a JSON file.

    Raises:
        CatalogFileNotFoundError: If the file does not exist
        InvalidDataError: If the file is not a JSON object
    """
    path = Path(path)
    if not path.exists():
        raise CatalogFileNotFoundError(str(path))

    data = _read_json(path)
    if not isinstance(data, dict):
        raise InvalidDataError("constraint profile must be a JSON object", source=path.name)
    return ConstraintProfile.from_dict(data)
