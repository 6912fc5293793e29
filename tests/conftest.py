"""Test fixtures for schedule planner tests."""

import json

import pytest

from schedule_planner.models import CourseOffering, Section


def make_course(code: str, *sections: tuple[str, list[str]], credits=3, name: str | None = None):
    """Build a CourseOffering from (section_id, slots) pairs."""
    return CourseOffering(
        code=code,
        name=name or f"Course {code}",
        credits=credits,
        sections=[Section(section_id=sid, time_slots=list(slots)) for sid, slots in sections],
    )


@pytest.fixture
def course():
    """Factory for course offerings."""
    return make_course


@pytest.fixture
def evening_catalog():
    """Three courses on disjoint evening slots."""
    return [
        make_course("DISC1", ("S11", ["2N1", "2N2"])),
        make_course("DISC2", ("S22", ["3N1", "3N2"])),
        make_course("DISC3", ("S33", ["4N1", "4N2"])),
    ]


@pytest.fixture
def mixed_catalog():
    """Courses spread over every shift, with alternative sections."""
    return [
        make_course("CALC1", ("A", ["2M1", "2M2"]), ("B", ["3T4", "3T5"]), ("C", ["4N1", "4N2"])),
        make_course("PHYS1", ("A", ["2M1", "2M2"]), ("B", ["5N1", "5N2"]), credits=4),
        make_course("PROG1", ("A", ["4N1", "4N2"]), ("B", ["6T6", "6T7"])),
        make_course("CHEM1", ("A", ["3M3", "3M4"]), ("B", ["2T4", "2T5"]), credits=2),
        make_course("STAT1", ("A", ["6N1", "6N2"])),
    ]


@pytest.fixture
def catalog_records():
    """Catalog as plain dictionaries, the JSON layout."""
    return [
        {
            "code": "ICSA31",
            "name": "Theory of Computation",
            "credits": 3,
            "sections": [{"section_id": "S71", "time_slots": ["5T4", "5T5", "5T6"]}],
        },
        {
            "code": "ICSA48",
            "name": "Graph Theory",
            "credits": 4,
            "sections": [{"section_id": "S73", "time_slots": ["5N1", "5N2", "5N3", "5N4"]}],
        },
    ]


@pytest.fixture
def catalog_json(tmp_path, catalog_records):
    """Catalog written to a JSON file."""
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"courses": catalog_records}), encoding="utf-8")
    return path


@pytest.fixture
def catalog_csv(tmp_path):
    """Catalog written as one row per section."""
    path = tmp_path / "catalog.csv"
    path.write_text(
        "code,name,credits,section,slots,instructors\n"
        "CALC1,Calculus I,4,A,2N1 2N2,Ana Souza\n"
        "CALC1,Calculus I,4,B,3N1;3N2,Bruno Lima; Carla Dias\n"
        "PROG1,Programming,3,A,\"4N1, 4N2\",\n"
        "STAT1,Statistics,,A,6N1 6N2,\n",
        encoding="utf-8",
    )
    return path
