"""Tests for catalog and constraint loading."""

import json

import pandas as pd
import pytest

from schedule_planner.exceptions import (
    CatalogFileNotFoundError,
    InvalidDataError,
    MissingColumnError,
    UnsupportedFormatError,
)
from schedule_planner.loader import (
    catalog_from_dataframe,
    catalog_from_records,
    load_catalog,
    load_constraints,
    split_cell,
)
from schedule_planner.models import Shift


class TestSplitCell:
    """Tests for split_cell function."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2M1 2M2", ["2M1", "2M2"]),
            ("2M1;2M2", ["2M1", "2M2"]),
            ("2M1, 2M2 ,", ["2M1", "2M2"]),
            ("  ", []),
            (None, []),
            (float("nan"), []),
        ],
    )
    def test_split(self, value, expected):
        assert split_cell(value) == expected


class TestLoadCatalogJson:
    """Tests for JSON catalogs."""

    def test_courses_wrapper(self, catalog_json):
        catalog = load_catalog(catalog_json)
        assert [c.code for c in catalog] == ["ICSA31", "ICSA48"]
        assert catalog[1].sections[0].time_slots == ["5N1", "5N2", "5N3", "5N4"]

    def test_plain_list(self, tmp_path, catalog_records):
        path = tmp_path / "list.json"
        path.write_text(json.dumps(catalog_records), encoding="utf-8")
        assert len(load_catalog(path)) == 2

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(InvalidDataError) as exc_info:
            load_catalog(path)
        assert exc_info.value.source == "broken.json"

    def test_wrong_shape(self):
        with pytest.raises(InvalidDataError):
            catalog_from_records({"something": 1})

    def test_non_object_entry(self):
        with pytest.raises(InvalidDataError) as exc_info:
            catalog_from_records([{"code": "A"}, "B"])
        assert exc_info.value.row == 1


class TestLoadCatalogTable:
    """Tests for CSV and Excel catalogs."""

    def test_csv(self, catalog_csv):
        catalog = load_catalog(catalog_csv)

        assert [c.code for c in catalog] == ["CALC1", "PROG1", "STAT1"]
        calc = catalog[0]
        assert calc.name == "Calculus I"
        assert calc.credits == 4
        assert [s.section_id for s in calc.sections] == ["A", "B"]
        assert calc.sections[1].time_slots == ["3N1", "3N2"]
        assert calc.sections[1].instructors == ["Bruno Lima", "Carla Dias"]
        assert catalog[1].sections[0].time_slots == ["4N1", "4N2"]
        assert catalog[1].sections[0].instructors == []

    def test_csv_missing_credits(self, catalog_csv):
        stat = load_catalog(catalog_csv)[2]
        assert stat.credits is None
        assert stat.weekly_credits == 1

    def test_xlsx(self, tmp_path):
        path = tmp_path / "catalog.xlsx"
        pd.DataFrame(
            {
                "Code": ["ALG1", "ALG1"],
                "Name": ["Algebra", "Algebra"],
                "Credits": [4, 4],
                "Section": ["A", "B"],
                "Slots": ["2N1 2N2", "4T4 4T5"],
            }
        ).to_excel(path, index=False)

        catalog = load_catalog(path)
        assert len(catalog) == 1
        assert catalog[0].credits == 4
        assert [s.time_slots for s in catalog[0].sections] == [["2N1", "2N2"], ["4T4", "4T5"]]

    def test_missing_columns(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("code,name\nA,Algebra\n", encoding="utf-8")
        with pytest.raises(MissingColumnError) as exc_info:
            load_catalog(path)
        assert exc_info.value.missing == ["credits", "section", "slots"]

    def test_rows_without_code_or_section_skipped(self):
        df = pd.DataFrame(
            {
                "code": ["A", None, "B"],
                "name": ["Alpha", "?", "Beta"],
                "credits": ["3", "3", "2"],
                "section": ["1", "1", None],
                "slots": ["2N1", "3N1", "4N1"],
            }
        )
        catalog = catalog_from_dataframe(df, source="inline")
        assert [c.code for c in catalog] == ["A", "B"]
        assert catalog[1].sections == []

    def test_rooms_column(self):
        df = pd.DataFrame(
            {
                "code": ["A"],
                "name": ["Alpha"],
                "credits": ["3"],
                "section": ["1"],
                "slots": ["2N1 2N2"],
                "rooms": ["B-12;B-14"],
            }
        )
        assert catalog_from_dataframe(df)[0].sections[0].rooms == ["B-12", "B-14"]


class TestLoadCatalogErrors:
    """Tests for file level errors."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogFileNotFoundError):
            load_catalog(tmp_path / "nope.json")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "catalog.txt"
        path.write_text("x", encoding="utf-8")
        with pytest.raises(UnsupportedFormatError) as exc_info:
            load_catalog(path)
        assert exc_info.value.suffix == ".txt"
        assert ".csv" in str(exc_info.value)


class TestLoadConstraints:
    """Tests for load_constraints function."""

    def test_load(self, tmp_path):
        path = tmp_path / "profile.json"
        path.write_text(
            json.dumps({"targetSubjectCount": 4, "blockedShifts": ["Morning"]}), encoding="utf-8"
        )
        profile = load_constraints(path)
        assert profile.target_subject_count == 4
        assert profile.blocked_shifts == frozenset({Shift.MORNING})

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "profile.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(InvalidDataError):
            load_constraints(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogFileNotFoundError):
            load_constraints(tmp_path / "missing.json")
