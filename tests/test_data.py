"""Tests for fixture loading and record validation helpers."""

import csv
from pathlib import Path

import pytest

from latin_seeder.data import (
    extract_number,
    read_csv_data,
    read_json_data,
    validate_required_fields,
    write_json_data,
)
from latin_seeder.errors import FixtureError


class TestReadJsonData:
    """Tests for read_json_data."""

    def test_loads_array(self, tmp_path: Path):
        path = tmp_path / "modules.json"
        path.write_text('[{"id": "M01"}, {"id": "M02"}]', encoding="utf-8")

        assert read_json_data(path) == [{"id": "M01"}, {"id": "M02"}]

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FixtureError, match="Data file not found"):
            read_json_data(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text('[{"id": "M01",', encoding="utf-8")

        with pytest.raises(FixtureError, match="Invalid JSON in broken.json"):
            read_json_data(path)

    def test_invalid_utf8(self, tmp_path: Path):
        path = tmp_path / "modules.json"
        path.write_bytes(b'[{"id": "M01", "name": "\xff\xfe"}]')

        with pytest.raises(FixtureError, match="Cannot read modules.json"):
            read_json_data(path)

    def test_directory_instead_of_file(self, tmp_path: Path):
        path = tmp_path / "modules.json"
        path.mkdir()

        with pytest.raises(FixtureError, match="Cannot read modules.json"):
            read_json_data(path)

    def test_rejects_non_array(self, tmp_path: Path):
        path = tmp_path / "object.json"
        path.write_text('{"id": "M01"}', encoding="utf-8")

        with pytest.raises(FixtureError, match="Expected a JSON array"):
            read_json_data(path)

    def test_write_then_read_keeps_unicode(self, tmp_path: Path):
        """Macrons and ligatures survive a write/read cycle unescaped."""
        path = tmp_path / "nested" / "words.json"
        write_json_data(path, [{"word": "cælum", "meaning": "heaven"}])

        assert "cælum" in path.read_text(encoding="utf-8")
        assert read_json_data(path)[0]["word"] == "cælum"


class TestReadCsvData:
    """Tests for read_csv_data."""

    def test_parses_header_and_rows(self, tmp_path: Path):
        path = tmp_path / "vocabulary.csv"
        path.write_text("word,meaning,lessonId\nPater,father,L002\n", encoding="utf-8")

        assert read_csv_data(path) == [{"word": "Pater", "meaning": "father", "lessonId": "L002"}]

    def test_strips_cells_and_pads_short_rows(self, tmp_path: Path):
        path = tmp_path / "vocabulary.csv"
        path.write_text("word, meaning ,lessonId\n Pater , father\n", encoding="utf-8")

        assert read_csv_data(path) == [{"word": "Pater", "meaning": "father", "lessonId": ""}]

    def test_quoted_commas(self, tmp_path: Path):
        """A quoted cell may contain commas (liturgical phrases often do)."""
        path = tmp_path / "vocabulary.csv"
        path.write_text(
            'word,meaning,liturgicalContext\nPater,father,"Pater noster, qui es in caelis"\n',
            encoding="utf-8",
        )

        rows = read_csv_data(path)
        assert rows[0]["liturgicalContext"] == "Pater noster, qui es in caelis"

    def test_skips_blank_lines(self, tmp_path: Path):
        path = tmp_path / "vocabulary.csv"
        path.write_text("word,meaning\nPater,father\n\n ,\nFilius,son\n", encoding="utf-8")

        assert [r["word"] for r in read_csv_data(path)] == ["Pater", "Filius"]

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "vocabulary.csv"
        path.write_text("", encoding="utf-8")

        assert read_csv_data(path) == []

    def test_invalid_utf8(self, tmp_path: Path):
        path = tmp_path / "vocabulary.csv"
        path.write_bytes(b"word,meaning\nP\xffter,father\n")

        with pytest.raises(FixtureError, match="Cannot read vocabulary.csv"):
            read_csv_data(path)

    def test_oversized_field(self, tmp_path: Path):
        path = tmp_path / "vocabulary.csv"
        oversized = "x" * (csv.field_size_limit() + 1)
        path.write_text(f"word,meaning\n{oversized},father\n", encoding="utf-8")

        with pytest.raises(FixtureError, match="Invalid CSV in vocabulary.csv"):
            read_csv_data(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FixtureError, match="Data file not found"):
            read_csv_data(tmp_path / "vocabulary.csv")


class TestValidateRequiredFields:
    """Tests for validate_required_fields."""

    def test_complete_record(self):
        record = {"id": "M01", "name": "Foundations", "description": "x"}
        assert validate_required_fields(record, ("id", "name", "description")) is None

    def test_one_error_for_several_missing_fields(self):
        """A record missing two fields yields one error naming both."""
        record = {"id": "M01"}
        error = validate_required_fields(record, ("id", "name", "description"))

        assert error is not None
        assert error.message == "Missing required fields: name, description"
        assert error.record is record
        assert error.code == "missing_field"

    def test_single_missing_field_wording(self):
        error = validate_required_fields({"id": "M01", "name": "x"}, ("id", "name", "description"))
        assert error.message == "Missing required field: description"

    @pytest.mark.parametrize("value", [None, "", []])
    def test_empty_values_count_as_missing(self, value):
        error = validate_required_fields({"id": value}, ("id",))
        assert error is not None

    @pytest.mark.parametrize("value", [0, False, ["x"]])
    def test_falsy_but_present_values(self, value):
        """Day 0 or a false flag is a value, not a missing field."""
        assert validate_required_fields({"day": value}, ("day",)) is None

    def test_non_object_record(self):
        error = validate_required_fields(["M01"], ("id",))

        assert error is not None
        assert error.code == "invalid_record"


class TestExtractNumber:
    """Tests for extract_number."""

    @pytest.mark.parametrize(
        "identifier,expected",
        [("M01", 1), ("L001", 1), ("L012", 12), ("lesson-7b", 7), ("A1B2", 1), (3, 3)],
    )
    def test_first_digit_run(self, identifier, expected):
        assert extract_number(identifier) == expected

    @pytest.mark.parametrize("identifier", ["intro", "", "M-X"])
    def test_no_digits(self, identifier):
        assert extract_number(identifier) is None
