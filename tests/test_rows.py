"""Tests for reading rows from arguments and files."""

import json

import pytest

from dyn_product.rows import RowsFileError, load_rows_file, parse_inline_rows


class TestParseInlineRows:
    """Test splitting CLI arguments into rows."""

    def test_default_separator(self):
        assert parse_inline_rows(["a,b,c", "x,y"]) == [["a", "b", "c"], ["x", "y"]]

    def test_whitespace_stripped(self):
        assert parse_inline_rows([" a , b", "x ,y "]) == [["a", "b"], ["x", "y"]]

    def test_custom_separator(self):
        assert parse_inline_rows(["a;b", "1,5;2"], separator=";") == [["a", "b"], ["1,5", "2"]]

    def test_single_item_row(self):
        assert parse_inline_rows(["only"]) == [["only"]]

    def test_empty_argument_is_empty_row(self):
        assert parse_inline_rows(["a,b", ""]) == [["a", "b"], []]

    def test_no_arguments(self):
        assert parse_inline_rows([]) == []

    def test_empty_separator_rejected(self):
        with pytest.raises(ValueError):
            parse_inline_rows(["a"], separator="")


class TestLoadRowsFile:
    """Test loading rows from TOML and JSON files."""

    def test_toml(self, toml_rows_file):
        assert load_rows_file(toml_rows_file) == [["a", "b"], ["x", "y"]]

    def test_json_array(self, json_rows_file):
        assert load_rows_file(json_rows_file) == [[1, 2, 3], [True, False]]

    def test_json_object(self, tmp_path):
        path = tmp_path / "rows.json"
        path.write_text(json.dumps({"rows": [["a"], ["b", "c"]]}), encoding="utf-8")

        assert load_rows_file(str(path)) == [["a"], ["b", "c"]]

    def test_empty_rows_kept(self, tmp_path):
        """Test that empty rows are passed through untouched."""
        path = tmp_path / "rows.toml"
        path.write_text('rows = [["a"], []]\n', encoding="utf-8")

        assert load_rows_file(path) == [["a"], []]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Rows file not found"):
            load_rows_file(tmp_path / "missing.toml")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "rows.csv"
        path.write_text("a,b\n", encoding="utf-8")

        with pytest.raises(RowsFileError, match="Unsupported rows file type"):
            load_rows_file(path)

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "rows.toml"
        path.write_text("rows = [[", encoding="utf-8")

        with pytest.raises(RowsFileError, match="Error reading"):
            load_rows_file(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "rows.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(RowsFileError):
            load_rows_file(path)

    def test_missing_rows_key(self, tmp_path):
        path = tmp_path / "rows.toml"
        path.write_text('columns = [["a"]]\n', encoding="utf-8")

        with pytest.raises(RowsFileError, match="missing 'rows' key"):
            load_rows_file(path)

    def test_row_not_an_array(self, tmp_path):
        path = tmp_path / "rows.json"
        path.write_text(json.dumps([["a"], "b"]), encoding="utf-8")

        with pytest.raises(RowsFileError, match="row 1 must be an array"):
            load_rows_file(path)

    def test_rows_not_an_array(self, tmp_path):
        path = tmp_path / "rows.json"
        path.write_text(json.dumps({"rows": "a,b"}), encoding="utf-8")

        with pytest.raises(RowsFileError, match="rows must be an array"):
            load_rows_file(path)

    def test_rows_file_error_is_value_error(self):
        assert issubclass(RowsFileError, ValueError)
