"""Unit tests for the reformat CLI."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import json

import pytest

from gherkin_table.reformat import main, reformat_file


@pytest.fixture
def table_file(tmp_path):
    path = tmp_path / "table.txt"
    path.write_text("|name|age|\n| Alice |30|\n|Bob| 25 |\n", encoding="utf-8")
    return path


class TestReformatFile:

    def test_text_output(self, table_file):
        assert reformat_file(table_file) == "| name  | age |\n| Alice | 30  |\n| Bob   | 25  |"

    def test_columns_output(self, table_file):
        result = json.loads(reformat_file(table_file, output="columns"))
        assert result == [{"name": "Alice", "age": "30"}, {"name": "Bob", "age": "25"}]

    def test_rows_output(self, table_file):
        result = json.loads(reformat_file(table_file, output="rows"))
        assert result == {"name": "age", "Alice": "30", "Bob": "25"}

    def test_unknown_output(self, table_file):
        with pytest.raises(ValueError, match="Unknown output"):
            reformat_file(table_file, output="yaml")

    def test_unicode_file(self, tmp_path):
        path = tmp_path / "unicode.txt"
        path.write_text("| ville | pays |\n| Zürich | Suisse |\n", encoding="utf-8")
        assert reformat_file(path) == "| ville  | pays   |\n| Zürich | Suisse |"


class TestMain:

    def test_prints_table(self, table_file, capsys):
        assert main([str(table_file)]) == 0
        assert capsys.readouterr().out == "| name  | age |\n| Alice | 30  |\n| Bob   | 25  |\n"

    def test_columns_flag(self, table_file, capsys):
        assert main([str(table_file), "--output", "columns"]) == 0
        assert json.loads(capsys.readouterr().out)[1] == {"name": "Bob", "age": "25"}

    def test_malformed_table_exit_code(self, tmp_path, capsys):
        path = tmp_path / "header_only.txt"
        path.write_text("| name | age |\n", encoding="utf-8")
        assert main([str(path), "--output", "columns"]) == 1
        assert capsys.readouterr().out == ""

    def test_not_a_table_exit_code(self, tmp_path, caplog):
        path = tmp_path / "prose.txt"
        path.write_text("Given a step\n", encoding="utf-8")
        assert main([str(path), "--first-line", "10"]) == 1
        assert "Line 10 is not a table row" in caplog.text
