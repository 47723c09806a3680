"""Unit tests for the TableStructure model."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from pydantic import ValidationError

from gherkin_table.schema import TableStructure


class TestTableStructure:

    def test_valid_structure(self):
        ts = TableStructure(column_headers=["a", "b"], data_rows=[["1", "2"], ["3", "4"]])
        assert ts.column_headers == ["a", "b"]
        assert len(ts.data_rows) == 2

    def test_short_row_rejected(self):
        with pytest.raises(ValidationError, match="Row 1 has 1 cells, expected 2"):
            TableStructure(column_headers=["a", "b"], data_rows=[["1"]])

    def test_long_row_rejected(self):
        with pytest.raises(ValidationError, match="Row 2 has 3 cells"):
            TableStructure(column_headers=["a", "b"], data_rows=[["1", "2"], ["3", "4", "5"]])

    def test_no_data_rows_is_valid(self):
        ts = TableStructure(column_headers=["a"], data_rows=[])
        assert ts.records() == []

    def test_records(self):
        ts = TableStructure(column_headers=["name", "age"], data_rows=[["Alice", "30"], ["Bob", "25"]])
        assert ts.records() == [{"name": "Alice", "age": "30"}, {"name": "Bob", "age": "25"}]

    def test_duplicate_header_keeps_last_value(self):
        ts = TableStructure(column_headers=["x", "x"], data_rows=[["1", "2"]])
        assert ts.records() == [{"x": "2"}]
