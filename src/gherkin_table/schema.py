"""Pydantic model for a header-keyed view of a table node.

The header row becomes column_headers and every following row a data row.
The model_validator guarantees that every data row lines up with the
headers, so a ragged table fails loudly instead of being zipped short.
"""

from pydantic import BaseModel, model_validator


class TableStructure(BaseModel):
    """Header row plus data rows of a table node, validated for equal widths."""

    column_headers: list[str]
    data_rows: list[list[str]]

    @model_validator(mode="after")
    def validate_row_widths(self) -> "TableStructure":
        """Ensure every data row has exactly len(column_headers) cells."""
        n_cols = len(self.column_headers)
        for i, row in enumerate(self.data_rows):
            if len(row) != n_cols:
                raise ValueError(f"Row {i + 1} has {len(row)} cells, expected {n_cols} (matching column_headers)")
        return self

    def records(self) -> list[dict[str, str]]:
        """Return one dict per data row, keyed by column header."""
        return [dict(zip(self.column_headers, row)) for row in self.data_rows]
