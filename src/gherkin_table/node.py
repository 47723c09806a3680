"""Immutable Gherkin table node.

A table is captured from feature text as an ordered mapping of source line
number to the row of cell strings found on that line:

    {2: ["name", "age"], 3: ["Alice", "30"], 4: ["Bob", "25"]}

The node exposes the rows in three shapes (raw rows, first-column keyed
rows hash, header keyed columns hash) and re-renders them as an aligned,
pipe-delimited grid:

    | name  | age |
    | Alice | 30  |
    | Bob   | 25  |

Column widths are measured in Unicode code points and computed once, when
the node is built.
"""

import logging
import operator
from collections.abc import Callable, Iterator, Mapping, Sequence
from types import MappingProxyType

from pydantic import ValidationError

from gherkin_table.config import CELL_PADDING, CELL_SEPARATOR, NODE_TYPE
from gherkin_table.exceptions import MalformedTableError, NodeError, NodeIndexError
from gherkin_table.schema import TableStructure

logger = logging.getLogger(__name__)

# (padded_cell, column_index) -> rendered cell, e.g. to add terminal colours
CellWrapper = Callable[[str, int], str]


def _pad_right(text: str, width: int) -> str:
    """Append spaces until *text* is *width* code points long.  Never truncates."""
    return text.ljust(width, " ")


class TableNode:
    """Rectangular (or ragged) block of table cells, keyed by source line number."""

    def __init__(self, table: Mapping[int, Sequence[str]]):
        # Rows are frozen into tuples so no caller can mutate them afterwards
        self._table: Mapping[int, tuple[str, ...]] = MappingProxyType({line: tuple(row) for line, row in table.items()})
        self._rows: tuple[tuple[str, ...], ...] = tuple(self._table.values())
        self._lines: tuple[int, ...] = tuple(self._table)

        # Widest cell per column index; a short row simply skips the missing columns
        self._column_widths: dict[int, int] = {}
        for row in self._rows:
            for column, value in enumerate(row):
                self._column_widths[column] = max(self._column_widths.get(column, 0), len(value))

        logger.debug("Built table node: %d rows, %d columns", len(self._table), len(self._column_widths))

    @classmethod
    def from_list(cls, values: Sequence[str]) -> "TableNode":
        """Build a single-column table from a flat list, numbering lines from 0."""
        if any(isinstance(value, (list, tuple)) for value in values):
            raise NodeError("List is not a one-dimensional array.")
        return cls({line: [value] for line, value in enumerate(values)})

    def __repr__(self) -> str:
        first_line = next(iter(self._table), None)
        return f"TableNode(rows={len(self._table)}, line={first_line})"

    def __str__(self) -> str:
        return self.get_table_as_string()

    def __iter__(self) -> Iterator[dict[str, str]]:
        # Re-derived on every iteration, nothing is cached between passes
        return iter(self.get_hash())

    def get_node_type(self) -> str:
        return NODE_TYPE

    # ─── Row / Line Access ───────────────────────────────────────────────────

    def get_table(self) -> dict[int, list[str]]:
        """Return a copy of the line number -> row mapping, in construction order."""
        return {line: list(row) for line, row in self._table.items()}

    def get_rows(self) -> list[list[str]]:
        """Return the rows in construction order, without their line numbers."""
        return [list(row) for row in self._rows]

    def get_lines(self) -> list[int]:
        """Return the source line number of every row, in construction order."""
        return list(self._lines)

    def get_column_widths(self) -> dict[int, int]:
        """Return the widest cell length (in code points) for each column index."""
        return dict(self._column_widths)

    def _check_row_index(self, index: int) -> int:
        # Non-integer positions (e.g. 1.0) raise TypeError here
        index = operator.index(index)
        if not 0 <= index < len(self._rows):
            raise NodeIndexError(f"Row #{index} does not exist in table.")
        return index

    def get_row(self, index: int) -> list[str]:
        """Return the row at ordinal position *index* (0-based).

        Raises NodeIndexError for positions outside ``[0, row_count)``;
        negative positions are not counted from the end.  *index* must be an
        int (anything accepted by operator.index); other types raise TypeError.
        """
        index = self._check_row_index(index)
        return list(self._rows[index])

    def get_row_line(self, index: int) -> int:
        """Return the source line number on which the row at *index* was defined."""
        index = self._check_row_index(index)
        return self._lines[index]

    def get_line(self) -> int:
        """Return the line number at which the table starts."""
        return self.get_row_line(0)

    def get_column(self, index: int) -> list[str]:
        """Return the cell at column *index* of every row, in row order."""
        index = operator.index(index)
        if index < 0 or any(index >= len(row) for row in self._rows):
            raise NodeIndexError(f"Column #{index} does not exist in table.")
        return [row[index] for row in self._rows]

    # ─── Hash Views ──────────────────────────────────────────────────────────

    def to_structure(self) -> TableStructure:
        """Split the table into header row and data rows, validating their widths.

        Raises MalformedTableError when there is no data row below the header,
        or when a data row does not have exactly one cell per header.
        """
        rows = self.get_rows()
        if len(rows) < 2:
            raise MalformedTableError("Could not get columns hash. It's likely the table is malformed (missing headers)")

        try:
            return TableStructure(column_headers=rows[0], data_rows=rows[1:])
        except ValidationError as exc:
            details = "; ".join(error["msg"] for error in exc.errors())
            raise MalformedTableError(f"Could not get columns hash: {details}") from exc

    def get_columns_hash(self) -> list[dict[str, str]]:
        """Return one record per data row, keyed by the cells of the header row (row 0)."""
        return self.to_structure().records()

    def get_hash(self) -> list[dict[str, str]]:
        """Alias of get_columns_hash()."""
        return self.get_columns_hash()

    def get_rows_hash(self) -> dict[str, str | list[str]]:
        """Return a mapping of each row's first cell to the rest of that row.

        A single remaining cell is stored as a plain string, anything else as
        a list.  Every row takes part (there is no header), and a repeated
        key is overwritten by the later row.
        """
        rows_hash: dict[str, str | list[str]] = {}
        for row in self.get_rows():
            key, rest = (row[0], row[1:]) if row else ("", [])
            rows_hash[key] = rest[0] if len(rest) == 1 else rest
        return rows_hash

    # ─── Text Rendering ──────────────────────────────────────────────────────

    def _padded_cells(self, index: int) -> list[str]:
        return [
            _pad_right(CELL_PADDING + value + CELL_PADDING, self._column_widths[column] + 2)
            for column, value in enumerate(self.get_row(index))
        ]

    def get_row_as_string(self, index: int) -> str:
        """Render one row as ``| v1 | v2 |`` with every cell padded to its column width."""
        cells = self._padded_cells(index)
        return CELL_SEPARATOR + CELL_SEPARATOR.join(cells) + CELL_SEPARATOR

    def get_row_as_string_with_wrapped_values(self, index: int, wrapper: CellWrapper) -> str:
        """Render one row like get_row_as_string(), passing each padded cell through *wrapper*.

        *wrapper* receives ``(padded_value, column_index)``; whatever it raises
        propagates to the caller.
        """
        cells = [wrapper(value, column) for column, value in enumerate(self._padded_cells(index))]
        return CELL_SEPARATOR + CELL_SEPARATOR.join(cells) + CELL_SEPARATOR

    def get_table_as_string(self) -> str:
        """Render every row, joined by newlines (no trailing newline)."""
        return "\n".join(self.get_row_as_string(i) for i in range(len(self._table)))
