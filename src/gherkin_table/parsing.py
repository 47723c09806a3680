r"""Parse pipe-delimited table text back into a TableNode.

Accepts the grid produced by TableNode.get_table_as_string() as well as
hand-written Gherkin tables:

    | name  | age |
    # comments and blank lines are skipped
    | Alice | 30  |

Each row keeps the line number it was read from (first_line + offset).

The renderer writes cells verbatim and this parser does not interpret
Gherkin escapes (`\|`, `\\`, `\n`), so a cell that itself contains a pipe
does not survive a render-then-parse round trip: it is split into two cells.
"""

import logging
import re

from gherkin_table.config import CELL_SEPARATOR
from gherkin_table.exceptions import MalformedTableError
from gherkin_table.node import TableNode

logger = logging.getLogger(__name__)

# Gherkin comment line inside a table block
COMMENT_RE = re.compile(r"^\s*#")


def parse_pipe_row(line: str) -> list[str]:
    """Split a pipe-delimited row into cell strings.

    Only the single outer pipe on each side is removed, so empty edge cells
    (`"|| a ||"` -> `["", "a", ""]`) are kept.  `"||"` is a row with no cells.
    """
    inner = line.strip()
    if inner.startswith(CELL_SEPARATOR):
        inner = inner[len(CELL_SEPARATOR) :]
    if inner.endswith(CELL_SEPARATOR):
        inner = inner[: -len(CELL_SEPARATOR)]
    if not inner:
        return []
    return [cell.strip() for cell in inner.split(CELL_SEPARATOR)]


def parse_table_text(text: str, first_line: int = 1) -> TableNode:
    """Build a TableNode from pipe-delimited *text*, numbering lines from *first_line*."""
    table: dict[int, list[str]] = {}
    for offset, line in enumerate(text.splitlines()):
        line_number = first_line + offset
        stripped = line.strip()

        # Blank lines and comments do not produce rows but still advance the line count
        if not stripped or COMMENT_RE.match(stripped):
            continue
        if not stripped.startswith(CELL_SEPARATOR):
            raise MalformedTableError(f"Line {line_number} is not a table row: {stripped!r}")

        table[line_number] = parse_pipe_row(stripped)

    logger.debug("Parsed %d table rows from %d lines of text", len(table), len(text.splitlines()))
    return TableNode(table)
