"""Re-align a pipe-delimited table file, or dump its hash views as JSON.

Reads a Gherkin-style table from a UTF-8 text file, builds a TableNode and
prints one of:
    text     -- the canonical aligned grid (default)
    columns  -- the header-keyed columns hash as JSON
    rows     -- the first-column keyed rows hash as JSON

Usage:
    python -m gherkin_table.reformat path/to/table.txt [--output columns] [--first-line 12]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from gherkin_table.config import LOG_FORMAT, LOG_LEVEL
from gherkin_table.exceptions import NodeError
from gherkin_table.parsing import parse_table_text

logger = logging.getLogger(__name__)

OUTPUTS = ("text", "columns", "rows")


def reformat_file(path: Path, output: str = "text", first_line: int = 1) -> str:
    """Parse the table in *path* and render it in the requested *output* shape."""
    if output not in OUTPUTS:
        raise ValueError(f"Unknown output: {output}")

    with open(path, "r", encoding="utf-8") as fopen:
        node = parse_table_text(fopen.read(), first_line=first_line)
    logger.info("Loaded %r from %s", node, path)

    if output == "columns":
        return json.dumps(node.get_columns_hash(), indent=2, ensure_ascii=False)
    if output == "rows":
        return json.dumps(node.get_rows_hash(), indent=2, ensure_ascii=False)
    return node.get_table_as_string()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Re-align a Gherkin table file or print its hash views.")
    parser.add_argument("path", type=Path, help="Text file containing a pipe-delimited table")
    parser.add_argument("--output", choices=OUTPUTS, default="text", help="Shape to print (default: text)")
    parser.add_argument("--first-line", type=int, default=1, help="Line number of the first line in the file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.  Returns a process exit code."""
    args = _build_parser().parse_args(argv)
    try:
        result = reformat_file(args.path, output=args.output, first_line=args.first_line)
    except NodeError as exc:
        logger.error("Could not reformat %s: %s", args.path, exc)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    sys.exit(main())
