"""Line-addressed Gherkin table node with hash views and aligned text rendering.

Submodules:
  config      -- project root, rendering constants, logging settings
  exceptions  -- NodeError hierarchy
  schema      -- TableStructure Pydantic model
  node        -- TableNode itself
  parsing     -- pipe-delimited text -> TableNode
  reformat    -- command-line entry point for re-aligning table files
"""

from gherkin_table.exceptions import MalformedTableError, NodeError, NodeIndexError
from gherkin_table.node import TableNode
from gherkin_table.parsing import parse_table_text
from gherkin_table.schema import TableStructure

__all__ = [
    "MalformedTableError",
    "NodeError",
    "NodeIndexError",
    "TableNode",
    "TableStructure",
    "parse_table_text",
]
