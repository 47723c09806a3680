"""Shared configuration for table rendering and the reformat CLI."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root in a source checkout or editable install; under a regular
# install this is site-packages' parent and .env is simply not found.
ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

NODE_TYPE = "Table"

# "| a   | bb |": every cell is wrapped in one padding space on each side
CELL_SEPARATOR = "|"
CELL_PADDING = " "

LOG_LEVEL = os.getenv("GHERKIN_TABLE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
