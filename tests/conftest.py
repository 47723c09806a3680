"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from gherkin_table.node import TableNode

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def people_table() -> TableNode:
    """Header row on line 2 followed by two data rows."""
    return TableNode({2: ["name", "age"], 3: ["Alice", "30"], 4: ["Bob", "25"]})
