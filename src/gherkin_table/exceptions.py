"""Errors raised by table nodes and the table text parser."""


class NodeError(Exception):
    """Base class for every error raised by this package."""


class MalformedTableError(NodeError):
    """The table cannot be read in the requested shape (missing headers, ragged rows, non-row lines)."""


class NodeIndexError(NodeError, IndexError):
    """A row or column position is outside the table."""
