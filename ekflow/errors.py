"""Exceptions raised for invalid max-flow inputs.

Both derive from ``ValueError`` so callers that already guard against bad
input with ``except ValueError`` keep working.
"""


class MalformedMatrixError(ValueError):
    """Capacity or flow matrix is not square, empty, or holds a bad entry."""


class InvalidIndexError(ValueError):
    """Source, sink or edge endpoint lies outside ``[0, n)``."""
