"""Dense capacity matrices.

A graph with ``n`` nodes is an ``n x n`` list of lists of non-negative
integers, where ``m[u][v]`` is the capacity of edge ``u -> v`` and 0 means
there is no edge. This module validates such matrices, copies them, and
edits edges in place.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, List, Sequence, Tuple

from ekflow.errors import InvalidIndexError, MalformedMatrixError

Matrix = List[List[int]]
Edge = Tuple[int, int]


def _is_int(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def validate_matrix(matrix: Sequence[Sequence[int]], name: str = "matrix") -> int:
    """Check that ``matrix`` is a non-empty square matrix of non-negative ints.

    Args:
        matrix: Row-major matrix to check.
        name: Label used in error messages.

    Returns:
        The number of nodes ``n``.

    Raises:
        MalformedMatrixError: If the matrix is empty, ragged, not square, or
            contains a negative or non-integer entry.
    """
    n = len(matrix)
    if n == 0:
        raise MalformedMatrixError(f"{name} must have at least one row.")
    for u, row in enumerate(matrix):
        if len(row) != n:
            raise MalformedMatrixError(
                f"{name} must be square: row {u} has {len(row)} entries, expected {n}."
            )
        for v, value in enumerate(row):
            if not _is_int(value):
                raise MalformedMatrixError(
                    f"{name}[{u}][{v}] must be an integer, got {value!r}."
                )
            if value < 0:
                raise MalformedMatrixError(
                    f"{name}[{u}][{v}] must be non-negative, got {value}."
                )
    return n


def check_index(index: int, n: int, label: str = "node") -> None:
    """Raise ``InvalidIndexError`` unless ``0 <= index < n``."""
    if not _is_int(index) or not 0 <= index < n:
        raise InvalidIndexError(f"{label} index {index!r} is outside [0, {n}).")


def copy_matrix(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return an independent deep copy of ``matrix`` as plain ints."""
    return [[int(value) for value in row] for row in matrix]


def zeros(n: int) -> Matrix:
    """Return an ``n x n`` matrix with no edges."""
    if n <= 0:
        raise MalformedMatrixError(f"Node count must be positive, got {n}.")
    return [[0] * n for _ in range(n)]


def edges(matrix: Sequence[Sequence[int]]) -> List[Tuple[int, int, int]]:
    """List ``(u, v, capacity)`` for every non-zero cell in row-major order."""
    return [
        (u, v, value)
        for u, row in enumerate(matrix)
        for v, value in enumerate(row)
        if value
    ]


def _check_edge(matrix: Matrix, u: int, v: int) -> None:
    n = len(matrix)
    check_index(u, n, "from")
    check_index(v, n, "to")
    if u == v:
        raise ValueError(f"Self-loop {u} -> {v} is not allowed.")


def _check_capacity(capacity: int) -> None:
    if not _is_int(capacity) or capacity <= 0:
        raise ValueError(f"Edge capacity must be a positive integer, got {capacity!r}.")


def add_edge(matrix: Matrix, u: int, v: int, capacity: int) -> None:
    """Add edge ``u -> v`` with ``capacity`` in place.

    Raises:
        InvalidIndexError: If ``u`` or ``v`` is out of range.
        ValueError: On a self-loop, a non-positive capacity, or if the edge
            already exists.
    """
    _check_edge(matrix, u, v)
    _check_capacity(capacity)
    if matrix[u][v] != 0:
        raise ValueError(f"Edge {u} -> {v} already exists.")
    matrix[u][v] = capacity


def remove_edge(matrix: Matrix, u: int, v: int) -> int:
    """Delete edge ``u -> v`` in place and return its former capacity.

    Raises:
        InvalidIndexError: If ``u`` or ``v`` is out of range.
        ValueError: If the edge does not exist.
    """
    _check_edge(matrix, u, v)
    if matrix[u][v] == 0:
        raise ValueError(f"Edge {u} -> {v} does not exist.")
    capacity = matrix[u][v]
    matrix[u][v] = 0
    return capacity


def set_capacity(matrix: Matrix, u: int, v: int, capacity: int) -> int:
    """Change the capacity of existing edge ``u -> v`` and return the old value.

    Raises:
        InvalidIndexError: If ``u`` or ``v`` is out of range.
        ValueError: On a non-positive capacity or if the edge does not exist.
    """
    _check_edge(matrix, u, v)
    _check_capacity(capacity)
    if matrix[u][v] == 0:
        raise ValueError(f"Edge {u} -> {v} does not exist.")
    previous = matrix[u][v]
    matrix[u][v] = capacity
    return previous
