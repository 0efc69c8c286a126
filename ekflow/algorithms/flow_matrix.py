"""Per-edge flow derived from capacities and a final residual graph."""

from __future__ import annotations

from typing import Sequence

from ekflow.errors import MalformedMatrixError
from ekflow.matrix import Matrix, validate_matrix


def derive_flow_matrix(
    capacity: Sequence[Sequence[int]],
    residual: Sequence[Sequence[int]],
) -> Matrix:
    """Return ``flow[u][v] = max(0, capacity[u][v] - residual[u][v])``.

    Neither input is modified.

    Raises:
        MalformedMatrixError: If either matrix is malformed or the two differ
            in size.
    """
    n = validate_matrix(capacity, "capacity")
    m = validate_matrix(residual, "residual")
    if n != m:
        raise MalformedMatrixError(
            f"capacity is {n}x{n} but residual is {m}x{m}."
        )
    return [
        [max(0, cap_row[v] - res_row[v]) for v in range(n)]
        for cap_row, res_row in zip(capacity, residual)
    ]
