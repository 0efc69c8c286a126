"""Flow-conservation checks on a derived flow matrix.

``validate_conservation`` gives the plain yes/no answer;
``find_conservation_violations`` lists the offending nodes when a caller
needs to know which ones.
"""

from __future__ import annotations

from typing import List, Sequence

from ekflow.algorithms.types import ConservationViolation
from ekflow.matrix import check_index, validate_matrix


def find_conservation_violations(
    flow: Sequence[Sequence[int]],
    source: int,
    sink: int,
) -> List[ConservationViolation]:
    """Return every conservation violation in ``flow``.

    The first check compares the total leaving ``source`` with the total
    entering ``sink``; a mismatch is reported against the source node. Every
    other node must have equal inflow and outflow.

    Raises:
        MalformedMatrixError: If ``flow`` is not a valid square matrix.
        InvalidIndexError: If ``source`` or ``sink`` is out of range.
    """
    n = validate_matrix(flow, "flow")
    check_index(source, n, "source")
    check_index(sink, n, "sink")

    outflow = [sum(row) for row in flow]
    inflow = [sum(flow[u][v] for u in range(n)) for v in range(n)]

    violations: List[ConservationViolation] = []
    if outflow[source] != inflow[sink]:
        violations.append(
            ConservationViolation(
                node=source, inflow=inflow[sink], outflow=outflow[source]
            )
        )
    for node in range(n):
        if node in (source, sink):
            continue
        if inflow[node] != outflow[node]:
            violations.append(
                ConservationViolation(
                    node=node, inflow=inflow[node], outflow=outflow[node]
                )
            )
    return violations


def validate_conservation(
    flow: Sequence[Sequence[int]],
    source: int,
    sink: int,
) -> bool:
    """Return True if ``flow`` conserves flow at every node."""
    return not find_conservation_violations(flow, source, sink)
