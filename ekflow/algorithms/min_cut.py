"""Minimum s-t cut read off a final residual graph."""

from __future__ import annotations

from typing import List, Sequence, Set

from ekflow.matrix import Edge


def residual_reachable(residual: Sequence[Sequence[int]], source: int) -> Set[int]:
    """Return the nodes reachable from ``source`` over positive residual edges.

    After a max-flow run this is the source side of a minimum cut.
    """
    n = len(residual)
    reachable = set()
    stack = [source]
    while stack:
        u = stack.pop()
        if u in reachable:
            continue
        reachable.add(u)
        for v in range(n):
            if residual[u][v] > 0 and v not in reachable:
                stack.append(v)
    return reachable


def min_cut_edges(capacity: Sequence[Sequence[int]], reachable: Set[int]) -> List[Edge]:
    """Return sorted edges ``(u, v)`` with ``u`` in ``reachable`` and ``v`` not."""
    n = len(capacity)
    return [
        (u, v)
        for u in sorted(reachable)
        for v in range(n)
        if v not in reachable and capacity[u][v] > 0
    ]
