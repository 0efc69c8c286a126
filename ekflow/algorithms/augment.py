"""Bottleneck search and flow placement along an augmenting path."""

from __future__ import annotations

from typing import List, Sequence

from ekflow.matrix import Edge, Matrix


def bottleneck(
    residual: Sequence[Sequence[int]],
    parent: Sequence[int],
    source: int,
    sink: int,
) -> int:
    """Return the smallest residual capacity on the path ``source -> sink``.

    The path is read from ``parent`` by walking back from ``sink``.

    Raises:
        ValueError: If ``source == sink`` (an empty path has no bottleneck).
    """
    if source == sink:
        raise ValueError("Augmenting path must contain at least one edge.")
    path_flow = None
    v = sink
    while v != source:
        u = parent[v]
        cap = residual[u][v]
        if path_flow is None or cap < path_flow:
            path_flow = cap
        v = u
    return path_flow


def augment_path(
    residual: Matrix,
    parent: Sequence[int],
    source: int,
    sink: int,
) -> int:
    """Push the bottleneck amount along the path and return it.

    Each path edge ``(u, v)`` loses the amount on ``residual[u][v]`` and the
    reverse cell ``residual[v][u]`` gains it, so later paths may cancel it.
    ``parent`` must come from a search on this same ``residual`` state.
    """
    path_flow = bottleneck(residual, parent, source, sink)
    v = sink
    while v != source:
        u = parent[v]
        residual[u][v] -= path_flow
        residual[v][u] += path_flow
        v = u
    return path_flow


def path_edges(parent: Sequence[int], source: int, sink: int) -> List[Edge]:
    """List the ``(u, v)`` edges of the path in source-to-sink order."""
    result = []
    v = sink
    while v != source:
        result.append((parent[v], v))
        v = parent[v]
    result.reverse()
    return result
