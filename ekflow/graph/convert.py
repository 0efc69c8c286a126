"""Conversion between capacity matrices and NetworkX graphs.

``to_digraph`` exposes a capacity matrix to the NetworkX ecosystem (for
drawing, or cross-checking against ``networkx.maximum_flow``);
``from_digraph`` goes the other way, assigning matrix indices to nodes in
``G.nodes`` order.
"""

from __future__ import annotations

from typing import Hashable, List, Sequence, Tuple

import networkx as nx

from ekflow.errors import MalformedMatrixError
from ekflow.matrix import Matrix, validate_matrix, zeros


def to_digraph(
    capacity: Sequence[Sequence[int]],
    capacity_attr: str = "capacity",
) -> nx.DiGraph:
    """Build a DiGraph with nodes ``0..n-1`` and one edge per non-zero cell.

    Args:
        capacity: Square capacity matrix.
        capacity_attr: Edge attribute that receives the capacity.

    Returns:
        A NetworkX DiGraph. Nodes without edges are still present.
    """
    n = validate_matrix(capacity, "capacity")
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(range(n))
    for u, row in enumerate(capacity):
        for v, value in enumerate(row):
            if value > 0:
                nx_graph.add_edge(u, v, **{capacity_attr: int(value)})
    return nx_graph


def from_digraph(
    nx_graph: nx.DiGraph,
    capacity_attr: str = "capacity",
) -> Tuple[Matrix, List[Hashable]]:
    """Build a capacity matrix from a DiGraph.

    Args:
        nx_graph: Directed graph whose edges carry ``capacity_attr``.
        capacity_attr: Name of the capacity attribute.

    Returns:
        ``(matrix, nodes)`` where ``nodes[i]`` is the graph node stored at
        matrix index ``i``.

    Raises:
        MalformedMatrixError: If the graph has no nodes, is a multigraph or
            undirected, has a self-loop, or an edge lacks a non-negative
            integer capacity.
    """
    if not nx_graph.is_directed() or nx_graph.is_multigraph():
        raise MalformedMatrixError("from_digraph expects a networkx.DiGraph.")
    nodes = list(nx_graph.nodes)
    if not nodes:
        raise MalformedMatrixError("Graph has no nodes.")
    index = {node: i for i, node in enumerate(nodes)}
    matrix = zeros(len(nodes))
    for u, v, data in nx_graph.edges(data=True):
        if u == v:
            raise MalformedMatrixError(f"Self-loop {u!r} -> {v!r} is not allowed.")
        if capacity_attr not in data:
            raise MalformedMatrixError(
                f"Edge {u!r} -> {v!r} has no '{capacity_attr}' attribute."
            )
        matrix[index[u]][index[v]] = data[capacity_attr]
    validate_matrix(matrix, "capacity")
    return matrix, nodes
