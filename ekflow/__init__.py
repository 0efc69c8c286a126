"""ekflow: maximum flow on dense capacity matrices.

Computes the maximum flow between a source and a sink of a directed graph
given as an ``n x n`` matrix of non-negative integer capacities, using the
Edmonds-Karp method (breadth-first augmenting paths).

Primary API:
    MaxFlowEngine - compute_max_flow() and get_residual_graph()
    calc_max_flow() - one-off computation, optionally with a FlowSummary
    derive_flow_matrix() - realized flow per edge from capacity and residual
    validate_conservation() - flow-conservation check on a flow matrix

Example:
    from ekflow import MaxFlowEngine, derive_flow_matrix, validate_conservation

    capacity = [[0, 3, 2, 0], [0, 0, 0, 2], [0, 0, 0, 3], [0, 0, 0, 0]]
    engine = MaxFlowEngine()
    value = engine.compute_max_flow(capacity, 0, 3)  # 4
    flow = derive_flow_matrix(capacity, engine.get_residual_graph())
    assert validate_conservation(flow, 0, 3)
"""

from __future__ import annotations

from ekflow import logging
from ekflow._version import __version__
from ekflow.algorithms import (
    ConservationViolation,
    FlowSummary,
    MaxFlowEngine,
    calc_max_flow,
    derive_flow_matrix,
    find_conservation_violations,
    min_cut_edges,
    residual_reachable,
    validate_conservation,
)
from ekflow.config import ENGINE_CONFIG, EngineConfig
from ekflow.errors import InvalidIndexError, MalformedMatrixError
from ekflow.graph import from_digraph, to_digraph
from ekflow.matrix import (
    Matrix,
    add_edge,
    copy_matrix,
    edges,
    remove_edge,
    set_capacity,
    validate_matrix,
    zeros,
)

__all__ = [
    # Version
    "__version__",
    # Engine
    "MaxFlowEngine",
    "calc_max_flow",
    "derive_flow_matrix",
    "validate_conservation",
    "find_conservation_violations",
    "residual_reachable",
    "min_cut_edges",
    # Results
    "FlowSummary",
    "ConservationViolation",
    # Configuration
    "EngineConfig",
    "ENGINE_CONFIG",
    # Errors
    "InvalidIndexError",
    "MalformedMatrixError",
    # Matrices
    "Matrix",
    "validate_matrix",
    "copy_matrix",
    "zeros",
    "edges",
    "add_edge",
    "remove_edge",
    "set_capacity",
    # NetworkX
    "to_digraph",
    "from_digraph",
    # Utilities
    "logging",
]
