"""Edmonds-Karp building blocks: path search, augmentation, derivation, checks."""

from ekflow.algorithms.augment import augment_path, bottleneck, path_edges
from ekflow.algorithms.bfs import find_augmenting_path, path_from_parents
from ekflow.algorithms.conservation import (
    find_conservation_violations,
    validate_conservation,
)
from ekflow.algorithms.flow_matrix import derive_flow_matrix
from ekflow.algorithms.max_flow import MaxFlowEngine, calc_max_flow
from ekflow.algorithms.min_cut import min_cut_edges, residual_reachable
from ekflow.algorithms.types import NO_PARENT, ConservationViolation, FlowSummary

__all__ = [
    "NO_PARENT",
    "ConservationViolation",
    "FlowSummary",
    "MaxFlowEngine",
    "augment_path",
    "bottleneck",
    "calc_max_flow",
    "derive_flow_matrix",
    "find_augmenting_path",
    "find_conservation_violations",
    "min_cut_edges",
    "path_edges",
    "path_from_parents",
    "residual_reachable",
    "validate_conservation",
]
