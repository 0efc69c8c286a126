"""Types and data structures for algorithm results.

Defines immutable summary containers returned by the max-flow engine and the
conservation validator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Set

from ekflow.matrix import Edge, Matrix

# Parent-map sentinel: the source, and every node BFS did not reach
NO_PARENT = -1


@dataclass(frozen=True)
class FlowSummary:
    """Summary of one max-flow computation.

    Attributes:
        total_flow: Maximum flow value achieved.
        flow_matrix: Realized flow per edge, ``max(0, capacity - residual)``.
        residual: Final residual graph.
        reachable: Nodes reachable from the source in the final residual graph.
        min_cut: Edges crossing from ``reachable`` to the rest, sorted.
        augmentations: Number of augmenting paths applied.
        elapsed: Wall-clock seconds spent in the augmenting loop.
    """

    total_flow: int
    flow_matrix: Matrix
    residual: Matrix
    reachable: Set[int]
    min_cut: List[Edge]
    augmentations: int
    elapsed: float

    @property
    def cut_capacity(self) -> int:
        """Total capacity of ``min_cut`` edges, read from the flow matrix.

        Every min-cut edge is saturated, so its flow equals its capacity.
        """
        return sum(self.flow_matrix[u][v] for u, v in self.min_cut)


@dataclass(frozen=True)
class ConservationViolation:
    """A node whose inflow and outflow disagree.

    For the source/sink balance check, ``node`` is the source, ``outflow`` is
    the total leaving the source and ``inflow`` the total entering the sink.
    """

    node: int
    inflow: int
    outflow: int

    @property
    def imbalance(self) -> int:
        """Inflow minus outflow; negative when the node emits more than it receives."""
        return self.inflow - self.outflow
