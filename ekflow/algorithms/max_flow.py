"""Maximum-flow computation via Edmonds-Karp.

Repeatedly finds a shortest (fewest-edge) augmenting path with breadth-first
search over the residual graph and pushes its bottleneck capacity, until no
path from source to sink remains. Integer capacities guarantee termination:
each augmentation raises the total by at least one and the total is bounded
by the capacity of any s-t cut.
"""

from __future__ import annotations

import time
from typing import Literal, Optional, Sequence, Tuple, Union, overload

from ekflow.algorithms.augment import augment_path, path_edges
from ekflow.algorithms.bfs import find_augmenting_path
from ekflow.algorithms.conservation import find_conservation_violations
from ekflow.algorithms.flow_matrix import derive_flow_matrix
from ekflow.algorithms.min_cut import min_cut_edges, residual_reachable
from ekflow.algorithms.types import FlowSummary
from ekflow.config import ENGINE_CONFIG, EngineConfig
from ekflow.errors import InvalidIndexError
from ekflow.logging import get_logger
from ekflow.matrix import Matrix, check_index, copy_matrix, validate_matrix

logger = get_logger(__name__)


class MaxFlowEngine:
    """Edmonds-Karp max-flow solver over a dense capacity matrix.

    Each ``compute_max_flow`` call builds its own residual graph from the
    given capacities; only the capacity snapshot, the final residual graph and
    run statistics of the most recent call are kept, for ``get_residual_graph``
    and ``summary``. An engine is not meant to be shared between threads.

    Example:
        >>> engine = MaxFlowEngine()
        >>> engine.compute_max_flow([[0, 5], [0, 0]], 0, 1)
        5
        >>> engine.get_residual_graph()
        [[0, 0], [5, 0]]
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config if config is not None else ENGINE_CONFIG
        self._reset()

    def _reset(self) -> None:
        self._capacity: Optional[Matrix] = None
        self._residual: Optional[Matrix] = None
        self._source: Optional[int] = None
        self._sink: Optional[int] = None
        self._total_flow = 0
        self._augmentations = 0
        self._elapsed = 0.0

    def compute_max_flow(
        self,
        capacity: Sequence[Sequence[int]],
        source: int,
        sink: int,
    ) -> int:
        """Return the maximum flow from ``source`` to ``sink``.

        Args:
            capacity: Square matrix of non-negative integer capacities. It is
                copied, never modified.
            source: Source node index.
            sink: Sink node index, different from ``source``.

        Raises:
            MalformedMatrixError: If ``capacity`` is malformed (only checked
                when ``config.validate_input`` is set).
            InvalidIndexError: If ``source`` or ``sink`` is out of range or
                they are equal.
            RuntimeError: If ``config.max_augmentations`` is exceeded.
        """
        # A failed call must not leave the previous result readable
        self._reset()

        if self.config.validate_input:
            n = validate_matrix(capacity, "capacity")
        else:
            n = len(capacity)
        check_index(source, n, "source")
        check_index(sink, n, "sink")
        if source == sink:
            raise InvalidIndexError(f"Source and sink must differ, both are {source}.")

        capacity_copy = copy_matrix(capacity)
        residual = copy_matrix(capacity_copy)
        limit = self.config.max_augmentations

        started = time.perf_counter()
        max_flow = 0
        augmentations = 0
        while True:
            found, parent = find_augmenting_path(residual, source, sink)
            if not found:
                break
            if limit is not None and augmentations >= limit:
                raise RuntimeError(
                    f"Exceeded {limit} augmenting paths from {source} to {sink}."
                )
            path_flow = augment_path(residual, parent, source, sink)
            max_flow += path_flow
            augmentations += 1
            if self.config.log_paths:
                logger.debug(
                    "Augmenting path %s carries %d (total %d)",
                    path_edges(parent, source, sink),
                    path_flow,
                    max_flow,
                )
        elapsed = time.perf_counter() - started

        self._capacity = capacity_copy
        self._residual = residual
        self._source = source
        self._sink = sink
        self._total_flow = max_flow
        self._augmentations = augmentations
        self._elapsed = elapsed

        logger.debug(
            "Max flow %d -> %d on %d nodes: %d after %d augmentations in %.6fs",
            source,
            sink,
            n,
            max_flow,
            augmentations,
            elapsed,
        )
        return max_flow

    def get_residual_graph(self) -> Matrix:
        """Return a copy of the residual graph left by the last computation.

        Raises:
            RuntimeError: If ``compute_max_flow`` has not been called yet or
                its last call raised.
        """
        if self._residual is None:
            raise RuntimeError("No completed max-flow computation.")
        return copy_matrix(self._residual)

    def summary(self) -> FlowSummary:
        """Build a ``FlowSummary`` for the last computation.

        A flow matrix that fails conservation is logged as a warning; the
        summary is still returned so the caller can inspect it.

        Raises:
            RuntimeError: If ``compute_max_flow`` has not been called yet or
                its last call raised.
        """
        if self._residual is None or self._capacity is None:
            raise RuntimeError("No completed max-flow computation.")

        flow = derive_flow_matrix(self._capacity, self._residual)
        violations = find_conservation_violations(flow, self._source, self._sink)
        if violations:
            logger.warning(
                "Derived flow from %d to %d violates conservation at nodes %s",
                self._source,
                self._sink,
                [v.node for v in violations],
            )
        reachable = residual_reachable(self._residual, self._source)
        return FlowSummary(
            total_flow=self._total_flow,
            flow_matrix=flow,
            residual=copy_matrix(self._residual),
            reachable=reachable,
            min_cut=min_cut_edges(self._capacity, reachable),
            augmentations=self._augmentations,
            elapsed=self._elapsed,
        )


@overload
def calc_max_flow(
    capacity: Sequence[Sequence[int]],
    source: int,
    sink: int,
    *,
    return_summary: Literal[False] = False,
    config: Optional[EngineConfig] = None,
) -> int: ...


@overload
def calc_max_flow(
    capacity: Sequence[Sequence[int]],
    source: int,
    sink: int,
    *,
    return_summary: Literal[True],
    config: Optional[EngineConfig] = None,
) -> Tuple[int, FlowSummary]: ...


def calc_max_flow(
    capacity: Sequence[Sequence[int]],
    source: int,
    sink: int,
    *,
    return_summary: bool = False,
    config: Optional[EngineConfig] = None,
) -> Union[int, Tuple[int, FlowSummary]]:
    """Compute max flow on a fresh ``MaxFlowEngine``.

    Args:
        capacity: Square matrix of non-negative integer capacities.
        source: Source node index.
        sink: Sink node index.
        return_summary: If True, also return a ``FlowSummary`` with the flow
            matrix, residual graph and min-cut.
        config: Engine settings; defaults to ``ENGINE_CONFIG``.

    Returns:
        The max-flow value, or ``(value, FlowSummary)`` with ``return_summary``.

    Examples:
        >>> capacity = [
        ...     [0, 3, 2, 0],
        ...     [0, 0, 0, 2],
        ...     [0, 0, 0, 3],
        ...     [0, 0, 0, 0],
        ... ]
        >>> calc_max_flow(capacity, 0, 3)
        4
        >>> flow, summary = calc_max_flow(capacity, 0, 3, return_summary=True)
        >>> summary.min_cut
        [(0, 2), (1, 3)]
    """
    engine = MaxFlowEngine(config)
    max_flow = engine.compute_max_flow(capacity, source, sink)
    if return_summary:
        return max_flow, engine.summary()
    return max_flow
