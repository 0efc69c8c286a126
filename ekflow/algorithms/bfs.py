from collections import deque
from typing import List, Sequence, Tuple

from ekflow.algorithms.types import NO_PARENT


def find_augmenting_path(
    residual: Sequence[Sequence[int]],
    source: int,
    sink: int,
) -> Tuple[bool, List[int]]:
    """
    Breadth-first search for a source-sink path of positive residual capacity.

    Neighbours are scanned in ascending index order, so the same residual
    graph always yields the same path. Visited and parent state are created
    fresh on every call.

    Returns:
        ``(found, parent)`` where ``parent[v]`` is the predecessor of ``v`` in
        the BFS tree and ``NO_PARENT`` for the source and unreached nodes.
    """
    n = len(residual)
    parent = [NO_PARENT] * n
    visited = [False] * n
    visited[source] = True
    queue = deque([source])
    while queue:
        u = queue.popleft()
        row = residual[u]
        for v in range(n):
            if not visited[v] and row[v] > 0:
                visited[v] = True
                parent[v] = u
                if v == sink:
                    return True, parent
                queue.append(v)
    return visited[sink], parent


def path_from_parents(parent: Sequence[int], source: int, sink: int) -> List[int]:
    """
    Rebuild the node list ``[source, ..., sink]`` from a parent map.

    Raises ValueError if ``sink`` is not connected to ``source`` in the map.
    """
    path = [sink]
    node = sink
    while node != source:
        node = parent[node]
        if node == NO_PARENT or len(path) > len(parent):
            raise ValueError(f"Parent map has no path from {source} to {sink}.")
        path.append(node)
    path.reverse()
    return path
