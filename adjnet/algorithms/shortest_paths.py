"""Single-source shortest paths: Dijkstra for weighted graphs, BFS otherwise."""

import heapq
import itertools
import math
from dataclasses import dataclass, field

from ..core.errors import NegativeWeightError
from .traversal import _check_endpoints, bfs, reconstruct_path


@dataclass
class ShortestPaths:
    """Distances and shortest-path tree from one source.

    Only reachable nodes appear in ``distance``.
    """

    source: object
    distance: dict = field(default_factory=dict)
    predecessor: dict = field(default_factory=dict)

    def path_to(self, target):
        if target not in self.distance:
            return None
        return reconstruct_path(self.predecessor, self.source, target)


@dataclass(frozen=True)
class PathData:
    path: list | None
    distance: float

    @property
    def reachable(self):
        return self.path is not None


def dijkstra(graph, source, target=None):
    """Dijkstra's algorithm with a binary heap.

    Parameters
    ----------
    graph : Graph
    source : hashable
    target : hashable, optional
        Stop once ``target`` is finalised.

    Returns
    -------
    ShortestPaths

    Raises
    ------
    NodeNotFound
        Unknown ``source`` or ``target``.
    NegativeWeightError
        A negative weight was met on an edge to an unfinalised node. No partial
        result is returned.

    Notes
    -----
    Heap entries carry an insertion counter so node ids never get compared.
    Stale entries are dropped when popped.

    """
    _check_endpoints(graph, source, target)

    out = ShortestPaths(source, {source: 0})
    dist, pred = out.distance, out.predecessor
    done = set()
    tie = itertools.count()
    heap = [(0, next(tie), source)]
    while heap:
        d, _, node = heapq.heappop(heap)
        if node in done:
            continue
        done.add(node)
        if target is not None and node == target:
            break
        for nbr, w in graph.iter_neighbors(node):
            if nbr in done:
                continue
            if w < 0:
                raise NegativeWeightError(node, nbr, w)
            nd = d + w
            if nbr not in dist or nd < dist[nbr]:
                dist[nbr] = nd
                pred[nbr] = node
                heapq.heappush(heap, (nd, next(tie), nbr))
    return out


def bfs_distances(graph, source, target=None):
    """Hop counts from ``source`` as a ``ShortestPaths``."""
    tree = bfs(graph, source, target=target)
    out = ShortestPaths(source, {source: 0}, tree.predecessor)
    # predecessor is filled in discovery order, parents always first
    for node, parent in tree.predecessor.items():
        out.distance[node] = out.distance[parent] + 1
    return out


def shortest_path_data(graph, source, target):
    """Shortest path and its length, dispatched on ``graph.is_weighted``.

    Returns
    -------
    PathData
        ``path`` is None and ``distance`` is ``math.inf`` when ``target`` is
        unreachable.

    """
    if graph.is_weighted:
        paths = dijkstra(graph, source, target)
    else:
        paths = bfs_distances(graph, source, target)
    path = paths.path_to(target)
    if path is None:
        return PathData(None, math.inf)
    return PathData(path, float(paths.distance[target]))
