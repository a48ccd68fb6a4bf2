"""Breadth- and depth-first traversal."""

from collections import deque
from dataclasses import dataclass, field

from ..core.errors import NodeNotFound


@dataclass
class TraversalResult:
    """Outcome of a single-source traversal.

    Attributes
    ----------
    visit_order : list
        Nodes in the order they were finalised (visitor order).
    visited : set
        Every node marked visited. For BFS this includes nodes enqueued but not
        yet finalised when the traversal stopped at ``target``.
    predecessor : dict
        ``node -> parent`` for every discovered node except the source.

    """

    visit_order: list = field(default_factory=list)
    visited: set = field(default_factory=set)
    predecessor: dict = field(default_factory=dict)

    @property
    def source(self):
        return self.visit_order[0] if self.visit_order else None

    def path_to(self, node):
        """Tree path from the source to ``node``, or None if it was not reached."""
        return reconstruct_path(self.predecessor, self.source, node)


def reconstruct_path(predecessor, source, target):
    """Walk ``predecessor`` back from ``target`` to ``source``.

    Returns
    -------
    list | None
        ``[source, ..., target]``; ``[source]`` when they are equal; None when
        ``target`` has no predecessor entry.

    """
    if target == source:
        return [source]
    if target not in predecessor:
        return None
    path = [target]
    node = target
    while node != source:
        node = predecessor[node]
        path.append(node)
    path.reverse()
    return path


def _check_endpoints(graph, source, target):
    if not graph.has_node(source):
        raise NodeNotFound(source)
    if target is not None and not graph.has_node(target):
        raise NodeNotFound(target)


def _out_neighbors(graph):
    def neighbors(node):
        return (v for v, _ in graph.iter_neighbors(node))

    return neighbors


def bfs(graph, source, target=None, visitor=None, neighbors=None):
    """Breadth-first traversal from ``source``.

    Parameters
    ----------
    graph : Graph
    source : hashable
        Start node.
    target : hashable, optional
        Stop right after this node is finalised.
    visitor : callable, optional
        Called as ``visitor(node, predecessor_or_None)`` for each finalised node.
    neighbors : callable, optional
        ``node -> iterable of nodes``; defaults to the graph's out-neighbours.

    Returns
    -------
    TraversalResult

    Raises
    ------
    NodeNotFound
        If ``source`` or a given ``target`` is not in the graph.

    Notes
    -----
    Nodes are marked visited when enqueued, so each one enters the queue once.

    """
    _check_endpoints(graph, source, target)
    neighbors = neighbors or _out_neighbors(graph)

    result = TraversalResult(visited={source})
    visited, pred = result.visited, result.predecessor
    queue = deque([source])
    while queue:
        node = queue.popleft()
        result.visit_order.append(node)
        if visitor is not None:
            visitor(node, pred.get(node))
        if target is not None and node == target:
            break
        for nbr in neighbors(node):
            if nbr not in visited:
                visited.add(nbr)
                pred[nbr] = node
                queue.append(nbr)
    return result


def dfs(graph, source, target=None, visitor=None):
    """Iterative depth-first traversal from ``source``.

    Neighbours are pushed in reverse so the visit order matches the recursive
    formulation. A node is marked visited when popped; stale stack entries are
    skipped. Parameters, return value and errors are as for :func:`bfs`.
    """
    _check_endpoints(graph, source, target)

    result = TraversalResult()
    visited, pred = result.visited, result.predecessor
    stack = [(source, None)]
    while stack:
        node, parent = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        if parent is not None:
            pred[node] = parent
        result.visit_order.append(node)
        if visitor is not None:
            visitor(node, parent)
        if target is not None and node == target:
            break
        pending = [v for v, _ in graph.iter_neighbors(node) if v not in visited]
        for nbr in reversed(pending):
            stack.append((nbr, node))
    return result
