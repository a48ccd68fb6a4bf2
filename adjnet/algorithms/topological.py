from collections import deque

from ..core.errors import DirectedOnlyError


def topological_sort(graph):
    """Kahn's algorithm.

    Zero in-degree nodes are seeded in insertion order and processed FIFO, so
    the result is deterministic for a given insertion history.

    Parameters
    ----------
    graph : Graph
        Must be directed.

    Returns
    -------
    list | None
        A topological order, or None if the graph contains a cycle.

    Raises
    ------
    DirectedOnlyError
        If the graph is undirected.

    """
    if not graph.is_directed:
        raise DirectedOnlyError("topological_sort")

    indegree = dict.fromkeys(graph.get_nodes(), 0)
    for edge in graph.get_edges():
        indegree[edge.target] += 1

    queue = deque(n for n, d in indegree.items() if d == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nbr, _ in graph.iter_neighbors(node):
            indegree[nbr] -= 1
            if indegree[nbr] == 0:
                queue.append(nbr)

    if len(order) < len(indegree):
        return None
    return order
