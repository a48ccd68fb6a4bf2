from .traversal import bfs


def _undirected_view(graph):
    """Neighbour function following edges in both directions."""
    incoming = {n: [] for n in graph.get_nodes()}
    for source, target, _ in graph.get_edges():
        incoming[target].append(source)

    def neighbors(node):
        for v, _ in graph.iter_neighbors(node):
            yield v
        yield from incoming[node]

    return neighbors


def weak_components(graph):
    """Weakly connected components.

    Each component lists its nodes in BFS order from its first node in
    insertion order. Directed graphs are traversed through an undirected view
    (out- and in-neighbours), so the partition does not depend on which node
    is processed first.

    Returns
    -------
    list[list]

    """
    neighbors = _undirected_view(graph) if graph.is_directed else None
    seen = set()
    components = []
    for node in graph.get_nodes():
        if node in seen:
            continue
        component = bfs(graph, node, neighbors=neighbors).visit_order
        seen.update(component)
        components.append(component)
    return components
