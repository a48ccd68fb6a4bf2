"""Cycle detection with a closed witness ``[v0, ..., v0]``."""

from enum import Enum


class Color(Enum):
    WHITE = 0  # unvisited
    GREY = 1  # on the current DFS path
    BLACK = 2  # finalised


def find_cycle(graph):
    """Return the first cycle found, or None.

    Nodes are tried in insertion order; colour and predecessor maps are shared
    across start nodes so every node is explored once.

    Parameters
    ----------
    graph : Graph

    Returns
    -------
    list | None
        Closed cycle (first node repeated at the end). A self-loop on ``u``
        yields ``[u, u]``.

    """
    color = dict.fromkeys(graph.get_nodes(), Color.WHITE)
    pred = {}
    search = _directed_search if graph.is_directed else _undirected_search
    for node in graph.get_nodes():
        if color[node] is Color.WHITE:
            cycle = search(graph, node, color, pred)
            if cycle is not None:
                return cycle
    return None


def _directed_search(graph, start, color, pred):
    color[start] = Color.GREY
    # a frame is popped only once its neighbour iterator is exhausted
    stack = [(start, iter([v for v, _ in graph.iter_neighbors(start)]))]
    while stack:
        node, nbrs = stack[-1]
        for v in nbrs:
            if color[v] is Color.WHITE:
                color[v] = Color.GREY
                pred[v] = node
                stack.append((v, iter([w for w, _ in graph.iter_neighbors(v)])))
                break
            if color[v] is Color.GREY:
                # back edge node -> v
                chain = [node]
                while chain[-1] != v:
                    chain.append(pred[chain[-1]])
                chain.reverse()
                chain.append(v)
                return chain
        else:
            color[node] = Color.BLACK
            stack.pop()
    return None


def _undirected_search(graph, start, color, pred):
    color[start] = Color.GREY
    stack = [start]
    while stack:
        u = stack.pop()
        for v, _ in graph.iter_neighbors(u):
            if v == u:
                return [u, u]
            if color[v] is Color.WHITE:
                color[v] = Color.GREY
                pred[v] = u
                stack.append(v)
            elif v != pred.get(u) and pred.get(v) != u:
                return _close(pred, u, v)
        color[u] = Color.BLACK
    return None


def _close(pred, u, v):
    """Join the tree paths of ``u`` and ``v`` at their lowest common ancestor."""
    ancestors = [u]
    while ancestors[-1] in pred:
        ancestors.append(pred[ancestors[-1]])
    seen = set(ancestors)

    v_chain = []
    node = v
    while node not in seen:
        v_chain.append(node)
        node = pred[node]
    lca = node

    u_chain = ancestors[: ancestors.index(lca) + 1]
    return u_chain + v_chain[::-1] + [u]
