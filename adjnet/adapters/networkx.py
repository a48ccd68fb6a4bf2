try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install adjnet[networkx]"
    ) from e

from ..core.flags import GraphFlags
from ..core.graph import Graph


def to_nx(graph: Graph, directed=None) -> nx.Graph:
    """Export to a NetworkX ``DiGraph`` or ``Graph``.

    Parameters
    ----------
    graph : Graph
        Source graph.
    directed : bool, optional
        Force the output class. Defaults to ``graph.is_directed``. An
        undirected export of a directed graph merges ``a->b`` and ``b->a``
        (the later weight wins).

    Returns
    -------
    networkx.Graph | networkx.DiGraph
        Nodes in insertion order; every edge carries a ``weight`` attribute.

    """
    if directed is None:
        directed = graph.is_directed
    nxG = nx.DiGraph() if directed else nx.Graph()
    nxG.add_nodes_from(graph.get_nodes())
    for s, t, w in graph.get_edges():
        nxG.add_edge(s, t, weight=w)
        if directed and not graph.is_directed and s != t:
            nxG.add_edge(t, s, weight=w)
    return nxG


def from_nx(nxG, flags=None, weight="weight") -> Graph:
    """Build a ``Graph`` from a simple NetworkX graph.

    Parameters
    ----------
    nxG : networkx.Graph | networkx.DiGraph
        Multigraphs are rejected.
    flags : GraphFlags, optional
        Explicit flags. When None they are inferred: ``DIRECTED`` from
        ``nxG.is_directed()``, ``WEIGHTED`` when any edge weight differs from
        1, ``ALLOW_SELF_LOOP`` when self-loops are present.
    weight : str, default "weight"
        Edge attribute holding the weight; missing attributes read as 1.

    Returns
    -------
    Graph

    Raises
    ------
    TypeError
        For multigraphs.

    """
    if nxG.is_multigraph():
        raise TypeError("from_nx does not accept multigraphs; collapse parallel edges first")

    edges = [(u, v, d.get(weight, 1)) for u, v, d in nxG.edges(data=True)]
    if flags is None:
        flags = GraphFlags.NONE
        if nxG.is_directed():
            flags |= GraphFlags.DIRECTED
        if any(w != 1 for _, _, w in edges):
            flags |= GraphFlags.WEIGHTED
        if nx.number_of_selfloops(nxG):
            flags |= GraphFlags.ALLOW_SELF_LOOP

    def build(g):
        g.add_nodes(list(nxG.nodes()))
        g.add_edges(edges)

    return Graph(flags, build)


class NetworkXAdapter:
    def export(self, graph, **kwargs):
        return to_nx(graph, **kwargs)

    def import_graph(self, obj, **kwargs):
        return from_nx(obj, **kwargs)
