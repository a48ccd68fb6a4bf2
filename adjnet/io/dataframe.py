"""Polars views of a graph.

Node ids land in a single column, so ids should share one type (all strings,
all ints, ...) for the frame to build.
"""

import polars as pl


def edges_view(graph, copy=True):
    """Build a Polars DF [DataFrame] of edges.

    Columns: ``source``, ``target``, ``weight`` (Float64), one row per edge
    (undirected edges once).

    Parameters
    ----------
    graph : Graph
    copy : bool, default True
        Return a clone so callers may mutate the frame freely.

    """
    edges = graph.get_edges()
    # Fast path: no edges
    if not edges:
        return pl.DataFrame(schema={"source": pl.Utf8, "target": pl.Utf8, "weight": pl.Float64})

    src, tgt, wts = zip(*edges)
    out = pl.DataFrame(
        {
            "source": list(src),
            "target": list(tgt),
            "weight": pl.Series("weight", [float(w) for w in wts], dtype=pl.Float64),
        }
    )
    return out.clone() if copy else out


def nodes_view(graph):
    """Build a Polars DF [DataFrame] of nodes.

    Columns: ``node``, ``out_degree``, ``in_degree`` in node insertion order.
    """
    nodes = graph.get_nodes()
    if not nodes:
        return pl.DataFrame(schema={"node": pl.Utf8, "out_degree": pl.Int64, "in_degree": pl.Int64})

    outdeg = {n: graph.out_degree(n) for n in nodes}
    if graph.is_directed:
        indeg = dict.fromkeys(nodes, 0)
        for _, t, _ in graph.get_edges():
            indeg[t] += 1
    else:
        indeg = outdeg

    return pl.DataFrame(
        {
            "node": nodes,
            "out_degree": pl.Series("out_degree", [outdeg[n] for n in nodes], dtype=pl.Int64),
            "in_degree": pl.Series("in_degree", [indeg[n] for n in nodes], dtype=pl.Int64),
        }
    )
