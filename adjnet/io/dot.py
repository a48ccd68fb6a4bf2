import re

_PLAIN_ID = re.compile(r"[A-Za-z_][A-Za-z0-9_]*|-?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)")


def _dot_id(node):
    # DOT accepts bare identifiers and numerals; everything else is quoted
    s = str(node)
    if _PLAIN_ID.fullmatch(s):
        return s
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _format_weight(w):
    if isinstance(w, float) and w.is_integer():
        return str(int(w))
    return str(w)


def to_dot(graph, name="G"):
    """Render ``graph`` as DOT text.

    Parameters
    ----------
    graph : Graph
    name : str, default "G"
        Graph name in the header.

    Returns
    -------
    str
        ``digraph <name> {`` (or ``graph``), one bare statement per isolated
        node, one ``a -> b`` (or ``a -- b``) statement per edge with
        ``[weight=W]`` on weighted graphs, then ``}``. Undirected edges are
        written once.

    """
    directed = graph.is_directed
    connector = "->" if directed else "--"
    edges = graph.get_edges()

    touched = set()
    for s, t, _ in edges:
        touched.add(s)
        touched.add(t)

    lines = [f"{'digraph' if directed else 'graph'} {_dot_id(name)} {{"]
    for node in graph.get_nodes():
        if node not in touched:
            lines.append(f"  {_dot_id(node)};")
    for s, t, w in edges:
        attrs = f" [weight={_format_weight(w)}]" if graph.is_weighted else ""
        lines.append(f"  {_dot_id(s)} {connector} {_dot_id(t)}{attrs};")
    lines.append("}")
    return "\n".join(lines)


def to_graphviz(graph, name="G", layout="dot", graph_attr=None, node_attr=None, edge_attr=None):
    """Build a ``graphviz.Digraph`` / ``graphviz.Graph`` with the same content as :func:`to_dot`.

    Requires the optional ``graphviz`` package (``pip install adjnet[graphviz]``).
    Node names are ``str(node)``; weights become edge ``weight`` and ``label``
    attributes on weighted graphs.
    """
    try:
        import graphviz  # type: ignore
    except ModuleNotFoundError as e:
        raise ModuleNotFoundError(
            "Optional dependency 'graphviz' is not installed. Install with: pip install adjnet[graphviz]"
        ) from e

    cls = graphviz.Digraph if graph.is_directed else graphviz.Graph
    g = cls(name=str(name), engine=layout, graph_attr=graph_attr, node_attr=node_attr, edge_attr=edge_attr)
    for node in graph.get_nodes():
        g.node(str(node))
    for s, t, w in graph.get_edges():
        if graph.is_weighted:
            g.edge(str(s), str(t), weight=_format_weight(w), label=_format_weight(w))
        else:
            g.edge(str(s), str(t))
    return g
