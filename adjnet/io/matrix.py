import numpy as np
import scipy.sparse as sp


def adjacency_labels(graph):
    """Row/column order of :func:`to_adjacency_matrix`: nodes sorted by ``str(node)``."""
    return sorted(graph.get_nodes(), key=str)


def to_adjacency_matrix(graph, sparse=False, as_array=False):
    """Boolean adjacency matrix with ``M[i][j] == graph.has_edge(labels[i], labels[j])``.

    Parameters
    ----------
    graph : Graph
    sparse : bool, default False
        Return a ``scipy.sparse.csr_matrix``.
    as_array : bool, default False
        Return a dense ``numpy.ndarray`` (ignored when ``sparse``).

    Returns
    -------
    list[list[bool]] | numpy.ndarray | scipy.sparse.csr_matrix
        A list of lists by default; ``[]`` for an empty graph.

    Notes
    -----
    Labels come from :func:`adjacency_labels`. Undirected graphs give a
    symmetric matrix.

    """
    labels = adjacency_labels(graph)
    n = len(labels)
    index = {node: i for i, node in enumerate(labels)}

    rows, cols = [], []
    for s, t, _ in graph.get_edges():
        rows.append(index[s])
        cols.append(index[t])
        if not graph.is_directed and s != t:
            rows.append(index[t])
            cols.append(index[s])

    M = sp.csr_matrix(
        (np.ones(len(rows), dtype=bool), (np.array(rows, dtype=np.int64), np.array(cols, dtype=np.int64))),
        shape=(n, n),
        dtype=bool,
    )
    if sparse:
        return M
    if as_array:
        return M.toarray()
    return M.toarray().tolist()
