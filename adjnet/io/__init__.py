"""Read-only exports: DOT text, adjacency matrices, Polars views."""

from .dataframe import edges_view, nodes_view
from .dot import to_dot, to_graphviz
from .matrix import adjacency_labels, to_adjacency_matrix

__all__ = [
    "adjacency_labels",
    "edges_view",
    "nodes_view",
    "to_adjacency_matrix",
    "to_dot",
    "to_graphviz",
]
