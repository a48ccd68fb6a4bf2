from importlib import import_module

from .edges import Edge, as_edge
from .errors import (
    AlgorithmicError,
    DirectedOnlyError,
    EdgeNotFound,
    GraphError,
    NegativeWeightError,
    NodeNotFound,
    NotFound,
    PolicyViolation,
    SelfLoopError,
    WeightPolicyError,
)
from .flags import GraphFlags

# graph.py pulls in adjnet.algorithms, which itself imports adjnet.core.errors
_lazy_symbols = {
    "Graph": ("adjnet.core.graph", "Graph"),
    "CacheManager": ("adjnet.core._cache", "CacheManager"),
    "GraphDiff": ("adjnet.core._history", "GraphDiff"),
}

__all__ = [
    "AlgorithmicError",
    "DirectedOnlyError",
    "Edge",
    "EdgeNotFound",
    "GraphError",
    "GraphFlags",
    "NegativeWeightError",
    "NodeNotFound",
    "NotFound",
    "PolicyViolation",
    "SelfLoopError",
    "WeightPolicyError",
    "as_edge",
    *_lazy_symbols,
]


def __getattr__(name):
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)
