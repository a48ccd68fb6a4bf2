# adjnet/__init__.py
"""adjnet: single import, full API."""
from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "core": "adjnet.core",
    "algorithms": "adjnet.algorithms",
    "generators": "adjnet.generators",
    "io": "adjnet.io",
    "adapters": "adjnet.adapters",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "Graph": ("adjnet.core.graph", "Graph"),
    "GraphFlags": ("adjnet.core.flags", "GraphFlags"),
    "Edge": ("adjnet.core.edges", "Edge"),
    "GraphError": ("adjnet.core.errors", "GraphError"),
    "NotFound": ("adjnet.core.errors", "NotFound"),
    "PolicyViolation": ("adjnet.core.errors", "PolicyViolation"),
    "AlgorithmicError": ("adjnet.core.errors", "AlgorithmicError"),

    # Generators
    "erdos_renyi": ("adjnet.generators", "erdos_renyi"),
    "path_graph": ("adjnet.generators", "path_graph"),
    "cycle_graph": ("adjnet.generators", "cycle_graph"),
    "grid_graph": ("adjnet.generators", "grid_graph"),

    # Export
    "to_dot": ("adjnet.io.dot", "to_dot"),
    "to_adjacency_matrix": ("adjnet.io.matrix", "to_adjacency_matrix"),
    "edges_view": ("adjnet.io.dataframe", "edges_view"),
    "nodes_view": ("adjnet.io.dataframe", "nodes_view"),

    # NetworkX adapter (optional dependency)
    "to_nx": ("adjnet.adapters.networkx", "to_nx"),
    "from_nx": ("adjnet.adapters.networkx", "from_nx"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("adjnet")
except PackageNotFoundError:
    __version__ = "0.0.0"
