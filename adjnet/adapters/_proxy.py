class NXProxy:
    """Lazy, cached NX (NetworkX) adapter behind ``Graph.nx``.

    - ``G.nx.<name>(...)`` resolves ``<name>`` in networkx and calls it.
    - Only arguments that *are* the owner graph are swapped for a NetworkX copy;
      nothing is injected.
    - The copy is cached per direction and rebuilt when the graph's structure
      or edge version changes.
    - ``_nx_directed=False`` (consumed here, never forwarded) runs the call on
      an undirected view of a directed graph.
    """

    def __init__(self, owner):
        self._G = owner
        self._cache = {}  # directed -> {"nxG": nx.Graph, "version": (int, int)}
        self.cache_enabled = True

    # ---------------------------- public API --------------------------------
    def clear(self):
        """Drop all cached NX graphs."""
        self._cache.clear()

    def backend(self, directed=None):
        """Return the NetworkX graph used for calls (cached)."""
        if directed is None:
            directed = self._G.is_directed
        return self._get_or_make_nx(bool(directed))

    # ------------------------- dynamic dispatch -----------------------------
    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)
        nx_callable = self._resolve_nx_callable(name)

        def wrapper(*args, **kwargs):
            directed = kwargs.pop("_nx_directed", None)

            args = list(args)
            has_owner_graph = any(a is self._G for a in args) or any(
                v is self._G for v in kwargs.values()
            )
            if has_owner_graph:
                nxG = self.backend(directed)
                for i, v in enumerate(args):
                    if v is self._G:
                        args[i] = nxG
                for k, v in list(kwargs.items()):
                    if v is self._G:
                        kwargs[k] = nxG
            return nx_callable(*args, **kwargs)

        wrapper.__name__ = name
        wrapper.__doc__ = getattr(nx_callable, "__doc__", None)
        return wrapper

    # ------------------------------ internals -------------------------------
    def _resolve_nx_callable(self, name: str):
        import networkx as _nx

        candidates = [
            _nx,
            getattr(_nx, "algorithms", None),
            getattr(_nx.algorithms, "community", None),
            getattr(_nx.algorithms, "approximation", None),
            getattr(_nx.algorithms, "centrality", None),
            getattr(_nx.algorithms, "shortest_paths", None),
            getattr(_nx.algorithms, "components", None),
            getattr(_nx.algorithms, "traversal", None),
            getattr(_nx.algorithms, "link_analysis", None),
            getattr(_nx.classes, "function", None),
        ]
        for mod in (m for m in candidates if m is not None):
            attr = getattr(mod, name, None)
            if callable(attr):
                return attr
        raise AttributeError(f"networkx has no callable '{name}'")

    def _get_or_make_nx(self, directed: bool):
        from .networkx import to_nx

        # isolated node inserts move only the structure version
        version = (self._G._structure_version, self._G._edge_version)
        entry = self._cache.get(directed)
        if not self.cache_enabled or entry is None or entry["version"] != version:
            nxG = to_nx(self._G, directed=directed)
            if self.cache_enabled:
                self._cache[directed] = {"nxG": nxG, "version": version}
            return nxG
        return entry["nxG"]
