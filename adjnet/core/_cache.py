from ..algorithms.components import weak_components
from ..algorithms.cycles import find_cycle

_VIEWS = ("edges", "components", "cycle")


class CacheManager:
    """Cache manager for derived views (edge list, components, cycle witness).

    Each view stores the graph version it was built from and is rebuilt on
    access when that version is stale. The edge list follows the *edge
    version* (bumped by weight changes too); components and the cycle witness
    follow the *structure version* (topology only).
    """

    def __init__(self, graph):
        self._G = graph
        self._edges = None
        self._components = None
        self._cycle = None
        self._edges_version = None
        self._components_version = None
        self._cycle_version = None

    # ==================== Views ====================

    @property
    def edges(self):
        """Flattened ``Edge`` list, each undirected edge once.
        Builds and caches on first access.
        """
        if self._edges is None or self._edges_version != self._G._edge_version:
            self._edges = self._G._build_edge_list()
            self._edges_version = self._G._edge_version
        return self._edges

    @property
    def components(self):
        """Weak components as lists of nodes in BFS order."""
        if self._components is None or self._components_version != self._G._structure_version:
            self._components = weak_components(self._G)
            self._components_version = self._G._structure_version
        return self._components

    @property
    def cycle(self):
        """First closed cycle found, or None for an acyclic graph."""
        # None is a valid cached value, so only the version decides
        if self._cycle_version != self._G._structure_version:
            self._cycle = find_cycle(self._G)
            self._cycle_version = self._G._structure_version
        return self._cycle

    def has_edges(self) -> bool:
        """True if the edge cache exists and matches the current edge version."""
        return self._edges is not None and self._edges_version == self._G._edge_version

    def has_components(self) -> bool:
        """True if the component cache exists and matches the current structure version."""
        return (
            self._components is not None
            and self._components_version == self._G._structure_version
        )

    def has_cycle(self) -> bool:
        """True if a cycle witness (possibly None) was computed for the current structure."""
        return self._cycle_version == self._G._structure_version

    # ==================== Cache Management ====================

    def invalidate(self, views=None):
        """Invalidate cached views.

        Parameters
        ----------
        views : list[str], optional
            Views to invalidate ('edges', 'components', 'cycle').
            If None, invalidate all.

        """
        if views is None:
            views = _VIEWS

        for view in views:
            if view == "edges":
                self._edges = None
                self._edges_version = None
            elif view == "components":
                self._components = None
                self._components_version = None
            elif view == "cycle":
                self._cycle = None
                self._cycle_version = None
            else:
                raise ValueError(f"unknown cache view {view!r}; expected one of {_VIEWS}")

    def build(self, views=None):
        """Pre-build specified views (eager caching).

        Parameters
        ----------
        views : list[str], optional
            Views to build ('edges', 'components', 'cycle').
            If None, build all.

        """
        if views is None:
            views = _VIEWS

        for view in views:
            if view == "edges":
                _ = self.edges
            elif view == "components":
                _ = self.components
            elif view == "cycle":
                _ = self.cycle
            else:
                raise ValueError(f"unknown cache view {view!r}; expected one of {_VIEWS}")

    def clear(self):
        """Clear all caches."""
        self.invalidate()

    def info(self):
        """Get cache status.

        Returns
        -------
        dict
            Status of each view: ``cached``, ``valid``, ``version`` and ``size``.

        """
        G = self._G
        out = {}
        for view, value, version, current in (
            ("edges", self._edges, self._edges_version, G._edge_version),
            ("components", self._components, self._components_version, G._structure_version),
            ("cycle", self._cycle, self._cycle_version, G._structure_version),
        ):
            if version is None:
                out[view] = {"cached": False}
                continue
            out[view] = {
                "cached": True,
                "valid": version == current,
                "version": version,
                "size": 0 if value is None else len(value),
            }
        return out
