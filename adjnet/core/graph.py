import itertools
import numbers
import time
from collections import deque
from collections.abc import Callable, Iterable, Mapping

from ..algorithms.shortest_paths import dijkstra, shortest_path_data
from ..algorithms.topological import topological_sort
from ..algorithms.traversal import bfs, dfs
from ._cache import CacheManager
from ._history import HistoryMixin
from .edges import Edge, as_edge, is_edge_like, iter_batch, iter_edge_batch
from .errors import DirectedOnlyError, EdgeNotFound, NodeNotFound, SelfLoopError, WeightPolicyError
from .flags import GraphFlags, resolve_flags

_debug_ids = itertools.count(1)


def _replay(target, source):
    """Builder that re-adds ``source``'s nodes then edges through ``target``'s mutators."""
    target.add_nodes(source.get_nodes())
    target.add_edges(source.get_edges())


class Graph(HistoryMixin):
    """Adjacency-map graph with a configurable contract and built-in algorithms.

    The store is an insertion-ordered ``dict`` of ``node -> {neighbor: weight}``.
    Undirected edges are mirrored in both rows; directed graphs keep forward
    entries only. Derived views (edge list, weak components, cycle witness)
    are memoised by :class:`CacheManager` against two version counters.

    Parameters
    ----------
    flags : GraphFlags | int, default GraphFlags.NONE
        Contract bits: ``DIRECTED``, ``WEIGHTED``, ``ALLOW_SELF_LOOP``, ``IMMUTABLE``.
    builder : Graph | Mapping | Iterable | Callable | hashable, optional
        Initial content, applied before ``IMMUTABLE`` takes effect:

        - another ``Graph``: its nodes and edges are replayed into this one;
        - a mapping with optional ``"nodes"`` and ``"edges"`` sequences;
        - an ``Edge``: a single edge;
        - a callable: invoked as ``builder(graph, *builder_args)``;
        - any other iterable (list, tuple, set, generator): each item is an
          edge when it is edge-shaped (tuple, list, mapping, ``Edge``), a node
          otherwise. Tuple node ids such as grid coordinates are therefore
          read as edges here; pass them as ``{"nodes": [...]}`` instead;
        - anything else (str included): a single node id.
    *builder_args
        Extra positional arguments for a callable builder.
    directed, weighted, allow_self_loops, immutable : bool, optional
        Override the matching bit of ``flags``; ``None`` leaves it as is.
    history : bool, default True
        Record every mutation in the in-memory history.
    history_limit : int, optional
        Keep only the newest ``history_limit`` events. ``None`` keeps them all,
        so long-running callers that mutate every step should set a limit or
        pass ``history=False``.

    Notes
    -----
    - Node ids are any hashable except ``None`` and follow dict key identity:
      ``123`` and ``"123"`` are different nodes, ``1``, ``1.0`` and ``True`` are
      the same node.
    - Mutations on a frozen graph are silent no-ops returning ``False``.
    - Weights on an unweighted graph are fixed at ``1``.

    See Also
    --------
    add_node, add_edge, bfs, dijkstra, get_components, clone

    """

    def __init__(
        self,
        flags=GraphFlags.NONE,
        builder=None,
        *builder_args,
        directed=None,
        weighted=None,
        allow_self_loops=None,
        immutable=None,
        history=True,
        history_limit=None,
    ):
        requested = resolve_flags(
            flags,
            directed=directed,
            weighted=weighted,
            allow_self_loops=allow_self_loops,
            immutable=immutable,
        )
        # sealed only after the builder ran
        self._flags = requested & ~GraphFlags.IMMUTABLE

        self._adj = {}  # node -> {neighbor: weight}
        self._node_count = 0
        self._edge_count = 0

        # cache keys: topology changes bump both, weight changes bump only the edge version
        self._structure_version = 0
        self._edge_version = 0

        self.debug_id = next(_debug_ids)

        # History
        self._history_enabled = bool(history)
        self._history = deque(maxlen=history_limit)
        self._event_seq = 0
        self._history_clock0 = time.perf_counter_ns()
        self._snapshots = []
        self._install_history_hooks()

        if builder is not None:
            self._run_builder(builder, builder_args)

        if requested & GraphFlags.IMMUTABLE:
            self._flags |= GraphFlags.IMMUTABLE

    def __setstate__(self, state):
        # unpickled and deep-copied graphs are new instances
        super().__setstate__(state)
        self.debug_id = next(_debug_ids)

    def _run_builder(self, builder, args):
        if isinstance(builder, Graph):
            _replay(self, builder)
        elif isinstance(builder, Edge):
            self.add_edge(*builder)
        elif isinstance(builder, Mapping):
            self.add_nodes(list(builder.get("nodes", ())))
            self.add_edges(list(builder.get("edges", ())))
        elif isinstance(builder, Callable):
            builder(self, *args)
        elif isinstance(builder, Iterable) and not isinstance(builder, (str, bytes)):
            for item in builder:
                if is_edge_like(item):
                    self.add_edge(*as_edge(item))
                else:
                    self.add_node(item)
        else:
            self.add_node(builder)

    # Flags

    @property
    def flags(self):
        """Current ``GraphFlags`` bitset."""
        return self._flags

    @property
    def is_directed(self):
        return bool(self._flags & GraphFlags.DIRECTED)

    @property
    def is_weighted(self):
        return bool(self._flags & GraphFlags.WEIGHTED)

    @property
    def allows_self_loops(self):
        return bool(self._flags & GraphFlags.ALLOW_SELF_LOOP)

    @property
    def is_frozen(self):
        return bool(self._flags & GraphFlags.IMMUTABLE)

    # Internal store helpers

    def _touch(self, structure=True):
        self._edge_version += 1
        if structure:
            self._structure_version += 1

    def _insert_node(self, node):
        if node in self._adj:
            return False
        self._adj[node] = {}
        self._node_count += 1
        self._structure_version += 1
        return True

    def _check_weight(self, weight):
        if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
            raise TypeError(f"edge weight must be a real number, got {type(weight).__name__}")
        if not self.is_weighted:
            if weight != 1:
                raise WeightPolicyError(weight)
            return 1
        return weight

    def _require_node(self, node):
        if node is None or node not in self._adj:
            raise NodeNotFound(node)

    def _build_edge_list(self):
        if self.is_directed:
            return [Edge(u, v, w) for u, nbrs in self._adj.items() for v, w in nbrs.items()]
        out = []
        done = set()
        for u, nbrs in self._adj.items():
            for v, w in nbrs.items():
                if v not in done:
                    out.append(Edge(u, v, w))
            done.add(u)
        return out

    # Mutation

    def add_node(self, node):
        """Insert ``node`` with no edges.

        Returns
        -------
        bool
            True if the node was inserted; False if it already existed, is
            ``None``, or the graph is frozen.

        """
        if self.is_frozen or node is None:
            return False
        return self._insert_node(node)

    def add_edge(self, source, target, weight=1):
        """Insert an edge, creating missing endpoints.

        Parameters
        ----------
        source, target : hashable
            Endpoints. For undirected graphs the edge is mirrored.
        weight : int | float, default 1
            Must be 1 on unweighted graphs.

        Returns
        -------
        bool
            True if inserted; False if the edge already exists, an endpoint is
            ``None``, or the graph is frozen.

        Raises
        ------
        SelfLoopError
            ``source == target`` without ``ALLOW_SELF_LOOP``.
        WeightPolicyError
            ``weight != 1`` on an unweighted graph.
        TypeError
            ``weight`` is not a real number.

        """
        if self.is_frozen or source is None or target is None:
            return False
        if source in self._adj and target in self._adj[source]:
            return False
        if source == target and not self.allows_self_loops:
            raise SelfLoopError(source)
        weight = self._check_weight(weight)

        self._insert_node(source)
        self._insert_node(target)
        self._adj[source][target] = weight
        if not self.is_directed:
            self._adj[target][source] = weight
        self._edge_count += 1
        self._touch()
        return True

    def remove_node(self, node):
        """Remove ``node`` and every edge touching it. Returns True if removed."""
        if self.is_frozen or node is None or node not in self._adj:
            return False
        removed = len(self._adj[node])
        if self.is_directed:
            # only forward entries are stored, so incoming edges need a full scan
            for u, nbrs in self._adj.items():
                if u != node and node in nbrs:
                    del nbrs[node]
                    removed += 1
        else:
            for v in self._adj[node]:
                if v != node:
                    del self._adj[v][node]
        del self._adj[node]
        self._node_count -= 1
        self._edge_count -= removed
        self._touch()
        return True

    def remove_edge(self, source, target):
        """Remove one edge (both directions when undirected). Returns True if removed."""
        if self.is_frozen or not self.has_edge(source, target):
            return False
        del self._adj[source][target]
        if not self.is_directed and source != target:
            del self._adj[target][source]
        self._edge_count -= 1
        self._touch()
        return True

    def set_weight(self, source, target, weight):
        """Change the weight of an existing edge.

        Only the edge version moves: components and the cycle witness stay cached.

        Raises
        ------
        EdgeNotFound
            If the edge does not exist.
        WeightPolicyError
            ``weight != 1`` on an unweighted graph.

        """
        if self.is_frozen:
            return False
        if not self.has_edge(source, target):
            raise EdgeNotFound(source, target)
        weight = self._check_weight(weight)
        self._adj[source][target] = weight
        if not self.is_directed:
            self._adj[target][source] = weight
        self._touch(structure=False)
        return True

    def clear(self):
        """Remove every node and edge. Returns True if anything was removed."""
        if self.is_frozen or not self._adj:
            return False
        self._adj = {}
        self._node_count = 0
        self._edge_count = 0
        self._touch()
        return True

    def add_nodes(self, *nodes):
        """Add several nodes (one iterable or variadic). Returns the number inserted.

        A single tuple is one node id: ``add_nodes(("r", 0))`` adds the node
        ``("r", 0)``. Use a list to add several.
        """
        return sum(self.add_node(n) for n in iter_batch(nodes))

    def add_edges(self, *edges):
        """Add several edges.

        Each item is an ``Edge``, ``(source, target)``, ``(source, target, weight)``
        or ``{"from": s, "to": t, "weight": w}``. Pass one iterable or the items
        themselves. Returns the number inserted.

        Raises
        ------
        TypeError
            For a lone tuple of edge-shaped items, e.g.
            ``add_edges((("A", "B"), ("B", "C")))``, which could mean two edges
            or one edge between tuple nodes. Pass a list for the former and use
            ``add_edge`` for the latter.
        """
        return sum(self.add_edge(*as_edge(e)) for e in iter_edge_batch(edges))

    def remove_nodes(self, *nodes):
        return sum(self.remove_node(n) for n in iter_batch(nodes))

    def remove_edges(self, *edges):
        return sum(self.remove_edge(*as_edge(e)[:2]) for e in iter_edge_batch(edges))

    def freeze(self):
        """Make the graph permanently immutable. Only ``clone`` produces a mutable copy."""
        self._flags |= GraphFlags.IMMUTABLE

    # Queries

    def has_node(self, node):
        return node is not None and node in self._adj

    def has_edge(self, source, target):
        nbrs = self._adj.get(source) if source is not None else None
        return nbrs is not None and target in nbrs

    def get_weight(self, source, target):
        """Weight of ``source -> target``; raises ``EdgeNotFound`` if absent."""
        if not self.has_edge(source, target):
            raise EdgeNotFound(source, target)
        return self._adj[source][target]

    def get_neighbors(self, node):
        """Out-neighbours of ``node`` in insertion order (a new list)."""
        self._require_node(node)
        return list(self._adj[node])

    def iter_neighbors(self, node):
        """Iterate ``(neighbor, weight)`` pairs of ``node`` without copying."""
        self._require_node(node)
        return iter(self._adj[node].items())

    def get_predecessors(self, node):
        """In-neighbours of ``node`` (same as neighbours when undirected)."""
        self._require_node(node)
        if not self.is_directed:
            return list(self._adj[node])
        return [u for u, nbrs in self._adj.items() if node in nbrs]

    def out_degree(self, node):
        self._require_node(node)
        return len(self._adj[node])

    def in_degree(self, node):
        return len(self.get_predecessors(node))

    def degree(self, node):
        """Number of incident edges; a self-loop counts once."""
        if not self.is_directed:
            return self.out_degree(node)
        own_loop = node in self._adj.get(node, ())
        return self.out_degree(node) + self.in_degree(node) - own_loop

    def get_nodes(self):
        return list(self._adj)

    def get_edges(self):
        """All edges as ``Edge`` tuples, each undirected edge once (a new list)."""
        return list(self.cache.edges)

    def get_node_count(self):
        return self._node_count

    def get_edge_count(self):
        return self._edge_count

    def __len__(self):
        return self._node_count

    def __contains__(self, node):
        return self.has_node(node)

    def __iter__(self):
        return iter(self._adj)

    def __repr__(self):
        kind = "directed" if self.is_directed else "undirected"
        extra = ", weighted" if self.is_weighted else ""
        extra += ", frozen" if self.is_frozen else ""
        return f"<Graph {kind}{extra}: {self._node_count} nodes, {self._edge_count} edges>"

    # Algorithms

    def bfs(self, source, target=None, visitor=None):
        """Breadth-first traversal; see :func:`adjnet.algorithms.traversal.bfs`."""
        return bfs(self, source, target=target, visitor=visitor)

    def dfs(self, source, target=None, visitor=None):
        """Depth-first traversal; see :func:`adjnet.algorithms.traversal.dfs`."""
        return dfs(self, source, target=target, visitor=visitor)

    def dijkstra(self, source, target=None):
        return dijkstra(self, source, target=target)

    def get_shortest_path(self, source, target):
        """Node list from ``source`` to ``target`` or None when unreachable.

        Weighted graphs use Dijkstra, unweighted graphs use BFS.
        """
        return shortest_path_data(self, source, target).path

    def get_shortest_path_data(self, source, target):
        """``PathData(path, distance)``; distance is ``math.inf`` when unreachable."""
        return shortest_path_data(self, source, target)

    def get_cycle(self):
        """A closed cycle ``[v0, ..., v0]`` or None. Cached per structure version."""
        cycle = self.cache.cycle
        return None if cycle is None else list(cycle)

    def has_cycle(self):
        return self.cache.cycle is not None

    is_cyclic = has_cycle

    def is_acyclic(self):
        return self.cache.cycle is None

    def is_dag(self):
        return self.is_directed and self.is_acyclic()

    def get_topological_sort(self):
        """Kahn ordering of a directed graph, or None if it has a cycle.

        Raises
        ------
        DirectedOnlyError
            On undirected graphs.

        """
        return topological_sort(self)

    def get_components(self):
        """Weak components, each a list of nodes in BFS order.

        The cached list itself is returned; do not mutate it.
        """
        return self.cache.components

    def get_components_count(self):
        return len(self.cache.components)

    def is_connected(self):
        """True for exactly one component (an empty graph is not connected)."""
        return len(self.cache.components) == 1

    # Lifecycle

    def clone(self, unfreeze=True):
        """Independent copy populated through the new graph's own mutators.

        Parameters
        ----------
        unfreeze : bool, default True
            Clear ``IMMUTABLE`` on the clone. With False a frozen source yields
            a frozen clone.

        """
        flags = self._flags & ~GraphFlags.IMMUTABLE if unfreeze else self._flags
        return Graph(
            flags,
            _replay,
            self,
            history=self._history_enabled,
            history_limit=self._history.maxlen,
        )

    def copy(self, source, unfreeze=True):
        """Overwrite this graph in place with a deep copy of ``source``.

        Takes ``source``'s flags (``IMMUTABLE`` cleared if ``unfreeze``) and a
        new ``debug_id``. No-op returning False if this graph is frozen.
        """
        if self.is_frozen:
            return False
        flags = source._flags & ~GraphFlags.IMMUTABLE if unfreeze else source._flags
        self._adj = {u: dict(nbrs) for u, nbrs in source._adj.items()}
        self._node_count = source._node_count
        self._edge_count = source._edge_count
        self._flags = flags
        self.debug_id = next(_debug_ids)
        self._touch()
        return True

    def reverse(self):
        """Flip every edge in place (directed graphs only).

        Raises
        ------
        DirectedOnlyError
            On undirected graphs.

        """
        if not self.is_directed:
            raise DirectedOnlyError("reverse")
        if self.is_frozen:
            return False
        edges = self.get_edges()
        self._adj = {n: {} for n in self._adj}
        for s, t, w in edges:
            self._adj[t][s] = w
        self._touch()
        return True

    def get_reversed(self):
        """Reversed clone; frozen if this graph is frozen."""
        if not self.is_directed:
            raise DirectedOnlyError("get_reversed")
        out = self.clone(unfreeze=True)
        out.reverse()
        if self.is_frozen:
            out.freeze()
        return out

    # Views and exports

    @property
    def cache(self):
        """Cache management (edge list, components, cycle witness)."""
        if not hasattr(self, "_cache_manager"):
            self._cache_manager = CacheManager(self)
        return self._cache_manager

    @property
    def nx(self):
        """Accessor for the lazy NX proxy.
        Usage: ``G.nx.pagerank(G)``, ``G.nx.shortest_path_length(G, "a", "b", weight="weight")``
        """
        if not hasattr(self, "_nx_proxy"):
            from ..adapters._proxy import NXProxy

            self._nx_proxy = NXProxy(self)
        return self._nx_proxy

    def edges_view(self, copy=False):
        """Polars DataFrame of edges (source, target, weight)."""
        from ..io.dataframe import edges_view

        return edges_view(self, copy=copy)

    def nodes_view(self):
        """Polars DataFrame of nodes (node, out_degree, in_degree)."""
        from ..io.dataframe import nodes_view

        return nodes_view(self)

    def to_dot(self, name="G"):
        from ..io.dot import to_dot

        return to_dot(self, name=name)

    def to_adjacency_matrix(self, sparse=False, as_array=False):
        from ..io.matrix import to_adjacency_matrix

        return to_adjacency_matrix(self, sparse=sparse, as_array=as_array)

    def export(self, backend, **kwargs):
        """Convert to another library's graph via a registered adapter (e.g. ``"networkx"``)."""
        from ..adapters import load_adapter

        return load_adapter(backend).export(self, **kwargs)
