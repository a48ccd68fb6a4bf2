"""Graph generators.

All generators build through the ``Graph`` constructor's builder phase, so
``GraphFlags.IMMUTABLE`` yields a populated, sealed graph.

- Random: ``erdos_renyi`` draws the whole edge mask in one vectorized
  ``rng.random`` call (seedable ``numpy.random.Generator``).
- Deterministic: ``path_graph``, ``cycle_graph``, ``grid_graph``.
"""

from __future__ import annotations

import numpy as np
from numpy.random import Generator

from .core.flags import GraphFlags
from .core.graph import Graph


def erdos_renyi(
    n: int,
    p: float,
    flags=GraphFlags.NONE,
    seed: int | Generator | None = None,
    weight_range: tuple[float, float] | None = None,
) -> Graph:
    """G(n, p) random graph on nodes ``0 .. n-1``.

    Parameters
    ----------
    n : int
        Number of nodes.
    p : float
        Probability of each candidate edge, in ``[0, 1]``. Directed graphs
        consider every ordered pair, undirected graphs every unordered pair.
        Self-loops are never drawn.
    flags : GraphFlags
    seed : int | numpy.random.Generator, optional
    weight_range : (low, high), optional
        Uniform weights for weighted graphs; ignored otherwise (weights stay 1).

    Returns
    -------
    Graph

    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"p must be in [0, 1], got {p}")
    rng = seed if isinstance(seed, Generator) else np.random.default_rng(seed)

    mask = rng.random((n, n)) < p
    np.fill_diagonal(mask, False)
    if not (GraphFlags(flags) & GraphFlags.DIRECTED):
        mask = np.triu(mask, k=1)
    pairs = np.argwhere(mask)

    weights = None
    if weight_range is not None and GraphFlags(flags) & GraphFlags.WEIGHTED:
        low, high = weight_range
        weights = rng.uniform(low, high, size=len(pairs))

    def build(g):
        g.add_nodes(range(n))
        if weights is None:
            g.add_edges((int(u), int(v)) for u, v in pairs)
        else:
            g.add_edges((int(u), int(v), float(w)) for (u, v), w in zip(pairs, weights))

    return Graph(flags, build)


def path_graph(n: int, flags=GraphFlags.NONE) -> Graph:
    """Path ``0 - 1 - ... - n-1``."""
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")

    def build(g):
        g.add_nodes(range(n))
        g.add_edges((i, i + 1) for i in range(n - 1))

    return Graph(flags, build)


def cycle_graph(n: int, flags=GraphFlags.NONE) -> Graph:
    """Cycle ``0 - 1 - ... - n-1 - 0``.

    ``n == 1`` is a single self-loop and needs ``ALLOW_SELF_LOOP``. ``n == 2``
    is only a cycle when directed.
    """
    flags = GraphFlags(flags)
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    if n == 2 and not flags & GraphFlags.DIRECTED:
        raise ValueError("an undirected cycle needs n >= 3")

    def build(g):
        g.add_nodes(range(n))
        g.add_edges((i, (i + 1) % n) for i in range(n))

    return Graph(flags, build)


def grid_graph(rows: int, cols: int, flags=GraphFlags.NONE) -> Graph:
    """2-D lattice with ``(row, col)`` nodes; edges point right and down."""
    if rows < 0 or cols < 0:
        raise ValueError(f"rows and cols must be >= 0, got {rows}x{cols}")

    def build(g):
        for r in range(rows):
            for c in range(cols):
                g.add_node((r, c))
        for r in range(rows):
            for c in range(cols):
                if c + 1 < cols:
                    g.add_edge((r, c), (r, c + 1))
                if r + 1 < rows:
                    g.add_edge((r, c), (r + 1, c))

    return Graph(flags, build)
