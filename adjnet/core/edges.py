from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple


class Edge(NamedTuple):
    """Transient ``(source, target, weight)`` projection of an adjacency entry.

    Edges are never stored; the graph builds them on demand.
    """

    source: Any
    target: Any
    weight: float = 1


_SOURCE_KEYS = ("from", "source")
_TARGET_KEYS = ("to", "target")


def _pick(mapping, keys, what):
    for k in keys:
        if k in mapping:
            return mapping[k]
    raise TypeError(f"edge mapping needs one of {keys} for the {what} endpoint")


def as_edge(item) -> Edge:
    """Resolve one EdgeLike into an ``Edge``.

    Parameters
    ----------
    item : Edge | tuple | list | Mapping
        - ``Edge`` (returned as-is)
        - ``(source, target)`` or ``[source, target]``
        - ``(source, target, weight)``
        - ``{"from": s, "to": t, "weight": w}`` (``source``/``target`` also accepted;
          ``weight`` optional)

    Returns
    -------
    Edge

    Raises
    ------
    TypeError
        If ``item`` has none of the accepted shapes.

    """
    if isinstance(item, Edge):
        return item
    if isinstance(item, Mapping):
        return Edge(
            _pick(item, _SOURCE_KEYS, "source"),
            _pick(item, _TARGET_KEYS, "target"),
            item.get("weight", 1),
        )
    if isinstance(item, (tuple, list)):
        if len(item) == 2:
            return Edge(item[0], item[1])
        if len(item) == 3:
            return Edge(item[0], item[1], item[2])
        raise TypeError(f"edge sequence must have 2 or 3 items, got {len(item)}")
    raise TypeError(f"cannot interpret {type(item).__name__} as an edge")


def is_edge_like(item) -> bool:
    """True for the shapes ``as_edge`` understands (used by builders to split nodes from edges)."""
    return isinstance(item, (Edge, Mapping, tuple, list))


def iter_batch(items):
    """Normalize the arguments of a batch mutator into a flat tuple of items.

    A single positional argument that is a non-tuple iterable (list, set,
    generator, ...) is expanded; otherwise the positional arguments themselves
    are the items. Tuples are never expanded because they are valid edge shapes
    and node ids.
    """
    if len(items) == 1:
        only = items[0]
        if isinstance(only, Iterable) and not isinstance(only, (str, bytes, tuple, Mapping, Edge)):
            return tuple(only)
    return items


def iter_edge_batch(items):
    """``iter_batch`` for edge mutators.

    Raises
    ------
    TypeError
        If the only argument is a plain tuple whose items are all edge-shaped:
        it reads both as a batch and as one edge between tuple nodes.

    """
    if len(items) == 1:
        only = items[0]
        if (
            type(only) is tuple
            and len(only) in (2, 3)
            and all(is_edge_like(x) for x in only)
        ):
            raise TypeError(
                f"ambiguous edge batch {only!r}: pass a list of edges, "
                "or call add_edge/remove_edge for an edge between tuple nodes"
            )
    return iter_batch(items)
