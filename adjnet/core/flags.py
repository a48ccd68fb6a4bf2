from enum import IntFlag


class GraphFlags(IntFlag):
    """Graph contract bits (DIRECTED, WEIGHTED, ALLOW_SELF_LOOP, IMMUTABLE).

    Attributes:
        NONE: Undirected, unweighted, no self-loops, mutable
        DIRECTED: Edges are one-way
        WEIGHTED: Edges carry arbitrary real weights (otherwise fixed at 1)
        ALLOW_SELF_LOOP: Edges ``(u, u)`` are accepted
        IMMUTABLE: Structural mutation is a silent no-op once construction completes
    """

    NONE = 0
    DIRECTED = 1
    WEIGHTED = 2
    ALLOW_SELF_LOOP = 4
    IMMUTABLE = 8


# constructor keyword -> flag bit
_KEYWORD_FLAGS = {
    "directed": GraphFlags.DIRECTED,
    "weighted": GraphFlags.WEIGHTED,
    "allow_self_loops": GraphFlags.ALLOW_SELF_LOOP,
    "immutable": GraphFlags.IMMUTABLE,
}


def resolve_flags(flags=GraphFlags.NONE, **overrides):
    """Combine a flag value with boolean keyword overrides.

    Parameters
    ----------
    flags : GraphFlags | int
        Base bitset.
    **overrides
        ``directed``, ``weighted``, ``allow_self_loops``, ``immutable``; ``None``
        leaves the corresponding bit untouched.

    Returns
    -------
    GraphFlags

    Raises
    ------
    TypeError
        If ``flags`` is not an integer bitset or an override name is unknown.

    """
    if isinstance(flags, bool) or not isinstance(flags, int):
        raise TypeError(f"flags must be a GraphFlags/int bitset, got {type(flags).__name__}")
    out = GraphFlags(int(flags))
    for name, value in overrides.items():
        if name not in _KEYWORD_FLAGS:
            raise TypeError(f"unknown flag keyword {name!r}")
        if value is None:
            continue
        bit = _KEYWORD_FLAGS[name]
        out = (out | bit) if value else (out & ~bit)
    return out
