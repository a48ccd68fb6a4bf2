"""Error taxonomy.

Three families are raised synchronously at the call site and never caught
internally:

- ``NotFound``: an unknown node or edge was referenced by a query/traversal.
- ``PolicyViolation``: the call conflicts with the graph's flags.
- ``AlgorithmicError``: the input is outside an algorithm's domain.

Each error carries a short ``message`` and an optional ``long_message`` with
context for the caller.
"""


class GraphError(Exception):
    """Base class for all adjnet errors."""

    def __init__(self, message, long_message=None):
        super().__init__(message)
        self.message = message
        self.long_message = long_message if long_message is not None else message

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.message


class NotFound(GraphError, KeyError):
    pass


class NodeNotFound(NotFound):
    def __init__(self, node):
        super().__init__(
            f"Node {node!r} not found",
            f"Node {node!r} is not part of the graph; add it before querying it.",
        )
        self.node = node


class EdgeNotFound(NotFound):
    def __init__(self, source, target):
        super().__init__(
            f"Edge {source!r} -> {target!r} not found",
            f"There is no edge from {source!r} to {target!r} in the graph.",
        )
        self.source = source
        self.target = target


class PolicyViolation(GraphError, ValueError):
    pass


class SelfLoopError(PolicyViolation):
    def __init__(self, node):
        super().__init__(
            f"Self-loop on {node!r} not allowed",
            f"Edge {node!r} -> {node!r} is a self-loop; construct the graph with "
            "GraphFlags.ALLOW_SELF_LOOP to accept it.",
        )
        self.node = node


class WeightPolicyError(PolicyViolation):
    def __init__(self, weight):
        super().__init__(
            f"Cannot set weight {weight!r} on an unweighted graph",
            f"Unweighted graphs store weight 1 on every edge (got {weight!r}); "
            "construct the graph with GraphFlags.WEIGHTED to use other weights.",
        )
        self.weight = weight


class DirectedOnlyError(PolicyViolation, TypeError):
    def __init__(self, operation):
        super().__init__(
            f"{operation} requires a directed graph",
            f"{operation} is only defined for graphs built with GraphFlags.DIRECTED.",
        )
        self.operation = operation


class AlgorithmicError(GraphError, ValueError):
    pass


class NegativeWeightError(AlgorithmicError):
    def __init__(self, source, target, weight):
        super().__init__(
            f"Negative edge weight {weight!r} on {source!r} -> {target!r}",
            f"Dijkstra requires non-negative weights; edge {source!r} -> {target!r} "
            f"has weight {weight!r}. No partial result is available.",
        )
        self.source = source
        self.target = target
        self.weight = weight
