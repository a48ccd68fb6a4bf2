import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from adjnet.core.edges import Edge, as_edge, is_edge_like, iter_batch, iter_edge_batch
from adjnet.core.errors import (
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


class TestAsEdge(unittest.TestCase):
    def test_shapes(self):
        self.assertEqual(as_edge(("a", "b")), Edge("a", "b", 1))
        self.assertEqual(as_edge(["a", "b", 3]), Edge("a", "b", 3))
        self.assertEqual(as_edge({"from": "a", "to": "b"}), Edge("a", "b", 1))
        e = Edge("x", "y", 2)
        self.assertIs(as_edge(e), e)

    def test_rejects(self):
        for bad in (("a",), ("a", "b", 1, 2), "ab", 5, {"from": "a"}):
            with self.assertRaises(TypeError):
                as_edge(bad)

    def test_is_edge_like(self):
        self.assertTrue(is_edge_like(("a", "b")))
        self.assertTrue(is_edge_like({"from": "a", "to": "b"}))
        self.assertFalse(is_edge_like("ab"))
        self.assertFalse(is_edge_like(3))

    def test_iter_batch(self):
        self.assertEqual(iter_batch((["a", "b"],)), ("a", "b"))
        self.assertEqual(iter_batch(({"a"},)), ("a",))
        self.assertEqual(iter_batch(("a", "b")), ("a", "b"))
        self.assertEqual(iter_batch((("a", "b"),)), (("a", "b"),))
        self.assertEqual(iter_batch(("ab",)), ("ab",))

    def test_iter_edge_batch(self):
        with self.assertRaises(TypeError):
            iter_edge_batch(((("a", "b"), ("b", "c")),))
        with self.assertRaises(TypeError):
            iter_edge_batch((({"from": "a", "to": "b"}, ("b", "c"), ["c", "d"]),))
        self.assertEqual(iter_edge_batch((("a", "b"),)), (("a", "b"),))
        weighted = (("a", "b"), ("c", "d"), 2)
        self.assertEqual(iter_edge_batch((weighted,)), (weighted,))
        e = Edge(("a", "b"), ("c", "d"))
        self.assertEqual(iter_edge_batch((e,)), (e,))
        self.assertEqual(iter_edge_batch(([("a", "b"), ("b", "c")],)), (("a", "b"), ("b", "c")))


class TestErrorTaxonomy(unittest.TestCase):
    def test_families(self):
        self.assertTrue(issubclass(NodeNotFound, NotFound))
        self.assertTrue(issubclass(EdgeNotFound, KeyError))
        self.assertTrue(issubclass(SelfLoopError, PolicyViolation))
        self.assertTrue(issubclass(WeightPolicyError, ValueError))
        self.assertTrue(issubclass(DirectedOnlyError, TypeError))
        self.assertTrue(issubclass(NegativeWeightError, AlgorithmicError))
        for cls in (NotFound, PolicyViolation, AlgorithmicError):
            self.assertTrue(issubclass(cls, GraphError))

    def test_messages(self):
        e = NodeNotFound("A")
        self.assertEqual(str(e), "Node 'A' not found")
        self.assertEqual(e.node, "A")
        self.assertIn("add it", e.long_message)

        e = NegativeWeightError("a", "b", -1)
        self.assertEqual((e.source, e.target, e.weight), ("a", "b", -1))
        self.assertIn("-1", e.message)

        e = GraphError("short")
        self.assertEqual(e.long_message, "short")


if __name__ == "__main__":
    unittest.main()
