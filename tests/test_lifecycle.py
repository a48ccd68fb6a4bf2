# tests/test_lifecycle.py
# Run: python -m unittest tests/test_lifecycle.py -v

import copy
import os
import pickle
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from adjnet.core.edges import Edge
from adjnet.core.errors import DirectedOnlyError, PolicyViolation
from adjnet.core.flags import GraphFlags
from adjnet.core.graph import Graph


def sample(flags=GraphFlags.DIRECTED | GraphFlags.WEIGHTED):
    G = Graph(flags)
    G.add_edges([("A", "B", 4), ("A", "C", 2), ("C", "B", 1)])
    G.add_node("Z")
    return G


class TestClone(unittest.TestCase):
    def test_clone_preserves_content_and_isolated_nodes(self):
        G = sample()
        H = G.clone()
        self.assertEqual(H.get_nodes(), G.get_nodes())
        self.assertEqual(H.get_edges(), G.get_edges())
        self.assertEqual(H.flags, G.flags)
        self.assertNotEqual(H.debug_id, G.debug_id)

    def test_clone_is_independent(self):
        G = sample()
        H = G.clone()
        H.add_edge("Z", "A", 7)
        H.set_weight("A", "B", 10)
        H.remove_node("C")
        self.assertFalse(G.has_edge("Z", "A"))
        self.assertEqual(G.get_weight("A", "B"), 4)
        self.assertTrue(G.has_node("C"))
        self.assertEqual(G.get_edge_count(), 3)

    def test_clone_unfreeze(self):
        G = sample()
        G.freeze()
        H = G.clone()
        self.assertFalse(H.is_frozen)
        self.assertTrue(H.add_node("new"))
        K = G.clone(unfreeze=False)
        self.assertTrue(K.is_frozen)
        self.assertEqual(K.get_edges(), G.get_edges())
        self.assertFalse(K.add_node("new"))


class TestCopy(unittest.TestCase):
    def test_copy_overwrites_receiver(self):
        G = sample()
        R = Graph()
        R.add_edge("x", "y")
        old_id = R.debug_id
        self.assertTrue(R.copy(G))
        self.assertEqual(R.get_nodes(), G.get_nodes())
        self.assertEqual(R.get_edges(), G.get_edges())
        self.assertTrue(R.is_directed)
        self.assertTrue(R.is_weighted)
        self.assertNotEqual(R.debug_id, old_id)
        self.assertEqual(R.get_node_count(), 4)
        self.assertEqual(R.get_edge_count(), 3)

    def test_copy_is_deep(self):
        G = sample()
        R = Graph()
        R.copy(G)
        R.set_weight("A", "C", 99)
        R.add_edge("Z", "C", 1)
        self.assertEqual(G.get_weight("A", "C"), 2)
        self.assertFalse(G.has_edge("Z", "C"))

    def test_copy_invalidates_caches(self):
        R = Graph()
        R.add_edge("x", "y")
        self.assertEqual(R.get_components_count(), 1)
        R.copy(sample())
        self.assertEqual(R.get_components_count(), 2)
        self.assertEqual(len(R.get_edges()), 3)

    def test_copy_into_frozen_is_noop(self):
        R = Graph(GraphFlags.IMMUTABLE, ["only"])
        self.assertFalse(R.copy(sample()))
        self.assertEqual(R.get_nodes(), ["only"])

    def test_copy_frozen_source(self):
        G = sample()
        G.freeze()
        R = Graph()
        R.copy(G)
        self.assertFalse(R.is_frozen)
        S = Graph()
        S.copy(G, unfreeze=False)
        self.assertTrue(S.is_frozen)


class TestCopyModuleAndPickle(unittest.TestCase):
    def test_deepcopy_is_independent(self):
        G = sample()
        H = copy.deepcopy(G)
        self.assertTrue(H.add_node("new"))
        self.assertTrue(H.add_edge("Z", "A", 7))
        self.assertFalse(G.has_node("new"))
        self.assertFalse(G.has_edge("Z", "A"))
        self.assertEqual(G.get_node_count(), 4)
        self.assertEqual(H.get_node_count(), 5)
        self.assertNotEqual(H.debug_id, G.debug_id)

    def test_deepcopy_logs_into_its_own_history(self):
        G = sample()
        before = len(G.history())
        H = copy.deepcopy(G)
        H.add_node("new")
        self.assertEqual(len(G.history()), before)
        self.assertEqual(H.history()[-1]["node"], "new")

    def test_deepcopy_caches_follow_the_copy(self):
        G = sample()
        self.assertEqual(G.get_components_count(), 2)
        H = copy.deepcopy(G)
        H.add_edge("Z", "A", 1)
        self.assertEqual(H.get_components_count(), 1)
        self.assertEqual(G.get_components_count(), 2)

    def test_pickle_roundtrip(self):
        G = sample()
        G.get_edges()
        H = pickle.loads(pickle.dumps(G))
        self.assertEqual(H.get_nodes(), G.get_nodes())
        self.assertEqual(H.get_edges(), G.get_edges())
        self.assertEqual(H.flags, G.flags)
        H.add_node("new")
        self.assertFalse(G.has_node("new"))
        self.assertEqual(H.history()[-1]["node"], "new")


class TestReverse(unittest.TestCase):
    def test_reverse_in_place(self):
        G = sample()
        self.assertTrue(G.reverse())
        self.assertEqual(
            sorted(G.get_edges()),
            sorted([Edge("B", "A", 4), Edge("C", "A", 2), Edge("B", "C", 1)]),
        )
        self.assertEqual(G.get_nodes(), ["A", "B", "C", "Z"])
        self.assertEqual(G.get_edge_count(), 3)

    def test_reverse_twice_restores(self):
        G = sample()
        before = sorted(G.get_edges())
        G.reverse()
        G.reverse()
        self.assertEqual(sorted(G.get_edges()), before)

    def test_reverse_undirected_raises(self):
        G = Graph(GraphFlags.NONE, [("A", "B")])
        with self.assertRaises(DirectedOnlyError):
            G.reverse()
        with self.assertRaises(TypeError):
            G.get_reversed()
        with self.assertRaises(PolicyViolation):
            G.get_reversed()

    def test_reverse_frozen_noop(self):
        G = sample()
        G.freeze()
        self.assertFalse(G.reverse())
        self.assertTrue(G.has_edge("A", "B"))

    def test_get_reversed(self):
        G = sample()
        R = G.get_reversed()
        self.assertTrue(R.has_edge("B", "A"))
        self.assertTrue(G.has_edge("A", "B"))
        self.assertFalse(R.is_frozen)
        self.assertIn("Z", R)

        G.freeze()
        R2 = G.get_reversed()
        self.assertTrue(R2.is_frozen)
        self.assertTrue(R2.has_edge("C", "A"))

    def test_reverse_flips_topological_order(self):
        G = Graph(GraphFlags.DIRECTED, [("A", "B"), ("B", "C")])
        self.assertEqual(G.get_topological_sort(), ["A", "B", "C"])
        G.reverse()
        self.assertEqual(G.get_topological_sort(), ["C", "B", "A"])


if __name__ == "__main__":
    unittest.main()
