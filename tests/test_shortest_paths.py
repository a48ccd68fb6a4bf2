# tests/test_shortest_paths.py
# Run: python -m unittest tests/test_shortest_paths.py -v

import importlib.util
import math
import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from adjnet.algorithms.shortest_paths import PathData, bfs_distances, dijkstra
from adjnet.core.errors import AlgorithmicError, NegativeWeightError, NodeNotFound
from adjnet.core.flags import GraphFlags
from adjnet.core.graph import Graph
from adjnet.generators import erdos_renyi

DW = GraphFlags.DIRECTED | GraphFlags.WEIGHTED


def weighted_sample():
    return Graph(DW, [("A", "B", 4), ("A", "C", 2), ("C", "B", 1), ("B", "D", 3), ("C", "D", 5)])


class TestDijkstra(unittest.TestCase):
    def test_distances_and_path(self):
        G = weighted_sample()
        res = G.dijkstra("A")
        self.assertEqual(res.distance, {"A": 0, "B": 3, "C": 2, "D": 6})
        self.assertEqual(G.get_shortest_path("A", "D"), ["A", "C", "B", "D"])
        self.assertEqual(res.predecessor["B"], "C")

    def test_path_data(self):
        G = weighted_sample()
        data = G.get_shortest_path_data("A", "D")
        self.assertIsInstance(data, PathData)
        self.assertEqual(data.path, ["A", "C", "B", "D"])
        self.assertEqual(data.distance, 6.0)
        self.assertTrue(data.reachable)

    def test_unreachable(self):
        G = weighted_sample()
        G.add_node("Z")
        self.assertNotIn("Z", G.dijkstra("A").distance)
        self.assertIsNone(G.get_shortest_path("A", "Z"))
        data = G.get_shortest_path_data("D", "A")
        self.assertIsNone(data.path)
        self.assertEqual(data.distance, math.inf)
        self.assertFalse(data.reachable)

    def test_source_equals_target(self):
        G = weighted_sample()
        self.assertEqual(G.get_shortest_path("B", "B"), ["B"])
        self.assertEqual(G.get_shortest_path_data("B", "B").distance, 0.0)

    def test_early_stop_target_is_final(self):
        G = weighted_sample()
        res = dijkstra(G, "A", target="B")
        self.assertEqual(res.distance["B"], 3)
        self.assertEqual(res.path_to("B"), ["A", "C", "B"])

    def test_negative_weight_raises(self):
        G = Graph(DW, [("A", "B", 1), ("B", "C", -2)])
        with self.assertRaises(NegativeWeightError):
            G.dijkstra("A")
        with self.assertRaises(AlgorithmicError):
            G.get_shortest_path("A", "C")
        # the negative edge is never reached from C
        self.assertEqual(G.dijkstra("C").distance, {"C": 0})

    def test_unknown_endpoints(self):
        G = weighted_sample()
        with self.assertRaises(NodeNotFound):
            G.dijkstra("Q")
        with self.assertRaises(NodeNotFound):
            G.get_shortest_path("A", "Q")

    def test_mixed_node_types_need_no_ordering(self):
        G = Graph(DW, [(1, "b", 1), (1, ("t",), 1), ("b", 2.5, 1), (("t",), 2.5, 1)])
        self.assertEqual(G.dijkstra(1).distance[2.5], 2)

    def test_triangle_inequality(self):
        G = erdos_renyi(40, 0.15, DW, seed=7, weight_range=(0.5, 10.0))
        dist = G.dijkstra(0).distance
        for u, v, w in G.get_edges():
            if u in dist:
                self.assertIn(v, dist)
                self.assertLessEqual(dist[v], dist[u] + w + 1e-9)


class TestUnweighted(unittest.TestCase):
    def test_bfs_hops(self):
        G = Graph(GraphFlags.NONE, [("A", "B"), ("B", "C"), ("C", "D"), ("A", "E"), ("E", "D")])
        data = G.get_shortest_path_data("A", "D")
        self.assertEqual(data.distance, 2.0)
        self.assertEqual(data.path, ["A", "E", "D"])
        self.assertEqual(bfs_distances(G, "A").distance, {"A": 0, "B": 1, "E": 1, "C": 2, "D": 2})

    def test_dijkstra_on_unweighted_counts_hops(self):
        G = Graph(GraphFlags.DIRECTED, [("A", "B"), ("B", "C")])
        self.assertEqual(G.dijkstra("A").distance, {"A": 0, "B": 1, "C": 2})


@unittest.skipUnless(importlib.util.find_spec("networkx"), "networkx not installed")
class TestAgainstNetworkX(unittest.TestCase):
    def test_weighted_distances_match(self):
        import networkx as nx

        from adjnet.adapters.networkx import to_nx

        for seed in range(5):
            G = erdos_renyi(30, 0.12, DW, seed=seed, weight_range=(1.0, 5.0))
            expected = nx.single_source_dijkstra_path_length(to_nx(G), 0)
            got = G.dijkstra(0).distance
            self.assertEqual(set(got), set(expected))
            for node, d in expected.items():
                self.assertAlmostEqual(got[node], d)

    def test_unweighted_lengths_match(self):
        import networkx as nx

        from adjnet.adapters.networkx import to_nx

        G = erdos_renyi(30, 0.1, GraphFlags.NONE, seed=3)
        expected = nx.single_source_shortest_path_length(to_nx(G), 0)
        for node, d in expected.items():
            self.assertEqual(G.get_shortest_path_data(0, node).distance, float(d))


if __name__ == "__main__":
    unittest.main()
