from .components import weak_components
from .cycles import find_cycle
from .shortest_paths import PathData, ShortestPaths, bfs_distances, dijkstra, shortest_path_data
from .topological import topological_sort
from .traversal import TraversalResult, bfs, dfs, reconstruct_path

__all__ = [
    "PathData",
    "ShortestPaths",
    "TraversalResult",
    "bfs",
    "bfs_distances",
    "dfs",
    "dijkstra",
    "find_cycle",
    "reconstruct_path",
    "shortest_path_data",
    "topological_sort",
    "weak_components",
]
