from gridpath.core.engine import SEARCHES, get_nodes_in_shortest_path_order, run, solve, steps
from gridpath.core.grid import Grid, load_map
from gridpath.core.types import Algorithm, Coord, Node, PathfindingResult, Stats

__all__ = [
    "Algorithm",
    "Coord",
    "Grid",
    "Node",
    "PathfindingResult",
    "SEARCHES",
    "Stats",
    "get_nodes_in_shortest_path_order",
    "load_map",
    "run",
    "solve",
    "steps",
]
