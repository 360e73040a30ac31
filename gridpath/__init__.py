"""Grid shortest-path search engine with a pygame viewer."""

from gridpath.core import (
    Algorithm,
    Grid,
    Node,
    PathfindingResult,
    Stats,
    get_nodes_in_shortest_path_order,
    load_map,
    run,
    solve,
    steps,
)

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "Grid",
    "Node",
    "PathfindingResult",
    "Stats",
    "get_nodes_in_shortest_path_order",
    "load_map",
    "run",
    "solve",
    "steps",
]
