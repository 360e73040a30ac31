# gridpath/core/types.py
#!/usr/bin/env python3
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from gridpath.core.grid import Grid

Coord = Tuple[int, int]  # (row, col)


class Algorithm(str, Enum):
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"
    BFS = "bfs"
    DFS = "dfs"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value) -> Optional[Algorithm]:
        """Member for an Algorithm or a case-insensitive name; None if unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


_LABELS = {
    Algorithm.DIJKSTRA: "Dijkstra",
    Algorithm.ASTAR: "A*",
    Algorithm.BFS: "BFS",
    Algorithm.DFS: "DFS",
}


@dataclass
class Node:
    row: int
    col: int
    is_wall: bool = False
    is_start: bool = False
    is_end: bool = False

    # search state, cleared by reset()
    is_visited: bool = False
    is_path: bool = False
    distance: float = math.inf
    g_cost: float = 0
    h_cost: float = 0
    f_cost: float = 0
    previous_node: Optional[Coord] = None

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    def reset(self) -> None:
        self.is_visited = False
        self.is_path = False
        self.distance = math.inf
        self.g_cost = 0
        self.h_cost = 0
        self.f_cost = 0
        self.previous_node = None


@dataclass
class Stats:
    visited_count: int = 0
    path_length: int = 0
    elapsed_ms: int = 0


@dataclass
class PathfindingResult:
    visited_nodes_in_order: List[Node]
    nodes_in_shortest_path_order: List[Node]
    final_grid: Grid

    @property
    def visited_coords(self) -> List[Coord]:
        return [n.coord for n in self.visited_nodes_in_order]

    @property
    def path_coords(self) -> List[Coord]:
        return [n.coord for n in self.nodes_in_shortest_path_order]

    @property
    def found(self) -> bool:
        return bool(self.nodes_in_shortest_path_order)
