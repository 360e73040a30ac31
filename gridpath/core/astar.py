# gridpath/core/astar.py
#!/usr/bin/env python3
"""
A* (heuristic best-first search) on a 4-connected unit-cost grid.

Heuristic:
- Manhattan distance, admissible and consistent here, so the first time the
  goal is expanded its path is optimal.

Open list:
- Re-sorted by f each iteration with a stable sort, so equal-f entries keep
  insertion order. A companion set of coords answers membership checks.
"""

from typing import Iterator, List, Set

from gridpath.core.grid import Grid
from gridpath.core.types import Coord, Node


def manhattan(a: Node, b: Node) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


def astar(grid: Grid, start: Node, end: Node) -> Iterator[Node]:
    open_list: List[Node] = [start]
    open_set: Set[Coord] = {start.coord}

    start.g_cost = 0
    start.h_cost = manhattan(start, end)
    start.f_cost = start.g_cost + start.h_cost

    while open_list:
        open_list.sort(key=lambda n: n.f_cost)
        current = open_list.pop(0)
        open_set.discard(current.coord)

        if current.is_wall:
            continue

        current.is_visited = True
        yield current

        if current is end:
            return

        for neighbor in grid.neighbors(current):
            if neighbor.is_visited:
                continue

            tentative_g = current.g_cost + 1

            if neighbor.coord not in open_set:
                open_list.append(neighbor)
                open_set.add(neighbor.coord)
            elif tentative_g >= neighbor.g_cost:
                continue

            neighbor.previous_node = current.coord
            neighbor.g_cost = tentative_g
            neighbor.h_cost = manhattan(neighbor, end)
            neighbor.f_cost = neighbor.g_cost + neighbor.h_cost
