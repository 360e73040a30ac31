# gridpath/core/dijkstra.py
#!/usr/bin/env python3
"""
Uniform-cost search (Dijkstra) over an unweighted 4-connected grid.

Every node starts as a candidate. Each iteration re-sorts the remaining
candidates by distance (stable, so ties keep their previous relative order,
which begins as row-major scan order) and expands the first one.
"""

from math import inf
from typing import Iterator, List

from gridpath.core.grid import Grid
from gridpath.core.types import Node


def dijkstra(grid: Grid, start: Node, end: Node) -> Iterator[Node]:
    start.distance = 0
    unvisited: List[Node] = list(grid)

    while unvisited:
        unvisited.sort(key=lambda n: n.distance)
        closest = unvisited.pop(0)

        if closest.is_wall:
            continue
        # everything left is unreachable
        if closest.distance == inf:
            return

        closest.is_visited = True
        yield closest

        if closest is end:
            return

        _update_unvisited_neighbors(closest, grid)


def _update_unvisited_neighbors(node: Node, grid: Grid) -> None:
    for neighbor in grid.neighbors(node):
        if neighbor.is_visited:
            continue
        alt = node.distance + 1
        if alt < neighbor.distance:
            neighbor.distance = alt
            neighbor.previous_node = node.coord
