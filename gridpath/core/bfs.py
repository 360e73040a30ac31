# gridpath/core/bfs.py
#!/usr/bin/env python3
import collections
from typing import Iterator

from gridpath.core.grid import Grid
from gridpath.core.types import Node


def bfs(grid: Grid, start: Node, end: Node) -> Iterator[Node]:
    """Breadth-first search. Nodes are marked visited when enqueued, so each
    is queued at most once and the found path is shortest in edge count."""
    queue = collections.deque([start])
    start.is_visited = True

    while queue:
        current = queue.popleft()
        yield current

        if current is end:
            return

        for neighbor in grid.neighbors(current):
            if not neighbor.is_visited:
                neighbor.is_visited = True
                neighbor.previous_node = current.coord
                queue.append(neighbor)
