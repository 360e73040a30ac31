# gridpath/core/dfs.py
#!/usr/bin/env python3
from typing import Iterator, List

from gridpath.core.grid import Grid
from gridpath.core.types import Node


def dfs(grid: Grid, start: Node, end: Node) -> Iterator[Node]:
    """Depth-first search with an explicit stack. Not shortest-path."""
    stack: List[Node] = [start]

    while stack:
        current = stack.pop()

        # duplicates are allowed on the stack
        if current.is_visited or current.is_wall:
            continue

        current.is_visited = True
        yield current

        if current is end:
            return

        for neighbor in grid.neighbors(current):
            if not neighbor.is_visited:
                neighbor.previous_node = current.coord
                stack.append(neighbor)
