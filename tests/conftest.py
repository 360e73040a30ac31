import collections
import random
from typing import List, Optional

import pytest

from gridpath.core.grid import Grid
from gridpath.core.types import Algorithm

ALL_ALGOS = list(Algorithm)


def flood_distance(grid: Grid) -> Optional[int]:
    """Brute-force edge count from start to end, None if unreachable."""
    start, end = grid.find_start(), grid.find_end()
    dist = {start.coord: 0}
    queue = collections.deque([start.coord])
    while queue:
        r, c = queue.popleft()
        for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nxt = (r + dr, c + dc)
            if grid.in_bounds(nxt) and nxt not in dist and not grid.at(nxt).is_wall:
                dist[nxt] = dist[(r, c)] + 1
                queue.append(nxt)
    return dist.get(end.coord)


def random_maze(seed: int, rows: int = 8, cols: int = 8, density: float = 0.3) -> List[str]:
    rng = random.Random(seed)
    lines = []
    for r in range(rows):
        row = []
        for c in range(cols):
            if (r, c) == (0, 0):
                row.append("S")
            elif (r, c) == (rows - 1, cols - 1):
                row.append("E")
            else:
                row.append("#" if rng.random() < density else ".")
        lines.append("".join(row))
    return lines


@pytest.fixture
def open_3x3() -> Grid:
    return Grid.from_strings([
        "S..",
        "...",
        "..E",
    ])


@pytest.fixture
def open_5x5() -> Grid:
    return Grid.create(5, 5, start=(0, 0), end=(4, 4))


@pytest.fixture
def enclosed_end() -> Grid:
    return Grid.from_strings([
        "S....",
        "..#..",
        ".#E#.",
        "..#..",
    ])
