# gridpath/core/grid.py
#!/usr/bin/env python3
"""
Grid model shared by the search engine and the viewer.

The grid owns a fixed rows x cols matrix of Node objects. The engine only
mutates search-state fields; wall/start/end flags belong to whoever edits
the grid (the viewer, a map file, a test).
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from gridpath.core.types import Coord, Node

DEFAULT_ROWS = 25
DEFAULT_COLS = 50
DEFAULT_START: Coord = (12, 10)
DEFAULT_END: Coord = (12, 40)

# ASCII map glyphs
WALL, OPEN, START, END = "#", ".", "S", "E"
VISITED, PATH = "o", "*"


@dataclass
class Grid:
    rows: int
    cols: int
    nodes: List[List[Node]] = field(default_factory=list)  # [row][col]

    def __post_init__(self):
        if not self.nodes:
            self.nodes = [[Node(r, c) for c in range(self.cols)] for r in range(self.rows)]

    # -------------------- construction --------------------

    @classmethod
    def create(cls, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS,
               start: Optional[Coord] = DEFAULT_START,
               end: Optional[Coord] = DEFAULT_END) -> "Grid":
        grid = cls(rows, cols)
        if start is not None:
            grid.set_start(start)
        if end is not None:
            grid.set_end(end)
        return grid

    @classmethod
    def from_strings(cls, lines: Sequence[str]) -> "Grid":
        """Build from ASCII art: '#' wall, 'S' start, 'E' end, anything else open."""
        lines = [ln.strip() for ln in lines if ln.strip()]
        assert lines, "empty grid"
        cols = len(lines[0])
        assert all(len(ln) == cols for ln in lines), "ragged grid rows"
        grid = cls(len(lines), cols)
        for r, ln in enumerate(lines):
            for c, ch in enumerate(ln):
                node = grid.nodes[r][c]
                node.is_wall = ch == WALL
                node.is_start = ch == START
                node.is_end = ch == END
        return grid

    def to_strings(self) -> List[str]:
        out = []
        for row in self.nodes:
            chars = []
            for n in row:
                if n.is_start:
                    chars.append(START)
                elif n.is_end:
                    chars.append(END)
                elif n.is_wall:
                    chars.append(WALL)
                elif n.is_path:
                    chars.append(PATH)
                elif n.is_visited:
                    chars.append(VISITED)
                else:
                    chars.append(OPEN)
            out.append("".join(chars))
        return out

    # -------------------- lookup --------------------

    def __iter__(self) -> Iterator[Node]:
        """Row-major scan order."""
        for row in self.nodes:
            yield from row

    def in_bounds(self, c: Coord) -> bool:
        r, col = c
        return 0 <= r < self.rows and 0 <= col < self.cols

    def node(self, row: int, col: int) -> Node:
        return self.nodes[row][col]

    def at(self, c: Coord) -> Node:
        return self.nodes[c[0]][c[1]]

    def find_start(self) -> Optional[Node]:
        return next((n for n in self if n.is_start), None)

    def find_end(self) -> Optional[Node]:
        return next((n for n in self if n.is_end), None)

    def neighbors(self, node: Node) -> List[Node]:
        """Non-wall orthogonal neighbors in the order up, down, left, right."""
        r, c = node.row, node.col
        out: List[Node] = []
        if r > 0:
            out.append(self.nodes[r - 1][c])
        if r < self.rows - 1:
            out.append(self.nodes[r + 1][c])
        if c > 0:
            out.append(self.nodes[r][c - 1])
        if c < self.cols - 1:
            out.append(self.nodes[r][c + 1])
        return [n for n in out if not n.is_wall]

    # -------------------- lifecycle / editing --------------------

    def reset_search_state(self) -> None:
        for n in self:
            n.reset()

    def set_start(self, c: Coord) -> bool:
        target = self.at(c)
        if target.is_end:
            return False
        for n in self:
            n.is_start = False
        target.is_start = True
        target.is_wall = False
        return True

    def set_end(self, c: Coord) -> bool:
        target = self.at(c)
        if target.is_start:
            return False
        for n in self:
            n.is_end = False
        target.is_end = True
        target.is_wall = False
        return True

    def toggle_wall(self, c: Coord) -> bool:
        n = self.at(c)
        if n.is_start or n.is_end:
            return False
        n.is_wall = not n.is_wall
        return True

    def erase_wall(self, c: Coord) -> bool:
        n = self.at(c)
        if n.is_start or n.is_end or not n.is_wall:
            return False
        n.is_wall = False
        return True

    def clear_walls(self) -> None:
        for n in self:
            n.is_wall = False
            n.reset()


# ---------- Loader ----------
def load_map(path: Path) -> Grid:
    with open(path, "r") as f:
        data = json.load(f)
    rows = int(data["rows"])
    cols = int(data["cols"])
    cells = data["cells"]
    start = tuple(data["start"])
    end = tuple(data["end"])
    assert len(cells) == rows and all(len(r) == cols for r in cells), "cells size mismatch"
    grid = Grid(rows, cols)
    assert grid.in_bounds(start), "start out of bounds"
    assert grid.in_bounds(end), "end out of bounds"
    assert start != end, "start and end overlap"
    for r in range(rows):
        for c in range(cols):
            grid.nodes[r][c].is_wall = cells[r][c] == 1
    grid.set_start(start)
    grid.set_end(end)
    return grid
