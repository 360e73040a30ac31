import json
import math

import pytest

from gridpath.config import MAP_FILES
from gridpath.core.grid import Grid, load_map


def coords(nodes):
    return [n.coord for n in nodes]


def test_neighbors_order_up_down_left_right(open_3x3):
    center = open_3x3.node(1, 1)
    assert coords(open_3x3.neighbors(center)) == [(0, 1), (2, 1), (1, 0), (1, 2)]


def test_neighbors_clipped_at_boundary(open_3x3):
    assert coords(open_3x3.neighbors(open_3x3.node(0, 0))) == [(1, 0), (0, 1)]
    assert coords(open_3x3.neighbors(open_3x3.node(2, 2))) == [(1, 2), (2, 1)]


def test_neighbors_skip_walls():
    grid = Grid.from_strings([
        ".#.",
        "#S.",
        "...",
    ])
    assert coords(grid.neighbors(grid.node(1, 1))) == [(2, 1), (1, 2)]


def test_find_start_and_end(open_3x3):
    assert open_3x3.find_start().coord == (0, 0)
    assert open_3x3.find_end().coord == (2, 2)
    assert Grid(2, 2).find_start() is None
    assert Grid(2, 2).find_end() is None


def test_create_defaults():
    grid = Grid.create()
    assert (grid.rows, grid.cols) == (25, 50)
    assert grid.find_start().coord == (12, 10)
    assert grid.find_end().coord == (12, 40)


def test_reset_search_state_keeps_structure(open_3x3):
    n = open_3x3.node(1, 1)
    n.is_wall = True
    n.is_visited = True
    n.is_path = True
    n.distance = 3
    n.g_cost, n.h_cost, n.f_cost = 1, 2, 3
    n.previous_node = (0, 1)

    open_3x3.reset_search_state()

    assert n.is_wall
    assert not n.is_visited and not n.is_path
    assert n.distance == math.inf
    assert (n.g_cost, n.h_cost, n.f_cost) == (0, 0, 0)
    assert n.previous_node is None
    assert open_3x3.find_start().is_start


def test_set_start_moves_marker_and_clears_wall(open_3x3):
    open_3x3.node(1, 1).is_wall = True
    assert open_3x3.set_start((1, 1))
    assert open_3x3.find_start().coord == (1, 1)
    assert not open_3x3.node(0, 0).is_start
    assert not open_3x3.node(1, 1).is_wall


def test_markers_do_not_overlap(open_3x3):
    assert not open_3x3.set_start((2, 2))
    assert not open_3x3.set_end((0, 0))
    assert open_3x3.find_start().coord == (0, 0)
    assert open_3x3.find_end().coord == (2, 2)


def test_wall_editing(open_3x3):
    assert open_3x3.toggle_wall((1, 1))
    assert open_3x3.node(1, 1).is_wall
    assert not open_3x3.toggle_wall((0, 0))
    assert not open_3x3.node(0, 0).is_wall

    assert open_3x3.erase_wall((1, 1))
    assert not open_3x3.node(1, 1).is_wall
    assert not open_3x3.erase_wall((1, 1))


def test_clear_walls():
    grid = Grid.from_strings([
        "S#.",
        "##E",
    ])
    grid.node(0, 2).is_visited = True
    grid.clear_walls()
    assert not any(n.is_wall for n in grid)
    assert not grid.node(0, 2).is_visited
    assert grid.find_end().coord == (1, 2)


def test_from_strings_and_to_strings():
    lines = ["S.#", ".#E"]
    grid = Grid.from_strings(lines)
    assert (grid.rows, grid.cols) == (2, 3)
    assert grid.node(0, 2).is_wall and grid.node(1, 1).is_wall
    grid.node(1, 0).is_visited = True
    grid.node(0, 1).is_path = True
    assert grid.to_strings() == ["S*#", "o#E"]


def test_from_strings_rejects_ragged_rows():
    with pytest.raises(AssertionError):
        Grid.from_strings(["S..", ".E"])


@pytest.mark.parametrize("key", sorted(MAP_FILES))
def test_bundled_maps_load(key):
    grid = load_map(MAP_FILES[key])
    assert grid.find_start() is not None
    assert grid.find_end() is not None
    assert not grid.find_start().is_wall and not grid.find_end().is_wall


def test_load_map(tmp_path):
    path = tmp_path / "tiny.json"
    path.write_text(json.dumps({
        "rows": 2, "cols": 3,
        "start": [0, 0], "end": [1, 2],
        "cells": [[0, 1, 0], [0, 0, 0]],
    }))
    grid = load_map(path)
    assert grid.to_strings() == ["S#.", "..E"]


def test_load_map_size_mismatch(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({
        "rows": 2, "cols": 3,
        "start": [0, 0], "end": [1, 2],
        "cells": [[0, 0, 0]],
    }))
    with pytest.raises(AssertionError, match="cells size mismatch"):
        load_map(path)


def test_load_map_out_of_bounds(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({
        "rows": 1, "cols": 2,
        "start": [0, 0], "end": [3, 3],
        "cells": [[0, 0]],
    }))
    with pytest.raises(AssertionError, match="end out of bounds"):
        load_map(path)
