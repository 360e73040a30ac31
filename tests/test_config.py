import pytest

from gridpath.config import DEFAULT_MAP, MAP_FILES, Settings, resolve_settings
from gridpath.core.types import Algorithm


def test_defaults():
    s = resolve_settings([], {})
    assert s == Settings()
    assert s.algorithm is Algorithm.DIJKSTRA
    assert s.map_key == DEFAULT_MAP
    assert s.delay_ms == 0
    assert s.map_path == MAP_FILES[DEFAULT_MAP]


def test_env():
    env = {"GRIDPATH_ALGO": "astar", "GRIDPATH_MAP": "03_maze", "GRIDPATH_DELAY_MS": "25"}
    s = resolve_settings([], env)
    assert s == Settings(Algorithm.ASTAR, "03_maze", 25)


def test_cli_overrides_env():
    env = {"GRIDPATH_ALGO": "astar", "GRIDPATH_DELAY_MS": "25"}
    s = resolve_settings(["--algo=dfs", "--delay=5", "--map=02_walled"], env)
    assert s == Settings(Algorithm.DFS, "02_walled", 5)


@pytest.mark.parametrize("argv,expected", [
    (["--algo=greedy"], Settings()),
    (["--map=nowhere"], Settings()),
    (["--delay=fast"], Settings()),
    (["--delay=-40"], Settings()),
])
def test_bad_values_fall_back(argv, expected):
    assert resolve_settings(argv, {}) == expected


@pytest.mark.parametrize("raw,expected", [
    ("dijkstra", Algorithm.DIJKSTRA),
    (" AStar ", Algorithm.ASTAR),
    (Algorithm.BFS, Algorithm.BFS),
    ("dfs", Algorithm.DFS),
    ("nope", None),
    (3, None),
    (None, None),
])
def test_algorithm_parse(raw, expected):
    assert Algorithm.parse(raw) is expected


def test_algorithm_labels():
    assert [a.label for a in Algorithm] == ["Dijkstra", "A*", "BFS", "DFS"]
