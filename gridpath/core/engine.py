# gridpath/core/engine.py
#!/usr/bin/env python3
"""
Search engine entry points.

- steps(grid, algo)  -> generator of (grid, Stats) snapshots; returns the result
- run(grid, algo, step_delay_ms, on_progress)  -> awaitable, paced by asyncio.sleep
- solve(grid, algo, on_progress)  -> synchronous, no pacing

Every snapshot is emitted after a node is visited (search phase) or after a
path node is revealed (replay phase). The grid is mutated in place and is not
rolled back if the caller abandons a run halfway.
"""

import asyncio
import time
from typing import Callable, Dict, Generator, Iterator, List, Optional, Tuple, Union

from loguru import logger

from gridpath.core.astar import astar
from gridpath.core.bfs import bfs
from gridpath.core.dfs import dfs
from gridpath.core.dijkstra import dijkstra
from gridpath.core.grid import Grid
from gridpath.core.types import Algorithm, Node, PathfindingResult, Stats

SearchFn = Callable[[Grid, Node, Node], Iterator[Node]]
ProgressFn = Callable[[Grid, Stats], None]
Snapshot = Tuple[Grid, Stats]

SEARCHES: Dict[Algorithm, SearchFn] = {
    Algorithm.DIJKSTRA: dijkstra,
    Algorithm.ASTAR: astar,
    Algorithm.BFS: bfs,
    Algorithm.DFS: dfs,
}

# replay is paced at twice the search delay
PATH_DELAY_FACTOR = 2


def get_nodes_in_shortest_path_order(grid: Grid, end: Node) -> List[Node]:
    """Walk predecessors back from `end`. Empty if `end` was never reached."""
    if end.previous_node is None:
        return []
    path: List[Node] = []
    cur: Optional[Node] = end
    while cur is not None:
        path.append(cur)
        cur = grid.at(cur.previous_node) if cur.previous_node is not None else None
    path.reverse()
    return path


def _elapsed_ms(clock: Callable[[], float], t0: float) -> int:
    return int(round((clock() - t0) * 1000))


def steps(
    grid: Grid,
    algorithm: Union[Algorithm, str],
    clock: Callable[[], float] = time.perf_counter,
) -> Generator[Snapshot, None, Optional[PathfindingResult]]:
    t0 = clock()

    start = grid.find_start()
    end = grid.find_end()
    if start is None or end is None:
        logger.warning("No {} node on the grid; nothing to search", "start" if start is None else "end")
        return None

    algo = Algorithm.parse(algorithm)
    if algo is None:
        logger.warning("Unknown algorithm {!r}", algorithm)
        return None

    logger.debug("{} search {}x{} from {} to {}", algo.label, grid.rows, grid.cols, start.coord, end.coord)

    visited: List[Node] = []
    for node in SEARCHES[algo](grid, start, end):
        visited.append(node)
        yield grid, Stats(visited_count=len(visited), elapsed_ms=_elapsed_ms(clock, t0))

    path = get_nodes_in_shortest_path_order(grid, end)
    for i, node in enumerate(path, start=1):
        if not node.is_start and not node.is_end:
            node.is_path = True
        yield grid, Stats(path_length=i, elapsed_ms=_elapsed_ms(clock, t0))

    logger.info(
        "{}: visited={} path_len={} elapsed={}ms",
        algo.label, len(visited), len(path), _elapsed_ms(clock, t0),
    )
    return PathfindingResult(
        visited_nodes_in_order=visited,
        nodes_in_shortest_path_order=path,
        final_grid=grid,
    )


async def run(
    grid: Grid,
    algorithm: Union[Algorithm, str],
    step_delay_ms: float = 0,
    on_progress: Optional[ProgressFn] = None,
) -> Optional[PathfindingResult]:
    """Run a search to completion, yielding to the event loop between steps
    when `step_delay_ms` > 0. Returns None if start/end is missing or the
    algorithm is unknown."""
    if step_delay_ms < 0:
        raise ValueError(f"step_delay_ms must be >= 0, got {step_delay_ms}")

    gen = steps(grid, algorithm)
    while True:
        try:
            snap_grid, stats = next(gen)
        except StopIteration as stop:
            return stop.value
        if on_progress is not None:
            on_progress(snap_grid, stats)
        if step_delay_ms > 0:
            factor = PATH_DELAY_FACTOR if stats.path_length else 1
            await asyncio.sleep(step_delay_ms * factor / 1000.0)


def solve(
    grid: Grid,
    algorithm: Union[Algorithm, str],
    on_progress: Optional[ProgressFn] = None,
) -> Optional[PathfindingResult]:
    """Synchronous run without pacing."""
    # with no delay run() never awaits, so one send() runs it to completion
    coro = run(grid, algorithm, 0, on_progress)
    try:
        coro.send(None)
    except StopIteration as stop:
        return stop.value
    coro.close()
    raise RuntimeError("solve() suspended on a zero-delay run")
