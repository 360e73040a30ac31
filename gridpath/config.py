# gridpath/config.py
#!/usr/bin/env python3
"""
Runtime settings for the viewer and launcher.

- ENV: GRIDPATH_ALGO=dijkstra|astar|bfs|dfs, GRIDPATH_MAP=<map key>, GRIDPATH_DELAY_MS=<int>
- CLI: --algo=..., --map=..., --delay=...   (CLI wins over ENV)
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

from gridpath.core.types import Algorithm

MAP_DIR = Path(__file__).resolve().parent / "maps"
MAP_FILES = {
    "01_open_field": MAP_DIR / "01_open_field.json",
    "02_walled":     MAP_DIR / "02_walled.json",
    "03_maze":       MAP_DIR / "03_maze.json",
}

DEFAULT_ALGO = Algorithm.DIJKSTRA
DEFAULT_MAP = "01_open_field"
DEFAULT_DELAY_MS = 0


@dataclass(frozen=True)
class Settings:
    algorithm: Algorithm = DEFAULT_ALGO
    map_key: str = DEFAULT_MAP
    delay_ms: int = DEFAULT_DELAY_MS

    @property
    def map_path(self) -> Path:
        return MAP_FILES[self.map_key]


def _flag(argv: Sequence[str], name: str) -> Optional[str]:
    prefix = f"--{name}="
    value = None
    for arg in argv:
        if arg.startswith(prefix):
            value = arg.split("=", 1)[1]
    return value


def resolve_algorithm(argv: Sequence[str], environ: Mapping[str, str]) -> Algorithm:
    raw = _flag(argv, "algo") or environ.get("GRIDPATH_ALGO", DEFAULT_ALGO.value)
    return Algorithm.parse(raw) or DEFAULT_ALGO


def resolve_map(argv: Sequence[str], environ: Mapping[str, str]) -> str:
    key = _flag(argv, "map") or environ.get("GRIDPATH_MAP", DEFAULT_MAP)
    return key if key in MAP_FILES else DEFAULT_MAP


def resolve_delay(argv: Sequence[str], environ: Mapping[str, str]) -> int:
    raw = _flag(argv, "delay") or environ.get("GRIDPATH_DELAY_MS", str(DEFAULT_DELAY_MS))
    try:
        return max(0, int(raw))
    except ValueError:
        return DEFAULT_DELAY_MS


def resolve_settings(argv: Optional[Sequence[str]] = None,
                     environ: Optional[Mapping[str, str]] = None) -> Settings:
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ
    return Settings(
        algorithm=resolve_algorithm(argv, environ),
        map_key=resolve_map(argv, environ),
        delay_ms=resolve_delay(argv, environ),
    )
