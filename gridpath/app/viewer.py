# gridpath/app/viewer.py
#!/usr/bin/env python3
"""
Pathfinding Viewer — Minimal Controls + Metrics

- Keyboard:
    [1]/[2]/[3]      -> switch map
    [D]/[A]/[B]/[F]  -> select algorithm (Dijkstra / A* / BFS / DFS)
    [SPACE]          -> run/pause
    [N]              -> single step
    [R]              -> reset search state
    [C]              -> clear walls
    [W]/[X]/[S]/[E]  -> click edits: wall toggle / erase wall / move start / move end
    [+]/[-]          -> steps/sec
    [Q]/[ESC]        -> quit
- Mouse:
    left click on a cell -> apply the current edit mode (path is recalculated if already solved)

Settings: see gridpath.config (GRIDPATH_ALGO / --algo=, GRIDPATH_MAP / --map=).
"""

import sys
import time
from typing import Dict, Generator, List, Optional, Tuple

import pygame
from loguru import logger

from gridpath.config import MAP_FILES, Settings, resolve_settings
from gridpath.core.engine import solve, steps
from gridpath.core.grid import Grid, load_map
from gridpath.core.types import Algorithm, Coord, PathfindingResult, Stats

PANEL_W = 420            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 24
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
OPEN_GRAY   = (200,200,200)
WALL_DARK   = ( 40, 44, 52)
VISITED_A   = (0,150,255,110)
PATH_MINT   = (0,255,200)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)

ALGO_KEYS = {
    pygame.K_d: Algorithm.DIJKSTRA,
    pygame.K_a: Algorithm.ASTAR,
    pygame.K_b: Algorithm.BFS,
    pygame.K_f: Algorithm.DFS,
}
MAP_KEYS = {
    pygame.K_1: "01_open_field",
    pygame.K_2: "02_walled",
    pygame.K_3: "03_maze",
}
EDIT_KEYS = {
    pygame.K_w: "wall",
    pygame.K_x: "erase",
    pygame.K_s: "start",
    pygame.K_e: "end",
}


def apply_edit(grid: Grid, cell: Coord, mode: str) -> bool:
    """Apply one click edit; False when the grid did not change."""
    if mode == "wall":
        return grid.toggle_wall(cell)
    if mode == "erase":
        return grid.erase_wall(cell)
    if mode == "start":
        return not grid.at(cell).is_start and grid.set_start(cell)
    if mode == "end":
        return not grid.at(cell).is_end and grid.set_end(cell)
    raise ValueError(f"unknown edit mode {mode!r}")


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)
        border_active = (120, 170, 255, 255)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False

# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, settings: Settings):
        pygame.init()

        self.grid = grid
        self.settings = settings
        self.cell_size = self._auto_cell_size(grid)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        grid_px_w = GRID_MARGIN*2 + grid.cols * self.cell_size
        grid_px_h = GRID_MARGIN*2 + grid.rows * self.cell_size
        win_w = grid_px_w + PANEL_W
        win_h = max(grid_px_h, 640)

        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption(f"Pathfinding — {settings.map_key}")

        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)

        self.running = False
        self.clock = pygame.time.Clock()
        self.steps_per_sec = max(1, min(240, 1000 // settings.delay_ms)) if settings.delay_ms else 30
        self.state = "Idle"
        self.selected_map_key = settings.map_key
        self.selected_algo = settings.algorithm
        self.edit_mode = "wall"

        self._gen: Optional[Generator] = None
        self.result: Optional[PathfindingResult] = None
        self.stats = Stats()
        self._refresh_active_states()

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and center the grid."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = int(max(8, min(avail_w // self.grid.cols, avail_h // self.grid.rows)))

        plate_w = self.grid.cols * self.cell_size + 2 * GRID_MARGIN
        plate_h = self.grid.rows * self.cell_size + 2 * GRID_MARGIN
        left_x = max(0, min((win_w - (plate_w + PANEL_W)) // 2, win_w - PANEL_W - plate_w))
        top_y  = max(0, (win_h - plate_h) // 2)

        self.canvas_rect = pygame.Rect(left_x, top_y, plate_w, plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN, self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right), win_h)
        self._build_buttons()

    def _auto_cell_size(self, grid: Grid) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(14, min(CELL_SIZE_DEFAULT, target_h // grid.rows))

    def _cell_at(self, pos: Tuple[int, int]) -> Optional[Coord]:
        ox, oy = self._grid_origin
        col = (pos[0] - ox) // self.cell_size
        row = (pos[1] - oy) // self.cell_size
        c = (row, col)
        return c if self.grid.in_bounds(c) else None

    # ---------- main loop ----------
    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    def _tick_algorithm(self):
        t0 = time.time()
        step_interval = 1.0 / max(1, self.steps_per_sec)
        if self.stats.path_length:
            step_interval *= 2  # path reveal runs at half speed
        if not hasattr(self, "_last_step_t"):
            self._last_step_t = 0.0
        if t0 - self._last_step_t >= step_interval:
            self._last_step_t = t0
            self._do_step()

    def _do_step(self):
        if self.state in ("Done", "No path"):
            return
        if self._gen is None:
            self.grid.reset_search_state()
            self._gen = steps(self.grid, self.selected_algo)
        try:
            _, self.stats = next(self._gen)
            if not self.running:
                self.state = "Paused"
        except StopIteration as stop:
            self._finish(stop.value)

    def _finish(self, result: Optional[PathfindingResult]):
        self._gen = None
        self.result = result
        self.running = False
        self.state = "Done" if result is not None and result.found else "No path"
        if result is not None:
            self.stats = Stats(visited_count=len(result.visited_nodes_in_order),
                               path_length=len(result.nodes_in_shortest_path_order),
                               elapsed_ms=self.stats.elapsed_ms)
        self._refresh_active_states()

    def _recalculate(self):
        """Instant re-solve after an edit on a finished board."""
        self.grid.reset_search_state()
        self._finish(solve(self.grid, self.selected_algo))

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_c:
                    self._clear_walls()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(+5)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(-5)
                elif e.key in MAP_KEYS:
                    self._switch_map(MAP_KEYS[e.key])
                elif e.key in ALGO_KEYS:
                    self._switch_algo(ALGO_KEYS[e.key])
                elif e.key in EDIT_KEYS:
                    self.edit_mode = EDIT_KEYS[e.key]
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                handled = False
                for b in self._buttons:
                    handled = b.handle_mouse(e) or handled
                if not handled and e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                    self._click_cell(e.pos)

    def _click_cell(self, pos: Tuple[int, int]):
        if self._gen is not None:
            return  # no edits while a search is in flight
        cell = self._cell_at(pos)
        if cell is None or not apply_edit(self.grid, cell, self.edit_mode):
            return
        if self.state in ("Done", "No path"):
            self._recalculate()

    def _switch_map(self, key: str):
        if key not in MAP_FILES: return
        try:
            self.grid = load_map(MAP_FILES[key])
        except (OSError, ValueError, KeyError, AssertionError) as ex:
            logger.error("Failed to load map {}: {}", key, ex)
            return
        self.selected_map_key = key
        logger.info("Switched to map {}", key)
        pygame.display.set_caption(f"Pathfinding — {key}")
        self._layout(*self.screen.get_size())
        self._reset()

    def _switch_algo(self, algo: Algorithm):
        self.selected_algo = algo
        logger.info("Selected algorithm {}", algo.label)
        self._reset()

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self._gen = None
        self.result = None
        self.stats = Stats()
        self.grid.reset_search_state()
        self._refresh_active_states()

    def _clear_walls(self):
        self._reset()
        self.grid.clear_walls()

    def _toggle_run(self):
        if self.state in ("Done", "No path"):
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = int(max(1, min(240, self.steps_per_sec + dv)))

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = tuple(int(a + (b - a) * t) for a, b in zip(top, bot))
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin
        visited = pygame.Surface((cs, cs), pygame.SRCALPHA); visited.fill(VISITED_A)

        for n in self.grid:
            rect = pygame.Rect(ox + n.col*cs, oy + n.row*cs, cs, cs)
            pygame.draw.rect(self.screen, WALL_DARK if n.is_wall else OPEN_GRAY, rect)
            if n.is_visited and not n.is_wall:
                self.screen.blit(visited, rect.topleft)
            if n.is_path:
                pygame.draw.rect(self.screen, PATH_MINT, rect.inflate(-cs//3, -cs//3), border_radius=3)
            pygame.draw.rect(self.screen, BLACK, rect, 1)

        start, end = self.grid.find_start(), self.grid.find_end()
        if start is not None:
            self._draw_badge(start.coord, BLUE, "S")
        if end is not None:
            self._draw_badge(end.coord, RED, "E")

    def _draw_badge(self, cell: Coord, color: Tuple[int,int,int], letter: str):
        cs = self.cell_size
        ox, oy = self._grid_origin
        row, col = cell
        cx = ox + col*cs + cs//2
        cy = oy + row*cs + cs//2
        pygame.draw.circle(self.screen, color, (cx,cy), max(5, cs//2 - 2))
        txt = self.font.render(letter, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=(cx,cy)))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 256  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self._toggle_run, togglable=True, store_as="btn_run"); y += h + gap
        add("Step Once", self._do_step); y += h + gap
        add("Reset", self._reset); y += h + gap
        add("Clear Walls", self._clear_walls); y += h + gap

        half = (w-8)//2
        self._buttons.append(UIButton("Speed −", pygame.Rect(x, y, half, h), lambda: self._bump_speed(-5)))
        self._buttons.append(UIButton("Speed +", pygame.Rect(x + half + 8, y, half, h), lambda: self._bump_speed(+5)))
        y += h + gap

        self._algo_buttons: Dict[Algorithm, UIButton] = {}
        for algo in Algorithm:
            add(f"Algo: {algo.label}", lambda a=algo: self._switch_algo(a), togglable=True)
            self._algo_buttons[algo] = self._buttons[-1]
            y += h + gap

        self._map_buttons: Dict[str, UIButton] = {}
        for i, key in enumerate(MAP_FILES, start=1):
            add(f"Map {i}: {key}", lambda k=key: self._switch_map(k), togglable=True)
            self._map_buttons[key] = self._buttons[-1]
            y += h + gap

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(getattr(self, "running", False))
        for algo, btn in getattr(self, "_algo_buttons", {}).items():
            btn.set_active(algo == getattr(self, "selected_algo", None))
        for key, btn in getattr(self, "_map_buttons", {}).items():
            btn.set_active(key == getattr(self, "selected_map_key", None))

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 236), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        line(f"Visited: {self.stats.visited_count}")
        line(f"Path Len: {self.stats.path_length}")
        line(f"Time: {self.stats.elapsed_ms} ms")
        line("-" * 26)
        line(f"Algo: {self.selected_algo.label}")
        line(f"Speed: {self.steps_per_sec} steps/s")
        line(f"Edit: {self.edit_mode}")
        line(f"State: {self.state}")

        for b in self._buttons:
            b.draw(self.screen, self.font)

# ---------- main ----------
def main(settings: Optional[Settings] = None):
    settings = settings or resolve_settings()
    try:
        grid = load_map(settings.map_path)
    except (OSError, ValueError, KeyError, AssertionError) as ex:
        logger.error("Failed to load default map: {}", ex)
        sys.exit(1)
    Viewer(grid, settings).run()

if __name__ == "__main__":
    main()
