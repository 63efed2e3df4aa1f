"""
astar.py — A* Search on a grid
================================
Generator-based A* with a pluggable heuristic.  Same movement model as
Dijkstra: 8 directions, orthogonal cost 1, diagonal cost 1.4.

Ships three built-in heuristics:
  • manhattan   – |Δr| + |Δc|                  (default; admissible only
                                                 on 4-connected grids, so
                                                 the path may be suboptimal
                                                 once diagonals cost 1.4)
  • octile      – max(|Δr|,|Δc|) + 0.4·min(…)   (admissible here → optimal)
  • zero        – h = 0                          (A* degrades to Dijkstra)

The open set is a plain list scanned for the lowest f-score on every
iteration (first found wins ties).  The goal is tested as soon as it is
selected, before it is removed from the open set, so the goal cell never
gets an EXPLORE step of its own.  Closed cells are never reopened.
"""

from typing import Callable, Dict, Generator, List, Optional, Sequence

from algorithms.step import Explore, Path, PathfindingStep
from structures.grid import (
    DIAGONAL_COST, WEIGHTED_MOVES, Grid, Position, as_position, reconstruct_path, shape
)


# ---------------------------------------------------------------------------
# Built-in heuristics  (both take two positions, return float)
# ---------------------------------------------------------------------------
def manhattan(a: Position, b: Position) -> float:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])

def octile(a: Position, b: Position) -> float:
    dr = abs(a[0] - b[0])
    dc = abs(a[1] - b[1])
    return max(dr, dc) + (DIAGONAL_COST - 1) * min(dr, dc)

def zero(a: Position, b: Position) -> float:
    """h=0 → A* degrades to Dijkstra.  Useful for teaching."""
    return 0.0

HEURISTICS: Dict[str, Callable[[Position, Position], float]] = {
    "manhattan": manhattan,
    "octile":    octile,
    "zero":      zero,
}

DEFAULT_HEURISTIC = "manhattan"


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def AStar(grid, start, end, h):",                  # 0
    "    g[start] ← 0;  f[start] ← h(start)",           # 1
    "    open ← [start]",                               # 2
    "    while open:",                                  # 3
    "        cell ← open entry with lowest f",          # 4
    "        if cell == end: return path",              # 5
    "        open.remove(cell);  closed.add(cell)",     # 6
    "        for (nbr, cost) in 8 neighbours(cell):",   # 7
    "            if nbr closed: continue",              # 8
    "            if g[cell] + cost < g[nbr]:",          # 9
    "                parent[nbr] ← cell",               # 10
    "                g[nbr] ← g[cell] + cost",          # 11
    "                f[nbr] ← g[nbr] + h(nbr)",         # 12
    "                open.add(nbr) if absent",          # 13
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def astar(
    grid: Grid,
    start: Sequence[int],
    end: Sequence[int],
    heuristic: str = DEFAULT_HEURISTIC,
) -> Generator[PathfindingStep, None, None]:
    """
    Args:
        grid      : 2-D matrix, 0 = open, 1 = obstacle.
        start     : (row, col) of the start cell.
        end       : (row, col) of the goal cell.
        heuristic : Key into HEURISTICS.

    Raises:
        ValueError if `heuristic` is not a known key.
    """

    if heuristic not in HEURISTICS:
        raise ValueError(f"Unknown heuristic: {heuristic}")
    h_fn = HEURISTICS[heuristic]

    INF   = float("inf")
    start = as_position(start)
    end   = as_position(end)
    rows, cols = shape(grid)

    g_score: Dict[Position, float]               = {(r, c): INF for r in range(rows) for c in range(cols)}
    f_score: Dict[Position, float]               = dict(g_score)
    parent:  Dict[Position, Optional[Position]]  = {start: None}
    closed:  set                                 = set()
    open_set: List[Position]                     = [start]

    g_score[start] = 0.0
    f_score[start] = h_fn(start, end)

    while open_set:
        # linear scan: lowest f, first found wins ties
        current_idx = 0
        for i in range(1, len(open_set)):
            if f_score[open_set[i]] < f_score[open_set[current_idx]]:
                current_idx = i
        current = open_set[current_idx]

        if current == end:
            yield Path(path=reconstruct_path(parent, end))
            return

        open_set.pop(current_idx)
        closed.add(current)
        yield Explore(position=current, visited=frozenset(closed))

        row, col = current
        for d_row, d_col, cost in WEIGHTED_MOVES:
            nbr = (row + d_row, col + d_col)
            if (
                0 <= nbr[0] < rows
                and 0 <= nbr[1] < cols
                and grid[nbr[0]][nbr[1]] == 0
                and nbr not in closed
            ):
                tentative_g = g_score[current] + cost
                if tentative_g < g_score[nbr]:
                    parent[nbr]  = current
                    g_score[nbr] = tentative_g
                    f_score[nbr] = tentative_g + h_fn(nbr, end)
                    if nbr not in open_set:
                        open_set.append(nbr)
