"""
dijkstra.py — Dijkstra's Algorithm on a grid
==============================================
8-directional movement: orthogonal moves cost 1, diagonal moves cost 1.4.

No priority queue.  Each iteration scans every cell in row-major order
and picks the unvisited one with the smallest tentative distance (the
first one found wins ties).  That is O(cells) per selection, which is
fine for grids sized to be watched.

Yields:
  1. EXPLORE per selected cell  →  the cell is already in the snapshot
  2. PATH when the goal is selected

The loop stops once every cell is visited or no unvisited cell has a
finite distance (the rest is unreachable).
"""

from typing import Dict, Generator, List, Optional, Sequence

from algorithms.step import Explore, Path, PathfindingStep
from structures.grid import (
    WEIGHTED_MOVES, Grid, Position, as_position, reconstruct_path, shape
)


PSEUDOCODE: List[str] = [
    "def Dijkstra(grid, start, end):",                  # 0
    "    dist ← {cell: ∞ for every cell}",              # 1
    "    dist[start] ← 0",                              # 2
    "    while some cell is unvisited:",                # 3
    "        cell ← unvisited cell with min dist",      # 4
    "        if dist[cell] = ∞: stop",                  # 5
    "        visited.add(cell)",                        # 6
    "        if cell == end: return path",              # 7
    "        for (nbr, cost) in 8 neighbours(cell):",   # 8
    "            if dist[cell] + cost < dist[nbr]:",    # 9
    "                dist[nbr] ← dist[cell] + cost",    # 10
    "                parent[nbr] ← cell",               # 11
]


def dijkstra(
    grid: Grid,
    start: Sequence[int],
    end: Sequence[int],
) -> Generator[PathfindingStep, None, None]:

    INF   = float("inf")
    start = as_position(start)
    end   = as_position(end)
    rows, cols = shape(grid)

    dist:    Dict[Position, float]               = {(r, c): INF for r in range(rows) for c in range(cols)}
    parent:  Dict[Position, Optional[Position]]  = {start: None}
    visited: set                                 = set()
    dist[start] = 0.0

    while len(visited) < rows * cols:
        current: Optional[Position] = None
        min_dist = INF

        for r in range(rows):
            for c in range(cols):
                if (r, c) not in visited and dist[(r, c)] < min_dist:
                    current  = (r, c)
                    min_dist = dist[(r, c)]

        if current is None:
            break

        visited.add(current)
        yield Explore(position=current, visited=frozenset(visited))

        if current == end:
            yield Path(path=reconstruct_path(parent, end))
            return

        row, col = current
        for d_row, d_col, cost in WEIGHTED_MOVES:
            nbr = (row + d_row, col + d_col)
            if 0 <= nbr[0] < rows and 0 <= nbr[1] < cols and grid[nbr[0]][nbr[1]] == 0:
                new_dist = dist[current] + cost
                if new_dist < dist[nbr]:
                    dist[nbr]   = new_dist
                    parent[nbr] = current
