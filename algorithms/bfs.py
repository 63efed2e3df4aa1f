"""
bfs.py — Breadth-First Search on a grid
=========================================
Generator-based BFS.  4-directional movement (up, down, left, right),
every move costs the same, so the first time the goal is dequeued the
path is a shortest one by cell count.

Yields:
  1. EXPLORE per dequeue  →  position + snapshot of every cell seen so far
  2. PATH once, when the goal is dequeued  →  start … end inclusive

If the goal cannot be reached the run ends after the last EXPLORE;
there is no "not found" step.
"""

from collections import deque
from typing import Deque, Dict, Generator, List, Optional, Sequence

from algorithms.step import Explore, Path, PathfindingStep
from structures.grid import (
    ORTHOGONAL_MOVES, Grid, Position, as_position, reconstruct_path, shape
)


PSEUDOCODE: List[str] = [
    "def BFS(grid, start, end):",                   # 0
    "    queue ← [start]",                          # 1
    "    visited ← {start}",                        # 2
    "    while queue is not empty:",                 # 3
    "        cell ← queue.dequeue()",               # 4
    "        if cell == end: return path",          # 5
    "        for nbr in up/down/left/right(cell):", # 6
    "            if nbr open and not visited:",     # 7
    "                visited.add(nbr)",             # 8
    "                parent[nbr] ← cell",           # 9
    "                queue.enqueue(nbr)",           # 10
]


def bfs(
    grid: Grid,
    start: Sequence[int],
    end: Sequence[int],
) -> Generator[PathfindingStep, None, None]:
    """
    Args:
        grid  : 2-D matrix, 0 = open, 1 = obstacle.
        start : (row, col) of the start cell.
        end   : (row, col) of the goal cell.
    """

    start = as_position(start)
    end   = as_position(end)
    rows, cols = shape(grid)

    queue:   Deque[Position]                     = deque([start])
    visited: set                                 = {start}
    parent:  Dict[Position, Optional[Position]]  = {start: None}

    while queue:
        cell = queue.popleft()
        yield Explore(position=cell, visited=frozenset(visited))

        if cell == end:
            yield Path(path=reconstruct_path(parent, end))
            return

        row, col = cell
        for d_row, d_col in ORTHOGONAL_MOVES:
            nbr = (row + d_row, col + d_col)
            if (
                0 <= nbr[0] < rows
                and 0 <= nbr[1] < cols
                and grid[nbr[0]][nbr[1]] == 0
                and nbr not in visited
            ):
                visited.add(nbr)
                parent[nbr] = cell
                queue.append(nbr)
