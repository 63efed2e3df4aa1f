"""
grid.py — Grid Helpers & Generator
===================================
A grid is a plain 2-D matrix (list of rows) of cells:

    0 = open / walkable
    1 = obstacle

Positions are (row, col) tuples.  The helpers here are shared by the three
pathfinding generators; `create_grid` is the random-input factory.
"""

import random
from typing import Dict, List, Optional, Sequence, Tuple

Position = Tuple[int, int]
Grid     = Sequence[Sequence[int]]

OPEN     = 0
OBSTACLE = 1

DIAGONAL_COST = 1.4

# (d_row, d_col) — up, down, left, right
ORTHOGONAL_MOVES: List[Tuple[int, int]] = [(-1, 0), (1, 0), (0, -1), (0, 1)]

# (d_row, d_col, cost) — orthogonal first, then the four diagonals
WEIGHTED_MOVES: List[Tuple[int, int, float]] = [
    (-1,  0, 1.0),
    ( 1,  0, 1.0),
    ( 0, -1, 1.0),
    ( 0,  1, 1.0),
    (-1, -1, DIAGONAL_COST),
    (-1,  1, DIAGONAL_COST),
    ( 1, -1, DIAGONAL_COST),
    ( 1,  1, DIAGONAL_COST),
]


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------
def shape(grid: Grid) -> Tuple[int, int]:
    """(rows, cols).  An empty grid is (0, 0)."""
    rows = len(grid)
    return rows, (len(grid[0]) if rows else 0)


def is_open(grid: Grid, pos: Position) -> bool:
    """True when `pos` lies inside the grid and is not an obstacle."""
    rows, cols = shape(grid)
    r, c = pos
    return 0 <= r < rows and 0 <= c < cols and grid[r][c] == OPEN


def as_position(pos: Sequence[int]) -> Position:
    """Normalise [r, c] / (r, c) input into a tuple."""
    r, c = pos
    return int(r), int(c)


def default_endpoints(grid: Grid) -> Tuple[Position, Position]:
    """Top-left and bottom-right corners — the cells `create_grid` keeps open."""
    rows, cols = shape(grid)
    return (0, 0), (max(rows - 1, 0), max(cols - 1, 0))


def move_cost(a: Position, b: Position) -> float:
    return DIAGONAL_COST if a[0] != b[0] and a[1] != b[1] else 1.0


def path_cost(path: Sequence[Position]) -> float:
    """Total weighted cost of a path under the 8-directional cost model."""
    return sum(move_cost(path[i], path[i + 1]) for i in range(len(path) - 1))


def reconstruct_path(
    parent: Dict[Position, Optional[Position]],
    target: Position,
) -> Tuple[Position, ...]:
    """Walk parent links back from `target`; the start maps to None."""
    path: List[Position] = []
    cur: Optional[Position] = target
    while cur is not None:
        path.append(cur)
        cur = parent.get(cur)
    path.reverse()
    return tuple(path)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def create_grid(
    width: int,
    height: int,
    obstacle_chance: float = 0.2,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> List[List[int]]:
    """
    Random obstacle grid with `height` rows and `width` columns.

    The start (0, 0) and end (height-1, width-1) cells are always open.
    Pass `rng` (or `seed`) to make the grid reproducible.
    """
    rng = rng or random.Random(seed)
    grid: List[List[int]] = []

    for r in range(height):
        row = []
        for c in range(width):
            is_obstacle = (
                rng.random() < obstacle_chance
                and (r, c) != (0, 0)
                and (r, c) != (height - 1, width - 1)
            )
            row.append(OBSTACLE if is_obstacle else OPEN)
        grid.append(row)

    return grid
