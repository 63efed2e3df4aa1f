"""Shared fixtures: small hand-built inputs plus reference shortest-path solvers."""

import heapq
from collections import deque

import pytest

from structures.graph import Graph
from structures.grid import ORTHOGONAL_MOVES, WEIGHTED_MOVES, shape


# ---------------------------------------------------------------------------
# Grid fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def open_grid_3x3():
    return [[0, 0, 0], [0, 0, 0], [0, 0, 0]]


@pytest.fixture
def walled_grid():
    """The right column is unreachable from (0, 0): column 1 is a full wall."""
    return [
        [0, 1, 0],
        [0, 1, 0],
        [0, 1, 0],
    ]


@pytest.fixture
def detour_grid():
    """A wall with a single gap at the bottom forces a detour."""
    return [
        [0, 0, 1, 0, 0],
        [0, 0, 1, 0, 0],
        [0, 0, 1, 0, 0],
        [0, 0, 0, 0, 0],
    ]


# ---------------------------------------------------------------------------
# Graph fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def triangle():
    return Graph(nodes=[0, 1, 2], edges=[(0, 1), (1, 2), (2, 0)])


@pytest.fixture
def dag():
    """0 → 1 → 3, 0 → 2 → 3, 4 → 2 (node 4 is a second source)."""
    return Graph(nodes=[0, 1, 2, 3, 4], edges=[(0, 1), (0, 2), (1, 3), (2, 3), (4, 2)])


@pytest.fixture
def two_components():
    return Graph(nodes=[0, 1, 2, 3, 4], edges=[(0, 1), (1, 2), (3, 4)])


# ---------------------------------------------------------------------------
# Reference solvers (independent of the engines under test)
# ---------------------------------------------------------------------------


def reference_bfs_length(grid, start, end):
    """Cells on a shortest 4-directional path, or None if unreachable."""
    rows, cols = shape(grid)
    dist = {start: 1}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == end:
            return dist[cell]
        for dr, dc in ORTHOGONAL_MOVES:
            nbr = (cell[0] + dr, cell[1] + dc)
            if 0 <= nbr[0] < rows and 0 <= nbr[1] < cols and grid[nbr[0]][nbr[1]] == 0 and nbr not in dist:
                dist[nbr] = dist[cell] + 1
                queue.append(nbr)
    return None


def reference_weighted_cost(grid, start, end):
    """Cheapest 8-directional cost (1 / 1.4), or None if unreachable."""
    rows, cols = shape(grid)
    best = {start: 0.0}
    heap = [(0.0, start)]
    while heap:
        d, cell = heapq.heappop(heap)
        if cell == end:
            return d
        if d > best[cell]:
            continue
        for dr, dc, cost in WEIGHTED_MOVES:
            nbr = (cell[0] + dr, cell[1] + dc)
            if 0 <= nbr[0] < rows and 0 <= nbr[1] < cols and grid[nbr[0]][nbr[1]] == 0:
                nd = d + cost
                if nd < best.get(nbr, float("inf")):
                    best[nbr] = nd
                    heapq.heappush(heap, (nd, nbr))
    return None
