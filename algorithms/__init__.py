"""
algorithms/__init__.py — Algorithm Registry & Dispatch
========================================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import sort, find_path, traverse, detect_cycle
    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict of dicts, one per domain:
    {
        "sorting":     {"bubble": AlgoInfo(…), "merge": …, "quick": …},
        "pathfinding": {"bfs": …, "dijkstra": …, "astar": …},
        "graph":       {"dfs": …, "bfs": …, "topological": …, "cycle": …},
    }

Every algorithm module exposes a generator.  The dispatch functions run it
to completion and hand back a plain list: the whole trace exists before
playback starts, and the caller can index it freely (forwards or back).
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Union

from algorithms.step import Step
from structures.graph import Graph

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble_sort      import bubble_sort      as _bubble,  PSEUDOCODE as _bubble_pc
from algorithms.merge_sort       import merge_sort       as _merge,   PSEUDOCODE as _merge_pc
from algorithms.quick_sort       import quick_sort       as _quick,   PSEUDOCODE as _quick_pc
from algorithms.bfs              import bfs              as _bfs,     PSEUDOCODE as _bfs_pc
from algorithms.dijkstra         import dijkstra         as _dijkstra, PSEUDOCODE as _dij_pc
from algorithms.astar            import astar            as _astar,   PSEUDOCODE as _ast_pc
from algorithms.astar            import DEFAULT_HEURISTIC, HEURISTICS
from algorithms.dfs              import dfs              as _dfs,     PSEUDOCODE as _dfs_pc
from algorithms.graph_bfs        import graph_bfs        as _gbfs,    PSEUDOCODE as _gbfs_pc
from algorithms.topological_sort import topological_sort as _topo,    PSEUDOCODE as _topo_pc
from algorithms.cycle_detection  import detect_cycle     as _cycle,   PSEUDOCODE as _cycle_pc


SORTING     = "sorting"
PATHFINDING = "pathfinding"
GRAPH       = "graph"


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bubble"
    domain:            str                    # "sorting" / "pathfinding" / "graph"
    label:             str                    # human label, e.g. "Bubble Sort"
    fn:                Callable               # the generator function
    pseudocode:        List[str]              # lines for the side-panel
    has_heuristic:     bool     = False       # A* — expose heuristic selector?
    complexity_time:   str      = ""          # e.g. "O(V + E)"
    complexity_space:  str      = ""          # e.g. "O(V)"
    description:       str      = ""          # one-liner for the UI card
    tags:              List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "domain":           self.domain,
            "label":            self.label,
            "pseudocode":       list(self.pseudocode),
            "has_heuristic":    self.has_heuristic,
            "heuristics":       sorted(HEURISTICS) if self.has_heuristic else [],
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
            "tags":             list(self.tags),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, Dict[str, AlgoInfo]] = {

    SORTING: {
        "bubble": AlgoInfo(
            key="bubble", domain=SORTING, label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
            tags=["comparison", "in-place", "stable"],
            complexity_time="O(n²)", complexity_space="O(1)",
            description="Swaps adjacent pairs; the largest value bubbles to the end each pass.",
        ),
        "merge": AlgoInfo(
            key="merge", domain=SORTING, label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
            tags=["comparison", "divide-and-conquer", "stable"],
            complexity_time="O(n log n)", complexity_space="O(n)",
            description="Splits in half, sorts each half, merges the sorted halves.",
        ),
        "quick": AlgoInfo(
            key="quick", domain=SORTING, label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
            tags=["comparison", "divide-and-conquer", "in-place"],
            complexity_time="O(n log n) avg, O(n²) worst", complexity_space="O(log n)",
            description="Partitions around the last element, then sorts both sides.",
        ),
    },

    PATHFINDING: {
        "bfs": AlgoInfo(
            key="bfs", domain=PATHFINDING, label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
            tags=["unweighted", "shortest-path", "4-directional"],
            complexity_time="O(V + E)", complexity_space="O(V)",
            description="Explores ring by ring. Shortest path by cell count.",
        ),
        "dijkstra": AlgoInfo(
            key="dijkstra", domain=PATHFINDING, label="Dijkstra's Algorithm", fn=_dijkstra, pseudocode=_dij_pc,
            tags=["weighted", "shortest-path", "8-directional"],
            complexity_time="O(V²)", complexity_space="O(V)",
            description="Always expands the closest cell. Diagonals cost 1.4.",
        ),
        "astar": AlgoInfo(
            key="astar", domain=PATHFINDING, label="A* Search", fn=_astar, pseudocode=_ast_pc,
            tags=["weighted", "shortest-path", "heuristic", "8-directional"],
            has_heuristic=True,
            complexity_time="O(V²)", complexity_space="O(V)",
            description="Dijkstra + heuristic guidance. Optimal when h is admissible (octile).",
        ),
    },

    GRAPH: {
        "dfs": AlgoInfo(
            key="dfs", domain=GRAPH, label="Depth-First Search", fn=_dfs, pseudocode=_dfs_pc,
            tags=["traversal", "stack"],
            complexity_time="O(V + E)", complexity_space="O(V)",
            description="Dives deep before backtracking.",
        ),
        "bfs": AlgoInfo(
            key="bfs", domain=GRAPH, label="Breadth-First Search", fn=_gbfs, pseudocode=_gbfs_pc,
            tags=["traversal", "queue"],
            complexity_time="O(V + E)", complexity_space="O(V)",
            description="Visits the graph level by level.",
        ),
        "topological": AlgoInfo(
            key="topological", domain=GRAPH, label="Topological Sort", fn=_topo, pseudocode=_topo_pc,
            tags=["directed", "dag", "ordering"],
            complexity_time="O(V + E)", complexity_space="O(V)",
            description="Orders a DAG so every edge points forward. Does not check for cycles.",
        ),
        "cycle": AlgoInfo(
            key="cycle", domain=GRAPH, label="Cycle Detection", fn=_cycle, pseudocode=_cycle_pc,
            tags=["directed", "three-colour"],
            complexity_time="O(V + E)", complexity_space="O(V)",
            description="Three-colour DFS; an edge into a node still on the stack is a cycle.",
        ),
    },
}

TRAVERSALS = ("dfs", "bfs", "topological")


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(domain: str, key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by domain + key, or None."""
    return REGISTRY.get(domain, {}).get(key)


def list_algorithms(domain: Optional[str] = None) -> List[AlgoInfo]:
    """All registered algorithms (optionally one domain) in insertion order."""
    if domain is not None:
        return list(REGISTRY.get(domain, {}).values())
    return [info for algos in REGISTRY.values() for info in algos.values()]


def _require(domain: str, key: str) -> AlgoInfo:
    info = get_algorithm(domain, key)
    if info is None:
        raise ValueError(f"Unknown {domain} algorithm: {key}")
    return info


# ---------------------------------------------------------------------------
# Dispatch — run an algorithm to completion, return the full trace
# ---------------------------------------------------------------------------
def sort(algorithm: str, array: Sequence[int]) -> List[Step]:
    """`algorithm` ∈ {"bubble", "merge", "quick"}."""
    return list(_require(SORTING, algorithm).fn(array))


def find_path(
    algorithm: str,
    grid: Sequence[Sequence[int]],
    start: Sequence[int],
    end: Sequence[int],
    heuristic: Optional[str] = None,
) -> List[Step]:
    """
    `algorithm` ∈ {"bfs", "dijkstra", "astar"}.  `heuristic` is only used by
    A* (default "manhattan").  No PATH step in the result means the end
    cell is unreachable.
    """
    info = _require(PATHFINDING, algorithm)
    if info.has_heuristic:
        return list(info.fn(grid, start, end, heuristic=heuristic or DEFAULT_HEURISTIC))
    return list(info.fn(grid, start, end))


def traverse(algorithm: str, graph: Union[Graph, Dict], start_node: int) -> List[Step]:
    """`algorithm` ∈ {"dfs", "bfs", "topological"}."""
    if algorithm not in TRAVERSALS:
        raise ValueError(f"Unknown graph traversal: {algorithm}")
    return list(_require(GRAPH, algorithm).fn(graph, start_node))


def detect_cycle(graph: Union[Graph, Dict]) -> List[Step]:
    return list(_require(GRAPH, "cycle").fn(graph))


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "TRAVERSALS",
    "HEURISTICS",
    "SORTING", "PATHFINDING", "GRAPH",
    "get_algorithm",
    "list_algorithms",
    "sort",
    "find_path",
    "traverse",
    "detect_cycle",
]
