"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (all Steps), then computes the
statistics the client shows next to the animation.

Usage:
    rec = Recorder()
    rec.start("sorting", "bubble", array=[3, 1, 2])
    rec.run_to_completion()          # materialises the full trace
    metrics = rec.get_metrics()      # the stats card
    rec.export()                     # JSON-ready snapshot for the client

Comparison Mode:
    The client asks for two Recorders (one per algorithm), both run on the
    SAME input, then compare(rec1, rec2) → ComparisonResult.
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from algorithms import (
    GRAPH, PATHFINDING, SORTING, AlgoInfo, detect_cycle, find_path,
    get_algorithm, sort, traverse,
)
from algorithms.step import Compare, Cycle, Explore, Finish, Path, Step, Swap, Visit
from structures.grid import path_cost

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the stats panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    domain:          str   = ""
    algo_key:        str   = ""
    algo_label:      str   = ""
    total_steps:     int   = 0
    wall_time_ms:    float = 0.0
    # sorting
    comparisons:     int   = 0
    swaps:           int   = 0
    # pathfinding
    cells_explored:  int   = 0
    path_found:      bool  = False
    path_length:     int   = 0          # number of cells on the path, endpoints included
    path_cost:       float = 0.0        # 1 per straight move, 1.4 per diagonal
    # graph
    nodes_visited:   int   = 0
    visit_order:     List[int] = field(default_factory=list)
    result:          List[int] = field(default_factory=list)
    has_cycle:       Optional[bool] = None


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_steps:    str = ""   # which algo needed fewer steps
    winner_explored: str = ""   # fewer comparisons / cells / nodes
    winner_path:     str = ""   # cheaper path (pathfinding only)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Full list of Steps from the run.
        metrics : Computed RunMetrics (available after run_to_completion).
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None

        self._algo_info: Optional[AlgoInfo] = None
        self._inputs:    Dict[str, Any]     = {}

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, domain: str, algo_key: str, **inputs: Any) -> None:
        """
        Select the algorithm and its input.  Any previous trace is dropped.

        Inputs per domain:
            sorting     : array
            pathfinding : grid, start, end, heuristic (A* only, optional)
            graph       : graph, start_node (ignored by "cycle")
        """
        info = get_algorithm(domain, algo_key)
        if info is None:
            raise ValueError(f"Unknown {domain} algorithm: {algo_key}")

        self._algo_info = info
        self._inputs    = dict(inputs)
        self.steps      = []
        self.metrics    = None

    def run_to_completion(self) -> RunMetrics:
        """Run the algorithm, record every step, compute metrics."""
        if self._algo_info is None:
            raise RuntimeError("Call start() first.")

        start_time = time.monotonic()
        self.steps = self._run()
        wall_ms    = (time.monotonic() - start_time) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.debug(
            "%s/%s finished: %d steps in %.2f ms",
            self._algo_info.domain, self._algo_info.key, len(self.steps), wall_ms,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "domain":   self._algo_info.domain if self._algo_info else "",
            "algo_key": self._algo_info.key if self._algo_info else "",
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _run(self) -> List[Step]:
        info   = self._algo_info
        inputs = self._inputs

        if info.domain == SORTING:
            return sort(info.key, inputs["array"])
        if info.domain == PATHFINDING:
            return find_path(
                info.key, inputs["grid"], inputs["start"], inputs["end"],
                heuristic=inputs.get("heuristic"),
            )
        if info.key == "cycle":
            return detect_cycle(inputs["graph"])
        return traverse(info.key, inputs["graph"], inputs.get("start_node", 0))

    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info  = self._algo_info
        steps = self.steps
        last  = steps[-1] if steps else None

        metrics = RunMetrics(
            domain=info.domain,
            algo_key=info.key,
            algo_label=info.label,
            total_steps=len(steps),
            wall_time_ms=round(wall_ms, 2),
        )

        if info.domain == SORTING:
            metrics.comparisons = sum(1 for s in steps if isinstance(s, Compare))
            metrics.swaps       = sum(1 for s in steps if isinstance(s, Swap))

        elif info.domain == PATHFINDING:
            explores = [s for s in steps if isinstance(s, Explore)]
            metrics.cells_explored = len(explores[-1].visited) if explores else 0
            if isinstance(last, Path):
                metrics.path_found  = True
                metrics.path_length = len(last.path)
                metrics.path_cost   = round(path_cost(last.path), 6)

        elif info.domain == GRAPH:
            visits = [s for s in steps if isinstance(s, Visit)]
            if visits:
                metrics.nodes_visited = len(visits[-1].visited)
                metrics.visit_order   = list(visits[-1].visit_order)
            finishes = [s for s in steps if isinstance(s, Finish)]
            if info.key == "topological" and finishes:
                metrics.result = list(finishes[-1].result)
            if info.key == "cycle":
                metrics.has_cycle = any(isinstance(s, Cycle) for s in steps)

        return metrics


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key):
        # lower wins
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    def effort(m: RunMetrics) -> int:
        if m.domain == SORTING:
            return m.comparisons
        if m.domain == PATHFINDING:
            return m.cells_explored
        return m.nodes_visited

    winner_path = ""
    if l.domain == PATHFINDING:
        # a run that found no path never wins on path cost
        l_cost = l.path_cost if l.path_found else float("inf")
        r_cost = r.path_cost if r.path_found else float("inf")
        winner_path = winner(l_cost, r_cost, l.algo_label, r.algo_label)

    return ComparisonResult(
        left=l,
        right=r,
        winner_steps   =winner(l.total_steps, r.total_steps, l.algo_label, r.algo_label),
        winner_explored=winner(effort(l), effort(r), l.algo_label, r.algo_label),
        winner_path    =winner_path,
    )
