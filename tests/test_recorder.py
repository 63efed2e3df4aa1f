"""Recorder: per-domain metrics, export shape, comparison winners."""

import pytest

from engine import ComparisonResult, Recorder, RunMetrics, compare
from structures import Graph


def _run(domain, key, **inputs):
    rec = Recorder()
    rec.start(domain, key, **inputs)
    rec.run_to_completion()
    return rec


class TestRecorder:

    def test_sorting_metrics(self):
        rec = _run("sorting", "bubble", array=[3, 1, 2])
        m = rec.get_metrics()
        assert m.algo_label == "Bubble Sort"
        assert m.comparisons == 3
        assert m.swaps == 2
        assert m.total_steps == len(rec.steps) == 8

    def test_pathfinding_metrics(self, open_grid_3x3):
        rec = _run("pathfinding", "bfs", grid=open_grid_3x3, start=(0, 0), end=(2, 2))
        m = rec.metrics
        assert m.path_found
        assert m.path_length == 5
        assert m.path_cost == pytest.approx(4.0)
        assert m.cells_explored == 9

    def test_pathfinding_heuristic_is_forwarded(self, detour_grid):
        rec = _run("pathfinding", "astar", grid=detour_grid, start=(0, 0), end=(0, 4), heuristic="octile")
        assert rec.metrics.path_found

    def test_unreachable_metrics(self, walled_grid):
        rec = _run("pathfinding", "dijkstra", grid=walled_grid, start=(0, 0), end=(0, 2))
        assert not rec.metrics.path_found
        assert rec.metrics.path_length == 0
        assert rec.metrics.cells_explored == 3

    def test_graph_metrics(self, dag):
        rec = _run("graph", "dfs", graph=dag, start_node=0)
        assert rec.metrics.nodes_visited == 5
        assert rec.metrics.visit_order[0] == 0
        assert rec.metrics.has_cycle is None

    def test_topological_result(self, dag):
        rec = _run("graph", "topological", graph=dag, start_node=0)
        assert rec.metrics.result == [4, 0, 2, 1, 3]

    def test_cycle_metrics(self, triangle, dag):
        assert _run("graph", "cycle", graph=triangle).metrics.has_cycle is True
        assert _run("graph", "cycle", graph=dag).metrics.has_cycle is False

    def test_restart_discards_previous_trace(self):
        rec = _run("sorting", "bubble", array=[2, 1])
        rec.start("sorting", "quick", array=[2, 1])
        assert rec.steps == []
        assert rec.metrics is None

    def test_export_is_json_ready(self):
        rec = _run("graph", "bfs", graph=Graph(nodes=[0, 1], edges=[(0, 1)]), start_node=0)
        out = rec.export()
        assert out["domain"] == "graph"
        assert out["algo_key"] == "bfs"
        assert out["steps"][-1] == {"type": "visit", "node": 1, "visited": [0, 1], "visitOrder": [0, 1]}
        assert out["metrics"]["nodes_visited"] == 2

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError):
            Recorder().start("sorting", "heap", array=[1])

    def test_run_before_start(self):
        with pytest.raises(RuntimeError):
            Recorder().run_to_completion()


class TestCompare:

    def test_sorting_winner(self):
        array = list(range(20, 0, -1))
        bubble = _run("sorting", "bubble", array=array)
        merge  = _run("sorting", "merge", array=array)
        result = compare(bubble, merge)
        assert isinstance(result, ComparisonResult)
        assert result.winner_explored == "Merge Sort"
        assert result.winner_path == ""

    def test_pathfinding_cheaper_path_wins(self, open_grid_3x3):
        inputs = dict(grid=open_grid_3x3, start=(0, 0), end=(2, 2))
        bfs = _run("pathfinding", "bfs", **inputs)
        dij = _run("pathfinding", "dijkstra", **inputs)
        assert compare(bfs, dij).winner_path == "Dijkstra's Algorithm"

    def test_missing_path_never_wins(self, walled_grid):
        inputs = dict(grid=walled_grid, start=(0, 0), end=(0, 2))
        a = _run("pathfinding", "bfs", **inputs)
        b = _run("pathfinding", "astar", **inputs)
        assert compare(a, b).winner_path == "tie"

    def test_tie(self, dag):
        a = _run("graph", "dfs", graph=dag, start_node=0)
        b = _run("graph", "bfs", graph=dag, start_node=0)
        result = compare(a, b)
        assert result.winner_explored == "tie"
        assert result.to_dict()["left"]["algo_key"] == "dfs"

    def test_unfinished_recorders(self):
        result = compare(Recorder(), Recorder())
        assert result.left == RunMetrics()
        assert result.winner_steps == "tie"
