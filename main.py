"""
main.py — Algorithm Visualizer Flask App
==========================================
JSON API in front of the three step engines.  The browser client owns
rendering and playback; every run returns the complete step trace so the
client can animate it, pause, change speed or rewind without calling back.

Routes:
  GET  /api/algorithms            – registry cards, grouped by domain
  POST /api/sorting/run           – run bubble / merge / quick sort
  POST /api/pathfinding/run       – run BFS / Dijkstra / A* on a grid
  POST /api/graph/run             – run DFS / BFS / topological sort / cycle detection
  POST /api/compare               – run two algorithms on the same input

Inputs:
  Each run accepts an explicit input (array / grid / graph) or generates
  one from size parameters and an optional `seed`, so a run can be
  reproduced exactly by sending the same seed again.

Config:
  Defaults live in DEFAULT_CONFIG and can be overridden through
  VISUALIZER_* environment variables (e.g. VISUALIZER_GRID_ROWS=30).
"""

import os
import random
import sys
from typing import Any, Dict, Tuple

from flask import Flask, jsonify, request

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import (
    GRAPH, PATHFINDING, REGISTRY, SORTING, get_algorithm, list_algorithms
)
from engine import Recorder, compare
from structures import (
    Graph, create_graph, create_grid, default_endpoints, generate_random_array
)
from structures.grid import as_position


DEFAULT_CONFIG: Dict[str, Any] = {
    "ARRAY_SIZE":      50,
    "ARRAY_MIN":       5,
    "ARRAY_MAX":       100,
    "GRID_ROWS":       25,
    "GRID_COLS":       40,
    "OBSTACLE_CHANCE": 0.2,
    "GRAPH_NODES":     15,
    # upper bounds on request inputs
    "MAX_ARRAY_SIZE":  200,
    "MAX_GRID_ROWS":   100,
    "MAX_GRID_COLS":   100,
    "MAX_GRID_CELLS":  2500,
    "MAX_GRAPH_NODES": 50,
    "MAX_GRAPH_EDGES": 300,
}

app = Flask(__name__)
app.config.from_mapping(DEFAULT_CONFIG)
app.config.from_prefixed_env("VISUALIZER")


# ---------------------------------------------------------------------------
# Input helpers — raise ValueError on anything malformed
# ---------------------------------------------------------------------------
def _payload() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


def _rng(data: Dict[str, Any]) -> random.Random:
    seed = data.get("seed")
    return random.Random(int(seed)) if seed is not None else random.Random()


def _integer(value: Any, name: str) -> int:
    """JSON integers only: 3 and 3.0 pass, 3.7, "3" and true do not."""
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(f"{name} must be an integer, got {value!r}")


def _bounded(data: Dict[str, Any], key: str, default: int, low: int, high: int) -> int:
    value = _integer(data.get(key, default), f"'{key}'")
    if not low <= value <= high:
        raise ValueError(f"'{key}' must be between {low} and {high}, got {value}")
    return value


def _array_input(data: Dict[str, Any]) -> list:
    cfg = app.config
    if "array" in data:
        values = data["array"]
        if not isinstance(values, list):
            raise ValueError("'array' must be a list of integers")
        if len(values) > cfg["MAX_ARRAY_SIZE"]:
            raise ValueError(f"Array too large (max {cfg['MAX_ARRAY_SIZE']} elements)")
        return [_integer(v, "Array value") for v in values]

    size = _bounded(data, "size", cfg["ARRAY_SIZE"], 0, cfg["MAX_ARRAY_SIZE"])
    return generate_random_array(
        size,
        min_value=_integer(data.get("min", cfg["ARRAY_MIN"]), "'min'"),
        max_value=_integer(data.get("max", cfg["ARRAY_MAX"]), "'max'"),
        rng=_rng(data),
    )


def _check_grid_size(rows: int, cols: int) -> None:
    cfg = app.config
    if not 1 <= rows <= cfg["MAX_GRID_ROWS"]:
        raise ValueError(f"Grid must have 1 to {cfg['MAX_GRID_ROWS']} rows, got {rows}")
    if not 1 <= cols <= cfg["MAX_GRID_COLS"]:
        raise ValueError(f"Grid must have 1 to {cfg['MAX_GRID_COLS']} columns, got {cols}")
    if rows * cols > cfg["MAX_GRID_CELLS"]:
        raise ValueError(f"Grid too large (max {cfg['MAX_GRID_CELLS']} cells)")


def _grid_input(data: Dict[str, Any]) -> Dict[str, Any]:
    cfg = app.config
    if "grid" in data:
        raw = data["grid"]
        if not isinstance(raw, list) or not all(isinstance(row, list) for row in raw):
            raise ValueError("'grid' must be a list of rows")
        if any(len(row) != len(raw[0]) for row in raw):
            raise ValueError("Grid rows must all have the same length")
        _check_grid_size(len(raw), len(raw[0]) if raw else 0)

        grid = [[_integer(cell, "Grid cell") for cell in row] for row in raw]
        if any(cell not in (0, 1) for row in grid for cell in row):
            raise ValueError("Grid cells must be 0 (open) or 1 (obstacle)")
    else:
        rows = _integer(data.get("rows", cfg["GRID_ROWS"]), "'rows'")
        cols = _integer(data.get("cols", cfg["GRID_COLS"]), "'cols'")
        _check_grid_size(rows, cols)
        grid = create_grid(
            cols,
            rows,
            obstacle_chance=float(data.get("obstacle_chance", cfg["OBSTACLE_CHANCE"])),
            rng=_rng(data),
        )

    default_start, default_end = default_endpoints(grid)
    start = as_position(data["start"]) if "start" in data else default_start
    end   = as_position(data["end"])   if "end"   in data else default_end
    return {"grid": grid, "start": start, "end": end, "heuristic": data.get("heuristic")}


def _graph_input(data: Dict[str, Any]) -> Dict[str, Any]:
    cfg = app.config
    if "graph" in data:
        graph = Graph.from_dict(data["graph"])
        # ids that only appear in edges count too
        if len(graph.node_ids()) > cfg["MAX_GRAPH_NODES"]:
            raise ValueError(f"Graph too large (max {cfg['MAX_GRAPH_NODES']} nodes)")
        if len(graph.edges) > cfg["MAX_GRAPH_EDGES"]:
            raise ValueError(f"Graph too large (max {cfg['MAX_GRAPH_EDGES']} edges)")
    else:
        count = _bounded(data, "nodes", cfg["GRAPH_NODES"], 0, cfg["MAX_GRAPH_NODES"])
        graph = create_graph(count, rng=_rng(data))
    return {"graph": graph, "start_node": _integer(data.get("start_node", 0), "'start_node'")}


INPUT_PARSERS = {
    SORTING:     _array_input,
    PATHFINDING: _grid_input,
    GRAPH:       _graph_input,
}


def _input_echo(domain: str, inputs: Any) -> Any:
    """The input actually used, in JSON form, so the client can draw frame 0."""
    if domain == SORTING:
        return {"array": inputs}
    if domain == PATHFINDING:
        return {
            "grid":  inputs["grid"],
            "start": list(inputs["start"]),
            "end":   list(inputs["end"]),
        }
    return {"graph": inputs["graph"].to_dict(), "start_node": inputs["start_node"]}


def _record(domain: str, algo_key: str, inputs: Any) -> Recorder:
    rec = Recorder()
    if domain == SORTING:
        rec.start(domain, algo_key, array=inputs)
    else:
        rec.start(domain, algo_key, **inputs)
    rec.run_to_completion()
    return rec


def _bad_request(error: Exception) -> Tuple[Any, int]:
    app.logger.warning("Rejected %s %s: %s", request.method, request.path, error)
    return jsonify({"error": str(error)}), 400


# ---------------------------------------------------------------------------
# API: Registry
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({
        domain: [info.to_dict() for info in list_algorithms(domain)]
        for domain in REGISTRY
    })


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
def _run(domain: str):
    try:
        data     = _payload()
        algo_key = data.get("algorithm", "")
        if get_algorithm(domain, algo_key) is None:
            raise ValueError(f"Unknown {domain} algorithm: {algo_key}")
        inputs = INPUT_PARSERS[domain](data)
        rec    = _record(domain, algo_key, inputs)
    except (ValueError, KeyError, TypeError) as e:
        return _bad_request(e)

    result = rec.export()
    result["input"] = _input_echo(domain, inputs)
    return jsonify(result)


@app.route("/api/sorting/run", methods=["POST"])
def api_sorting_run():
    return _run(SORTING)


@app.route("/api/pathfinding/run", methods=["POST"])
def api_pathfinding_run():
    return _run(PATHFINDING)


@app.route("/api/graph/run", methods=["POST"])
def api_graph_run():
    return _run(GRAPH)


# ---------------------------------------------------------------------------
# API: Comparison Mode
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    try:
        data   = _payload()
        domain = data.get("domain", "")
        if domain not in INPUT_PARSERS:
            raise ValueError(f"Unknown domain: {domain}")

        left_key, right_key = data.get("left", ""), data.get("right", "")
        for key in (left_key, right_key):
            if get_algorithm(domain, key) is None:
                raise ValueError(f"Unknown {domain} algorithm: {key}")

        # both runs share one input
        inputs = INPUT_PARSERS[domain](data)
        left   = _record(domain, left_key, inputs)
        right  = _record(domain, right_key, inputs)
    except (ValueError, KeyError, TypeError) as e:
        return _bad_request(e)

    result = compare(left, right).to_dict()
    result["input"] = _input_echo(domain, inputs)
    return jsonify(result)


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    print("=" * 60)
    print("  Algorithm Visualizer API")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000/api/algorithms")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000)
