"""
step.py — Algorithm Step Snapshots
===================================
Every algorithm is a generator that yields Step records.
A Step is a frozen-in-time picture of the algorithm at one discrete event:

    • sorting      → compare / swap / sorted   (+ a copy of the array)
    • pathfinding  → explore / path            (+ a copy of the visited set)
    • graph        → visit / finish / cycle    (+ copies of visited & order)

Design decisions:
  - One frozen dataclass per kind instead of one shape with optional
    fields.  The renderer / tests dispatch on the class (or on `kind`).
  - Every collection stored on a Step is an independently allocated
    tuple / frozenset taken at emission time.  The algorithms mutate
    their working array / visited set in place, so a Step that held a
    reference instead of a copy would rewrite the whole history.
  - `to_dict()` produces the JSON shape the client consumes:
        {"type": "compare", "indices": [0, 1], "array": [3, 1, 2]}
"""

from dataclasses import dataclass
from typing import (
    Any, ClassVar, Dict, FrozenSet, Iterable, List, Optional, Tuple, Union
)

Position = Tuple[int, int]


def _positions(cells: Iterable[Position]) -> List[List[int]]:
    return [list(p) for p in sorted(cells)]


# ---------------------------------------------------------------------------
# Sorting steps
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Compare:
    """Two positions are being compared."""

    kind: ClassVar[str] = "compare"

    indices: Tuple[int, ...]
    array:   Tuple[int, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "indices": list(self.indices), "array": list(self.array)}


@dataclass(frozen=True)
class Swap:
    """
    The array was written to.  Bubble / quick sort exchange two positions;
    merge sort records the single output position it just filled.
    """

    kind: ClassVar[str] = "swap"

    indices: Tuple[int, ...]
    array:   Tuple[int, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "indices": list(self.indices), "array": list(self.array)}


@dataclass(frozen=True)
class Sorted:
    """Positions that have reached their final place."""

    kind: ClassVar[str] = "sorted"

    indices: Tuple[int, ...]
    array:   Tuple[int, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "indices": list(self.indices), "array": list(self.array)}


# ---------------------------------------------------------------------------
# Pathfinding steps
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Explore:
    kind: ClassVar[str] = "explore"

    position: Position
    visited:  FrozenSet[Position]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type":     self.kind,
            "position": list(self.position),
            "visited":  _positions(self.visited),
        }


@dataclass(frozen=True)
class Path:
    """Terminal step: the full path from start to end, both inclusive."""

    kind: ClassVar[str] = "path"

    path: Tuple[Position, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "path": [list(p) for p in self.path]}


# ---------------------------------------------------------------------------
# Graph steps
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Visit:
    kind: ClassVar[str] = "visit"

    node:        int
    visited:     FrozenSet[int]
    visit_order: Tuple[int, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type":       self.kind,
            "node":       self.node,
            "visited":    sorted(self.visited),
            "visitOrder": list(self.visit_order),
        }


@dataclass(frozen=True)
class Finish:
    """
    A node's DFS call returned.

    `has_cycle` is None for topological sort (which never looks for
    cycles) and, for cycle detection, the flag as it stood when this node
    finished, not the final answer of the run.
    """

    kind: ClassVar[str] = "finish"

    node:      int
    visited:   FrozenSet[int]
    result:    Tuple[int, ...]
    has_cycle: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type":     self.kind,
            "node":     self.node,
            "visited":  sorted(self.visited),
            "result":   list(self.result),
            "hasCycle": self.has_cycle,
        }


@dataclass(frozen=True)
class Cycle:
    """A back edge into `node` (currently on the DFS stack) was found."""

    kind: ClassVar[str] = "cycle"

    node:      int
    has_cycle: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "node": self.node, "hasCycle": self.has_cycle}


SortStep        = Union[Compare, Swap, Sorted]
PathfindingStep = Union[Explore, Path]
GraphStep       = Union[Visit, Finish, Cycle]
Step            = Union[SortStep, PathfindingStep, GraphStep]

STEP_TYPES: Dict[str, type] = {
    cls.kind: cls for cls in (Compare, Swap, Sorted, Explore, Path, Visit, Finish, Cycle)
}


# ---------------------------------------------------------------------------
# Deserialisation (stored traces → Step objects)
# ---------------------------------------------------------------------------
def step_from_dict(data: Dict[str, Any]) -> Step:
    """Inverse of `to_dict()`.  Raises ValueError on an unknown type."""
    kind = data.get("type")
    if kind not in STEP_TYPES:
        raise ValueError(f"Unknown step type: {kind!r}")

    if kind in ("compare", "swap", "sorted"):
        return STEP_TYPES[kind](indices=tuple(data["indices"]), array=tuple(data["array"]))
    if kind == "explore":
        return Explore(
            position=tuple(data["position"]),
            visited=frozenset(tuple(p) for p in data["visited"]),
        )
    if kind == "path":
        return Path(path=tuple(tuple(p) for p in data["path"]))
    if kind == "visit":
        return Visit(
            node=data["node"],
            visited=frozenset(data["visited"]),
            visit_order=tuple(data["visitOrder"]),
        )
    if kind == "finish":
        return Finish(
            node=data["node"],
            visited=frozenset(data["visited"]),
            result=tuple(data["result"]),
            has_cycle=data.get("hasCycle"),
        )
    return Cycle(node=data["node"], has_cycle=data.get("hasCycle", True))
