"""
graph.py — Graph Container & Generator
=======================================
The graph the traversal algorithms walk over.

Responsibilities:
  1. Hold node ids (0 … N-1) and edges as (u, v) pairs   (insertion order kept)
  2. Build adjacency lists, undirected or directed        (adjacency)
  3. Serialisation round-trip                             (to_dict / from_dict)
  4. Random connected-graph factory                       (create_graph)

Design decisions:
  - Edges are stored once, in the order they were added.  Adjacency lists
    are derived on demand, so the same Graph serves DFS / BFS (both
    directions) and topological sort / cycle detection (u → v only).
  - Neighbour order is edge insertion order.  DFS and BFS visiting order
    depends on it, so it is never sorted.
"""

import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set, Tuple, Union

Edge = Tuple[int, int]


@dataclass
class Graph:
    """
    Attributes:
        nodes : Node ids in display order.
        edges : (u, v) pairs.  Read as u → v by the directed algorithms.
    """

    nodes: List[int]  = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def adjacency(self, directed: bool = False) -> Dict[int, List[int]]:
        """
        {node_id: [neighbour, …]} in edge insertion order.
        Undirected: both endpoints get each edge appended.
        """
        adj: Dict[int, List[int]] = {n: [] for n in self.nodes}
        for u, v in self.edges:
            adj.setdefault(u, []).append(v)
            if directed:
                adj.setdefault(v, [])
            else:
                adj.setdefault(v, []).append(u)
        return adj

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    def node_ids(self) -> List[int]:
        """Distinct ids from `nodes`, then any edge endpoint not listed there."""
        return list(self.adjacency(directed=True))

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [{"id": n, "label": str(n)} for n in self.nodes],
            "edges": [[u, v] for u, v in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        """
        Accepts nodes either as plain ids or as {"id": …} dicts, and edges
        as two-element lists.  Raises ValueError on anything else.
        """
        if not isinstance(data, dict):
            raise ValueError("Graph must be an object with 'nodes' and 'edges'")

        nodes: List[int] = []
        for nd in data.get("nodes", []):
            nodes.append(int(nd["id"]) if isinstance(nd, dict) else int(nd))

        edges: List[Edge] = []
        for ed in data.get("edges", []):
            if len(ed) != 2:
                raise ValueError(f"Edge must have exactly two endpoints: {ed!r}")
            edges.append((int(ed[0]), int(ed[1])))

        return cls(nodes=nodes, edges=edges)

    @classmethod
    def coerce(cls, graph: Union["Graph", Dict[str, Any]]) -> "Graph":
        """Graph objects pass through; dicts go through from_dict."""
        if isinstance(graph, Graph):
            return graph
        return cls.from_dict(graph)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def create_graph(
    node_count: int = 15,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> Graph:
    """
    Random connected graph.

    1. Spanning tree: every node i < N-1 links to a random j in (i, N).
       Following those links from any node ends at N-1, so the tree
       connects everything.
    2. Extra edges: each node gets 1-3 attempts at linking to a random
       other node; pairs already present (either direction) are skipped.
    """
    rng = rng or random.Random(seed)
    nodes = list(range(node_count))
    edges: List[Edge] = []
    seen:  Set[Tuple[int, int]] = set()

    for i in range(node_count - 1):
        j = i + 1 + rng.randrange(node_count - i - 1)
        edges.append((i, j))
        seen.add((i, j))

    for i in range(node_count):
        for _ in range(rng.randint(1, 3)):
            target = rng.randrange(node_count)
            if target == i:
                continue
            key = (min(i, target), max(i, target))
            if key not in seen:
                seen.add(key)
                edges.append((i, target))

    return Graph(nodes=nodes, edges=edges)
