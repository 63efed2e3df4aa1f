"""
topological_sort.py — Topological Sort (DFS post-order)
=========================================================
Edges are read as directed u → v.  Recursive DFS; once every descendant
of a node has finished, the node is PREPENDED to the result, so on a DAG
every edge u → v ends up with u before v.

Yields:
  1. VISIT on entry to a node
  2. FINISH after the node is prepended  →  snapshot of the result so far

Every node is used as a DFS root if still unvisited (`start_node` first
when given, then the rest in node order), so disconnected parts and
multiple sources are all covered.

No cycle check: a cyclic graph still produces an ordering, just not a
topological one.  Use cycle detection to find out.
"""

from typing import Dict, Generator, List, Optional, Union

from algorithms.step import Finish, GraphStep, Visit
from structures.graph import Graph


PSEUDOCODE: List[str] = [
    "def TopologicalSort(graph):",                      # 0
    "    for node in graph.nodes:",                     # 1
    "        if node not visited: Visit(node)",         # 2
    "def Visit(node):",                                 # 3
    "    visited.add(node)",                            # 4
    "    for nbr in out(node):",                        # 5
    "        if nbr not visited: Visit(nbr)",           # 6
    "    result.prepend(node)",                         # 7
]


def topological_sort(
    graph: Union[Graph, Dict],
    start_node: Optional[int] = None,
) -> Generator[GraphStep, None, None]:
    """
    Args:
        graph      : The graph; edges are followed u → v only.
        start_node : Optional first root.  None → roots in node order.
    """

    adj         = Graph.coerce(graph).adjacency(directed=True)
    visited:     set       = set()
    visit_order: List[int] = []
    result:      List[int] = []

    def visit(node: int) -> Generator[GraphStep, None, None]:
        visited.add(node)
        visit_order.append(node)
        yield Visit(node=node, visited=frozenset(visited), visit_order=tuple(visit_order))

        for nbr in adj.get(node, []):
            if nbr not in visited:
                yield from visit(nbr)

        result.insert(0, node)
        yield Finish(node=node, visited=frozenset(visited), result=tuple(result))

    roots = list(adj)
    if start_node is not None:
        roots.insert(0, start_node)

    for root in roots:
        if root not in visited:
            yield from visit(root)
