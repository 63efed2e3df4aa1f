"""
dfs.py — Depth-First Search
=============================
Generator-based DFS using an explicit stack (no Python recursion limit issues).

Yields a VISIT step per node actually visited (not per pop: a node can
be pushed several times before it is popped, later pops are skipped).

Unvisited neighbours are pushed in REVERSE adjacency order so that they
pop in the original order.  The visiting order shown to the user
depends on this.
"""

from typing import Dict, Generator, List, Union

from algorithms.step import GraphStep, Visit
from structures.graph import Graph


PSEUDOCODE: List[str] = [
    "def DFS(graph, start):",                           # 0
    "    stack ← [start]",                              # 1
    "    while stack is not empty:",                    # 2
    "        node ← stack.pop()",                       # 3
    "        if node in visited: continue",             # 4
    "        visited.add(node);  order.append(node)",   # 5
    "        for nbr in reversed(adj(node)):",          # 6
    "            if nbr not visited: stack.push(nbr)",  # 7
]


def dfs(
    graph: Union[Graph, Dict],
    start_node: int,
) -> Generator[GraphStep, None, None]:
    """
    Args:
        graph      : The graph; edges are followed in both directions.
        start_node : Root of the traversal.
    """

    adj         = Graph.coerce(graph).adjacency(directed=False)
    stack       = [start_node]
    visited:     set       = set()
    visit_order: List[int] = []

    while stack:
        node = stack.pop()
        if node in visited:
            continue

        visited.add(node)
        visit_order.append(node)
        yield Visit(node=node, visited=frozenset(visited), visit_order=tuple(visit_order))

        for nbr in reversed(adj.get(node, [])):
            if nbr not in visited:
                stack.append(nbr)
