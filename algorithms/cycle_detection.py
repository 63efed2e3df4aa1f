"""
cycle_detection.py — Cycle Detection (three-colour DFS)
=========================================================
Edges are read as directed u → v.  Each node is

    WHITE  – not seen yet
    GREY   – on the current DFS path ("visiting")
    BLACK  – finished

An edge into a GREY node is a back edge, i.e. a cycle.

Yields:
  1. VISIT on entry (node turns GREY)
  2. CYCLE for every back edge; `node` is the GREY node the edge points at
  3. FINISH on exit (node turns BLACK) with `has_cycle` as it stands NOW

Nodes that finish before the first back edge is found carry
has_cycle=False even if the run later finds a cycle.  Only a CYCLE step
(or the last FINISH) answers "does the graph have a cycle?".
"""

from typing import Dict, Generator, List, Union

from algorithms.step import Cycle, Finish, GraphStep, Visit
from structures.graph import Graph


WHITE, GREY, BLACK = 0, 1, 2

PSEUDOCODE: List[str] = [
    "def DetectCycle(graph):",                          # 0
    "    colour ← {v: WHITE for v in V}",               # 1
    "    for node in graph.nodes:",                     # 2
    "        if colour[node] = WHITE: Visit(node)",     # 3
    "def Visit(node):",                                 # 4
    "    colour[node] ← GREY",                          # 5
    "    for nbr in out(node):",                        # 6
    "        if colour[nbr] = GREY: cycle found",       # 7
    "        elif colour[nbr] = WHITE: Visit(nbr)",     # 8
    "    colour[node] ← BLACK",                         # 9
]


def detect_cycle(graph: Union[Graph, Dict]) -> Generator[GraphStep, None, None]:

    adj    = Graph.coerce(graph).adjacency(directed=True)
    colour: Dict[int, int] = {n: WHITE for n in adj}

    visit_order: List[int] = []
    finished:    List[int] = []
    has_cycle = False

    def visit(node: int) -> Generator[GraphStep, None, None]:
        nonlocal has_cycle
        colour[node] = GREY
        visit_order.append(node)
        yield Visit(node=node, visited=_seen(colour), visit_order=tuple(visit_order))

        for nbr in adj[node]:
            if colour[nbr] == GREY:
                has_cycle = True
                yield Cycle(node=nbr, has_cycle=True)
            elif colour[nbr] == WHITE:
                yield from visit(nbr)

        colour[node] = BLACK
        finished.append(node)
        yield Finish(
            node=node,
            visited=_seen(colour),
            result=tuple(finished),
            has_cycle=has_cycle,
        )

    for root in adj:
        if colour[root] == WHITE:
            yield from visit(root)


def _seen(colour: Dict[int, int]) -> frozenset:
    return frozenset(n for n, c in colour.items() if c != WHITE)
