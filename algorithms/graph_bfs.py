"""
graph_bfs.py — Breadth-First Search over a graph
==================================================
FIFO queue, nodes marked visited when enqueued.  Neighbours come in
adjacency-list order (edge insertion order; an undirected edge is listed
under both endpoints).

One VISIT step per dequeue.  The `visited` snapshot therefore already
contains the nodes waiting in the queue; `visit_order` holds only the
ones dequeued so far.
"""

from collections import deque
from typing import Deque, Dict, Generator, List, Union

from algorithms.step import GraphStep, Visit
from structures.graph import Graph


PSEUDOCODE: List[str] = [
    "def BFS(graph, start):",                           # 0
    "    queue ← [start];  visited ← {start}",          # 1
    "    while queue is not empty:",                    # 2
    "        node ← queue.dequeue();  order.append(node)",  # 3
    "        for nbr in adj(node):",                    # 4
    "            if nbr not visited:",                  # 5
    "                visited.add(nbr)",                 # 6
    "                queue.enqueue(nbr)",               # 7
]


def graph_bfs(
    graph: Union[Graph, Dict],
    start_node: int,
) -> Generator[GraphStep, None, None]:

    adj         = Graph.coerce(graph).adjacency(directed=False)
    queue:       Deque[int] = deque([start_node])
    visited:     set        = {start_node}
    visit_order: List[int]  = []

    while queue:
        node = queue.popleft()
        visit_order.append(node)
        yield Visit(node=node, visited=frozenset(visited), visit_order=tuple(visit_order))

        for nbr in adj.get(node, []):
            if nbr not in visited:
                visited.add(nbr)
                queue.append(nbr)
