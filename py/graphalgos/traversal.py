"""Graph traversal algorithms: DFS and BFS."""
import logging
from collections import deque
from dataclasses import replace
from typing import List

from .graph import Graph
from .types import UNREACHED, Vertex, VertexRef

log = logging.getLogger(__name__)


def dfs(graph: Graph) -> List[Vertex]:
    """Depth-first search over every vertex, recording pre/post order.

    Roots are taken in vertex order and edges in edge order. A single clock
    starting at 1 numbers both discoveries and finishes. Returns the vertices
    in graph order, annotated with ``pre_rank`` and ``post_rank``.
    """
    n = len(graph.vertices)
    pre = [0] * n
    post = [0] * n
    clock = 1

    for root in range(n):
        if pre[root]:
            continue
        stack = [root]
        # Position in each stacked vertex's out-edge list
        cursor = {root: 0}

        while stack:
            current = stack[-1]
            if pre[current] == 0:
                pre[current] = clock
                clock += 1

            nxt = _next_unvisited(graph, current, cursor, pre)
            if nxt is not None:
                stack.append(nxt)
                cursor[nxt] = 0
            else:
                post[current] = clock
                clock += 1
                stack.pop()

    return [replace(v, pre_rank=pre[i], post_rank=post[i])
            for i, v in enumerate(graph.vertices)]


def dfs_undirected(graph: Graph) -> List[Vertex]:
    """Depth-first labelling of the vertices reachable from each new root.

    Vertices are taken in the order of ``graph.vertices``; each root that is
    still unlabelled opens a new ``scc_num``. Used by SCC decomposition on an
    already-ordered vertex sequence.
    """
    n = len(graph.vertices)
    label = [0] * n
    current_label = 0

    for root in range(n):
        if label[root]:
            continue
        current_label += 1
        stack = [root]
        cursor = {root: 0}

        while stack:
            current = stack[-1]
            if label[current] == 0:
                label[current] = current_label

            nxt = _next_unvisited(graph, current, cursor, label)
            if nxt is not None:
                stack.append(nxt)
                cursor[nxt] = 0
            else:
                stack.pop()

    log.debug("dfs_undirected: %d labels over %d vertices", current_label, n)
    return [replace(v, scc_num=label[i]) for i, v in enumerate(graph.vertices)]


def _next_unvisited(graph: Graph, current: int, cursor: dict, seen: List[int]):
    """Advance ``current``'s edge cursor to the first unvisited destination."""
    out = graph.out_edges(current)
    k = cursor[current]
    while k < len(out):
        _, dest = graph.endpoints(out[k])
        k += 1
        if seen[dest] == 0:
            cursor[current] = k
            return dest
    cursor[current] = k
    return None


def bfs(graph: Graph, start: VertexRef) -> List[float]:
    """Breadth-first hop distances from ``start``.

    Indexed by vertex position; ``UNREACHED`` for vertices that cannot be
    reached. Edge weights are ignored.
    """
    s = graph.index_of(start)
    distances = [UNREACHED] * len(graph.vertices)
    distances[s] = 0
    queue = deque([s])

    while queue:
        u = queue.popleft()
        for e in graph.out_edges(u):
            _, v = graph.endpoints(e)
            if distances[v] == UNREACHED:
                distances[v] = distances[u] + 1
                queue.append(v)

    return distances
