"""Shortest paths: Dijkstra, Bellman-Ford and Floyd-Warshall."""
import heapq
import logging
from typing import List, Optional, Tuple

from .graph import Graph
from .types import (
    UNREACHED, NegativeCycleError, NegativeWeightError, Vertex, VertexRef,
)

log = logging.getLogger(__name__)


def dijkstra(graph: Graph, start: VertexRef) -> List[Optional[Vertex]]:
    """Single-source shortest paths for non-negative weights.

    Returns the predecessor of every vertex on its shortest path from
    ``start`` (indexed by vertex position). The start vertex and unreached
    vertices have ``None``.
    """
    _, prev_edge = shortest_path_tree(graph, start)
    return [graph.edges[e].from_vertex if e is not None else None
            for e in prev_edge]


def dijkstra_distances(graph: Graph, start: VertexRef) -> List[float]:
    """Distances found by Dijkstra's algorithm, ``UNREACHED`` if unreachable."""
    dist, _ = shortest_path_tree(graph, start)
    return dist


def shortest_path(graph: Graph, start: VertexRef, end: VertexRef) -> List[Vertex]:
    """Vertices of a shortest path from ``start`` to ``end``; [] if none."""
    target = graph.index_of(end)
    _, prev_edge = shortest_path_tree(graph, start)
    s = graph.index_of(start)
    if target != s and prev_edge[target] is None:
        return []

    path = [graph.vertices[target]]
    current = target
    while prev_edge[current] is not None:
        current, _ = graph.endpoints(prev_edge[current])
        path.append(graph.vertices[current])
    path.reverse()
    return path


def shortest_path_tree(graph: Graph, start: VertexRef,
                       unit_cost: bool = False) -> Tuple[List[float], List[Optional[int]]]:
    """Run Dijkstra from ``start``.

    Returns ``(dist, prev_edge)`` where ``prev_edge[v]`` is the index of the
    edge used to reach ``v``. With ``unit_cost`` every edge costs 1, which
    gives fewest-hop paths and skips the weight check.
    """
    s = graph.index_of(start)
    if not unit_cost:
        for e, edge in enumerate(graph.edges):
            if edge.weight < 0:
                raise NegativeWeightError(
                    f"Edge {e} ({edge.from_vertex.id} -> {edge.to_vertex.id}) "
                    f"has negative weight {edge.weight}"
                )

    n = len(graph.vertices)
    dist = [UNREACHED] * n
    prev_edge: List[Optional[int]] = [None] * n
    done = [False] * n
    dist[s] = 0
    heap = [(0, s)]

    while heap:
        d, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True

        for e in graph.out_edges(u):
            _, v = graph.endpoints(e)
            if done[v]:
                continue
            cost = 1 if unit_cost else graph.edges[e].weight
            new_dist = d + cost
            if new_dist < dist[v]:
                dist[v] = new_dist
                prev_edge[v] = e
                heapq.heappush(heap, (new_dist, v))

    return dist, prev_edge


def bellman_ford(graph: Graph, start: VertexRef) -> List[float]:
    """Single-source distances allowing negative weights.

    Relaxes every edge for ``|V| - 1`` rounds, then checks once more:
    if any reachable edge can still be relaxed the graph has a negative
    cycle and ``NegativeCycleError`` is raised.
    """
    s = graph.index_of(start)
    n = len(graph.vertices)
    dist = [UNREACHED] * n
    dist[s] = 0
    ends = [graph.endpoints(e) for e in range(len(graph.edges))]

    for round_ in range(n - 1):
        changed = False
        for edge, (u, v) in zip(graph.edges, ends):
            if dist[u] != UNREACHED and dist[u] + edge.weight < dist[v]:
                dist[v] = dist[u] + edge.weight
                changed = True
        if not changed:
            log.debug("bellman_ford: converged after %d rounds", round_ + 1)
            break

    for edge, (u, v) in zip(graph.edges, ends):
        if dist[u] != UNREACHED and dist[u] + edge.weight < dist[v]:
            raise NegativeCycleError(
                f"Negative cycle reachable from vertex {graph.vertices[s].id} "
                f"through edge {edge.from_vertex.id} -> {edge.to_vertex.id}"
            )

    return dist


def floyd_warshall(graph: Graph) -> List[List[float]]:
    """All-pairs distances as a dense matrix indexed by vertex position.

    Round ``k`` allows paths to route through vertex ``k``. A negative entry
    on the diagonal afterwards means a negative cycle.
    """
    n = len(graph.vertices)
    dist = [[UNREACHED] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0
    for e, edge in enumerate(graph.edges):
        u, v = graph.endpoints(e)
        if edge.weight < dist[u][v]:
            dist[u][v] = edge.weight

    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            d_ik = dist[i][k]
            if d_ik == UNREACHED:
                continue
            row_i = dist[i]
            for j in range(n):
                through = d_ik + row_k[j]
                if through < row_i[j]:
                    row_i[j] = through

    for i in range(n):
        if dist[i][i] < 0:
            raise NegativeCycleError(
                f"Negative cycle through vertex {graph.vertices[i].id}"
            )
    return dist
