"""Maximum flow (Edmonds-Karp) on residual networks."""
import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .graph import Graph
from .paths import shortest_path_tree
from .types import UNREACHED, CapacityError, Edge, Vertex, VertexRef

log = logging.getLogger(__name__)

FORWARD = 1
BACKWARD = -1


@dataclass
class FlowResult:
    """Outcome of a max-flow run.

    ``graph`` is a copy of the input graph whose edge weights are the final
    flows; ``flows`` lists the same values by edge index.
    """
    value: float
    flows: List[float]
    graph: Graph


def residual_network(graph: Graph, capacities: Sequence[float],
                     flows: Sequence[float]) -> Tuple[Graph, List[Tuple[int, int]]]:
    """Build the residual network of ``graph`` for the given flows.

    Each original edge with capacity ``c`` and flow ``f`` contributes a
    forward edge of capacity ``c - f`` and a backward edge of capacity ``f``,
    each only when positive. The second value pairs every residual edge with
    the original edge index and ``FORWARD``/``BACKWARD``.
    """
    edges: List[Edge] = []
    origins: List[Tuple[int, int]] = []
    for e, edge in enumerate(graph.edges):
        c, f = capacities[e], flows[e]
        if c - f > 0:
            edges.append(Edge(edge.from_vertex, edge.to_vertex, c - f))
            origins.append((e, FORWARD))
        if f > 0:
            edges.append(Edge(edge.to_vertex, edge.from_vertex, f))
            origins.append((e, BACKWARD))
    return Graph(graph.vertices, tuple(edges)), origins


def edmonds_karp(graph: Graph, capacities: Sequence[float],
                 source: VertexRef, sink: VertexRef) -> FlowResult:
    """Maximum flow from ``source`` to ``sink``.

    Edge weights of ``graph`` are the starting flows (normally all 0) and
    ``capacities`` holds one capacity per edge. Each round rebuilds the
    residual network, finds a fewest-hop augmenting path and pushes its
    bottleneck; the loop ends when the sink is unreachable.
    """
    s, t = _check_network(graph, capacities, source, sink)
    flows = [edge.weight for edge in graph.edges]
    rounds = 0

    while True:
        residual, origins = residual_network(graph, capacities, flows)
        dist, prev_edge = shortest_path_tree(
            residual, graph.vertices[s], unit_cost=True)
        if dist[t] == UNREACHED:
            break

        path = []
        v = t
        while v != s:
            r = prev_edge[v]
            path.append(r)
            v, _ = residual.endpoints(r)

        bottleneck = min(residual.edges[r].weight for r in path)
        for r in path:
            e, direction = origins[r]
            flows[e] += direction * bottleneck

        rounds += 1
        log.debug("edmonds_karp: round %d pushed %s along %d edges",
                  rounds, bottleneck, len(path))

    value = _net_outflow(graph, flows, s)
    log.debug("edmonds_karp: max flow %s after %d augmentations", value, rounds)
    return FlowResult(value=value, flows=flows, graph=graph.with_weights(flows))


def min_cut(graph: Graph, capacities: Sequence[float],
            source: VertexRef, sink: VertexRef) -> Tuple[List[Vertex], float]:
    """Source side of a minimum cut and the cut's capacity.

    The source side is everything still reachable from the source in the
    residual network of a maximum flow.
    """
    result = edmonds_karp(graph, capacities, source, sink)
    residual, _ = residual_network(graph, capacities, result.flows)
    dist, _ = shortest_path_tree(residual, source, unit_cost=True)
    side = {i for i, d in enumerate(dist) if d != UNREACHED}

    capacity = 0
    for e in range(len(graph.edges)):
        u, v = graph.endpoints(e)
        if u in side and v not in side:
            capacity += capacities[e]
    return [graph.vertices[i] for i in sorted(side)], capacity


def _check_network(graph: Graph, capacities: Sequence[float],
                   source: VertexRef, sink: VertexRef) -> Tuple[int, int]:
    if len(capacities) != len(graph.edges):
        raise CapacityError(
            f"Expected {len(graph.edges)} capacities, got {len(capacities)}"
        )
    for e, (edge, c) in enumerate(zip(graph.edges, capacities)):
        if c < 0:
            raise CapacityError(f"Edge {e} has negative capacity {c}")
        if not 0 <= edge.weight <= c:
            raise CapacityError(
                f"Edge {e} starts with flow {edge.weight} outside [0, {c}]"
            )
    s, t = graph.index_of(source), graph.index_of(sink)
    if s == t:
        raise CapacityError("Source and sink must be different vertices")

    balance = [0] * len(graph.vertices)
    for e, edge in enumerate(graph.edges):
        u, v = graph.endpoints(e)
        balance[u] -= edge.weight
        balance[v] += edge.weight
    for i, b in enumerate(balance):
        if i not in (s, t) and b != 0:
            raise CapacityError(
                f"Starting flow is not conserved at vertex {graph.vertices[i].id}: "
                f"inflow minus outflow is {b}"
            )
    return s, t


def _net_outflow(graph: Graph, flows: Sequence[float], s: int) -> float:
    value = 0
    for e, f in enumerate(flows):
        u, v = graph.endpoints(e)
        if u == s:
            value += f
        if v == s:
            value -= f
    return value
