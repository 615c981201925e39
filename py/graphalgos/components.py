"""Strongly connected components and weak connectivity."""
import logging
from dataclasses import replace
from typing import Dict, List, Set

from .graph import Graph
from .spanning import UnionFind
from .traversal import dfs, dfs_undirected
from .types import Vertex

log = logging.getLogger(__name__)


def find_scc(graph: Graph) -> List[Vertex]:
    """Find strongly connected components (Kosaraju's algorithm).

    Steps:
      1. transpose the graph;
      2. DFS the transpose to rank every vertex by finish time;
      3. order the vertices by that rank, latest finish first;
      4. label-DFS the original edges over that order.

    Vertices sharing an ``scc_num`` are mutually reachable. Labels are
    numbered in condensation order: an edge between two components always
    goes from a lower ``scc_num`` to a higher one. Returns the vertices in
    the order of step 3.
    """
    if not graph.vertices:
        return []

    ranked = dfs(graph.reversed())
    ordered = sorted(ranked, key=lambda v: v.post_rank, reverse=True)
    labelled = dfs_undirected(graph.with_vertices(ordered))

    # Step 4 discovers components sink-first; flip to topological order.
    count = max(v.scc_num for v in labelled)
    log.debug("find_scc: %d components over %d vertices", count, len(labelled))
    return [replace(v, scc_num=count + 1 - v.scc_num) for v in labelled]


def strongly_connected_components(graph: Graph) -> List[List[Vertex]]:
    """Group bare vertices by SCC, in condensation order, each sorted by id."""
    groups: Dict[int, List[Vertex]] = {}
    for v in find_scc(graph):
        groups.setdefault(v.scc_num, []).append(v.bare())
    return [sorted(groups[k], key=lambda v: v.id) for k in sorted(groups)]


def connected_components(graph: Graph) -> List[List[Vertex]]:
    """Weakly connected components, ignoring edge direction."""
    uf = UnionFind(len(graph.vertices))
    for e in range(len(graph.edges)):
        a, b = graph.endpoints(e)
        uf.union(a, b)

    groups: Dict[int, List[Vertex]] = {}
    for i, v in enumerate(graph.vertices):
        groups.setdefault(uf.find(i), []).append(v.bare())

    components = [sorted(g, key=lambda v: v.id) for g in groups.values()]
    components.sort(key=lambda g: g[0].id)
    return components


def is_strongly_connected(graph: Graph) -> bool:
    """True when every vertex reaches every other (vacuously for empty graphs)."""
    labels: Set[int] = {v.scc_num for v in find_scc(graph)}
    return len(labels) <= 1
