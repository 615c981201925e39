"""Minimum spanning forest (Kruskal) and the union-find it runs on."""
import logging
from typing import List

from .graph import Graph
from .types import Edge

log = logging.getLogger(__name__)


class UnionFind:
    """Disjoint sets over ``0..size-1`` with path compression and union by rank."""

    def __init__(self, size: int):
        self.parent = list(range(size))
        self.rank = [0] * size

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # Path compression
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``. Returns False if already joined."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1
        return True


def kruskal_mst(graph: Graph) -> List[Edge]:
    """Minimum spanning forest as an edge list.

    Edge direction is ignored. Edges are considered lightest first (ties in
    input order); an edge is kept only if it joins two different trees.
    """
    order = sorted(range(len(graph.edges)), key=lambda e: graph.edges[e].weight)
    uf = UnionFind(len(graph.vertices))
    tree: List[Edge] = []

    for e in order:
        a, b = graph.endpoints(e)
        if uf.union(a, b):
            tree.append(graph.edges[e])

    log.debug("kruskal_mst: kept %d of %d edges", len(tree), len(graph.edges))
    return tree


def total_weight(edges: List[Edge]) -> float:
    return sum(e.weight for e in edges)
