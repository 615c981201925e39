"""Directed-graph algorithms - public API."""
from .types import (
    UNREACHED, Vertex, Edge, CNF,
    GraphError, UnknownVertexError, ClauseError, NegativeWeightError,
    NegativeCycleError, CapacityError,
)
from .graph import Graph
from .traversal import dfs, dfs_undirected, bfs
from .components import (
    find_scc, strongly_connected_components, connected_components,
    is_strongly_connected,
)
from .satisfiability import two_sat, evaluate, implication_graph
from .paths import (
    dijkstra, dijkstra_distances, shortest_path, shortest_path_tree,
    bellman_ford, floyd_warshall,
)
from .spanning import UnionFind, kruskal_mst, total_weight
from .flow import FlowResult, residual_network, edmonds_karp, min_cut

__all__ = [
    # Types
    'UNREACHED', 'Vertex', 'Edge', 'CNF', 'Graph',
    'GraphError', 'UnknownVertexError', 'ClauseError', 'NegativeWeightError',
    'NegativeCycleError', 'CapacityError',
    # Traversal and connectivity
    'dfs', 'dfs_undirected', 'bfs',
    'find_scc', 'strongly_connected_components', 'connected_components',
    'is_strongly_connected',
    # Satisfiability
    'two_sat', 'evaluate', 'implication_graph',
    # Shortest paths
    'dijkstra', 'dijkstra_distances', 'shortest_path', 'shortest_path_tree',
    'bellman_ford', 'floyd_warshall',
    # Spanning tree
    'UnionFind', 'kruskal_mst', 'total_weight',
    # Max flow
    'FlowResult', 'residual_network', 'edmonds_karp', 'min_cut',
]
