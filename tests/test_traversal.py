"""Tests for graph traversal algorithms: DFS and BFS."""
import math

import pytest

from graphalgos import UNREACHED, Graph, UnknownVertexError, Vertex, bfs, dfs, dfs_undirected


def ranks(vertices):
    return {v.id: (v.pre_rank, v.post_rank) for v in vertices}


class TestDFS:
    """Tests for depth-first search."""

    def test_dfs_single_vertex(self):
        """A lone vertex is discovered at 1 and finished at 2."""
        g = Graph.from_edges([], [1])
        assert ranks(dfs(g)) == {1: (1, 2)}

    def test_dfs_clock_shared_by_pre_and_post(self):
        """Pre and post ranks come from one clock, branches in edge order."""
        g = Graph.from_edges([(1, 2), (2, 3), (1, 4)], [1, 2, 3, 4, 5])
        assert ranks(dfs(g)) == {
            1: (1, 8),
            2: (2, 5),
            3: (3, 4),
            4: (6, 7),
            5: (9, 10),
        }

    def test_dfs_cycle(self):
        """Visited vertices are not re-entered."""
        g = Graph.from_edges([(1, 2), (2, 1)])
        assert ranks(dfs(g)) == {1: (1, 4), 2: (2, 3)}

    def test_dfs_keeps_graph_order(self):
        """Output follows the input vertex order."""
        g = Graph.from_edges([(3, 1)], [3, 1, 2])
        assert [v.id for v in dfs(g)] == [3, 1, 2]

    def test_dfs_does_not_touch_input(self):
        """Annotated vertices are new values; the graph keeps bare ones."""
        g = Graph.from_edges([(1, 2)])
        result = dfs(g)
        assert result[0] != g.vertices[0]
        assert g.vertices[0] == Vertex(1)

    def test_dfs_nesting(self):
        """Descendants finish before their ancestors."""
        g = Graph.from_edges([(1, 2), (2, 3), (3, 4)])
        r = {v.id: v for v in dfs(g)}
        for parent, child in [(1, 2), (2, 3), (3, 4)]:
            assert r[parent].pre_rank < r[child].pre_rank
            assert r[child].post_rank < r[parent].post_rank

    def test_dfs_long_chain(self):
        """Deep graphs do not hit the recursion limit."""
        n = 5000
        g = Graph.from_edges([(i, i + 1) for i in range(1, n)])
        result = dfs(g)
        assert result[-1].pre_rank == n
        assert result[0].post_rank == 2 * n

    def test_dfs_empty_graph(self):
        """No vertices, nothing to rank."""
        assert dfs(Graph.from_edges([])) == []


class TestDFSUndirected:
    """Tests for the labelling DFS."""

    def test_labels_per_root(self):
        """Each new root opens the next label."""
        g = Graph.from_edges([(1, 2), (2, 3), (1, 4)], [1, 2, 3, 4, 5])
        labels = {v.id: v.scc_num for v in dfs_undirected(g)}
        assert labels == {1: 1, 2: 1, 3: 1, 4: 1, 5: 2}

    def test_follows_vertex_order(self):
        """Starting from a later root yields a separate label for it."""
        g = Graph.from_edges([(1, 2)], [2, 1])
        labels = {v.id: v.scc_num for v in dfs_undirected(g)}
        assert labels == {2: 1, 1: 2}

    def test_keeps_existing_ranks(self):
        """Pre/post ranks on the input survive labelling."""
        g = Graph.from_edges([], [Vertex(1, pre_rank=3, post_rank=4)])
        (v,) = dfs_undirected(g)
        assert (v.pre_rank, v.post_rank, v.scc_num) == (3, 4, 1)


class TestBFS:
    """Tests for breadth-first search."""

    def test_bfs_hop_distances(self):
        """Distances count hops and ignore weights."""
        g = Graph.from_edges([(1, 2, 10), (2, 3, 10), (1, 3, 99), (4, 1)])
        assert bfs(g, 1) == [0, 1, 1, UNREACHED]

    def test_bfs_unreached_is_infinite(self):
        """Unreached vertices carry the sentinel, distinct from real distances."""
        g = Graph.from_edges([(1, 2)], [1, 2, 3])
        distances = bfs(g, 2)
        assert distances[1] == 0
        assert math.isinf(distances[0]) and math.isinf(distances[2])

    def test_bfs_accepts_vertex(self):
        """Start may be given as a Vertex."""
        g = Graph.from_edges([(1, 2)])
        assert bfs(g, Vertex(1)) == [0, 1]

    def test_bfs_directed(self):
        """Edges are followed in their direction only."""
        g = Graph.from_edges([(1, 2), (3, 2)])
        assert bfs(g, 2) == [UNREACHED, 0, UNREACHED]

    def test_bfs_unknown_start(self):
        """A start vertex outside the graph is an error."""
        g = Graph.from_edges([(1, 2)])
        with pytest.raises(UnknownVertexError):
            bfs(g, 9)
