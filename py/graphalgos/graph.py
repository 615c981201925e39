"""Graph construction and read-only accessors."""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .types import Edge, GraphError, UnknownVertexError, Vertex, VertexRef, vertex_id


EdgeLike = Union[Edge, Tuple[VertexRef, VertexRef], Tuple[VertexRef, VertexRef, float]]


@dataclass(frozen=True)
class Graph:
    """Immutable snapshot of vertices and edges.

    Vertices are addressed by their position in ``vertices``; every edge is
    bound to the graph's own vertex values.
    """
    vertices: Tuple[Vertex, ...]
    edges: Tuple[Edge, ...]
    _index: Dict[int, int] = field(init=False, repr=False, compare=False)
    _adj: Tuple[Tuple[int, ...], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "vertices", tuple(self.vertices))
        index: Dict[int, int] = {}
        for i, v in enumerate(self.vertices):
            if v.id in index:
                raise GraphError(f"Duplicate vertex id: {v.id}")
            index[v.id] = i

        adj: List[List[int]] = [[] for _ in self.vertices]
        bound = []
        for e, edge in enumerate(self.edges):
            for end in (edge.from_vertex, edge.to_vertex):
                if end.id not in index:
                    raise UnknownVertexError(
                        f"Edge {e} references unknown vertex {end.id}"
                    )
            src = index[edge.from_vertex.id]
            adj[src].append(e)
            bound.append(Edge(self.vertices[src],
                              self.vertices[index[edge.to_vertex.id]],
                              edge.weight))

        object.__setattr__(self, "edges", tuple(bound))
        object.__setattr__(self, "_index", index)
        object.__setattr__(self, "_adj", tuple(tuple(a) for a in adj))

    @classmethod
    def from_edges(cls, edges: Iterable[EdgeLike],
                   vertices: Optional[Iterable[VertexRef]] = None) -> "Graph":
        """Build a graph from an edge list.

        Without ``vertices`` the vertex set is the unique endpoint ids in
        ascending order, so indexing is the same on every run.
        """
        normalized = [_to_edge(e) for e in edges]
        if vertices is None:
            ids = sorted({v.id for e in normalized
                          for v in (e.from_vertex, e.to_vertex)})
            verts = tuple(Vertex(i) for i in ids)
        else:
            verts = tuple(v if isinstance(v, Vertex) else Vertex(int(v))
                          for v in vertices)
        return cls(verts, tuple(normalized))

    def __len__(self) -> int:
        return len(self.vertices)

    def index_of(self, ref: VertexRef) -> int:
        """Position of a vertex, looked up by id."""
        vid = vertex_id(ref)
        try:
            return self._index[vid]
        except KeyError:
            raise UnknownVertexError(f"Vertex {vid} is not in the graph") from None

    def has_vertex(self, ref: VertexRef) -> bool:
        return vertex_id(ref) in self._index

    def out_edges(self, i: int) -> Tuple[int, ...]:
        """Indices of edges leaving the vertex at position ``i``, in edge order."""
        return self._adj[i]

    def endpoints(self, e: int) -> Tuple[int, int]:
        """Vertex positions of edge ``e``."""
        edge = self.edges[e]
        return self._index[edge.from_vertex.id], self._index[edge.to_vertex.id]

    def reversed(self) -> "Graph":
        """Transposed graph: same vertices, every edge flipped."""
        return Graph(self.vertices, tuple(e.reversed() for e in self.edges))

    def with_vertices(self, vertices: Sequence[Vertex]) -> "Graph":
        """Same edges over a reordered or re-annotated vertex sequence."""
        return Graph(tuple(vertices), self.edges)

    def with_weights(self, weights: Sequence[float]) -> "Graph":
        """Same topology with one new weight per edge."""
        if len(weights) != len(self.edges):
            raise GraphError(
                f"Expected {len(self.edges)} weights, got {len(weights)}"
            )
        return Graph(self.vertices, tuple(
            Edge(e.from_vertex, e.to_vertex, w) for e, w in zip(self.edges, weights)
        ))


def _to_edge(item: EdgeLike) -> Edge:
    if isinstance(item, Edge):
        return item
    if len(item) == 2:
        u, v = item
        weight = 1
    elif len(item) == 3:
        u, v, weight = item
    else:
        raise GraphError(f"Edge must be (from, to) or (from, to, weight): {item!r}")
    return Edge(Vertex(vertex_id(u)), Vertex(vertex_id(v)), weight)
