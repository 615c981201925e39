"""Type definitions for the graph algorithms engine."""
import math
from dataclasses import dataclass
from functools import total_ordering
from typing import List, Sequence, Tuple, Union


# Distance reported for vertices that cannot be reached.
UNREACHED = math.inf


@total_ordering
@dataclass(frozen=True)
class Vertex:
    """A vertex id plus the scratch fields written by traversals.

    Equality covers every field, so an annotated vertex is a different value
    from the bare one. Ordering is (pre_rank, post_rank, scc_num, id).
    """
    id: int
    pre_rank: int = 0
    post_rank: int = 0
    scc_num: int = 0

    def sort_key(self) -> Tuple[int, int, int, int]:
        return (self.pre_rank, self.post_rank, self.scc_num, self.id)

    def __lt__(self, other: "Vertex") -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def bare(self) -> "Vertex":
        """Same vertex with all scratch fields reset."""
        return Vertex(self.id)

    def complement(self) -> "Vertex":
        """The opposite literal when the vertex is used in a CNF formula."""
        if self.id == 0:
            raise ClauseError("Literal id cannot be 0")
        return Vertex(-self.id)


VertexRef = Union[Vertex, int]


def vertex_id(ref: VertexRef) -> int:
    """Id of a vertex given either as a Vertex or as a plain int."""
    if isinstance(ref, Vertex):
        return ref.id
    return int(ref)


@dataclass(frozen=True)
class Edge:
    """Directed edge with a weight (distance, flow or ignored)."""
    from_vertex: Vertex
    to_vertex: Vertex
    weight: float = 1

    def reversed(self) -> "Edge":
        return Edge(self.to_vertex, self.from_vertex, self.weight)


class CNF:
    """A 2-CNF formula: every clause holds exactly two literals."""

    def __init__(self, formula: Sequence[Sequence[VertexRef]]):
        clauses: List[Tuple[Vertex, Vertex]] = []
        for i, clause in enumerate(formula):
            if len(clause) != 2:
                raise ClauseError(
                    f"Clause {i} has {len(clause)} literals, expected exactly 2"
                )
            pair = tuple(Vertex(vertex_id(lit)) for lit in clause)
            for literal in pair:
                if literal.id == 0:
                    raise ClauseError(f"Clause {i} contains literal 0")
            clauses.append(pair)
        self.clauses = clauses

    def __len__(self) -> int:
        return len(self.clauses)

    def __iter__(self):
        return iter(self.clauses)

    def variables(self) -> List[int]:
        """Variable ids (absolute literal ids) in ascending order."""
        return sorted({abs(lit.id) for clause in self.clauses for lit in clause})


# Errors

class GraphError(Exception):
    """Base error for graph algorithms."""
    pass


class UnknownVertexError(GraphError):
    """An edge endpoint or a start vertex is not part of the graph."""
    pass


class ClauseError(GraphError):
    """Malformed 2-SAT clause."""
    pass


class NegativeWeightError(GraphError):
    """Negative edge weight where only non-negative weights are allowed."""
    pass


class NegativeCycleError(GraphError):
    """Shortest distances are undefined because of a negative cycle."""
    pass


class CapacityError(GraphError):
    """Invalid capacities or flows for a flow network."""
    pass
