"""2-SAT solving through the implication graph's strongly connected components.

A literal is a vertex id: ``x`` for a variable, ``-x`` for its negation.
For a clause ``(a or b)`` the implication graph holds the edges
``not a -> b`` and ``not b -> a``. The formula is unsatisfiable exactly when
some variable shares a component with its own negation.
"""
import logging
from typing import Dict, Mapping, Optional, Sequence, Union

from .components import find_scc
from .graph import Graph
from .types import CNF, Edge, Vertex, VertexRef

log = logging.getLogger(__name__)

Formula = Union[CNF, Sequence[Sequence[VertexRef]]]


def implication_graph(cnf: CNF) -> Graph:
    """One vertex per literal (both polarities of every variable) plus the implications."""
    vertices = []
    for var in cnf.variables():
        vertices.append(Vertex(var))
        vertices.append(Vertex(-var))

    edges = []
    for a, b in cnf:
        edges.append(Edge(a.complement(), b, 0))
        edges.append(Edge(b.complement(), a, 0))
    return Graph(tuple(vertices), tuple(edges))


def two_sat(formula: Formula) -> Optional[Dict[int, bool]]:
    """Solve a 2-CNF formula.

    Returns a mapping from variable id to its value, or ``None`` when the
    formula is unsatisfiable. Components are visited from sink to source and
    every literal whose variable is still open is made true.
    """
    cnf = formula if isinstance(formula, CNF) else CNF(formula)
    labelled = find_scc(implication_graph(cnf))
    component = {v.id: v.scc_num for v in labelled}

    for var in cnf.variables():
        if component[var] == component[-var]:
            log.debug("two_sat: x%d and its negation share component %d",
                      var, component[var])
            return None

    assignment: Dict[int, bool] = {}
    for v in sorted(labelled, key=lambda v: v.scc_num, reverse=True):
        var = abs(v.id)
        if var not in assignment:
            assignment[var] = v.id > 0
    return dict(sorted(assignment.items()))


def evaluate(formula: Formula, assignment: Mapping[int, bool]) -> bool:
    """True if every clause has at least one true literal under ``assignment``."""
    cnf = formula if isinstance(formula, CNF) else CNF(formula)
    return all(
        any(assignment[abs(lit.id)] == (lit.id > 0) for lit in clause)
        for clause in cnf
    )
