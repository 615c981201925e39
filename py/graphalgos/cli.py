#!/usr/bin/env python3
"""CLI wrapper for the graph algorithms.

Usage: ``python -m graphalgos <command> < args.json``. The JSON array on
stdin holds the positional arguments; a graph argument is an object
``{"edges": [[from, to, weight?], ...], "vertices": [ids]?}``.
"""
import argparse
import json
import logging
import math
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List

from . import (
    Graph, GraphError, bellman_ford, bfs, dfs, dijkstra, dijkstra_distances,
    edmonds_karp, find_scc, floyd_warshall, kruskal_mst, min_cut, shortest_path,
    strongly_connected_components, two_sat,
)

log = logging.getLogger(__name__)


def _graph(data: Dict[str, Any]) -> Graph:
    return Graph.from_edges([tuple(e) for e in data.get("edges", [])],
                            data.get("vertices"))


def _finite(values: List[float]) -> List[Any]:
    """JSON has no infinity; unreached distances become null."""
    return [None if math.isinf(v) else v for v in values]


def _shortest_path(args):
    g = _graph(args[0])
    path = shortest_path(g, args[1], args[2])
    if not path:
        return {"exists": False, "path": [], "distance": -1}
    distance = dijkstra_distances(g, args[1])[g.index_of(args[2])]
    return {"exists": True, "path": [v.id for v in path], "distance": distance}


def _two_sat(args):
    assignment = two_sat(args[0])
    if assignment is None:
        return {"satisfiable": False, "assignment": {}}
    return {"satisfiable": True,
            "assignment": {str(k): v for k, v in assignment.items()}}


def _kruskal(args):
    tree = kruskal_mst(_graph(args[0]))
    return {
        "edges": [[e.from_vertex.id, e.to_vertex.id, e.weight] for e in tree],
        "weight": sum(e.weight for e in tree),
    }


def _edmonds_karp(args):
    result = edmonds_karp(_graph(args[0]), args[1], args[2], args[3])
    return {"value": result.value, "flows": result.flows}


def _min_cut(args):
    side, capacity = min_cut(_graph(args[0]), args[1], args[2], args[3])
    return {"source_side": [v.id for v in side], "capacity": capacity}


COMMANDS = {
    'dfs': lambda args: {"vertices": [asdict(v) for v in dfs(_graph(args[0]))]},
    'bfs': lambda args: {"distances": _finite(bfs(_graph(args[0]), args[1]))},
    'find_scc': lambda args: {"vertices": [asdict(v) for v in find_scc(_graph(args[0]))]},
    'scc': lambda args: {
        "components": [[v.id for v in c]
                       for c in strongly_connected_components(_graph(args[0]))]
    },
    'two_sat': _two_sat,
    'dijkstra': lambda args: {
        "predecessors": [p.id if p is not None else None
                         for p in dijkstra(_graph(args[0]), args[1])],
        "distances": _finite(dijkstra_distances(_graph(args[0]), args[1])),
    },
    'shortest_path': _shortest_path,
    'bellman_ford': lambda args: {
        "distances": _finite(bellman_ford(_graph(args[0]), args[1]))
    },
    'floyd_warshall': lambda args: {
        "distances": [_finite(row) for row in floyd_warshall(_graph(args[0]))]
    },
    'kruskal_mst': _kruskal,
    'edmonds_karp': _edmonds_karp,
    'min_cut': _min_cut,
}


def main(argv=None):
    parser = argparse.ArgumentParser(description='Graph algorithms over JSON input')
    parser.add_argument('command', nargs='?', help='Algorithm to run')
    parser.add_argument('--log-level', type=str, help='Logging level (stderr)')
    args = parser.parse_args(argv)

    level = args.log_level or os.environ.get('GRAPHALGOS_LOG_LEVEL', 'WARNING')
    if not isinstance(logging.getLevelName(level.upper()), int):
        print(json.dumps({"error": f"Invalid log level: {level}"}))
        sys.exit(1)
    logging.basicConfig(level=level.upper(), stream=sys.stderr,
                        format='%(levelname)s %(name)s: %(message)s')

    if not args.command:
        print(json.dumps({"error": "No command provided"}))
        sys.exit(1)
    if args.command not in COMMANDS:
        print(json.dumps({"error": f"Unknown command: {args.command}"}))
        sys.exit(1)

    payload = json.loads(sys.stdin.read() or "[]")
    log.debug("running %s with %d arguments", args.command, len(payload))
    try:
        result = COMMANDS[args.command](payload)
    except GraphError as exc:
        print(json.dumps({"error": str(exc), "type": type(exc).__name__}))
        sys.exit(1)
    print(json.dumps(result))


if __name__ == "__main__":
    main()
